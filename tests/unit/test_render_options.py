import json
import os
import sys
import tempfile
import unittest

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from pydantic import ValidationError

from core.render_options import GobanRange, GobanStyle, MakeSvgOptions, NodeDescription


class TestDefaults(unittest.TestCase):
    def test_defaults(self):
        options = MakeSvgOptions()
        self.assertEqual(options.goban_range.kind, "full")
        self.assertEqual(options.style, GobanStyle.SIMPLE)
        self.assertEqual(options.viewbox_width, 800)
        self.assertTrue(options.draw_board_labels)
        self.assertFalse(options.draw_move_numbers)
        self.assertTrue(options.draw_marks and options.draw_arrows and options.draw_dimmed)
        self.assertEqual(options.first_move_number, 1)
        self.assertEqual(options.node_description, NodeDescription(number=0))

    def test_options_are_immutable(self):
        options = MakeSvgOptions()
        with self.assertRaises(ValidationError):
            options.viewbox_width = 10


class TestJsonLoading(unittest.TestCase):
    def test_from_json_with_shorthands(self):
        options = MakeSvgOptions.from_json(json.dumps({
            "style": "fancy",
            "goban_range": {"x": [0, 9], "y": [3, 12]},
            "node_description": {"path": [0, 1]},
            "draw_move_numbers": True,
        }))
        self.assertEqual(options.style, GobanStyle.FANCY)
        self.assertEqual(options.goban_range, GobanRange.ranged((0, 9), (3, 12)))
        self.assertEqual(options.node_description.path, [0, 1])
        self.assertTrue(options.draw_move_numbers)

    def test_range_string_shorthand(self):
        options = MakeSvgOptions.from_json('{"goban_range": "shrink_wrap"}')
        self.assertEqual(options.goban_range, GobanRange.shrink_wrap())

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValidationError):
            MakeSvgOptions.from_json('{"draw_kittens": true}')

    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "options.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write('{"viewbox_width": 400, "draw_board_labels": false}')
            options = MakeSvgOptions.load(path)
        self.assertEqual(options.viewbox_width, 400)
        self.assertFalse(options.draw_board_labels)


class TestRangeAndNodeValidation(unittest.TestCase):
    def test_parse_cli_range(self):
        self.assertEqual(GobanRange.parse("0:9,3:12"), GobanRange.ranged((0, 9), (3, 12)))
        with self.assertRaises(ValueError):
            GobanRange.parse("A1-D4")

    def test_ranged_requires_both_axes(self):
        with self.assertRaises(ValidationError):
            GobanRange(kind="ranged", x=(0, 3))

    def test_last_and_path_are_exclusive(self):
        with self.assertRaises(ValidationError):
            NodeDescription(last=True, path=[0])

    def test_number_not_combined_with_path_or_last(self):
        with self.assertRaises(ValidationError):
            NodeDescription(number=3, path=[0])
        with self.assertRaises(ValidationError):
            NodeDescription(number=3, last=True)
        self.assertEqual(NodeDescription(number=0, path=[0]).path, [0])


if __name__ == "__main__":
    unittest.main()
