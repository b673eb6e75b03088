import os
import sys
import unittest

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from core.game_board import Color, Goban
from core.point import Point
from core.render_options import MakeSvgOptions
from utils.renderer.renderer import SvgBoardRenderer
from utils.renderer.svg import to_string
from utils.renderer.layers.move_number_layer import displayed_move_number


def _render_move_numbers(goban, first=1):
    options = MakeSvgOptions(draw_move_numbers=True, first_move_number=first)
    root = SvgBoardRenderer().render(goban, options)
    layer = next(g for g in root.iter("g") if g.get("id") == "move-numbers")
    return layer


def _texts(layer):
    return [t.text for t in layer.iter("text")]


class TestDisplayedMoveNumber(unittest.TestCase):
    def test_wraparound(self):
        self.assertEqual(displayed_move_number(1, 1), 1)
        self.assertEqual(displayed_move_number(99, 1), 99)
        self.assertEqual(displayed_move_number(100, 1), 1)
        self.assertEqual(displayed_move_number(198, 1), 99)
        self.assertEqual(displayed_move_number(199, 1), 1)

    def test_relative_to_first_move_number(self):
        self.assertEqual(displayed_move_number(50, 50), 1)
        self.assertEqual(displayed_move_number(148, 50), 99)
        self.assertEqual(displayed_move_number(149, 50), 1)

    def test_below_first_is_suppressed(self):
        self.assertIsNone(displayed_move_number(49, 50))


class TestMoveNumberLayer(unittest.TestCase):
    def test_only_maximum_number_is_shown(self):
        """打ち直された交点は最大の手数だけを表示する"""
        goban = Goban((9, 9))
        goban.stones[Point(2, 2)] = Color.BLACK
        goban.move_numbers[Point(2, 2)] = [3, 17]
        self.assertEqual(_texts(_render_move_numbers(goban)), ["17"])

    def test_permuting_history_does_not_change_output(self):
        a = Goban((9, 9))
        a.move_numbers[Point(4, 4)] = [3, 10, 5]
        b = Goban((9, 9))
        b.move_numbers[Point(4, 4)] = [10, 5, 3]
        self.assertEqual(to_string(_render_move_numbers(a)), to_string(_render_move_numbers(b)))

    def test_sorted_by_move_number(self):
        goban = Goban((9, 9))
        goban.move_numbers[Point(0, 0)] = [5]
        goban.move_numbers[Point(8, 8)] = [2]
        goban.move_numbers[Point(4, 0)] = [9]
        self.assertEqual(_texts(_render_move_numbers(goban)), ["2", "5", "9"])

    def test_numbers_before_first_are_hidden(self):
        goban = Goban((9, 9))
        goban.move_numbers[Point(0, 0)] = [4]
        goban.move_numbers[Point(1, 0)] = [5]
        goban.move_numbers[Point(2, 0)] = [6]
        self.assertEqual(_texts(_render_move_numbers(goban, first=5)), ["1", "2"])

    def test_replayed_point_uses_latest_number_even_below_first(self):
        """最大の手数が基準以上なら、それ以前の手数は考慮しない"""
        goban = Goban((9, 9))
        goban.move_numbers[Point(3, 3)] = [2, 120]
        self.assertEqual(_texts(_render_move_numbers(goban, first=100)), ["21"])

    def test_backing_square_only_on_empty_points(self):
        goban = Goban((9, 9))
        goban.stones[Point(1, 1)] = Color.BLACK
        goban.move_numbers[Point(1, 1)] = [1]
        goban.move_numbers[Point(5, 5)] = [2]
        layer = _render_move_numbers(goban)
        on_stone, on_empty = list(layer)
        self.assertEqual(len(on_stone.findall("rect")), 0)
        self.assertEqual(on_stone.find("text").get("fill"), "white")
        rect = on_empty.find("rect")
        self.assertIsNotNone(rect)
        self.assertEqual(rect.get("x"), "4.6")
        self.assertEqual(rect.get("width"), "0.8")
        self.assertEqual(on_empty.find("text").get("fill"), "black")


if __name__ == "__main__":
    unittest.main()
