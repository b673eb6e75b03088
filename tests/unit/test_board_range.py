import os
import sys
import unittest

# プロジェクトのルートをパスに追加
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from core.board_range import resolve_ranges
from core.errors import InvalidRangeError, UnlabellableRangeError
from core.game_board import Color, Goban
from core.point import Point
from core.render_options import GobanRange


class TestFullAndExplicitRanges(unittest.TestCase):
    def test_full_board(self):
        goban = Goban((19, 13))
        x_range, y_range = resolve_ranges(goban, GobanRange.full_board())
        self.assertEqual(x_range, range(0, 19))
        self.assertEqual(y_range, range(0, 13))

    def test_explicit_range_is_returned_unchanged(self):
        goban = Goban((19, 19))
        x_range, y_range = resolve_ranges(goban, GobanRange.ranged((2, 5), (3, 6)))
        self.assertEqual(x_range, range(2, 5))
        self.assertEqual(y_range, range(3, 6))

    def test_explicit_range_outside_board_fails(self):
        goban = Goban((9, 9))
        with self.assertRaises(InvalidRangeError):
            resolve_ranges(goban, GobanRange.ranged((0, 10), (0, 9)))
        with self.assertRaises(InvalidRangeError):
            resolve_ranges(goban, GobanRange.ranged((0, 9), (4, 12)))

    def test_empty_explicit_range_fails(self):
        goban = Goban((9, 9))
        with self.assertRaises(InvalidRangeError):
            resolve_ranges(goban, GobanRange.ranged((3, 3), (0, 9)))
        with self.assertRaises(InvalidRangeError):
            resolve_ranges(goban, GobanRange.ranged((5, 2), (0, 9)))


class TestShrinkWrap(unittest.TestCase):
    def test_bounding_box_with_margin(self):
        goban = Goban((19, 19))
        goban.stones[Point(3, 4)] = Color.BLACK
        goban.marks.add(Point(10, 2))
        x_range, y_range = resolve_ranges(goban, GobanRange.shrink_wrap())
        self.assertEqual(x_range, range(2, 12))
        self.assertEqual(y_range, range(1, 6))

    def test_clamped_to_board(self):
        goban = Goban((19, 19))
        goban.stones[Point(0, 0)] = Color.WHITE
        goban.triangles.add(Point(18, 18))
        x_range, y_range = resolve_ranges(goban, GobanRange.shrink_wrap())
        self.assertEqual(x_range, range(0, 19))
        self.assertEqual(y_range, range(0, 19))

    def test_empty_board_falls_back_to_full(self):
        goban = Goban((13, 13))
        x_range, y_range = resolve_ranges(goban, GobanRange.shrink_wrap())
        self.assertEqual(x_range, range(0, 13))
        self.assertEqual(y_range, range(0, 13))

    def test_contains_every_occupied_point(self):
        """全ての注釈種別 (線の端点、手数含む) が範囲内に収まる"""
        goban = Goban((19, 19))
        goban.stones[Point(9, 9)] = Color.BLACK
        goban.move_numbers[Point(5, 16)] = [12]
        goban.labels[Point(14, 8)] = "A"
        goban.dimmed.add(Point(7, 7))
        goban.arrows.add((Point(9, 9), Point(12, 3)))
        goban.lines.add((Point(4, 10), Point(6, 10)))
        x_range, y_range = resolve_ranges(goban, GobanRange.shrink_wrap())
        for p in goban.occupied_points():
            self.assertIn(p.x, x_range)
            self.assertIn(p.y, y_range)
        self.assertEqual(x_range, range(3, 16))
        self.assertEqual(y_range, range(2, 18))


class TestLabelConstraints(unittest.TestCase):
    def test_exactly_25_by_99_is_labellable(self):
        goban = Goban((25, 99))
        x_range, y_range = resolve_ranges(goban, GobanRange.full_board(), draw_board_labels=True)
        self.assertEqual(len(x_range), 25)
        self.assertEqual(len(y_range), 99)

    def test_too_wide_to_label(self):
        goban = Goban((26, 26))
        with self.assertRaises(UnlabellableRangeError):
            resolve_ranges(goban, GobanRange.full_board(), draw_board_labels=True)

    def test_too_tall_to_label(self):
        goban = Goban((5, 100))
        with self.assertRaises(UnlabellableRangeError) as cm:
            resolve_ranges(goban, GobanRange.full_board(), draw_board_labels=True)
        self.assertEqual(cm.exception.height, 100)

    def test_large_range_without_labels_is_fine(self):
        goban = Goban((26, 26))
        x_range, _ = resolve_ranges(goban, GobanRange.full_board(), draw_board_labels=False)
        self.assertEqual(len(x_range), 26)

    def test_cropped_range_of_large_board_is_labellable(self):
        goban = Goban((26, 26))
        x_range, _ = resolve_ranges(goban, GobanRange.ranged((1, 26), (0, 10)),
                                    draw_board_labels=True)
        self.assertEqual(len(x_range), 25)


if __name__ == "__main__":
    unittest.main()
