from typing import Tuple
from core.errors import InvalidRangeError, UnlabellableRangeError
from core.game_board import Goban
from core.render_options import GobanRange

# 座標ラベルの上限: 列はIを除いた25文字、行は2桁の数字
MAX_LABELLED_WIDTH = 25
MAX_LABELLED_HEIGHT = 99

# 自動トリミング時に占有領域の周囲へ残す余白
SHRINK_WRAP_MARGIN = 1


def resolve_ranges(goban: Goban, goban_range: GobanRange,
                   draw_board_labels: bool = False) -> Tuple[range, range]:
    """描画する列と行の半開区間を求める

    ラベル描画時に範囲が大きすぎる場合は UnlabellableRangeError を送出する。
    """
    if goban_range.kind == "shrink_wrap":
        x_range, y_range = _shrink_wrap(goban)
    elif goban_range.kind == "ranged":
        x_range = _checked(range(*goban_range.x), goban.width, "x")
        y_range = _checked(range(*goban_range.y), goban.height, "y")
    else:
        x_range, y_range = range(goban.width), range(goban.height)

    if draw_board_labels and (len(x_range) > MAX_LABELLED_WIDTH
                              or len(y_range) > MAX_LABELLED_HEIGHT):
        raise UnlabellableRangeError(len(x_range), len(y_range))
    return x_range, y_range


def _checked(r: range, limit: int, axis: str) -> range:
    if len(r) == 0 or r.start < 0 or r.stop > limit:
        raise InvalidRangeError(
            f"{axis} range [{r.start}, {r.stop}) is empty or outside the board (size {limit})")
    return r


def _shrink_wrap(goban: Goban) -> Tuple[range, range]:
    points = goban.occupied_points()
    if not points:
        return range(goban.width), range(goban.height)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    x_range = range(max(min(xs) - SHRINK_WRAP_MARGIN, 0),
                    min(max(xs) + 1 + SHRINK_WRAP_MARGIN, goban.width))
    y_range = range(max(min(ys) - SHRINK_WRAP_MARGIN, 0),
                    min(max(ys) + 1 + SHRINK_WRAP_MARGIN, goban.height))
    return x_range, y_range
