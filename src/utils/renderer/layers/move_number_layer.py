import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from core.point import Point
from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.svg import group

MOVE_NUMBER_CYCLE = 99


def displayed_move_number(n: int, first_move_number: int) -> Optional[int]:
    """表示する手数。first_move_number 未満は None、以降は 1..99 で循環する"""
    if n < first_move_number:
        return None
    return (n - first_move_number) % MOVE_NUMBER_CYCLE + 1


def latest_move_numbers(ctx: RenderContext) -> List[Tuple[int, Point]]:
    """各交点の最大の手数を (手数, 交点) の昇順で返す"""
    return sorted((max(nums), point) for point, nums in ctx.goban.move_numbers.items() if nums)


class MoveNumberLayer(RenderLayer):
    """手数を描画するレイヤー

    同じ交点に複数回打たれている場合は最後 (最大) の手数のみを表示する。
    """
    group_id = "move-numbers"
    option_name = "draw_move_numbers"

    def build(self, ctx: RenderContext) -> ET.Element:
        g = group(self.group_id, text_anchor="middle")
        first = ctx.options.first_move_number
        for n, point in latest_move_numbers(ctx):
            shown = displayed_move_number(n, first)
            if shown is None:
                continue
            g.append(self._text_with_backing(point.x, point.y, str(shown),
                                             ctx.stone_color(point), ctx))
        return g
