import xml.etree.ElementTree as ET

from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.svg import group


class StoneLayer(RenderLayer):
    """盤上の石を描画するレイヤー"""
    group_id = "stones"

    def build(self, ctx: RenderContext) -> ET.Element:
        g = group(self.group_id, stroke="none")
        # 石の描き方はテーマに委ねる (Fancy: 影+グラデーション / その他: 単色)
        for stone in ctx.goban.stones_list():
            g.append(ctx.theme.draw_stone(stone, ctx.theme, ctx.constants))
        return g
