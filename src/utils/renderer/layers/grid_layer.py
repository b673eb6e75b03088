import xml.etree.ElementTree as ET

from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.svg import group, svg_element


class GridLayer(RenderLayer):
    """罫線と星を描画するレイヤー"""
    group_id = "lines"

    def build(self, ctx: RenderContext) -> ET.Element:
        c = ctx.constants
        width, height = ctx.goban.size
        g = group(self.group_id, stroke=c.line_color, stroke_width=c.line_width,
                  stroke_linecap="square")

        # Lines (盤全体を描き、表示範囲外はクリップで隠す)
        for x in range(width):
            svg_element("line", {"x1": x, "y1": 0, "x2": x, "y2": height - 1}, parent=g)
        for y in range(height):
            svg_element("line", {"x1": 0, "y1": y, "x2": width - 1, "y2": y}, parent=g)

        # Star Points
        hoshi = group("hoshi", stroke="none", fill=c.line_color)
        for p in ctx.goban.hoshi_points():
            svg_element("circle", {"cx": p.x, "cy": p.y, "r": c.hoshi_radius}, parent=hoshi)
        g.append(hoshi)
        return g
