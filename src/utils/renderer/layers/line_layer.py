import xml.etree.ElementTree as ET

from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.svg import group, svg_element


class SegmentLayer(RenderLayer):
    """2点を結ぶ注釈 (LN / AR) を描画するレイヤーの基底クラス"""
    goban_attribute: str = ""
    markers = {}

    def build(self, ctx: RenderContext) -> ET.Element:
        g = group(self.group_id, stroke=ctx.constants.line_color,
                  stroke_width=ctx.constants.line_width, **self.markers)
        for p1, p2 in sorted(getattr(ctx.goban, self.goban_attribute)):
            svg_element("line", {"x1": p1.x, "x2": p2.x, "y1": p1.y, "y2": p2.y}, parent=g)
        return g


class LineLayer(SegmentLayer):
    group_id = "markup-lines"
    option_name = "draw_lines"
    goban_attribute = "lines"
    markers = {"marker_start": "url(#linehead)", "marker_end": "url(#linehead)"}


class ArrowLayer(SegmentLayer):
    group_id = "markup-arrows"
    option_name = "draw_arrows"
    goban_attribute = "arrows"
    markers = {"marker_end": "url(#arrowhead)"}
