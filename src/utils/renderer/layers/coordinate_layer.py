import xml.etree.ElementTree as ET

from core.coordinate_transformer import CoordinateTransformer
from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.svg import fmt, group, svg_element


class CoordinateLayer(RenderLayer):
    """座標の文字 (A-Z, 1-99) を描画するレイヤー

    盤のクリップ領域の外側 (上辺と左辺の余白) に置かれるため、
    切り出し範囲の原点ではなくラベル余白を基準に配置する。
    """
    group_id = "board-labels"
    option_name = "draw_board_labels"

    def build(self, ctx: RenderContext) -> ET.Element:
        c = ctx.constants
        margin = fmt(c.label_margin)
        g = group(self.group_id, fill=ctx.theme.label_color,
                  transform=f"translate({margin}, {margin})")

        column_labels = group(text_anchor="middle")
        for x in ctx.x_range:
            svg_element("text", {"x": x - ctx.x_range.start + c.board_margin, "y": 0.0},
                        parent=column_labels, text=CoordinateTransformer.column_label(x))

        row_labels = group(text_anchor="end")
        for y in ctx.y_range:
            svg_element("text", {"x": 0.0, "y": y - ctx.y_range.start + c.board_margin,
                                 "dy": "0.35em"},
                        parent=row_labels,
                        text=CoordinateTransformer.row_label(y, ctx.goban.height))

        g.append(column_labels)
        g.append(row_labels)
        return g
