import math
import xml.etree.ElementTree as ET
from abc import abstractmethod
from typing import Optional

from core.game_board import Color
from core.point import Point
from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.svg import group, points_attr, svg_element

MARK_ARM = 0.25
TRIANGLE_RADIUS = 0.45
CIRCLE_RADIUS = 0.25
SQUARE_WIDTH = 0.55
SELECTED_WIDTH = 0.25
DIMMED_WIDTH = 1.0
LABEL_MAX_CHARS = 2


class PointMarkupLayer(RenderLayer):
    """交点ごとの注釈 (△□×など) を描画するレイヤーの基底クラス

    goban_attribute で指定した集合を座標順に並べてから描画する。
    """
    goban_attribute: str = ""

    def build(self, ctx: RenderContext) -> ET.Element:
        g = group(self.group_id)
        for point in sorted(getattr(ctx.goban, self.goban_attribute)):
            g.append(self.draw_point(point, ctx.stone_color(point), ctx))
        return g

    @abstractmethod
    def draw_point(self, p: Point, color: Optional[Color], ctx: RenderContext) -> ET.Element:
        pass

    def _outlined(self, color: Optional[Color], ctx: RenderContext) -> ET.Element:
        return group(stroke=ctx.theme.markup_color(color), fill="none",
                     stroke_width=ctx.constants.line_width)


class MarkLayer(PointMarkupLayer):
    group_id = "markup-marks"
    option_name = "draw_marks"
    goban_attribute = "marks"

    def draw_point(self, p, color, ctx):
        g = group(stroke=ctx.theme.markup_color(color), stroke_width=ctx.constants.markup_width)
        svg_element("line", {"x1": p.x - MARK_ARM, "x2": p.x + MARK_ARM,
                             "y1": p.y - MARK_ARM, "y2": p.y + MARK_ARM}, parent=g)
        svg_element("line", {"x1": p.x - MARK_ARM, "x2": p.x + MARK_ARM,
                             "y1": p.y + MARK_ARM, "y2": p.y - MARK_ARM}, parent=g)
        return g


class TriangleLayer(PointMarkupLayer):
    group_id = "markup-triangles"
    option_name = "draw_triangles"
    goban_attribute = "triangles"

    def draw_point(self, p, color, ctx):
        g = self._outlined(color, ctx)
        # 外接円半径 TRIANGLE_RADIUS の正三角形 (頂点が上)
        dx = math.sqrt(3) / 2 * TRIANGLE_RADIUS
        dy = 0.5 * TRIANGLE_RADIUS
        svg_element("polygon", {"points": points_attr([
            (p.x, p.y - TRIANGLE_RADIUS),
            (p.x - dx, p.y + dy),
            (p.x + dx, p.y + dy),
        ])}, parent=g)
        return g


class CircleLayer(PointMarkupLayer):
    group_id = "markup-circles"
    option_name = "draw_circles"
    goban_attribute = "circles"

    def draw_point(self, p, color, ctx):
        g = self._outlined(color, ctx)
        svg_element("circle", {"cx": float(p.x), "cy": float(p.y), "r": CIRCLE_RADIUS}, parent=g)
        return g


class SquareLayer(PointMarkupLayer):
    group_id = "markup-squares"
    option_name = "draw_squares"
    goban_attribute = "squares"

    def draw_point(self, p, color, ctx):
        g = self._outlined(color, ctx)
        svg_element("rect", {"x": p.x - SQUARE_WIDTH / 2, "y": p.y - SQUARE_WIDTH / 2,
                             "width": SQUARE_WIDTH, "height": SQUARE_WIDTH}, parent=g)
        return g


class SelectedLayer(PointMarkupLayer):
    group_id = "markup-selected"
    option_name = "draw_selected"
    goban_attribute = "selected"

    def draw_point(self, p, color, ctx):
        g = group(stroke="none", fill=ctx.theme.selected_color(color))
        svg_element("rect", {"x": p.x - SELECTED_WIDTH / 2, "y": p.y - SELECTED_WIDTH / 2,
                             "width": SELECTED_WIDTH, "height": SELECTED_WIDTH}, parent=g)
        return g


class DimmedLayer(PointMarkupLayer):
    group_id = "markup-dimmed"
    option_name = "draw_dimmed"
    goban_attribute = "dimmed"

    def draw_point(self, p, color, ctx):
        g = group(stroke="none", fill="black", fill_opacity=0.5, shape_rendering="crispEdges")
        svg_element("rect", {"x": p.x - DIMMED_WIDTH / 2, "y": p.y - DIMMED_WIDTH / 2,
                             "width": DIMMED_WIDTH, "height": DIMMED_WIDTH}, parent=g)
        return g


class LabelLayer(PointMarkupLayer):
    """LB プロパティの文字ラベル (先頭2文字まで)"""
    group_id = "markup-labels"
    option_name = "draw_labels"
    goban_attribute = "labels"

    def draw_point(self, p, color, ctx):
        text = ctx.goban.labels[p][:LABEL_MAX_CHARS]
        return self._text_with_backing(p.x, p.y, text, color, ctx)
