import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from config import DEFAULT_CONSTANTS, RenderConstants
from core.game_board import Color, Goban
from core.point import Point
from core.render_options import MakeSvgOptions
from utils.renderer.svg import svg_element
from utils.renderer.theme import RenderTheme, SIMPLE_THEME

# 手数・ラベルの背後に敷く背景色の正方形の一辺
TEXT_BACKING_SIZE = 0.8


@dataclass(frozen=True)
class RenderContext:
    """描画に必要な全情報を保持するコンテキスト"""
    goban: Goban
    options: MakeSvgOptions
    x_range: range
    y_range: range
    theme: RenderTheme = SIMPLE_THEME
    constants: RenderConstants = DEFAULT_CONSTANTS

    def stone_color(self, point: Point) -> Optional[Color]:
        return self.goban.stones.get(point)


class RenderLayer(ABC):
    """描画レイヤーの基底クラス

    各レイヤーは盤面とオプションから独立した <g> を1つ生成する。
    option_name が None のレイヤーは常に描画される。
    """
    group_id: str = ""
    option_name: Optional[str] = None

    def is_enabled(self, options: MakeSvgOptions) -> bool:
        return self.option_name is None or getattr(options, self.option_name)

    @abstractmethod
    def build(self, ctx: RenderContext) -> ET.Element:
        """
        ctx: RenderContext containing the goban, options and theme
        returns: a <g> element for this layer
        """
        pass

    def _text_with_backing(self, x: int, y: int, text: str,
                           color: Optional[Color], ctx: RenderContext) -> ET.Element:
        """Utility for centered text; a background square hides grid lines on empty points"""
        g = svg_element("g")
        if color is None:
            half = TEXT_BACKING_SIZE / 2
            svg_element("rect", {
                "fill": ctx.theme.background_fill,
                "x": x - half,
                "y": y - half,
                "width": TEXT_BACKING_SIZE,
                "height": TEXT_BACKING_SIZE,
            }, parent=g)
        svg_element("text", {
            "x": float(x),
            "y": float(y),
            "text-anchor": "middle",
            "dy": "0.35em",
            "fill": ctx.theme.markup_color(color),
        }, parent=g, text=text)
        return g
