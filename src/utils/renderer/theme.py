import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from config import RenderConstants
from core.game_board import Color, Stone
from core.render_options import GobanStyle
from utils.renderer.svg import svg_element

STONE_RADIUS_FANCY = 0.475
STONE_RADIUS_FLAT = 0.48
SHADOW_OFFSET = 0.025
HIGHLIGHT_OFFSET = 0.017


def flat_stone(stone: Stone, theme: 'RenderTheme', constants: RenderConstants) -> ET.Element:
    """単色の円と細い輪郭で石を描く"""
    g = svg_element("g")
    svg_element("circle", {
        "cx": float(stone.x),
        "cy": float(stone.y),
        "r": STONE_RADIUS_FLAT,
        "stroke": theme.stone_outline_color,
        "stroke-width": constants.line_width,
        "fill": theme.stone_fill(stone.color),
    }, parent=g)
    return g


def shaded_stone(stone: Stone, theme: 'RenderTheme', constants: RenderConstants) -> ET.Element:
    """右下に影、左上にずらしたグラデーションの円で立体的な石を描く"""
    g = svg_element("g")
    svg_element("circle", {
        "cx": stone.x + SHADOW_OFFSET,
        "cy": stone.y + SHADOW_OFFSET,
        "r": STONE_RADIUS_FANCY,
        "fill": "black",
        "fill-opacity": 0.5,
    }, parent=g)
    svg_element("circle", {
        "cx": stone.x - HIGHLIGHT_OFFSET,
        "cy": stone.y - HIGHLIGHT_OFFSET,
        "r": STONE_RADIUS_FANCY,
        "fill": theme.stone_fill(stone.color),
    }, parent=g)
    return g


def _linehead(fill: str) -> ET.Element:
    marker = svg_element("marker", {
        "id": "linehead",
        "viewBox": "0 0 10 10",
        "refX": 5,
        "refY": 5,
        "markerWidth": 4,
        "markerHeight": 4,
    })
    svg_element("circle", {"cx": 5, "cy": 5, "r": 5, "fill": fill}, parent=marker)
    return marker


def _arrowhead(fill: str) -> ET.Element:
    marker = svg_element("marker", {
        "id": "arrowhead",
        "viewBox": "0 0 10 10",
        "refX": 9,
        "refY": 5,
        "markerWidth": 8,
        "markerHeight": 8,
        "orient": "auto",
    })
    svg_element("path", {"d": "M 0 0 L 10 5 L 0 10 z", "fill": fill}, parent=marker)
    return marker


def _stone_gradient(gradient_id: str, inner: str, outer: str) -> ET.Element:
    gradient = svg_element("radialGradient", {
        "id": gradient_id,
        "cx": "35%",
        "cy": "35%",
        "r": "65%",
    })
    svg_element("stop", {"offset": "0%", "stop-color": inner}, parent=gradient)
    svg_element("stop", {"offset": "100%", "stop-color": outer}, parent=gradient)
    return gradient


def _fancy_defs() -> List[ET.Element]:
    return [
        _stone_gradient("black-stone-fill", "#666666", "#000000"),
        _stone_gradient("white-stone-fill", "#ffffff", "#bbbbbb"),
    ]


@dataclass(frozen=True)
class RenderTheme:
    """描画スタイルごとの色と描画方法をまとめた能力テーブル"""
    style: GobanStyle
    background_fill: str
    label_color: str

    # 石のスタイル
    black_stone_fill: str = "black"
    white_stone_fill: str = "white"
    stone_outline_color: str = "black"
    draw_stone: Callable[[Stone, 'RenderTheme', RenderConstants], ET.Element] = flat_stone

    # 注釈スタイル (下に石がない場合 / 黒石上 / 白石上)
    markup_color_empty: str = "black"
    markup_color_on_black: str = "white"
    markup_color_on_white: str = "black"
    selected_color_empty: str = "blue"
    selected_color_on_black: str = "#8ab4ff"
    selected_color_on_white: str = "blue"
    line_marker_fill: str = "black"

    extra_defs: Callable[[], List[ET.Element]] = field(default=list)

    def stone_fill(self, color: Color) -> str:
        return self.black_stone_fill if color == Color.BLACK else self.white_stone_fill

    def markup_color(self, color: Optional[Color]) -> str:
        """下にある石の色に対してコントラストの取れる注釈色"""
        if color is None:
            return self.markup_color_empty
        return self.markup_color_on_black if color == Color.BLACK else self.markup_color_on_white

    def selected_color(self, color: Optional[Color]) -> str:
        if color is None:
            return self.selected_color_empty
        return self.selected_color_on_black if color == Color.BLACK else self.selected_color_on_white

    def linehead(self) -> ET.Element:
        return _linehead(self.line_marker_fill)

    def arrowhead(self) -> ET.Element:
        return _arrowhead(self.line_marker_fill)

    def defs(self) -> List[ET.Element]:
        return self.extra_defs()


# プリセットテーマ
FANCY_THEME = RenderTheme(
    style=GobanStyle.FANCY,
    background_fill="#cfa87e",
    label_color="#6e5840",
    black_stone_fill="url(#black-stone-fill)",
    white_stone_fill="url(#white-stone-fill)",
    draw_stone=shaded_stone,
    selected_color_empty="#1c4fd6",
    selected_color_on_white="#1c4fd6",
    extra_defs=_fancy_defs,
)

SIMPLE_THEME = RenderTheme(
    style=GobanStyle.SIMPLE,
    background_fill="#cfa87e",
    label_color="#6e5840",
)

MINIMALIST_THEME = RenderTheme(
    style=GobanStyle.MINIMALIST,
    background_fill="white",
    label_color="black",
    selected_color_empty="black",
    selected_color_on_black="white",
    selected_color_on_white="black",
)


class ThemeManager:
    """スタイル名からテーマを引くためのレジストリ"""
    def __init__(self):
        self._themes = {
            GobanStyle.FANCY: FANCY_THEME,
            GobanStyle.SIMPLE: SIMPLE_THEME,
            GobanStyle.MINIMALIST: MINIMALIST_THEME,
        }

    def get_theme(self, style) -> RenderTheme:
        return self._themes[GobanStyle(style)]

    @property
    def available_themes(self):
        return [s.value for s in self._themes]
