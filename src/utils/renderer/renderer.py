import xml.etree.ElementTree as ET
from typing import List

from config import DEFAULT_CONSTANTS, RenderConstants
from core.board_range import resolve_ranges
from core.coordinate_transformer import CoordinateTransformer
from core.game_board import Goban
from core.render_options import MakeSvgOptions
from utils.logger import logger
from utils.renderer.base import RenderContext, RenderLayer
from utils.renderer.layers import (
    ArrowLayer, CircleLayer, CoordinateLayer, DimmedLayer, GridLayer, LabelLayer, LineLayer,
    MarkLayer, MoveNumberLayer, SelectedLayer, SquareLayer, StoneLayer, TriangleLayer
)
from utils.renderer.svg import document, fmt, group, svg_element
from utils.renderer.theme import ThemeManager


class SvgBoardRenderer:
    """レイヤー構造を用いて碁盤をSVGにレンダリングするメインクラス"""

    def __init__(self, constants: RenderConstants = DEFAULT_CONSTANTS):
        self.constants = constants
        self.theme_manager = ThemeManager()

        # 奥から手前の順。この順序で重なることが保証される
        self.layers: List[RenderLayer] = [
            GridLayer(),
            StoneLayer(),
            MoveNumberLayer(),
            MarkLayer(),
            TriangleLayer(),
            CircleLayer(),
            SquareLayer(),
            SelectedLayer(),
            DimmedLayer(),
            LabelLayer(),
            LineLayer(),
            ArrowLayer(),
        ]
        # 盤の外側に置くのでクリップしない
        self.coordinate_layer = CoordinateLayer()

    def render(self, goban: Goban, options: MakeSvgOptions) -> ET.Element:
        """盤面を1枚のSVG文書にする。範囲の検証に失敗した場合は例外を送出"""
        x_range, y_range = resolve_ranges(goban, options.goban_range, options.draw_board_labels)
        logger.debug(f"Resolved ranges: x={x_range}, y={y_range}", layer="RENDER")

        transformer = CoordinateTransformer(x_range, y_range, options.viewbox_width,
                                            options.draw_board_labels, self.constants)
        ctx = RenderContext(
            goban=goban,
            options=options,
            x_range=x_range,
            y_range=y_range,
            theme=self.theme_manager.get_theme(options.style),
            constants=self.constants,
        )

        c = self.constants
        root = document(transformer.viewbox_width, transformer.viewbox_height,
                        font_size=c.font_size, font_family=c.font_family,
                        font_weight=c.font_weight)
        root.append(self._build_definitions(ctx, transformer))
        svg_element("rect", {
            "x": 0,
            "y": 0,
            "width": "100%",
            "height": "100%",
            "fill": ctx.theme.background_fill,
        }, parent=root)
        root.append(self._build_diagram(ctx, transformer))
        return root

    def _build_definitions(self, ctx: RenderContext, transformer: CoordinateTransformer) -> ET.Element:
        defs = svg_element("defs")
        clip_path = svg_element("clipPath", {"id": "board-clip"}, parent=defs)
        x, y, width, height = transformer.clip_rect()
        svg_element("rect", {"x": float(x), "y": float(y), "width": width, "height": height},
                    parent=clip_path)
        defs.append(ctx.theme.linehead())
        defs.append(ctx.theme.arrowhead())
        for element in ctx.theme.defs():
            defs.append(element)
        return defs

    def _build_board(self, ctx: RenderContext) -> ET.Element:
        """盤全体を1マス=1.0の座標系で描く"""
        board = group("goban")
        for layer in self.layers:
            if layer.is_enabled(ctx.options):
                board.append(layer.build(ctx))
        board.set("clip-path", "url(#board-clip)")
        return board

    def _build_diagram(self, ctx: RenderContext, transformer: CoordinateTransformer) -> ET.Element:
        tx, ty = transformer.board_translation()
        board_view = group("board-view", transform=f"translate({fmt(float(tx))}, {fmt(float(ty))})")
        board_view.append(self._build_board(ctx))

        scale = fmt(transformer.scale)
        diagram = group("diagram", transform=f"scale({scale}, {scale})")
        diagram.append(board_view)
        if self.coordinate_layer.is_enabled(ctx.options):
            diagram.append(self.coordinate_layer.build(ctx))
        return diagram
