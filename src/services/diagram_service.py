import xml.etree.ElementTree as ET
from typing import Optional

from core.errors import GobanSVGError
from core.game_state import GoGameRecord
from core.render_options import MakeSvgOptions
from utils.logger import logger
from utils.renderer.renderer import SvgBoardRenderer
from utils.renderer.svg import to_string


class DiagramService:
    """SGFテキストから指定ノードの盤面図 (SVG) を生成するサービス

    処理の流れ: SGF解析 -> ノード選択 -> 盤面構築 -> 範囲決定 -> 各レイヤー描画 -> 文書組み立て。
    どの段階で失敗しても途中までの文書は返さず、例外をそのまま呼び出し元へ送出する。
    """

    def __init__(self, renderer: Optional[SvgBoardRenderer] = None):
        self.renderer = renderer or SvgBoardRenderer()

    def make_svg_document(self, sgf_text, options: Optional[MakeSvgOptions] = None) -> ET.Element:
        options = options or MakeSvgOptions()
        try:
            record = GoGameRecord.from_sgf(sgf_text)
            goban = record.build_goban(options.node_description)
            logger.debug(
                f"Rendering node {options.node_description.model_dump()} "
                f"({goban.width}x{goban.height}, style={options.style.value})",
                layer="SERVICE")
            return self.renderer.render(goban, options)
        except GobanSVGError as e:
            logger.error(f"SVG generation failed: {type(e).__name__}: {e}", layer="SERVICE")
            raise

    def make_svg(self, sgf_text, options: Optional[MakeSvgOptions] = None) -> str:
        return to_string(self.make_svg_document(sgf_text, options))


def make_svg_document(sgf_text, options: Optional[MakeSvgOptions] = None) -> ET.Element:
    return DiagramService().make_svg_document(sgf_text, options)


def make_svg(sgf_text, options: Optional[MakeSvgOptions] = None) -> str:
    """SGFテキストを受け取り、SVG文字列を返す"""
    return DiagramService().make_svg(sgf_text, options)
