from typing import List, Sequence
from sgfmill import sgf
from core.errors import NodeNotFoundError, ParseError
from core.game_board import Goban
from utils.logger import logger


class GoGameRecord:
    """sgfmill のゲームツリーをラップし、ノード選択と盤面構築を提供するクラス"""

    def __init__(self, sgf_game: sgf.Sgf_game):
        self.sgf_game = sgf_game
        self.board_size = sgf_game.get_size()

    @classmethod
    def from_sgf(cls, text) -> 'GoGameRecord':
        """SGFテキスト (str または bytes) を解析する"""
        try:
            if isinstance(text, bytes):
                game = sgf.Sgf_game.from_bytes(text)
            else:
                game = sgf.Sgf_game.from_string(text)
        except ValueError as e:
            logger.error(f"Failed to parse SGF: {e}", layer="CORE")
            raise ParseError(f"Invalid SGF: {e}") from e
        logger.debug(f"SGF parsed: {game.get_size()}x{game.get_size()}", layer="CORE")
        return cls(game)

    def main_line(self) -> List:
        return self.sgf_game.get_main_sequence()

    def select_path(self, description) -> List:
        """NodeDescription に従い、ルートから対象ノードまでのノード列を返す"""
        if description.last:
            return self.main_line()
        if description.path is not None:
            return self._follow_path(description.path)
        return self._follow_number(description.number)

    def _follow_number(self, number: int) -> List:
        main_line = self.main_line()
        if number >= len(main_line):
            raise NodeNotFoundError(
                f"Node number {number} not found (main line has {len(main_line)} nodes)")
        return main_line[:number + 1]

    def _follow_path(self, path: Sequence[int]) -> List:
        node = self.sgf_game.get_root()
        nodes = [node]
        for depth, child in enumerate(path):
            if child >= len(node):
                raise NodeNotFoundError(
                    f"Variation {child} not found at depth {depth + 1} (path {list(path)})")
            node = node[child]
            nodes.append(node)
        return nodes

    def build_goban(self, description) -> Goban:
        nodes = self.select_path(description)
        # sgfmill はプロパティ値を読み出し時に検証するため、ここでも ParseError に変換する
        try:
            return Goban.from_nodes(nodes, self.board_size)
        except ValueError as e:
            logger.error(f"Invalid SGF property value: {e}", layer="CORE")
            raise ParseError(f"Invalid SGF: {e}") from e


def load_goban(text, description) -> Goban:
    """SGFテキストから指定ノードの盤面を構築するショートカット"""
    return GoGameRecord.from_sgf(text).build_goban(description)
