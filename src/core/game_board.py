from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Set, Tuple
from sgfmill import boards
from core.point import Point
from utils.logger import logger


class Color(Enum):
    BLACK = 'b'
    WHITE = 'w'


class Stone(NamedTuple):
    """描画用の石 (位置と色)"""
    x: int
    y: int
    color: Color


# 星の位置 (sizeごと)
_HOSHI_LINES = {
    19: ([3, 9, 15], []),
    13: ([3, 9], [(6, 6)]),
    9: ([2, 6], [(4, 4)]),
}

Segment = Tuple[Point, Point]


class Goban:
    """あるノード時点での盤面と注釈を保持するクラス

    レンダラーからは読み取り専用として扱われる。
    """

    def __init__(self, size: Tuple[int, int] = (19, 19)):
        self.size = size
        self.stones: Dict[Point, Color] = {}
        self.move_numbers: Dict[Point, List[int]] = {}
        self.marks: Set[Point] = set()
        self.triangles: Set[Point] = set()
        self.circles: Set[Point] = set()
        self.squares: Set[Point] = set()
        self.selected: Set[Point] = set()
        self.dimmed: Set[Point] = set()
        self.labels: Dict[Point, str] = {}
        self.lines: Set[Segment] = set()
        self.arrows: Set[Segment] = set()

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def stones_list(self) -> List[Stone]:
        """石を座標順 (列優先) に並べて返す"""
        return [Stone(p.x, p.y, c) for p, c in sorted(self.stones.items())]

    def hoshi_points(self) -> List[Point]:
        if self.width != self.height or self.width not in _HOSHI_LINES:
            return []
        lines, extra = _HOSHI_LINES[self.width]
        points = [Point(x, y) for x in lines for y in lines]
        points += [Point(x, y) for x, y in extra]
        return sorted(points)

    def occupied_points(self) -> Set[Point]:
        """石または何らかの注釈が置かれている全ての交点"""
        points = set(self.stones)
        points.update(self.move_numbers)
        for markup in (self.marks, self.triangles, self.circles, self.squares,
                       self.selected, self.dimmed, self.labels):
            points.update(markup)
        for p1, p2 in self.lines | self.arrows:
            points.add(p1)
            points.add(p2)
        return points

    @classmethod
    def from_nodes(cls, nodes: Iterable, size: int) -> 'Goban':
        """ルートから対象ノードまでのノード列を再生して盤面を構築する

        nodes は sgfmill の Tree_node をルート側から順に並べたもの。
        石の着手は sgfmill.boards.Board に委ね、取られた石はそちらで除去される。
        """
        nodes = list(nodes)
        goban = cls((size, size))
        board = boards.Board(size)
        move_number = 0
        dimmed: Set[Point] = set()

        for node in nodes:
            black, white, empty = node.get_setup_stones()
            if black or white or empty:
                board.apply_setup(black, white, empty)

            color, move = node.get_move()
            if color is not None:
                if node.has_property("MN"):
                    move_number = node.get("MN")
                else:
                    move_number += 1
                if move is not None:
                    row, col = move
                    if board.get(row, col) is not None:
                        # 打ち直し (同一点への再着手) は前の石を上書きする
                        board.apply_setup((), (), [move])
                    board.play(row, col, color)
                    point = Point.from_sgfmill(move, size)
                    goban.move_numbers.setdefault(point, []).append(move_number)

            if node.has_property("DD"):
                dimmed = goban._points(node.get("DD"))

        for color, move in board.list_occupied_points():
            goban.stones[Point.from_sgfmill(move, size)] = Color(color)
        goban.dimmed = dimmed

        if nodes:
            goban._load_markup(nodes[-1])
        logger.debug(
            f"Goban built: {size}x{size}, {len(goban.stones)} stones, last move number {move_number}",
            layer="CORE")
        return goban

    def _points(self, moves) -> Set[Point]:
        return {Point.from_sgfmill(m, self.height) for m in moves}

    def _segments(self, pairs) -> Set[Segment]:
        return {
            (Point.from_sgfmill(a, self.height), Point.from_sgfmill(b, self.height))
            for a, b in pairs
        }

    def _load_markup(self, node):
        """選択ノード自身の注釈プロパティを読み込む (DD以外は継承しない)"""
        if node.has_property("MA"):
            self.marks = self._points(node.get("MA"))
        if node.has_property("TR"):
            self.triangles = self._points(node.get("TR"))
        if node.has_property("CR"):
            self.circles = self._points(node.get("CR"))
        if node.has_property("SQ"):
            self.squares = self._points(node.get("SQ"))
        if node.has_property("SL"):
            self.selected = self._points(node.get("SL"))
        if node.has_property("LB"):
            self.labels = {
                Point.from_sgfmill(m, self.height): text for m, text in node.get("LB")
            }
        if node.has_property("LN"):
            self.lines = self._segments(node.get("LN"))
        if node.has_property("AR"):
            self.arrows = self._segments(node.get("AR"))
