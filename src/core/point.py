from typing import NamedTuple, Tuple


class Point(NamedTuple):
    """盤上の交点。x は左からの列、y は上からの行 (どちらも0始まり)

    タプルの自然順序が列優先 (x, y) となるため、そのままソートキーに使える。
    """
    x: int
    y: int

    @classmethod
    def from_sgfmill(cls, move: Tuple[int, int], height: int) -> 'Point':
        """sgfmill の (row, col) 座標 (row 0 が最下段) から Point を生成"""
        row, col = move
        return cls(col, height - 1 - row)
