class GobanSVGError(ValueError):
    """SVG生成処理で発生するエラーの基底クラス"""


class ParseError(GobanSVGError):
    """SGFテキストの解析に失敗した"""


class NodeNotFoundError(GobanSVGError):
    """指定されたノードがゲームツリーに存在しない"""


class InvalidRangeError(GobanSVGError):
    """指定された表示範囲が盤面の外にはみ出している、または空である"""


class UnlabellableRangeError(GobanSVGError):
    """座標ラベルを描画できないほど表示範囲が大きい (幅25、高さ99まで)"""

    def __init__(self, width: int, height: int):
        super().__init__(
            f"Range {width}x{height} is too large to label (max 25 columns, 99 rows)"
        )
        self.width = width
        self.height = height
