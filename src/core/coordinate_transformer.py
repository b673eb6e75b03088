from config import DEFAULT_CONSTANTS, RenderConstants


class CoordinateTransformer:
    """盤上座標 (1マス = 1.0) と SVG の viewBox 座標の対応を計算するクラス"""

    # 共通の列定義 (Iを除去)
    COLS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"

    def __init__(self, x_range: range, y_range: range, viewbox_width: float,
                 draw_labels: bool = False, constants: RenderConstants = DEFAULT_CONSTANTS):
        self.x_range = x_range
        self.y_range = y_range
        self.viewbox_width = viewbox_width
        self.constants = constants
        self.label_margin = constants.label_margin if draw_labels else 0.0

    @property
    def board_width(self) -> float:
        return len(self.x_range) - 1 + 2 * self.constants.board_margin + self.label_margin

    @property
    def board_height(self) -> float:
        return len(self.y_range) - 1 + 2 * self.constants.board_margin + self.label_margin

    @property
    def scale(self) -> float:
        return self.viewbox_width / self.board_width

    @property
    def viewbox_height(self) -> float:
        return self.viewbox_width * self.board_height / self.board_width

    @property
    def offset(self) -> float:
        return self.constants.board_margin + self.label_margin

    def board_translation(self):
        """切り出した範囲の左上が余白の内側に来るような平行移動量"""
        return self.offset - self.x_range.start, self.offset - self.y_range.start

    def clip_rect(self):
        """(x, y, width, height): 表示範囲の交点を中心に半マスずつ広げた矩形"""
        return (self.x_range.start - 0.5, self.y_range.start - 0.5,
                len(self.x_range), len(self.y_range))

    @staticmethod
    def column_label(x: int) -> str:
        """列番号を座標ラベルに変換 (Iは数字の1と紛らわしいため飛ばす)

        26路盤の最終列など、25文字を超える列は AA, AB ... と2文字にする。
        """
        cols = CoordinateTransformer.COLS
        if x < len(cols):
            return cols[x]
        return cols[x // len(cols) - 1] + cols[x % len(cols)]

    @staticmethod
    def row_label(y: int, board_height: int) -> str:
        """上からの行番号を、盤全体の下端から数えた1始まりのラベルに変換"""
        return str(board_height - y)
