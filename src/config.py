from dataclasses import dataclass

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class RenderConstants:
    """描画全体で共有する固定値 (単位は盤上の1マス = 1.0)"""
    board_margin: float = 0.64
    label_margin: float = 0.8

    font_family: str = "Roboto"
    font_size: float = 0.5
    font_weight: int = 700

    line_color: str = "black"
    line_width: float = 0.03
    markup_width: float = 0.1
    hoshi_radius: float = 0.09


DEFAULT_CONSTANTS = RenderConstants()
