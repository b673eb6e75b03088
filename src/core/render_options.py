import json
from enum import Enum
from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


class GobanStyle(str, Enum):
    FANCY = "fancy"
    MINIMALIST = "minimalist"
    SIMPLE = "simple"


class NodeDescription(BaseModel):
    """描画するノードの指定 (主分岐の手数、分岐パス、または最終ノード)"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    number: int = Field(default=0, ge=0, description="主分岐上のノード番号 (0 = ルート)")
    path: Optional[List[int]] = Field(default=None, description="ルートからの子ノード番号の列")
    last: bool = Field(default=False, description="主分岐の最終ノード")

    @model_validator(mode="after")
    def _check_exclusive(self):
        if self.last and self.path is not None:
            raise ValueError("'last' and 'path' cannot be combined")
        if self.number != 0 and (self.last or self.path is not None):
            raise ValueError("'number' cannot be combined with 'last' or 'path'")
        if self.path is not None and any(i < 0 for i in self.path):
            raise ValueError("path indices must be non-negative")
        return self


class GobanRange(BaseModel):
    """描画範囲の指定。x, y は半開区間 [start, end)"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["full", "shrink_wrap", "ranged"] = "full"
    x: Optional[Tuple[int, int]] = None
    y: Optional[Tuple[int, int]] = None

    @model_validator(mode="before")
    @classmethod
    def _from_shorthand(cls, data):
        if isinstance(data, str):
            return {"kind": data}
        if isinstance(data, dict) and "kind" not in data and ("x" in data or "y" in data):
            return {"kind": "ranged", **data}
        return data

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.kind == "ranged":
            if self.x is None or self.y is None:
                raise ValueError("ranged GobanRange requires both 'x' and 'y'")
            if min(self.x + self.y) < 0:
                raise ValueError("range bounds must be non-negative")
        return self

    @classmethod
    def full_board(cls) -> 'GobanRange':
        return cls(kind="full")

    @classmethod
    def shrink_wrap(cls) -> 'GobanRange':
        return cls(kind="shrink_wrap")

    @classmethod
    def ranged(cls, x: Tuple[int, int], y: Tuple[int, int]) -> 'GobanRange':
        return cls(kind="ranged", x=x, y=y)

    @classmethod
    def parse(cls, text: str) -> 'GobanRange':
        """CLI用: 'x0:x1,y0:y1' 形式の文字列から範囲を生成"""
        try:
            x_text, y_text = text.split(",")
            x0, x1 = (int(v) for v in x_text.split(":"))
            y0, y1 = (int(v) for v in y_text.split(":"))
        except ValueError:
            raise ValueError(f"Invalid range '{text}', expected 'x0:x1,y0:y1'") from None
        return cls.ranged((x0, x1), (y0, y1))


class MakeSvgOptions(BaseModel):
    """SVG生成オプション。1回の描画中は不変"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    node_description: NodeDescription = Field(default_factory=NodeDescription)
    goban_range: GobanRange = Field(default_factory=GobanRange.full_board)
    style: GobanStyle = GobanStyle.SIMPLE
    viewbox_width: float = Field(default=800.0, gt=0)
    draw_board_labels: bool = True
    draw_move_numbers: bool = False
    draw_marks: bool = True
    draw_triangles: bool = True
    draw_circles: bool = True
    draw_squares: bool = True
    draw_selected: bool = True
    draw_dimmed: bool = True
    draw_labels: bool = True
    draw_lines: bool = True
    draw_arrows: bool = True
    first_move_number: int = Field(default=1, ge=0)

    @classmethod
    def from_json(cls, text: str) -> 'MakeSvgOptions':
        return cls.model_validate(json.loads(text))

    @classmethod
    def load(cls, path: str) -> 'MakeSvgOptions':
        """JSONファイルからオプションを読み込む"""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_json(f.read())
