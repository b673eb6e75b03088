import math
import xml.etree.ElementTree as ET
from typing import Dict, Iterable, Optional, Tuple, Union

from config import SVG_NAMESPACE

Attr = Union[str, int, float]


def fmt(value: Attr) -> str:
    """属性値を文字列化する。浮動小数は末尾の0を落として出力を安定させる"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isclose(value, round(value), abs_tol=1e-9):
            return str(int(round(value)))
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return value


def svg_element(tag: str, attrs: Optional[Dict[str, Attr]] = None,
                parent: Optional[ET.Element] = None, text: Optional[str] = None) -> ET.Element:
    """属性を整形して要素を作成する。parent があればその子として追加"""
    attrib = {k: fmt(v) for k, v in (attrs or {}).items()}
    if parent is None:
        elem = ET.Element(tag, attrib)
    else:
        elem = ET.SubElement(parent, tag, attrib)
    if text is not None:
        elem.text = text
    return elem


def group(group_id: Optional[str] = None, **attrs: Attr) -> ET.Element:
    """<g> を作成する。キーワード引数の '_' は '-' に置き換える (stroke_width -> stroke-width)"""
    attrib: Dict[str, Attr] = {}
    if group_id is not None:
        attrib["id"] = group_id
    attrib.update({k.replace("_", "-"): v for k, v in attrs.items()})
    return svg_element("g", attrib)


def points_attr(points: Iterable[Tuple[float, float]]) -> str:
    return " ".join(f"{fmt(float(x))},{fmt(float(y))}" for x, y in points)


def document(width: float, height: float, **attrs: Attr) -> ET.Element:
    attrib: Dict[str, Attr] = {
        "xmlns": SVG_NAMESPACE,
        "viewBox": f"0 0 {fmt(float(width))} {fmt(float(height))}",
        "width": float(width),
    }
    attrib.update({k.replace("_", "-"): v for k, v in attrs.items()})
    return svg_element("svg", attrib)


def to_string(root: ET.Element) -> str:
    return ET.tostring(root, encoding="unicode", xml_declaration=False)
