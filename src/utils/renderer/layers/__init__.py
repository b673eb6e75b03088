from utils.renderer.layers.coordinate_layer import CoordinateLayer
from utils.renderer.layers.grid_layer import GridLayer
from utils.renderer.layers.line_layer import ArrowLayer, LineLayer
from utils.renderer.layers.markup_layer import (
    CircleLayer, DimmedLayer, LabelLayer, MarkLayer, SelectedLayer, SquareLayer, TriangleLayer
)
from utils.renderer.layers.move_number_layer import MoveNumberLayer
from utils.renderer.layers.stone_layer import StoneLayer

__all__ = [
    "ArrowLayer", "CircleLayer", "CoordinateLayer", "DimmedLayer", "GridLayer", "LabelLayer",
    "LineLayer", "MarkLayer", "MoveNumberLayer", "SelectedLayer", "SquareLayer", "StoneLayer",
    "TriangleLayer",
]
