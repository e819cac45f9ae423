# geometry.py

import math
from numbers import Real
from typing import Any, List, Sequence, Tuple, TYPE_CHECKING

from constants import HIT_RADIUS

if TYPE_CHECKING:
    from shapes.base_shape import Shape


def is_number(value: Any) -> bool:
    """True for real numbers that can be used as a coordinate. JSON booleans don't count."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)

def distance(p1: Tuple[float, float], p2: Tuple[float, float]) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])

def is_near(shape: "Shape", point: Tuple[float, float], radius: float = HIT_RADIUS) -> bool:
    """
    Returns True if the shape's placement point lies within `radius` of `point`.
    The radius is the same for every shape type, regardless of how big it draws.
    Shapes without numeric coordinates are never near anything.
    """
    position = shape.position
    if position is None:
        return False
    return distance(position, point) <= radius

def shapes_near(point: Tuple[float, float], shapes: Sequence["Shape"], radius: float = HIT_RADIUS) -> List["Shape"]:
    """All shapes within `radius` of `point`, in store order. Not just the nearest one."""
    return [shape for shape in shapes if is_near(shape, point, radius)]


def canvas_point_from_root(x_root: int, y_root: int, origin: Tuple[int, int], size: Tuple[int, int]):
    """
    Converts screen coordinates to canvas coordinates given the canvas' screen origin.
    Returns None when the point falls outside the canvas.
    """
    x = x_root - origin[0]
    y = y_root - origin[1]
    width, height = size
    if not (0 <= x < width and 0 <= y < height):
        return None
    return (float(x), float(y))
