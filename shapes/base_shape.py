# shapes/base_shape.py

from typing import Dict, Optional, Any, Tuple
from PIL import ImageDraw
import tkinter as tk # Needed for tk.Canvas type hint

from utils.geometry import is_number

# Marks shapes created in the app rather than read from a file
_NOT_IMPORTED = object()


class Shape:
    """A shape placed on the canvas.

    The base class is also what malformed imported entries become: it keeps
    whatever was read, counts toward totals and draws nothing.
    """

    def __init__(self, sid: Any, shape_type: Any, x: Any, y: Any, source: Any = _NOT_IMPORTED):
        self.sid = sid
        self.shape_type = shape_type
        self.x = x
        self.y = y
        # The decoded JSON value this shape was imported from, written back untouched on export
        self.source = source

    def __repr__(self):
        return f"{type(self).__name__}(sid={self.sid!r}, type={self.shape_type!r}, x={self.x!r}, y={self.y!r})"

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        """Placement point, or None when the coordinates are not numbers."""
        if is_number(self.x) and is_number(self.y):
            return (self.x, self.y)
        return None

    def to_dict(self) -> Any:
        """Serializes the Shape to its exported form."""
        if self.source is not _NOT_IMPORTED:
            return self.source
        return {
            'id': self.sid,
            'type': self.shape_type,
            'x': self.x,
            'y': self.y,
        }

    @staticmethod
    def from_dict(data: Any) -> 'Shape':
        """Factory method to create a Shape from one decoded JSON entry.

        Entries are never rejected. Anything that is not a well-formed
        circle, square or triangle becomes a plain Shape that draws nothing.
        """
        if not isinstance(data, dict):
            print(f"Shape.from_dict: Entry is not an object, keeping as-is: {data!r}")
            return Shape(None, None, None, None, source=data)

        sid = data.get('id')
        shape_type = data.get('type')
        x, y = data.get('x'), data.get('y')

        shape_class = SHAPE_CLASSES.get(shape_type) if isinstance(shape_type, str) else None
        if shape_class is None:
            print(f"Shape.from_dict: Unknown shape type {shape_type!r}, shape will not be drawn.")
            return Shape(sid, shape_type, x, y, source=data)
        if not (is_number(x) and is_number(y)):
            print(f"Shape.from_dict: Shape {sid!r} has invalid coordinates ({x!r}, {y!r}), shape will not be drawn.")
            return Shape(sid, shape_type, x, y, source=data)

        return shape_class(sid, shape_type, x, y, source=data)

    def draw_shape(self, canvas: Optional[tk.Canvas] = None, draw: Optional[ImageDraw.ImageDraw] = None):
        pass  # Override in subclasses


# Import specific shape subclasses for the from_dict factory method
# These imports MUST be *after* the Shape class definition
from .circle import Circle
from .square import Square
from .triangle import Triangle

SHAPE_CLASSES: Dict[str, type] = {
    'circle': Circle,
    'square': Square,
    'triangle': Triangle,
}
