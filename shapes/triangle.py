from typing import List, Optional, Tuple
from PIL import ImageDraw
from shapes.base_shape import Shape
from constants import TRIANGLE_HALF_BASE, TRIANGLE_APEX_OFFSET, TRIANGLE_BASE_OFFSET, FILL_COLOR

class Triangle(Shape):
    @property
    def vertices(self) -> List[Tuple[float, float]]:
        """Apex above the placement point, base corners below it."""
        x, y = self.x, self.y
        return [
            (x, y - TRIANGLE_APEX_OFFSET),
            (x - TRIANGLE_HALF_BASE, y + TRIANGLE_BASE_OFFSET),
            (x + TRIANGLE_HALF_BASE, y + TRIANGLE_BASE_OFFSET),
        ]

    def draw_shape(self, canvas=None, draw: Optional[ImageDraw.ImageDraw]=None):
        pts = self.vertices
        if canvas:
            flat = [c for pt in pts for c in pt] # Tkinter wants a flat list
            canvas.create_polygon(flat, fill=FILL_COLOR, outline='', tags=('shape', f'id{self.sid}'))
        elif draw:
            draw.polygon(pts, fill=FILL_COLOR)
