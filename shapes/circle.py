from typing import Optional
from PIL import ImageDraw
from shapes.base_shape import Shape
from constants import CIRCLE_RADIUS, FILL_COLOR

class Circle(Shape):
    def draw_shape(self, canvas=None, draw: Optional[ImageDraw.ImageDraw]=None):
        x, y = self.x, self.y
        r = CIRCLE_RADIUS
        if canvas:
            canvas.create_oval(x - r, y - r, x + r, y + r,
                               fill=FILL_COLOR, outline='', tags=('shape', f'id{self.sid}'))
        elif draw:
            # PIL ellipse uses bounding box [x0, y0, x1, y1] format
            draw.ellipse([x - r, y - r, x + r, y + r], fill=FILL_COLOR)
