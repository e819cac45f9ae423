from typing import Optional
from PIL import ImageDraw
from shapes.base_shape import Shape
from constants import SQUARE_SIDE, FILL_COLOR

class Square(Shape):
    def draw_shape(self, canvas=None, draw: Optional[ImageDraw.ImageDraw]=None):
        half = SQUARE_SIDE / 2
        # Centred on the placement point
        x0, y0 = self.x - half, self.y - half
        x1, y1 = x0 + SQUARE_SIDE, y0 + SQUARE_SIDE
        if canvas:
            canvas.create_rectangle(x0, y0, x1, y1,
                                    fill=FILL_COLOR, outline='', tags=('shape', f'id{self.sid}'))
        elif draw:
            # PIL rectangles include the far edge, so stop one pixel short
            draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=FILL_COLOR)
