# rendering.py

from typing import Iterable, Tuple

from PIL import Image, ImageDraw
from reportlab.pdfgen import canvas as pdf_canvas

from shapes.base_shape import Shape
from constants import CANVAS_WIDTH, CANVAS_HEIGHT, BACKGROUND_COLOR


def render(surface, shapes: Iterable[Shape]):
    """
    Clears the whole surface, then paints every shape in store order.
    `surface` is a Tkinter canvas or a PIL ImageDraw.
    """
    if isinstance(surface, ImageDraw.ImageDraw):
        width, height = surface.im.size
        surface.rectangle([0, 0, width, height], fill=BACKGROUND_COLOR)
        for shape in shapes:
            shape.draw_shape(draw=surface)
    else:
        surface.delete("all")
        for shape in shapes:
            shape.draw_shape(canvas=surface)


def render_image(shapes: Iterable[Shape], size: Tuple[int, int] = (CANVAS_WIDTH, CANVAS_HEIGHT)) -> Image.Image:
    """Renders the shapes off screen onto a new white image the size of the canvas."""
    img = Image.new('RGB', size, BACKGROUND_COLOR)
    render(ImageDraw.Draw(img), shapes)
    return img


def export_png(path: str, shapes: Iterable[Shape]):
    render_image(shapes).save(path, 'PNG')


def export_pdf(path: str, shapes: Iterable[Shape]):
    """Writes a single page sized to the canvas, one pixel to one point."""
    img = render_image(shapes)
    width, height = img.size
    pdf = pdf_canvas.Canvas(path, pagesize=(width, height))
    pdf.drawInlineImage(img, 0, 0, width=width, height=height, preserveAspectRatio=False)
    pdf.showPage()
    pdf.save()
