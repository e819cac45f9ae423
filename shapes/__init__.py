
# Import the base shape class
from .base_shape import Shape, SHAPE_CLASSES

# Import the specific shape subclasses
from .circle import Circle
from .square import Square
from .triangle import Triangle
