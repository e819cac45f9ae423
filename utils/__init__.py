# utils/__init__.py

# Import key utility functions you want to expose.
# serialization and rendering depend on the shapes package, import them directly.
from .geometry import is_number, is_near, shapes_near

# __all__ = ['is_number', 'is_near', 'shapes_near']
