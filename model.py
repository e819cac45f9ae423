import math
from typing import Callable, Dict, Iterable, List, Tuple

from shapes.base_shape import Shape, SHAPE_CLASSES
from utils.geometry import is_number
from constants import SHAPE_TYPES


class PaintingModel:
    """
    The shape store: an ordered list of placed shapes, the only source of
    truth for what the canvas shows. List order is paint order.

    Every mutation notifies the observers, which redraw from scratch.
    """

    def __init__(self):
        self._shapes: List[Shape] = []
        # Highest id handed out so far. Ids are never reused, even after removal.
        self._last_id = 0

        # Observer callbacks
        self._observers: List[Callable] = []

    def all(self) -> Tuple[Shape, ...]:
        """Current shapes in store order. A snapshot, changing it doesn't touch the store."""
        return tuple(self._shapes)

    def __len__(self):
        return len(self._shapes)

    def _next_id(self) -> int:
        # Imported ids may be floats such as 1.0, which equal the int 1
        stored_ids = [math.floor(s.sid) for s in self._shapes if is_number(s.sid)]
        self._last_id = max([self._last_id] + stored_ids) + 1
        return self._last_id

    def add(self, shape_type: str, x: float, y: float) -> Shape:
        """Appends a new shape with a fresh id."""
        # An unknown type still gets stored, it just draws nothing
        shape_class = SHAPE_CLASSES.get(shape_type, Shape)
        shape = shape_class(self._next_id(), shape_type, x, y)
        self._shapes.append(shape)
        print(f"PaintingModel.add: Shape ID {shape.sid} ({shape_type}) added at ({x}, {y}). {len(self._shapes)} shapes in store.")
        self.notify_observers()
        return shape

    def remove_where(self, predicate: Callable[[Shape], bool]) -> List[Shape]:
        """Keeps only the shapes for which predicate is false. Returns the removed ones."""
        kept, removed = [], []
        for shape in self._shapes:
            (removed if predicate(shape) else kept).append(shape)
        self._shapes = kept
        print(f"PaintingModel.remove_where: Removed {len(removed)} shape(s), {len(kept)} left.")
        self.notify_observers()
        return removed

    def replace_all(self, shapes: Iterable[Shape]):
        """Discards the current shapes and installs the given ones as they are."""
        self._shapes = list(shapes)
        print(f"PaintingModel.replace_all: Store replaced, {len(self._shapes)} shapes.")
        self.notify_observers()

    def reset(self):
        self.replace_all([])

    def shape_counts(self) -> Dict[str, int]:
        """Number of shapes per known type. Entries of any other type are not counted."""
        counts = {shape_type: 0 for shape_type in SHAPE_TYPES}
        for shape in self._shapes:
            if isinstance(shape.shape_type, str) and shape.shape_type in counts:
                counts[shape.shape_type] += 1
        return counts

    def add_observer(self, fn):
        if callable(fn): self._observers.append(fn)

    def notify_observers(self):
        for cb in list(self._observers):
            try: cb()
            except Exception as e: print(f"Error calling model observer callback {getattr(cb, '__name__', cb)}: {e}")
