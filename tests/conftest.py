import pytest

import controller as controller_module
from controller import PainterApp
from model import PaintingModel
from utils.geometry import canvas_point_from_root
from constants import CANVAS_WIDTH, CANVAS_HEIGHT, DEFAULT_TITLE


class FakeView:
    """Stands in for PaintingView so the controller can run without a display."""

    canvas_origin = (10, 20)

    def __init__(self):
        self.refreshes = 0
        self.title = DEFAULT_TITLE
        self.dragging = False

    def refresh_all(self, model_state):
        self.refreshes += 1

    def set_dragging(self, dragging):
        self.dragging = dragging

    def get_title(self):
        return self.title

    def set_title(self, title):
        self.title = title

    def get_canvas_coords(self, event):
        return float(event.x), float(event.y)

    def canvas_point_from_root(self, x_root, y_root):
        return canvas_point_from_root(x_root, y_root, self.canvas_origin, (CANVAS_WIDTH, CANVAS_HEIGHT))


@pytest.fixture
def model():
    return PaintingModel()


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def app(model, view):
    return PainterApp(None, model, view=view)


@pytest.fixture
def errors(monkeypatch):
    """Collects messagebox.showerror calls instead of opening dialogs."""
    shown = []
    monkeypatch.setattr(controller_module.messagebox, 'showerror',
                        lambda title, message: shown.append((title, message)))
    return shown
