# controller.py

from typing import Callable, Iterable, List, Optional, TYPE_CHECKING

# Tkinter and its modules for UI interaction and dialogs
import tkinter as tk
from tkinter import filedialog, messagebox

from shapes.base_shape import Shape
from utils.geometry import shapes_near
from utils.serialization import (MalformedImport, export_filename, read_shapes_file, write_shapes_file,
                                 import_csv as read_shapes_csv, export_csv as write_shapes_csv)
from utils.rendering import export_png, export_pdf
from view import PaintingView
from constants import DEFAULT_TITLE

if TYPE_CHECKING:
    from model import PaintingModel # PainterApp uses PaintingModel type hint

JSON_FILETYPES = [("JSON files", "*.json"), ("All files", "*.*")]
CSV_FILETYPES = [("CSV files", "*.csv"), ("All files", "*.*")]


class PainterApp:
    def __init__(self, root: Optional[tk.Tk], model: 'PaintingModel', view=None):
        self.root = root
        self.model = model

        # The View needs access to the controller (self)
        self.view = view if view is not None else PaintingView(root, self)

        # Register the View as an observer of the Model
        self.model.add_observer(lambda: self.view.refresh_all(self.model))

        # Shape type carried by the palette drag in progress, if any
        self.drag_payload: Optional[str] = None

        if root is not None:
            self._build_menubar()

    def _build_menubar(self):
        menubar = tk.Menu(self.root)
        filemenu = tk.Menu(menubar, tearoff=0)
        filemenu.add_command(label="New", command=self.new_drawing, accelerator="Ctrl+N")
        filemenu.add_command(label="Import...", command=self.import_shapes, accelerator="Ctrl+O")
        filemenu.add_command(label="Export...", command=self.export_shapes, accelerator="Ctrl+S")
        filemenu.add_separator()
        filemenu.add_command(label="Import CSV file...", command=self.import_csv)
        filemenu.add_command(label="Export CSV...", command=self.export_csv)
        filemenu.add_command(label="Export PNG...", command=self.export_png)
        filemenu.add_command(label="Export PDF...", command=self.export_pdf)
        filemenu.add_separator()
        filemenu.add_command(label="Exit", command=self.root.quit)
        menubar.add_cascade(label="File", menu=filemenu)
        self.root.config(menu=menubar)


    # --- Controller - Palette drag and drop ---

    def on_palette_press(self, e, shape_type: str):
        """Starts dragging a shape type off the palette."""
        self.drag_payload = shape_type
        self.view.set_dragging(True)

    def on_palette_release(self, e):
        """Drops the dragged shape where the pointer was released, if that's over the canvas."""
        payload, self.drag_payload = self.drag_payload, None
        self.view.set_dragging(False)

        point = self.view.canvas_point_from_root(e.x_root, e.y_root)
        if point is None:
            print(f"Controller.on_palette_release: Released outside the canvas at ({e.x_root}, {e.y_root}). Nothing placed.")
            return
        self.handle_drop(payload, *point)

    def handle_drop(self, shape_type: Optional[str], x: float, y: float) -> Optional[Shape]:
        """Places a shape at canvas point (x, y). An empty payload places nothing."""
        if not shape_type:
            print("Controller.handle_drop: Empty drag payload, ignoring drop.")
            return None
        return self.model.add(shape_type, x, y) # Model update + notify


    # --- Controller - Canvas Event Handlers ---

    def on_canvas_double_click(self, e):
        x, y = self.view.get_canvas_coords(e)
        self.handle_double_click(x, y)

    def handle_double_click(self, x: float, y: float) -> List[Shape]:
        """Removes every shape within the hit radius of (x, y), not only the nearest."""
        hits = {id(shape) for shape in shapes_near((x, y), self.model.all())}
        print(f"Controller.handle_double_click: ({x}, {y}) hits {len(hits)} shape(s).")
        return self.model.remove_where(lambda shape: id(shape) in hits) # Model update + notify


    # --- Controller - File Menu Functionality ---

    def new_drawing(self):
        """Starts a new blank drawing."""
        print("\nController.new_drawing: Creating a new drawing.")
        self.model.reset() # Model reset state and notifies observers
        self.view.set_title(DEFAULT_TITLE)

    def import_shapes(self, file_path=None) -> bool:
        """Replaces the drawing with the shapes in a JSON file. The drawing is kept if the file is bad."""
        return self._import(file_path, JSON_FILETYPES, read_shapes_file, "import_shapes")

    def import_csv(self, file_path=None) -> bool:
        """Replaces the drawing with the shapes in a CSV table."""
        return self._import(file_path, CSV_FILETYPES, read_shapes_csv, "import_csv")

    def _import(self, file_path, filetypes, reader: Callable[[str], List[Shape]], name: str) -> bool:
        if not file_path:
            print(f"\nController.{name}: Opening file dialog.")
            file_path = filedialog.askopenfilename(filetypes=filetypes)
            if not file_path: print(f"Controller.{name}: File dialog cancelled."); return False

        print(f"Controller.{name}: Selected file: {file_path}. Loading...")
        try:
            shapes = reader(file_path)
        except MalformedImport as e:
            print(f"Controller.{name}: Import of {file_path} failed: {e}")
            messagebox.showerror("Import Error", str(e))
            return False

        self.model.replace_all(shapes) # Model update + notify
        print(f"Controller.{name}: Successfully loaded {len(shapes)} shapes from {file_path}.")
        return True

    def export_shapes(self, file_path=None) -> bool:
        """Writes the shape list as a JSON file named after the title."""
        return self._export(file_path, '.json', JSON_FILETYPES, write_shapes_file, "export_shapes")

    def export_csv(self, file_path=None) -> bool:
        return self._export(file_path, '.csv', CSV_FILETYPES, write_shapes_csv, "export_csv")

    def export_png(self, file_path=None) -> bool:
        return self._export(file_path, '.png', [("PNG images", "*.png"), ("All files", "*.*")], export_png, "export_png")

    def export_pdf(self, file_path=None) -> bool:
        return self._export(file_path, '.pdf', [("PDF files", "*.pdf"), ("All files", "*.*")], export_pdf, "export_pdf")

    def _export(self, file_path, extension: str, filetypes,
                writer: Callable[[str, Iterable[Shape]], None], name: str) -> bool:
        if not file_path:
            file_path = filedialog.asksaveasfilename(
                initialfile=export_filename(self.view.get_title(), extension),
                defaultextension=extension,
                filetypes=filetypes)
            if not file_path: print(f"Controller.{name}: File dialog cancelled."); return False

        print(f"\nController.{name}: Exporting {len(self.model)} shapes to {file_path}.")
        try:
            writer(file_path, self.model.all())
        except OSError as e:
            print(f"Controller.{name}: Export to {file_path} failed: {e}")
            messagebox.showerror("Export Error", f"Failed to export shapes: {e}")
            return False
        print(f"Controller.{name}: Successfully exported to {file_path}.")
        return True
