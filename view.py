# view.py

import tkinter as tk      # For core Tkinter widgets and functionality
from typing import Dict, Optional, Tuple

from model import PaintingModel # The view observes and displays the model
from utils.geometry import canvas_point_from_root
from utils.rendering import render
from constants import (CANVAS_WIDTH, CANVAS_HEIGHT, PANEL_WIDTH, TOOLBAR_HEIGHT, PALETTE_ICON_SIZE,
                       SHAPE_BUTTONS, BACKGROUND_COLOR, DEFAULT_TITLE)

# --- View - Handles UI and Drawing ────────────────────────────────────────────


class PaintingView(tk.Frame):
    def __init__(self, master, controller):
        super().__init__(master)
        self.controller = controller # View holds a reference to the Controller
        self.pack(fill=tk.BOTH, expand=True)

        self.title_var = tk.StringVar(value=DEFAULT_TITLE)
        self._palette_icons: Dict[str, tk.Canvas] = {}

        # Build UI
        self._build_ui()

        # Bind events to controller methods
        self._bind_events()

        master.title("Shape Painter")

    def _build_ui(self):
        # Header: title field and file buttons
        self.toolbar = tk.Frame(self, height=TOOLBAR_HEIGHT, bd=1, relief=tk.RAISED, bg='#f8f9fa')
        self.toolbar.pack(side=tk.TOP, fill=tk.X)
        self.title_entry = tk.Entry(self.toolbar, textvariable=self.title_var, font=('Segoe UI', 12))
        self.title_entry.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=10, pady=8)
        # Buttons call controller methods
        tk.Button(self.toolbar, text="Export", command=self.controller.export_shapes).pack(side=tk.LEFT, padx=(0, 10))
        tk.Button(self.toolbar, text="Import...", command=self.controller.import_shapes).pack(side=tk.LEFT, padx=(0, 10))

        # Footer: shape counts
        self.footer = tk.Frame(self, bd=1, relief=tk.GROOVE, bg='#f8f9fa')
        self.footer.pack(side=tk.BOTTOM, fill=tk.X)
        self.counts_label = tk.Label(self.footer, anchor='w', bg='#f8f9fa', padx=12, pady=8)
        self.counts_label.pack(fill=tk.X)

        # Sidebar: tool palette
        self.sidebar = tk.Frame(self, width=PANEL_WIDTH, bg='#f0f0f0', bd=1, relief=tk.GROOVE)
        self.sidebar.pack(side=tk.RIGHT, fill=tk.Y)
        self.sidebar.pack_propagate(False)
        tk.Label(self.sidebar, text="Tools", font=('Segoe UI', 12, 'bold'), bg='#f0f0f0').pack(pady=(20, 15))
        for stype, color in SHAPE_BUTTONS.items():
            icon = tk.Canvas(self.sidebar, width=PALETTE_ICON_SIZE, height=PALETTE_ICON_SIZE,
                             bg='#f0f0f0', highlightthickness=0, cursor='hand2')
            self._draw_palette_icon(icon, stype, color)
            icon.pack(pady=8)
            self._palette_icons[stype] = icon

        # Canvas area. The border lives on the frame so canvas coordinates start at the drawing's corner.
        self.canvas_area = tk.Frame(self, bg=BACKGROUND_COLOR)
        self.canvas_area.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.canvas_border = tk.Frame(self.canvas_area, bd=2, relief=tk.GROOVE)
        self.canvas_border.pack(padx=20, pady=20, expand=True)
        self.canvas = tk.Canvas(self.canvas_border, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                                bg=BACKGROUND_COLOR, highlightthickness=0, bd=0, cursor='crosshair')
        self.canvas.pack()

    @staticmethod
    def _draw_palette_icon(icon: tk.Canvas, stype: str, color: str):
        s = PALETTE_ICON_SIZE
        if stype == 'circle':
            icon.create_oval(1, 1, s - 1, s - 1, fill=color, outline='')
        elif stype == 'square':
            icon.create_rectangle(0, 0, s, s, fill=color, outline='')
        elif stype == 'triangle':
            icon.create_polygon(s / 2, 0, 0, s, s, s, fill=color, outline='')

    def _bind_events(self):
        for stype, icon in self._palette_icons.items():
            icon.bind("<ButtonPress-1>", lambda e, s=stype: self.controller.on_palette_press(e, s))
            icon.bind("<ButtonRelease-1>", self.controller.on_palette_release)
        self.canvas.bind("<Double-Button-1>", self.controller.on_canvas_double_click)

        self.master.bind_all("<Control-n>", lambda e: self.controller.new_drawing())
        self.master.bind_all("<Control-o>", lambda e: self.controller.import_shapes())
        self.master.bind_all("<Control-s>", lambda e: self.controller.export_shapes())


    # --- View - Methods to update the display (Called by Controller or Model Observer) ---

    def refresh_all(self, model_state: PaintingModel):
        """Redraws the canvas and the count footer to match the model state."""
        render(self.canvas, model_state.all())

        counts = model_state.shape_counts()
        self.counts_label.config(
            text=f"Shape Count:  Circle: {counts['circle']} | Square: {counts['square']} | Triangle: {counts['triangle']}")

    def set_dragging(self, dragging: bool):
        """Switches the cursor while a palette icon is being dragged."""
        self.master.config(cursor='fleur' if dragging else '')

    def get_title(self) -> str:
        return self.title_var.get()

    def set_title(self, title: str):
        self.title_var.set(title)

    # --- View - Coordinate helpers ---

    def get_canvas_coords(self, event) -> Tuple[float, float]:
        return self.canvas.canvasx(event.x), self.canvas.canvasy(event.y)

    def canvas_point_from_root(self, x_root: int, y_root: int) -> Optional[Tuple[float, float]]:
        """Canvas coordinates of a screen point, or None when it's not over the canvas."""
        return canvas_point_from_root(
            x_root, y_root,
            (self.canvas.winfo_rootx(), self.canvas.winfo_rooty()),
            (self.canvas.winfo_width(), self.canvas.winfo_height()))
