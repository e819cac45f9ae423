# ─── Constants ──────────────────────────────────────────────────────────────────
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 500
PANEL_WIDTH = 180
TOOLBAR_HEIGHT = 40

# Double-click removal radius, same for every shape type
HIT_RADIUS = 30

# Fixed drawing sizes (pixels)
CIRCLE_RADIUS = 20
SQUARE_SIDE = 40
TRIANGLE_HALF_BASE = 25
TRIANGLE_APEX_OFFSET = 25
TRIANGLE_BASE_OFFSET = 20

FILL_COLOR = '#333'
BACKGROUND_COLOR = '#ffffff'

# Palette icons: shape type -> icon colour
SHAPE_BUTTONS = {
    'circle':   '#6c757d',
    'square':   '#17a2b8',
    'triangle': '#ffc107',
}
SHAPE_TYPES = list(SHAPE_BUTTONS.keys())
PALETTE_ICON_SIZE = 50

DEFAULT_TITLE = 'My Painting'
DEFAULT_EXPORT_NAME = 'painting'
