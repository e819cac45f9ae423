# painter.py

import sys

from constants import DEFAULT_TITLE


def _missing_dependencies():
    missing = []
    try:
        from PIL import Image, ImageDraw
        Image.new('RGB', (1, 1))
    except ImportError:
        missing.append('Pillow')
    try:
        import pandas as pd
        pd.DataFrame()
    except ImportError:
        missing.append('pandas')
    try:
        import reportlab
    except ImportError:
        missing.append('reportlab')
    return missing


def _export_headless(args) -> int:
    """Renders the given file straight to PNG/PDF without opening a window."""
    from utils.serialization import MalformedImport, read_shapes_file
    from utils.rendering import export_png, export_pdf

    shapes = []
    if args.file:
        try:
            shapes = read_shapes_file(args.file)
        except MalformedImport as e:
            print(f"painter: {e}", file=sys.stderr)
            return 1

    exports = [(args.export_png, export_png), (args.export_pdf, export_pdf)]
    for path, writer in exports:
        if not path:
            continue
        try:
            writer(path, shapes)
        except OSError as e:
            print(f"painter: Failed to export shapes: {e}", file=sys.stderr)
            return 1
        print(f"painter: Wrote {len(shapes)} shapes to {path}")
    return 0


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Shape Painter')
    parser.add_argument('file', nargs='?', help='JSON shape file to open')
    parser.add_argument('-t', '--title', default=DEFAULT_TITLE, help='Painting title, used to name exports')
    parser.add_argument('--export-png', dest='export_png', metavar='OUT.png', help='Render to PNG and exit')
    parser.add_argument('--export-pdf', dest='export_pdf', metavar='OUT.pdf', help='Render to PDF and exit')
    args = parser.parse_args(argv)

    missing = _missing_dependencies()

    if args.export_png or args.export_pdf:
        if missing:
            print(f"painter: Install the following packages: {', '.join(missing)}", file=sys.stderr)
            return 1
        return _export_headless(args)

    import tkinter as tk
    from tkinter import messagebox

    # Initialize Tk as early as possible
    root = tk.Tk()
    root.withdraw() # Hide the main window until it's built

    if missing:
        messagebox.showerror('Missing Dependencies', f"Install the following packages: {', '.join(missing)}")
        root.destroy()
        return 1

    from model import PaintingModel
    from controller import PainterApp

    model = PaintingModel()
    controller = PainterApp(root, model)
    controller.view.set_title(args.title)

    if args.file:
        controller.import_shapes(args.file) # Shows an error messagebox if the file is bad

    # Initial draw of the (possibly empty) model
    controller.view.refresh_all(model)

    root.deiconify()
    root.mainloop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
