import json
from types import SimpleNamespace

from constants import DEFAULT_TITLE
from utils.serialization import INVALID_FORMAT


def event(**kwargs):
    return SimpleNamespace(**kwargs)


def test_n_drops_give_n_shapes_in_drop_order(app, model):
    drops = [('circle', 10, 10), ('triangle', 20, 30), ('square', 400, 250), ('circle', 10, 10)]
    for shape_type, x, y in drops:
        app.handle_drop(shape_type, x, y)

    shapes = model.all()
    assert [(s.shape_type, s.x, s.y) for s in shapes] == drops
    assert len({s.sid for s in shapes}) == len(drops)


def test_empty_payload_leaves_store_unchanged(app, model, view):
    app.handle_drop('circle', 5, 5)
    refreshes = view.refreshes
    assert app.handle_drop('', 10, 10) is None
    assert app.handle_drop(None, 10, 10) is None
    assert len(model) == 1
    assert view.refreshes == refreshes


def test_palette_drag_drops_at_canvas_coordinates(app, model, view):
    app.on_palette_press(event(x=5, y=5), 'square')
    assert view.dragging
    app.on_palette_release(event(x_root=110, y_root=220))
    assert not view.dragging
    (shape,) = model.all()
    assert (shape.shape_type, shape.x, shape.y) == ('square', 100.0, 200.0)
    assert app.drag_payload is None


def test_release_outside_canvas_places_nothing(app, model):
    app.on_palette_press(event(x=5, y=5), 'circle')
    app.on_palette_release(event(x_root=5, y_root=5))
    assert len(model) == 0


def test_release_without_press_places_nothing(app, model):
    app.on_palette_release(event(x_root=110, y_root=220))
    assert len(model) == 0


def test_double_click_removes_every_shape_in_radius(app, model):
    app.handle_drop('circle', 100, 100)
    app.handle_drop('square', 115, 100)
    app.handle_drop('triangle', 140, 100)

    removed = app.handle_double_click(100, 100)

    assert [s.shape_type for s in removed] == ['circle', 'square']
    assert [(s.x, s.y) for s in model.all()] == [(140, 100)]


def test_double_click_on_empty_area_removes_nothing(app, model):
    app.handle_drop('circle', 100, 100)
    app.on_canvas_double_click(event(x=300, y=300))
    assert len(model) == 1


def test_view_redraws_on_every_change(app, view):
    app.handle_drop('circle', 100, 100)
    app.handle_drop('circle', 300, 300)
    app.handle_double_click(100, 100)
    assert view.refreshes == 3


def test_export_then_import_round_trip(app, model, tmp_path):
    app.handle_drop('circle', 100.5, 100)
    app.handle_drop('triangle', 20, 30.25)
    before = [s.to_dict() for s in model.all()]
    path = tmp_path / "painting.json"

    assert app.export_shapes(str(path))
    app.new_drawing()
    assert len(model) == 0
    assert app.import_shapes(str(path))

    assert [s.to_dict() for s in model.all()] == before


def test_import_of_non_json_leaves_store_untouched(app, model, errors, tmp_path):
    app.handle_drop('circle', 1, 1)
    before = model.all()
    path = tmp_path / "bad.json"
    path.write_text("not json")

    assert not app.import_shapes(str(path))

    assert model.all() == before
    assert len(errors) == 1
    assert errors[0][1].startswith("Failed to load shapes: ")


def test_import_of_object_reports_invalid_format(app, model, errors, tmp_path):
    app.handle_drop('circle', 1, 1)
    before = model.all()
    path = tmp_path / "object.json"
    path.write_text('{"a":1}')

    assert not app.import_shapes(str(path))

    assert model.all() == before
    assert errors == [("Import Error", INVALID_FORMAT)]


def test_import_accepts_malformed_entries(app, model, errors, tmp_path):
    entries = [{"id": 1, "type": "circle", "x": 1, "y": 1}, {"type": "star"}, 3]
    path = tmp_path / "odd.json"
    path.write_text(json.dumps(entries))

    assert app.import_shapes(str(path))

    assert errors == []
    assert len(model) == 3
    counts = model.shape_counts()
    assert counts == {'circle': 1, 'square': 0, 'triangle': 0}
    assert sum(counts.values()) <= len(model)


def test_new_shapes_after_import_get_fresh_ids(app, model, tmp_path):
    path = tmp_path / "stamped.json"
    path.write_text(json.dumps([{"id": 1718000000000, "type": "square", "x": 1, "y": 1}]))
    app.import_shapes(str(path))
    added = app.handle_drop('square', 1, 1)
    assert added.sid not in {s.sid for s in model.all() if s is not added}


def test_export_failure_is_reported(app, errors, tmp_path):
    app.handle_drop('circle', 1, 1)
    assert not app.export_shapes(str(tmp_path / "missing-dir" / "out.json"))
    assert errors and errors[0][1].startswith("Failed to export shapes: ")


def test_csv_export_and_import(app, model, tmp_path):
    app.handle_drop('square', 12.5, 40.0)
    path = tmp_path / "painting.csv"
    assert app.export_csv(str(path))
    app.new_drawing()
    assert app.import_csv(str(path))
    (shape,) = model.all()
    assert (shape.shape_type, shape.x, shape.y) == ('square', 12.5, 40.0)


def test_png_and_pdf_exports(app, tmp_path):
    app.handle_drop('circle', 100, 100)
    assert app.export_png(str(tmp_path / "p.png"))
    assert app.export_pdf(str(tmp_path / "p.pdf"))
    assert (tmp_path / "p.png").exists()
    assert (tmp_path / "p.pdf").exists()


def test_new_drawing_resets_title(app, view):
    view.set_title("Sunset")
    app.handle_drop('circle', 1, 1)
    app.new_drawing()
    assert view.title == DEFAULT_TITLE


def test_drop_after_csv_round_trip_with_missing_ids_gets_a_fresh_id(app, model, tmp_path):
    json_path = tmp_path / "gaps.json"
    json_path.write_text('[5, {"id": 1, "type": "circle", "x": 1, "y": 1}]')
    app.import_shapes(str(json_path))
    csv_path = tmp_path / "gaps.csv"
    app.export_csv(str(csv_path))
    app.new_drawing()

    app.import_csv(str(csv_path))
    app.handle_drop('square', 50, 50)

    ids = [s.sid for s in model.all() if s.sid is not None]
    assert len(set(ids)) == len(ids) == 2
