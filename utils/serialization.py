# serialization.py

import json
from typing import Any, Iterable, List

import pandas as pd

from shapes.base_shape import Shape
from constants import DEFAULT_EXPORT_NAME

INVALID_FORMAT = "Invalid file format"
LOAD_FAILED = "Failed to load shapes: "

# Column order of the CSV shape table
CSV_COLUMNS = ['id', 'type', 'x', 'y']


class MalformedImport(Exception):
    """An import could not be turned into a shape list. The message is shown to the user as-is."""


def _reject_constant(name: str):
    # NaN/Infinity are not JSON, even though the json module accepts them by default
    raise ValueError(f"Unexpected token {name} in JSON")


def export_filename(title: str, extension: str = '.json') -> str:
    """File name for an export: the trimmed title, or the default name when blank."""
    return f"{(title or '').strip() or DEFAULT_EXPORT_NAME}{extension}"


def export_shapes(shapes: Iterable[Shape]) -> str:
    """Serializes shapes to a JSON array of {id, type, x, y} objects, in store order."""
    return json.dumps([shape.to_dict() for shape in shapes], indent=2)


def import_shapes(text: str) -> List[Shape]:
    """
    Parses exported JSON text back into shapes.

    Only the top level is checked: it must be an array. Its entries are taken
    as they are, without validating their types or fields.
    Raises MalformedImport on a parse failure or a non-array document.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e: # json.JSONDecodeError is a ValueError
        raise MalformedImport(f"{LOAD_FAILED}{e}") from e

    if not isinstance(data, list):
        raise MalformedImport(INVALID_FORMAT)

    return [Shape.from_dict(entry) for entry in data]


def read_shapes_file(path: str) -> List[Shape]:
    """Reads a whole file and imports it. Read failures are reported like parse failures."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedImport(f"{LOAD_FAILED}{e}") from e
    return import_shapes(text)


def write_shapes_file(path: str, shapes: Iterable[Shape]):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(export_shapes(shapes))


# --- CSV shape table ---

def shapes_to_dataframe(shapes: Iterable[Shape]) -> pd.DataFrame:
    rows = [{'id': s.sid, 'type': s.shape_type, 'x': s.x, 'y': s.y} for s in shapes]
    # object dtype keeps integer ids as integers when some ids are missing
    return pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=object)


def export_csv(path: str, shapes: Iterable[Shape]):
    shapes_to_dataframe(shapes).to_csv(path, index=False)


def import_csv(path: str) -> List[Shape]:
    """
    Reads a shape table with id, type, x and y columns.
    Extra columns are ignored, empty cells become null fields.
    """
    try:
        df = pd.read_csv(path)
    except (OSError, UnicodeDecodeError, ValueError) as e: # pandas parser errors are ValueErrors
        raise MalformedImport(f"{LOAD_FAILED}{e}") from e

    if any(column not in df.columns for column in CSV_COLUMNS):
        raise MalformedImport(INVALID_FORMAT)

    # An empty id cell turns the column to float, bring whole-number ids back to integers
    ids = df['id']
    if pd.api.types.is_float_dtype(ids) and (ids.dropna() % 1 == 0).all():
        df['id'] = ids.astype('Int64')

    table = df[CSV_COLUMNS]
    table = table.astype(object).where(table.notna(), None)
    records: List[Any] = table.to_dict('records')
    return [Shape.from_dict(record) for record in records]
