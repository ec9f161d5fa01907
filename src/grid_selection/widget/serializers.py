"""Serializers: convert selection state to and from JS-transferable JSON."""

from __future__ import annotations

import json
from typing import Any

from ..core.table_selection import TableSelection


def serialize_selection(selection: TableSelection) -> str:
    """Serialize selected rows as a JSON string, rows and columns ascending."""
    return json.dumps(selection.to_dict())


def deserialize_selection(payload: str | dict[str, Any]) -> TableSelection:
    """Rebuild a TableSelection from a JSON string or decoded dict.

    Rows with an empty column list are dropped.
    """
    data = json.loads(payload) if isinstance(payload, str) else payload
    if not isinstance(data, dict):
        raise ValueError(
            f"Selection payload must be a JSON object, got {type(data).__name__}."
        )
    if "rows" not in data:
        raise ValueError("Selection payload is missing the 'rows' key.")
    rows = data["rows"]
    if not isinstance(rows, list):
        raise ValueError(f"'rows' must be a list, got {type(rows).__name__}.")
    for i, row in enumerate(rows):
        if not isinstance(row, dict) or "rowId" not in row or "columns" not in row:
            raise ValueError(
                f"Row entry {i} must be an object with 'rowId' and 'columns'."
            )
        if not _is_int(row["rowId"]):
            raise ValueError(
                f"Row entry {i}: 'rowId' must be an integer, got {row['rowId']!r}."
            )
        columns = row["columns"]
        if not isinstance(columns, list):
            raise ValueError(
                f"Row entry {i}: 'columns' must be a list, "
                f"got {type(columns).__name__}."
            )
        bad = [c for c in columns if not _is_int(c)]
        if bad:
            raise ValueError(
                f"Row entry {i}: column indices must be integers, got {bad[:5]}."
            )
    return TableSelection.from_dict(data)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
