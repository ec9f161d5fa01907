"""RowSelection: the selected column indices of a single grid row."""

from __future__ import annotations

from typing import Iterable, Iterator


class RowSelection:
    """Set of selected column indices for one row.

    Owned by a TableSelection, which drops the record as soon as its
    column set becomes empty.
    """

    __slots__ = ("_row_id", "columns")

    def __init__(self, row_id: int, columns: Iterable[int] = ()) -> None:
        self._row_id = row_id
        self.columns: set[int] = set(columns)

    @property
    def row_id(self) -> int:
        return self._row_id

    def is_selected(self, column_index: int) -> bool:
        return column_index in self.columns

    def is_range_selected(self, columns: Iterable[int]) -> bool:
        """True if every given column is selected (vacuously true if none)."""
        return all(c in self.columns for c in columns)

    def add(self, column_index_list: Iterable[int]) -> None:
        self.columns.update(column_index_list)

    def remove(self, column_index_list: Iterable[int]) -> None:
        self.columns.difference_update(column_index_list)

    def to_dict(self) -> dict:
        """Serialize for JSON transfer to JS."""
        return {"rowId": self._row_id, "columns": sorted(self.columns)}

    def __len__(self) -> int:
        return len(self.columns)

    def __contains__(self, column_index: object) -> bool:
        return column_index in self.columns

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.columns))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowSelection):
            return NotImplemented
        return self._row_id == other._row_id and self.columns == other.columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RowSelection(row_id={self._row_id}, columns={sorted(self.columns)})"
