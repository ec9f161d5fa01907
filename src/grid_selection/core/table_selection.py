"""TableSelection: cell selection state for a rows x columns grid.

Tracks selected (row, column) cells as a map from row id to its
RowSelection. Supports single clicks, multi-selection and rectangular
ranges that toggle as one unit.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .row_selection import RowSelection

logger = logging.getLogger(__name__)


class TableSelection:
    """Selection state for a grid of unbounded size.

    Row ids and column indices are opaque integers; nothing is validated
    and a missing row entry simply means "not selected". Every row kept
    in the map has at least one selected column.
    """

    def __init__(self) -> None:
        self._selected_map: dict[int, RowSelection] = {}

    def get_selected_rows(self) -> list[RowSelection]:
        """Return all row selections, ascending by row id."""
        return [self._selected_map[row_id] for row_id in sorted(self._selected_map)]

    def get_selected_cells(self) -> list[tuple[int, int]]:
        """Return selected (row_id, column_index) pairs in row-major order."""
        return [
            (row.row_id, col)
            for row in self.get_selected_rows()
            for col in row
        ]

    @property
    def is_empty(self) -> bool:
        return not self._selected_map

    def clear(self) -> None:
        """Drop every selected cell."""
        if self._selected_map:
            logger.debug("Clearing selection of %d rows", len(self._selected_map))
        self._selected_map.clear()

    def select_cell(
        self,
        row_id: int,
        column_index: int,
        is_multiple: bool,
        ignore_selected: bool = False,
    ) -> None:
        """Select a single cell, or toggle it off if already selected.

        A non-multiple selection replaces whatever was selected before.
        With ignore_selected=True an already selected cell stays selected.
        """
        if not is_multiple:
            self.clear()

        row_selection = self._selected_map.get(row_id)

        if (
            not ignore_selected
            and row_selection is not None
            and row_selection.is_selected(column_index)
        ):
            self._unselect_columns(row_selection, [column_index])
        else:
            self._select_columns(row_id, row_selection, [column_index])

    def select_range(
        self,
        start_position: int,
        end_position: int,
        columns: Sequence[int],
        is_multiple: bool,
    ) -> None:
        """Toggle the rectangle of rows [start, end] x columns as one unit.

        If the whole rectangle is already selected it is unselected,
        otherwise (partially or not selected) it becomes fully selected.
        The decision is taken before any row is mutated.
        """
        first_row = min(start_position, end_position)
        last_row = max(start_position, end_position)
        is_selected = self.is_range_selected(first_row, last_row, columns)

        if not is_multiple:
            self.clear()

        logger.debug(
            "%s rows %d..%d, columns %s",
            "Unselecting" if is_selected else "Selecting",
            first_row, last_row, list(columns),
        )

        for row_id in range(first_row, last_row + 1):
            row_selection = self._selected_map.get(row_id)
            if is_selected:
                if row_selection is not None:
                    self._unselect_columns(row_selection, columns)
            else:
                self._select_columns(row_id, row_selection, columns)

    def is_cell_selected(self, row_id: int, column_index: int) -> bool:
        row_selection = self._selected_map.get(row_id)
        if row_selection is None:
            return False
        return row_selection.is_selected(column_index)

    def is_range_selected(
        self,
        start_position: int,
        end_position: int,
        columns: Sequence[int],
    ) -> bool:
        """True only if every row in the span has every given column selected."""
        start = min(start_position, end_position)
        end = max(start_position, end_position)

        for row_id in range(start, end + 1):
            row_selection = self._selected_map.get(row_id)
            if row_selection is None or not row_selection.is_range_selected(columns):
                return False
        return True

    def update(self, other: TableSelection) -> None:
        """Replace this selection's contents with a copy of other's."""
        if other is self:
            return
        self.clear()
        for row in other.get_selected_rows():
            self._selected_map[row.row_id] = RowSelection(row.row_id, row.columns)

    def _unselect_columns(
        self,
        row_selection: RowSelection,
        column_index_list: Sequence[int],
    ) -> None:
        row_selection.remove(column_index_list)
        if not row_selection.columns:
            del self._selected_map[row_selection.row_id]

    def _select_columns(
        self,
        row_id: int,
        row_selection: RowSelection | None,
        column_index_list: Sequence[int],
    ) -> None:
        # An empty column list must not leave an empty row behind.
        if not column_index_list:
            return
        if row_selection is None:
            row_selection = RowSelection(row_id)
            self._selected_map[row_id] = row_selection
        row_selection.add(column_index_list)

    def to_dict(self) -> dict:
        """Serialize for JSON transfer to JS."""
        return {"rows": [row.to_dict() for row in self.get_selected_rows()]}

    @classmethod
    def from_dict(cls, data: dict) -> TableSelection:
        """Rebuild a selection from the output of to_dict().

        Rows without columns are skipped.
        """
        selection = cls()
        for row in data.get("rows", []):
            row_id = int(row["rowId"])
            selection._select_columns(
                row_id,
                selection._selected_map.get(row_id),
                [int(c) for c in row["columns"]],
            )
        return selection

    def __len__(self) -> int:
        return sum(len(row) for row in self._selected_map.values())

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        return self.is_cell_selected(cell[0], cell[1])

    def __repr__(self) -> str:
        return f"TableSelection(rows={len(self._selected_map)}, cells={len(self)})"
