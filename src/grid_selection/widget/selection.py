"""SelectionState: reactive container + callback registry for cell selections."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from ..core.row_selection import RowSelection
from ..core.table_selection import TableSelection
from .serializers import deserialize_selection

logger = logging.getLogger(__name__)

SelectionCallback = Callable[[list[RowSelection]], Any]


class SelectionState:
    """Holds a TableSelection and notifies registered callbacks.

    Every mutation is forwarded to the wrapped selection, after which
    each callback is called with the selected rows (ascending row id).
    """

    def __init__(self, selection: TableSelection | None = None) -> None:
        self._selection = selection if selection is not None else TableSelection()
        self._callbacks: list[SelectionCallback] = []

    @property
    def selection(self) -> TableSelection:
        return self._selection

    @property
    def value(self) -> dict[str, list]:
        """Current selection as {rows: [{rowId, columns}, ...]}."""
        return self._selection.to_dict()

    @property
    def selected_rows(self) -> list[RowSelection]:
        return self._selection.get_selected_rows()

    def select_cell(
        self,
        row_id: int,
        column_index: int,
        is_multiple: bool,
        ignore_selected: bool = False,
    ) -> None:
        self._selection.select_cell(row_id, column_index, is_multiple, ignore_selected)
        self._notify()

    def select_range(
        self,
        start_position: int,
        end_position: int,
        columns: Sequence[int],
        is_multiple: bool,
    ) -> None:
        self._selection.select_range(start_position, end_position, columns, is_multiple)
        self._notify()

    def clear(self) -> None:
        """Clear the selection."""
        self._selection.clear()
        self._notify()

    def update_from_json(self, payload: str | dict) -> None:
        """Replace the selection with a JS-side snapshot and notify.

        The wrapped TableSelection is updated in place. A malformed
        payload raises before anything changes.
        """
        snapshot = deserialize_selection(payload)
        self._selection.update(snapshot)
        self._notify()

    def is_cell_selected(self, row_id: int, column_index: int) -> bool:
        return self._selection.is_cell_selected(row_id, column_index)

    def is_range_selected(
        self, start_position: int, end_position: int, columns: Sequence[int]
    ) -> bool:
        return self._selection.is_range_selected(start_position, end_position, columns)

    def on_select(self, callback: SelectionCallback) -> None:
        """Register a callback: fn(selected_rows)."""
        self._callbacks.append(callback)

    def _notify(self) -> None:
        rows = self._selection.get_selected_rows()
        logger.debug("Notifying %d callbacks of %d selected rows", len(self._callbacks), len(rows))
        for cb in self._callbacks:
            cb(rows)

    def __repr__(self) -> str:
        return (
            f"SelectionState(rows={len(self._selection.get_selected_rows())}, "
            f"cells={len(self._selection)})"
        )
