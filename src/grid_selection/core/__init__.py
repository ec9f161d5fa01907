"""Selection state for rows x columns grids."""

from .row_selection import RowSelection
from .table_selection import TableSelection
from .extract import selection_mask, selected_values, selected_records

__all__ = [
    "RowSelection",
    "TableSelection",
    "selection_mask",
    "selected_values",
    "selected_records",
]
