"""grid-selection: cell, multi and range selection state for table widgets."""

import logging

from ._version import __version__
from .core import (
    RowSelection,
    TableSelection,
    selection_mask,
    selected_values,
    selected_records,
)
from .widget import SelectionState, serialize_selection, deserialize_selection

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "RowSelection",
    "TableSelection",
    "SelectionState",
    "selection_mask",
    "selected_values",
    "selected_records",
    "serialize_selection",
    "deserialize_selection",
]
