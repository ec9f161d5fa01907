"""Bridge between selection state and the JS table component."""

from .selection import SelectionState
from .serializers import serialize_selection, deserialize_selection

__all__ = [
    "SelectionState",
    "serialize_selection",
    "deserialize_selection",
]
