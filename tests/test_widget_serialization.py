"""Tests for selection serializers and the observable SelectionState."""

import json

import pytest

from grid_selection.core.table_selection import TableSelection
from grid_selection.widget.serializers import (
    serialize_selection,
    deserialize_selection,
)
from grid_selection.widget.selection import SelectionState


class TestSerializeSelection:
    def test_empty(self, empty_selection):
        assert json.loads(serialize_selection(empty_selection)) == {"rows": []}

    def test_rows_and_columns_sorted(self, empty_selection):
        empty_selection.select_cell(4, 3, True)
        empty_selection.select_cell(4, 0, True)
        empty_selection.select_cell(1, 2, True)
        d = json.loads(serialize_selection(empty_selection))
        assert d["rows"] == [
            {"rowId": 1, "columns": [2]},
            {"rowId": 4, "columns": [0, 3]},
        ]

    def test_roundtrip(self, block_selection):
        restored = deserialize_selection(serialize_selection(block_selection))
        assert restored.get_selected_rows() == block_selection.get_selected_rows()


class TestDeserializeSelection:
    def test_accepts_dict(self):
        selection = deserialize_selection({"rows": [{"rowId": 0, "columns": [1, 2]}]})
        assert selection.get_selected_cells() == [(0, 1), (0, 2)]

    def test_not_object_raises(self):
        with pytest.raises(ValueError, match="JSON object"):
            deserialize_selection("[1, 2]")

    def test_missing_rows_raises(self):
        with pytest.raises(ValueError, match="'rows'"):
            deserialize_selection("{}")

    def test_bad_row_entry_raises(self):
        with pytest.raises(ValueError, match="Row entry 0"):
            deserialize_selection({"rows": [{"rowId": 1}]})

    def test_float_row_id_raises(self):
        with pytest.raises(ValueError, match="Row entry 0: 'rowId'"):
            deserialize_selection('{"rows": [{"rowId": 1.7, "columns": [2]}]}')

    def test_bool_row_id_raises(self):
        with pytest.raises(ValueError, match="'rowId' must be an integer"):
            deserialize_selection({"rows": [{"rowId": True, "columns": [2]}]})

    def test_float_column_raises(self):
        with pytest.raises(ValueError, match="column indices must be integers"):
            deserialize_selection('{"rows": [{"rowId": 1, "columns": [2.9]}]}')

    def test_bool_column_raises(self):
        with pytest.raises(ValueError, match="column indices must be integers"):
            deserialize_selection({"rows": [{"rowId": 1, "columns": [0, False]}]})

    def test_string_columns_raises(self):
        with pytest.raises(ValueError, match="'columns' must be a list, got str"):
            deserialize_selection('{"rows": [{"rowId": 0, "columns": "12"}]}')

    def test_scalar_columns_raises(self):
        with pytest.raises(ValueError, match="Row entry 1: 'columns' must be a list"):
            deserialize_selection({"rows": [
                {"rowId": 0, "columns": [1]},
                {"rowId": 2, "columns": 5},
            ]})

    def test_invalid_json_propagates(self):
        with pytest.raises(json.JSONDecodeError):
            deserialize_selection("{not json")


class TestSelectionState:
    def test_initial_empty(self):
        ss = SelectionState()
        assert ss.value == {"rows": []}
        assert ss.selected_rows == []

    def test_wraps_existing_selection(self, block_selection):
        ss = SelectionState(block_selection)
        assert ss.selection is block_selection
        assert ss.is_range_selected(0, 2, [0, 1])

    def test_select_cell(self):
        ss = SelectionState()
        ss.select_cell(1, 2, False)
        assert ss.is_cell_selected(1, 2)

    def test_clear(self, block_selection):
        ss = SelectionState(block_selection)
        ss.clear()
        assert ss.value == {"rows": []}

    def test_callback_called_per_mutation(self):
        ss = SelectionState()
        results = []
        ss.on_select(lambda rows: results.append([r.row_id for r in rows]))
        ss.select_cell(3, 0, True)
        ss.select_range(0, 1, [0], True)
        ss.clear()
        assert results == [[3], [0, 1, 3], []]

    def test_multiple_callbacks(self):
        ss = SelectionState()
        r1, r2 = [], []
        ss.on_select(lambda rows: r1.append(len(rows)))
        ss.on_select(lambda rows: r2.append(sum(len(r) for r in rows)))
        ss.select_range(0, 1, [0, 1, 2], False)
        assert r1 == [2]
        assert r2 == [6]

    def test_update_from_json(self):
        ss = SelectionState()
        results = []
        ss.on_select(lambda rows: results.append(len(rows)))
        ss.update_from_json('{"rows": [{"rowId": 5, "columns": [1]}]}')
        assert ss.is_cell_selected(5, 1)
        assert results == [1]

    def test_update_from_json_keeps_wrapped_selection(self, block_selection):
        ss = SelectionState(block_selection)
        ss.update_from_json('{"rows": [{"rowId": 5, "columns": [1]}]}')
        assert ss.selection is block_selection
        assert block_selection.get_selected_cells() == [(5, 1)]

    def test_update_from_json_bad_payload_leaves_state(self, block_selection):
        ss = SelectionState(block_selection)
        results = []
        ss.on_select(lambda rows: results.append(rows))
        with pytest.raises(ValueError):
            ss.update_from_json('{"rows": [{"rowId": 5, "columns": "1"}]}')
        assert len(block_selection) == 6
        assert results == []

    def test_repr(self):
        ss = SelectionState(TableSelection())
        ss.select_range(0, 1, [0, 1, 2], False)
        assert "rows=2" in repr(ss)
        assert "cells=6" in repr(ss)
