"""Derive selected data from a grid's backing table.

Row ids and column indices are treated as positions into the data.
Selected cells that fall outside the data are ignored.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from .table_selection import TableSelection
from .validation import validate_dataframe, validate_grid_shape


def _cells_within(
    selection: TableSelection, n_rows: int, n_cols: int
) -> list[tuple[int, int]]:
    return [
        (r, c) for r, c in selection.get_selected_cells()
        if 0 <= r < n_rows and 0 <= c < n_cols
    ]


def selection_mask(selection: TableSelection, n_rows: int, n_cols: int) -> np.ndarray:
    """Dense boolean (n_rows, n_cols) mask of the selected cells."""
    n_rows, n_cols = validate_grid_shape(n_rows, n_cols)
    mask = np.zeros((n_rows, n_cols), dtype=bool)
    cells = _cells_within(selection, n_rows, n_cols)
    if cells:
        rows, cols = zip(*cells)
        mask[list(rows), list(cols)] = True
    return mask


def selected_values(data: pd.DataFrame, selection: TableSelection) -> pd.DataFrame:
    """Return the sub-frame spanned by the selection.

    Rows are the selected rows, columns the union of their selected
    columns, both in ascending position order. Cells inside that span
    that are not themselves selected are NaN.
    """
    data = validate_dataframe(data)
    n_rows, n_cols = data.shape
    cells = _cells_within(selection, n_rows, n_cols)
    if not cells:
        return data.iloc[0:0, 0:0]

    row_pos = sorted({r for r, _ in cells})
    col_pos = sorted({c for _, c in cells})
    sub = data.iloc[row_pos, col_pos]

    mask = selection_mask(selection, n_rows, n_cols)[np.ix_(row_pos, col_pos)]
    return sub.where(mask)


def selected_records(data: pd.DataFrame, selection: TableSelection) -> list[dict]:
    """One record per selected cell, in row-major order.

    Each record carries the positional ids, the DataFrame labels and
    the cell value.
    """
    data = validate_dataframe(data)
    n_rows, n_cols = data.shape
    return [
        {
            "row_id": r,
            "column_index": c,
            "row": data.index[r],
            "column": data.columns[c],
            "value": data.iat[r, c],
        }
        for r, c in _cells_within(selection, n_rows, n_cols)
    ]
