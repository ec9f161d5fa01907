"""Shared test fixtures for grid-selection."""

import pandas as pd
import pytest

from grid_selection.core.table_selection import TableSelection


@pytest.fixture
def empty_selection():
    return TableSelection()


@pytest.fixture
def block_selection():
    """Rows 0-2 x columns 0-1 selected."""
    selection = TableSelection()
    selection.select_range(0, 2, [0, 1], False)
    return selection


@pytest.fixture
def small_grid_df():
    """4x3 order table with mixed dtypes, keyed by record id."""
    return pd.DataFrame(
        {
            "product": ["alpha", "beta", "gamma", "delta"],
            "qty": [3, 0, 12, 7],
            "price": [9.5, 4.25, 1.0, 20.0],
        },
        index=pd.Index([101, 102, 103, 104], name="order_id"),
    )
