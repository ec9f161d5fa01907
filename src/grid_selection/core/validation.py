"""Input validation for selected-data extraction."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd


def validate_dataframe(data: Any) -> pd.DataFrame:
    """Validate that data is a DataFrame the selection can be applied to.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}. "
            "Wrap your data with pd.DataFrame(data)."
        )
    return data


def validate_grid_shape(n_rows: Any, n_cols: Any) -> tuple[int, int]:
    """Validate grid dimensions and return them as plain ints."""
    for name, value in (("n_rows", n_rows), ("n_cols", n_cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}.")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}.")
    return int(n_rows), int(n_cols)
