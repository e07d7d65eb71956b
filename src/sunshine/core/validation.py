"""Input validation for forecast tables, with messages that name the offending rows."""

from __future__ import annotations

from typing import Any

import pandas as pd

REQUIRED_COLUMNS = (
    "_id",
    "date",
    "weather_id",
    "short_desc",
    "max_temp",
    "min_temp",
)

OPTIONAL_COLUMNS = (
    "humidity",
    "pressure",
    "wind_speed",
    "degrees",
)


def validate_forecast_frame(data: Any) -> pd.DataFrame:
    """Validate that data is a DataFrame usable as a forecast list.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}. "
            "Build one with pd.DataFrame(rows) using the forecast column names."
        )
    missing = [c for c in REQUIRED_COLUMNS if c not in data.columns]
    if missing:
        raise ValueError(
            f"Forecast table is missing required columns: {missing}. "
            f"Required: {list(REQUIRED_COLUMNS)}"
        )
    if not pd.api.types.is_integer_dtype(data["_id"]):
        raise TypeError(
            f"Column '_id' must hold integer stable ids, got dtype {data['_id'].dtype}."
        )
    ids = data["_id"]
    if ids.duplicated().any():
        dupes = ids[ids.duplicated()].unique().tolist()
        raise ValueError(
            f"Stable ids must be unique. Found duplicates: {dupes[:5]}"
            + (f" (and {len(dupes) - 5} more)" if len(dupes) > 5 else "")
        )
    numeric = ["date", "weather_id", "max_temp", "min_temp"]
    numeric += [c for c in OPTIONAL_COLUMNS if c in data.columns]
    non_numeric = [
        c for c in numeric if not pd.api.types.is_numeric_dtype(data[c])
    ]
    if non_numeric:
        raise TypeError(f"Columns must be numeric: {non_numeric}")
    return data
