"""ForecastTable: validated, date-ordered forecast rows with stable ids."""

from __future__ import annotations

import numpy as np
import pandas as pd

from .validation import validate_forecast_frame


class ForecastTable:
    """Immutable container for forecast rows in display order.

    Rows are sorted by ``date`` ascending. The ``_id`` column carries the
    stable id of each row, which survives re-sorting and refreshes.
    """

    __slots__ = ("_df", "_ids")

    def __init__(self, df: pd.DataFrame) -> None:
        df = validate_forecast_frame(df)
        self._df = df.sort_values("date", kind="stable").reset_index(drop=True)
        self._ids: np.ndarray = self._df["_id"].to_numpy(dtype=np.int64)
        self._ids.flags.writeable = False

    @classmethod
    def from_records(cls, records: list[dict]) -> ForecastTable:
        """Create a table from a list of row dicts."""
        return cls(pd.DataFrame.from_records(records))

    @property
    def df(self) -> pd.DataFrame:
        return self._df

    @property
    def ids(self) -> np.ndarray:
        """Stable ids in display order, read-only int64 array."""
        return self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def id_at(self, position: int) -> int:
        if not 0 <= position < len(self._ids):
            raise IndexError(
                f"Position {position} out of range for {len(self._ids)} rows."
            )
        return int(self._ids[position])

    def row(self, position: int) -> pd.Series:
        if not 0 <= position < len(self._ids):
            raise IndexError(
                f"Position {position} out of range for {len(self._ids)} rows."
            )
        return self._df.iloc[position]

    def position_of(self, stable_id: int) -> int | None:
        """Return the position of a stable id, or None if not present."""
        matches = np.flatnonzero(self._ids == stable_id)
        if len(matches) == 0:
            return None
        return int(matches[0])

    def __repr__(self) -> str:
        return f"ForecastTable(rows={len(self._ids)})"
