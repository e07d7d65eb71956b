"""Shared test fixtures for sunshine."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pandas as pd
import pytest


class FakeListOwner:
    """In-memory list owner that records the tracker's callbacks."""

    def __init__(self, ids, stable=True):
        self.ids = list(ids)
        self.stable = stable
        self.observers = []
        self.refreshed = []
        self.rebound = []

    def item_count(self):
        return len(self.ids)

    def has_stable_ids(self):
        return self.stable

    def stable_id_at(self, position):
        return self.ids[position]

    def rebind_view(self, holder, position):
        self.rebound.append(position)

    def request_visual_refresh(self, position):
        self.refreshed.append(position)

    def register_observer(self, callback):
        self.observers.append(callback)

    def set_ids(self, ids):
        """Replace the data and fire change notifications."""
        self.ids = list(ids)
        for cb in self.observers:
            cb()


@pytest.fixture
def make_owner():
    """Factory: make_owner(ids, stable=True) -> FakeListOwner."""
    return FakeListOwner


@pytest.fixture
def row():
    """Factory: row(position) -> holder with a plain (non-checkable) view."""
    def _row(position):
        return SimpleNamespace(position=position, view=SimpleNamespace(activated=False))
    return _row


@pytest.fixture
def now():
    """Fixed clock: Monday, June 24 2024, noon local time."""
    return datetime(2024, 6, 24, 12, 0)


def to_millis(dt):
    return int(dt.timestamp() * 1000)


@pytest.fixture
def forecast_df(now):
    """Ten days of forecast rows, ids 100..109, starting today."""
    weather_ids = [800, 500, 211, 803, 601, 741, 801, 300, 502, 804]
    descs = ["Clear", "Light Rain", "Storm", "Broken Clouds", "Snow",
             "Fog", "Mostly Clear", "Drizzle", "Heavy Rain", "Overcast Clouds"]
    rows = []
    for i in range(10):
        rows.append({
            "_id": 100 + i,
            "date": to_millis(now + timedelta(days=i)),
            "weather_id": weather_ids[i],
            "short_desc": descs[i],
            "max_temp": 20.0 + i,
            "min_temp": 10.0 + i,
            "humidity": 50.0,
            "pressure": 1013.0,
            "wind_speed": 10.0,
            "degrees": 45.0,
        })
    return pd.DataFrame(rows)
