"""ForecastAdapter: list owner that binds forecast rows and tracks selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

import pandas as pd

from ..config import SunshinePreferences
from ..core.choice_mode import ChoiceMode, NO_POSITION
from ..core.conditions import art_url_for_condition, icon_for_condition
from ..core.forecast import ForecastTable
from ..core.selection_tracker import SelectionTracker
from ..display_utils import format_temperature, friendly_day_string
from .observable import DataSetObservable

logger = logging.getLogger(__name__)


@dataclass
class RowView:
    """Renderable state of one forecast row."""

    date_text: str = ""
    description: str = ""
    high_text: str = ""
    low_text: str = ""
    icon: str | None = None
    art_url: str | None = None
    checked: bool = False
    activated: bool = False

    def set_checked(self, checked: bool) -> None:
        self.checked = checked


@dataclass
class ForecastRowHolder:
    """A RowView together with the position it is currently bound to."""

    view: RowView = field(default_factory=RowView)
    position: int = NO_POSITION


class ForecastAdapter:
    """Binds a ForecastTable to row views and owns their selection.

    Parameters
    ----------
    preferences : SunshinePreferences, optional
        Units and art pack used when binding rows. Defaults are used if
        omitted.
    choice_mode : ChoiceMode
        Initial selection mode.
    now : callable, optional
        Clock used for friendly date labels; ``datetime.now`` by default.
    """

    def __init__(
        self,
        preferences: SunshinePreferences | None = None,
        choice_mode: ChoiceMode = ChoiceMode.NONE,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.preferences = preferences or SunshinePreferences()
        self._now = now or datetime.now
        self._table: ForecastTable | None = None
        self._observable = DataSetObservable()
        self._pending_refresh: set[int] = set()
        self.tracker = SelectionTracker(
            self, search_distance=self.preferences.choice_search_distance
        )
        self.tracker.set_mode(choice_mode)
        self.preferences.param.watch(
            self._on_search_distance_changed, "choice_search_distance"
        )

    def _on_search_distance_changed(self, event) -> None:
        self.tracker.search_distance = event.new

    # --- List owner protocol ---

    def item_count(self) -> int:
        return 0 if self._table is None else len(self._table)

    def has_stable_ids(self) -> bool:
        return True

    def stable_id_at(self, position: int) -> int:
        if self._table is None:
            raise IndexError(f"Position {position} out of range: no data loaded.")
        return self._table.id_at(position)

    def rebind_view(self, holder: ForecastRowHolder, position: int) -> None:
        self.bind_holder(holder, position)

    def request_visual_refresh(self, position: int) -> None:
        self._pending_refresh.add(position)

    def register_observer(self, callback: Callable[[], Any]) -> None:
        self._observable.register(callback)

    def unregister_observer(self, callback: Callable[[], Any]) -> None:
        self._observable.unregister(callback)

    # --- Data ---

    @property
    def table(self) -> ForecastTable | None:
        return self._table

    def swap_data(self, data: ForecastTable | pd.DataFrame | None) -> None:
        """Replace the forecast rows and notify observers."""
        if isinstance(data, pd.DataFrame):
            data = ForecastTable(data)
        self._table = data
        logger.info("Forecast data swapped: %d rows", self.item_count())
        self._observable.notify_changed()

    # --- Rows ---

    def create_holder(self) -> ForecastRowHolder:
        return ForecastRowHolder()

    def bind_holder(self, holder: ForecastRowHolder, position: int) -> None:
        """Fill the holder's view from the row at position."""
        if self._table is None:
            raise IndexError(f"Position {position} out of range: no data loaded.")
        row = self._table.row(position)
        prefs = self.preferences
        weather_id = int(row["weather_id"])

        view = holder.view
        view.date_text = friendly_day_string(
            int(row["date"]), now=self._now(), display_long_today=position == 0
        )
        view.description = str(row["short_desc"])
        view.high_text = format_temperature(float(row["max_temp"]), prefs.is_metric)
        view.low_text = format_temperature(float(row["min_temp"]), prefs.is_metric)
        view.icon = icon_for_condition(weather_id)
        view.art_url = (
            None if prefs.using_local_graphics
            else art_url_for_condition(weather_id, prefs.art_pack)
        )
        holder.position = position
        self.tracker.bind_visual_state(view, position)

    def on_click(self, holder: ForecastRowHolder) -> None:
        self.tracker.on_item_activated(holder)

    def drain_refresh_requests(self) -> list[int]:
        """Return pending refresh positions in ascending order and clear them."""
        pending = sorted(self._pending_refresh)
        self._pending_refresh.clear()
        return pending

    # --- Selection passthroughs ---

    @property
    def selected_position(self) -> int:
        return self.tracker.get_selected_position()

    def save_instance_state(self, bundle: dict) -> None:
        self.tracker.save_instance_state(bundle)

    def restore_instance_state(self, bundle: dict) -> None:
        self.tracker.restore_instance_state(bundle)

    def __repr__(self) -> str:
        return (
            f"ForecastAdapter(rows={self.item_count()}, "
            f"mode={self.tracker.mode.name})"
        )
