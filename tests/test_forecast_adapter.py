"""Integration tests: ForecastAdapter binding rows and keeping selection across refreshes."""

from datetime import timedelta

import pandas as pd
import pytest

from sunshine import (
    ChoiceMode,
    ForecastAdapter,
    ForecastTable,
    NO_POSITION,
    SunshinePreferences,
)


@pytest.fixture
def adapter(forecast_df, now):
    adapter = ForecastAdapter(choice_mode=ChoiceMode.SINGLE, now=lambda: now)
    adapter.swap_data(forecast_df)
    return adapter


def bound(adapter, position):
    holder = adapter.create_holder()
    adapter.bind_holder(holder, position)
    return holder


class TestListOwner:
    def test_empty_adapter(self):
        adapter = ForecastAdapter()
        assert adapter.item_count() == 0
        assert adapter.has_stable_ids()
        with pytest.raises(IndexError):
            adapter.stable_id_at(0)

    def test_swap_dataframe(self, adapter):
        assert adapter.item_count() == 10
        assert isinstance(adapter.table, ForecastTable)
        assert adapter.stable_id_at(3) == 103

    def test_swap_invalid_frame_raises(self, forecast_df):
        adapter = ForecastAdapter()
        df = forecast_df.copy()
        df["_id"] = 1
        with pytest.raises(ValueError, match="unique"):
            adapter.swap_data(df)

    def test_observers_notified_on_swap(self, adapter, forecast_df):
        calls = []
        adapter.register_observer(lambda: calls.append(adapter.item_count()))
        adapter.swap_data(forecast_df.head(4))
        assert calls == [4]

    def test_unregister_observer(self, adapter, forecast_df):
        calls = []
        cb = lambda: calls.append(1)  # noqa: E731
        adapter.register_observer(cb)
        adapter.unregister_observer(cb)
        adapter.swap_data(forecast_df)
        assert calls == []

    def test_repr(self, adapter):
        assert repr(adapter) == "ForecastAdapter(rows=10, mode=SINGLE)"


class TestBinding:
    def test_first_row(self, adapter):
        view = bound(adapter, 0).view
        assert view.date_text == "Today, June 24"
        assert view.description == "Clear"
        assert view.high_text == "20°"
        assert view.low_text == "10°"
        assert view.icon == "ic_clear"
        assert view.art_url is None
        assert view.checked is False
        assert view.activated is False

    def test_later_rows(self, adapter):
        assert bound(adapter, 1).view.date_text == "Tomorrow"
        assert bound(adapter, 2).view.date_text == "Wednesday"
        assert bound(adapter, 8).view.date_text == "Tue Jul 02"
        assert bound(adapter, 3).view.icon == "ic_cloudy"

    def test_imperial_units(self, forecast_df, now):
        prefs = SunshinePreferences(units="imperial")
        adapter = ForecastAdapter(preferences=prefs, now=lambda: now)
        adapter.swap_data(forecast_df)
        view = bound(adapter, 0).view
        assert view.high_text == "68°"
        assert view.low_text == "50°"

    def test_remote_art_pack(self, forecast_df, now):
        prefs = SunshinePreferences(art_pack="https://art.example/%s.png")
        adapter = ForecastAdapter(preferences=prefs, now=lambda: now)
        adapter.swap_data(forecast_df)
        assert bound(adapter, 1).view.art_url == "https://art.example/rain.png"

    def test_holder_position_updated(self, adapter):
        holder = bound(adapter, 4)
        assert holder.position == 4

    def test_bind_without_data_raises(self):
        adapter = ForecastAdapter()
        with pytest.raises(IndexError):
            adapter.bind_holder(adapter.create_holder(), 0)


class TestClickSelection:
    def test_click_selects_row(self, adapter):
        holder = bound(adapter, 2)
        adapter.on_click(holder)
        assert adapter.selected_position == 2
        assert holder.view.checked is True
        assert holder.view.activated is True

    def test_click_other_row_requests_refresh(self, adapter):
        adapter.on_click(bound(adapter, 2))
        adapter.on_click(bound(adapter, 5))
        assert adapter.selected_position == 5
        assert adapter.drain_refresh_requests() == [2]
        assert adapter.drain_refresh_requests() == []

    def test_click_unbound_holder_is_ignored(self, adapter):
        adapter.on_click(adapter.create_holder())
        assert adapter.selected_position == NO_POSITION

    def test_click_holder_left_past_shrunk_data(self, adapter, forecast_df):
        holder = bound(adapter, 8)
        adapter.swap_data(forecast_df.iloc[:3])
        adapter.on_click(holder)
        assert adapter.selected_position == NO_POSITION
        assert adapter.tracker.checked_positions == {}
        assert adapter.tracker.checked_ids == {}
        assert adapter.drain_refresh_requests() == []

    def test_stale_click_keeps_existing_selection(self, adapter, forecast_df):
        adapter.on_click(bound(adapter, 1))
        holder = bound(adapter, 8)
        adapter.swap_data(forecast_df.iloc[:3])
        adapter.on_click(holder)
        assert adapter.selected_position == 1
        assert adapter.tracker.checked_positions == {1: True}
        assert adapter.tracker.checked_ids == {101: 1}

    def test_none_mode_ignores_clicks(self, forecast_df, now):
        adapter = ForecastAdapter(now=lambda: now)
        adapter.swap_data(forecast_df)
        adapter.on_click(bound(adapter, 1))
        assert adapter.selected_position == NO_POSITION

    def test_search_distance_from_preferences(self):
        prefs = SunshinePreferences(choice_search_distance=3)
        adapter = ForecastAdapter(preferences=prefs)
        assert adapter.tracker.search_distance == 3


class TestSelectionAcrossRefresh:
    def test_row_inserted_above_selection(self, adapter, forecast_df, now):
        adapter.on_click(bound(adapter, 2))
        yesterday = forecast_df.iloc[[0]].copy()
        yesterday["_id"] = 99
        yesterday["date"] = int((now - timedelta(days=1)).timestamp() * 1000)
        adapter.swap_data(pd.concat([forecast_df, yesterday], ignore_index=True))

        assert adapter.stable_id_at(0) == 99
        assert adapter.selected_position == 3
        assert bound(adapter, 3).view.activated is True
        assert bound(adapter, 2).view.activated is False

    def test_selected_row_removed(self, adapter, forecast_df):
        adapter.on_click(bound(adapter, 2))
        adapter.swap_data(forecast_df[forecast_df["_id"] != 102])
        assert adapter.selected_position == NO_POSITION

    def test_swap_to_none_clears_selection(self, adapter):
        adapter.on_click(bound(adapter, 1))
        adapter.swap_data(None)
        assert adapter.item_count() == 0
        assert adapter.selected_position == NO_POSITION

    def test_save_and_restore(self, adapter, forecast_df, now):
        adapter.on_click(bound(adapter, 6))
        bundle = {}
        adapter.save_instance_state(bundle)

        recreated = ForecastAdapter(choice_mode=ChoiceMode.SINGLE, now=lambda: now)
        recreated.swap_data(forecast_df)
        recreated.restore_instance_state(bundle)
        assert recreated.selected_position == 6
        assert recreated.tracker.checked_ids == {106: 6}


class TestPreferenceChanges:
    def test_search_distance_follows_preferences(self, adapter):
        adapter.preferences.choice_search_distance = 2
        assert adapter.tracker.search_distance == 2

    def test_narrowed_window_applies_on_next_refresh(self, adapter, forecast_df):
        adapter.on_click(bound(adapter, 2))
        adapter.preferences.choice_search_distance = 2
        earlier = forecast_df.iloc[:3].copy()
        earlier["_id"] = [90, 91, 92]
        earlier["date"] = earlier["date"] - 10 * 86_400_000
        adapter.swap_data(pd.concat([forecast_df, earlier], ignore_index=True))
        # Row 102 moved from 2 to 5, outside a radius of 2.
        assert adapter.stable_id_at(5) == 102
        assert adapter.selected_position == NO_POSITION

    def test_widened_window_keeps_selection(self, forecast_df, now):
        prefs = SunshinePreferences(choice_search_distance=1)
        adapter = ForecastAdapter(
            preferences=prefs, choice_mode=ChoiceMode.SINGLE, now=lambda: now
        )
        adapter.swap_data(forecast_df)
        adapter.on_click(bound(adapter, 2))
        prefs.choice_search_distance = 5
        earlier = forecast_df.iloc[:3].copy()
        earlier["_id"] = [90, 91, 92]
        earlier["date"] = earlier["date"] - 10 * 86_400_000
        adapter.swap_data(pd.concat([forecast_df, earlier], ignore_index=True))
        assert adapter.selected_position == 5
