"""SunshinePreferences: user settings for the forecast list."""

from __future__ import annotations

import logging

import param

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "94043"

# Art pack values are format strings with a single %s for the condition key.
ART_PACK_SUNSHINE = "sunshine/art/%s.png"

LOCATION_STATUSES = ["ok", "server_down", "server_invalid", "unknown", "invalid"]


class SunshinePreferences(param.Parameterized):
    """Reactive user preferences.

    Values are held in memory only; storing them is the host's job.
    """

    location = param.String(default=DEFAULT_LOCATION)
    units = param.Selector(default="metric", objects=["metric", "imperial"])
    art_pack = param.String(default=ART_PACK_SUNSHINE)
    location_status = param.Selector(default="unknown", objects=LOCATION_STATUSES)

    # --- List selection ---
    choice_search_distance = param.Integer(default=20, bounds=(0, None))

    # --- Location entry ---
    location_min_length = param.Integer(default=2, bounds=(0, None))

    def __init__(self, **params):
        super().__init__(**params)
        self.param.watch(self._on_location_changed, "location")

    @property
    def is_metric(self) -> bool:
        return self.units == "metric"

    @property
    def using_local_graphics(self) -> bool:
        return self.art_pack == ART_PACK_SUNSHINE

    def is_valid_location(self, text: str) -> bool:
        """Whether a typed location is long enough to submit."""
        return len(text.strip()) >= self.location_min_length

    def reset_location_status(self) -> None:
        self.location_status = "unknown"

    def _on_location_changed(self, event) -> None:
        # A new location has not been checked against the server yet.
        logger.info("Location changed from %r to %r", event.old, event.new)
        self.reset_location_status()
