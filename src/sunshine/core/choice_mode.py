"""Choice modes for list selection."""

from __future__ import annotations

from enum import IntEnum

# Adapter position for a row that is not (or no longer) bound to data.
NO_POSITION = -1


class ChoiceMode(IntEnum):
    """How a list reacts when the user activates a row."""

    NONE = 0
    SINGLE = 1
    MULTIPLE = 2
    MULTIPLE_MODAL = 3
