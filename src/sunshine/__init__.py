"""sunshine: forecast list selection that survives data refreshes."""

from ._version import __version__
from .config import SunshinePreferences
from .core.choice_mode import ChoiceMode, NO_POSITION
from .core.forecast import ForecastTable
from .core.selection_tracker import SelectionTracker
from .widget.forecast_adapter import ForecastAdapter, ForecastRowHolder, RowView


__all__ = [
    "__version__",
    "ChoiceMode",
    "NO_POSITION",
    "ForecastAdapter",
    "ForecastRowHolder",
    "ForecastTable",
    "RowView",
    "SelectionTracker",
    "SunshinePreferences",
]
