"""Display utilities for temperatures, wind and forecast dates.

Temperatures are stored in Celsius and wind speeds in km/h; conversion to
imperial units happens only at display time. Dates are epoch milliseconds
interpreted in local time.
"""

from __future__ import annotations

from datetime import date, datetime

_KMH_TO_MPH = 0.621371192237334

# (lower bound inclusive, upper bound exclusive, label)
_COMPASS = (
    (22.5, 67.5, "NE"),
    (67.5, 112.5, "E"),
    (112.5, 157.5, "SE"),
    (157.5, 202.5, "S"),
    (202.5, 247.5, "SW"),
    (247.5, 292.5, "W"),
    (292.5, 337.5, "NW"),
)


def _to_date(date_in_millis: int) -> date:
    return datetime.fromtimestamp(date_in_millis / 1000).date()


def _today(now: datetime | None) -> date:
    return (now or datetime.now()).date()


def format_temperature(temperature: float, metric: bool = True) -> str:
    """Format a Celsius value, converting to Fahrenheit when not metric.

    Examples::

        format_temperature(21.4)               # -> "21°"
        format_temperature(21.4, metric=False) # -> "71°"
    """
    if not metric:
        temperature = temperature * 1.8 + 32
    return f"{temperature:.0f}°"


def wind_direction(degrees: float) -> str:
    """Eight-point compass direction for a bearing in degrees."""
    if degrees >= 337.5 or degrees < 22.5:
        return "N"
    for low, high, label in _COMPASS:
        if low <= degrees < high:
            return label
    return "Unknown"


def format_wind(wind_speed: float, degrees: float, metric: bool = True) -> str:
    if metric:
        return f"Wind: {wind_speed:.0f} km/h {wind_direction(degrees)}"
    return f"Wind: {wind_speed * _KMH_TO_MPH:.0f} mph {wind_direction(degrees)}"


def format_date(date_in_millis: int) -> str:
    """Medium date, e.g. ``Jun 24, 2024``."""
    return _to_date(date_in_millis).strftime("%b %d, %Y")


def formatted_month_day(date_in_millis: int) -> str:
    """Month and day, e.g. ``June 24``."""
    return _to_date(date_in_millis).strftime("%B %d")


def day_name(date_in_millis: int, now: datetime | None = None) -> str:
    """``Today``, ``Tomorrow`` or the weekday name."""
    delta = (_to_date(date_in_millis) - _today(now)).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    return _to_date(date_in_millis).strftime("%A")


def friendly_day_string(
    date_in_millis: int,
    now: datetime | None = None,
    display_long_today: bool = True,
) -> str:
    """Forecast list date label.

    - today: ``Today, June 24`` (or ``Today`` when not long)
    - within the next week: the day name
    - later: ``Mon Jun 03``
    """
    delta = (_to_date(date_in_millis) - _today(now)).days
    if display_long_today and delta == 0:
        return f"Today, {formatted_month_day(date_in_millis)}"
    if delta < 7:
        return day_name(date_in_millis, now)
    return _to_date(date_in_millis).strftime("%a %b %d")


def full_friendly_day_string(date_in_millis: int, now: datetime | None = None) -> str:
    """Detail view label, e.g. ``Tomorrow, June 25``."""
    return f"{day_name(date_in_millis, now)}, {formatted_month_day(date_in_millis)}"
