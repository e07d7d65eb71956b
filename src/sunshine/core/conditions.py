"""Weather condition lookups keyed by OpenWeatherMap condition id.

Condition codes: https://openweathermap.org/weather-conditions
"""

from __future__ import annotations

# (low, high, art name), checked in order; first match wins. 761 (dust) is
# fog here, not storm.
_CONDITION_RANGES: tuple[tuple[int, int, str], ...] = (
    (200, 232, "storm"),
    (300, 321, "light_rain"),
    (500, 504, "rain"),
    (511, 511, "snow"),
    (520, 531, "rain"),
    (600, 622, "snow"),
    (701, 761, "fog"),
    (781, 781, "storm"),
    (800, 800, "clear"),
    (801, 801, "light_clouds"),
    (802, 804, "clouds"),
)

# Icons use "cloudy" where the artwork uses "clouds".
_ICON_NAMES = {"clouds": "cloudy"}

_DESCRIPTIONS = {
    500: "Light Rain",
    501: "Moderate Rain",
    502: "Heavy Rain",
    503: "Intense Rain",
    504: "Extreme Rain",
    511: "Freezing Rain",
    520: "Light Shower",
    531: "Ragged Shower",
    600: "Light Snow",
    601: "Snow",
    602: "Heavy Snow",
    611: "Sleet",
    612: "Shower Sleet",
    615: "Light Rain and Snow",
    616: "Rain and Snow",
    620: "Light Shower Snow",
    621: "Shower Snow",
    622: "Heavy Shower Snow",
    701: "Mist",
    711: "Smoke",
    721: "Haze",
    731: "Sand, Dust",
    741: "Fog",
    751: "Sand",
    761: "Dust",
    762: "Volcanic Ash",
    771: "Squalls",
    781: "Tornado",
    800: "Clear",
    801: "Mostly Clear",
    802: "Scattered Clouds",
    803: "Broken Clouds",
    804: "Overcast Clouds",
    900: "Tornado",
    901: "Tropical Storm",
    902: "Hurricane",
    903: "Cold",
    904: "Hot",
    905: "Windy",
    906: "Hail",
    951: "Calm",
    952: "Light Breeze",
    953: "Gentle Breeze",
    954: "Breeze",
    955: "Fresh Breeze",
    956: "Strong Breeze",
    957: "Near Gale",
    958: "Gale",
    959: "Severe Gale",
    960: "Storm",
    961: "Violent Storm",
    962: "Hurricane",
}


def condition_key(weather_id: int) -> str | None:
    """Return the artwork key ('storm', 'rain', ...) for a condition id."""
    for low, high, name in _CONDITION_RANGES:
        if low <= weather_id <= high:
            return name
    return None


def icon_for_condition(weather_id: int) -> str | None:
    """Small list icon resource name, e.g. ``ic_storm``."""
    key = condition_key(weather_id)
    if key is None:
        return None
    return "ic_" + _ICON_NAMES.get(key, key)


def art_for_condition(weather_id: int) -> str | None:
    """Large artwork resource name, e.g. ``art_storm``."""
    key = condition_key(weather_id)
    if key is None:
        return None
    return "art_" + key


def art_url_for_condition(weather_id: int, art_pack: str) -> str | None:
    """Fill the art pack's ``%s`` placeholder with the condition key."""
    key = condition_key(weather_id)
    if key is None:
        return None
    return art_pack % key


def description_for_condition(weather_id: int) -> str:
    """Human-readable condition, falling back to ``Unknown (<id>)``."""
    if 200 <= weather_id <= 232:
        return "Storm"
    if 300 <= weather_id <= 321:
        return "Drizzle"
    return _DESCRIPTIONS.get(weather_id, f"Unknown ({weather_id})")
