"""Icon lookup tables for the console report."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

_EMOJI_SKY = {
    "Rain": "\U0001f327",
    "Snow": "\U0001f328",
    "Rain and thunder": "⛈",
    "Light rain": "\U0001f326",
    "Light snow": "\U0001f328",
    "Light rain and thunder": "⛈",
    "Light rain showers": "\U0001f326",
    "Light rain showers and thunder": "⛈",
    "Light snow showers": "\U0001f328",
    "Heavy rain": "\U0001f327",
    "Heavy rain and thunder": "⛈",
    "Heavy snow": "\U0001f328",
    "Rain showers": "\U0001f326",
    "Rain showers and thunder": "⛈",
    "Snow showers": "\U0001f328",
    "Clear sky": "☼",
    "Cloudy": "☁",
    "Partly cloudy": "⛅",
    "Fair": "⛅",
}

# Arrows point where the wind blows to
_EMOJI_WIND = {
    "N": "↓",
    "S": "↑",
    "E": "←",
    "W": "→",
    "NE": "↙",
    "NNE": "↙",
    "NEE": "↙",
    "ENE": "↙",
    "NW": "↘",
    "NNW": "↘",
    "NWW": "↘",
    "WNW": "↘",
    "SE": "↖",
    "SEE": "↖",
    "SSE": "↖",
    "ESE": "↖",
    "SW": "↗",
    "SSW": "↗",
    "SWW": "↗",
    "WSW": "↗",
}

_TEXT_SKY = {
    "Rain": "rain",
    "Snow": "snow",
    "Rain and thunder": "storm",
    "Light rain": "drizzle",
    "Light snow": "snow",
    "Light rain and thunder": "storm",
    "Light rain showers": "showers",
    "Light rain showers and thunder": "storm",
    "Light snow showers": "snow",
    "Heavy rain": "rain",
    "Heavy rain and thunder": "storm",
    "Heavy snow": "snow",
    "Rain showers": "showers",
    "Rain showers and thunder": "storm",
    "Snow showers": "snow",
    "Clear sky": "sun",
    "Cloudy": "cloud",
    "Partly cloudy": "partly",
    "Fair": "fair",
}

_TEXT_WIND = {
    "N": "v",
    "S": "^",
    "E": "<",
    "W": ">",
    "NE": "/",
    "NNE": "/",
    "NEE": "/",
    "ENE": "/",
    "NW": "\\",
    "NNW": "\\",
    "NWW": "\\",
    "WNW": "\\",
    "SE": "\\",
    "SEE": "\\",
    "SSE": "\\",
    "ESE": "\\",
    "SW": "/",
    "SSW": "/",
    "SWW": "/",
    "WSW": "/",
}


@dataclass(frozen=True)
class IconSet:
    """Glyphs used when rendering a report."""

    sky: Mapping[str, str]
    wind: Mapping[str, str]
    sun: str
    sunrise: str
    sunset: str
    thermometer: str
    celsius: str
    umbrella: str
    wind_speed: str

    def sky_icon(self, name: str) -> str:
        """Icon for a sky condition, empty when unknown."""
        return self.sky.get(name, "")

    def wind_icon(self, code: str) -> str:
        """Arrow for a compass code, empty when unknown."""
        return self.wind.get(code, "")


EMOJI_ICONS = IconSet(
    sky=MappingProxyType(_EMOJI_SKY),
    wind=MappingProxyType(_EMOJI_WIND),
    sun=_EMOJI_SKY["Clear sky"],
    sunrise=_EMOJI_WIND["S"],
    sunset=_EMOJI_WIND["N"],
    thermometer="\U0001f321",
    celsius="℃",
    umbrella="☂",
    wind_speed="\U0001f32c",
)

TEXT_ICONS = IconSet(
    sky=MappingProxyType(_TEXT_SKY),
    wind=MappingProxyType(_TEXT_WIND),
    sun="sun",
    sunrise="up",
    sunset="down",
    thermometer="temp",
    celsius="C",
    umbrella="rain",
    wind_speed="wind",
)

ICON_SETS: Mapping[str, IconSet] = MappingProxyType(
    {
        "emoji": EMOJI_ICONS,
        "text": TEXT_ICONS,
    }
)
