"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

FEED_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<weatherdata>
  <location>
    <name>Estersmark</name>
    <type>Village</type>
    <country>Sweden</country>
    <timezone id="Europe/Stockholm" utcoffsetMinutes="60" />
    <location altitude="20" latitude="63.8" longitude="20.2" geobase="geonames" geobaseid="123" />
  </location>
  <credit>
    <link text="Weather forecast from Yr, delivered by the Norwegian Meteorological Institute and NRK" url="http://www.yr.no/place/Sweden/V%C3%A4sterbotten/Estersmark/" />
  </credit>
  <links>
    <link id="xmlSource" url="http://www.yr.no/place/Sweden/V%C3%A4sterbotten/Estersmark/forecast.xml" />
  </links>
  <meta>
    <lastupdate>{last_update}</lastupdate>
    <nextupdate>{next_update}</nextupdate>
  </meta>
  <sun rise="2024-03-01T06:45:12" set="2024-03-01T17:15:12" />
  <forecast>
    <tabular>
{entries}
    </tabular>
  </forecast>
</weatherdata>
"""

ENTRY_TEMPLATE = """      <time from="{start}" to="{end}" period="{period}">
        <symbol number="{number}" numberEx="{number}" name="{symbol}" var="03d" />
        <precipitation value="{precipitation}" minvalue="0" maxvalue="0.6" />
        <windDirection deg="{deg}" code="{code}" name="South-southwest" />
        <windSpeed mps="{mps}" name="Light breeze" />
        <temperature unit="celsius" value="{temperature}" />
        <pressure unit="hPa" value="1013.4" />
      </time>"""

DEFAULT_ENTRIES = [
    {"start": "2024-03-01T06:00:00", "end": "2024-03-01T12:00:00", "period": 1,
     "symbol": "Partly cloudy", "number": 3, "temperature": -2, "precipitation": 0,
     "mps": 3.4, "code": "SSW", "deg": 203.5},
    {"start": "2024-03-01T12:00:00", "end": "2024-03-01T18:00:00", "period": 2,
     "symbol": "Light rain", "number": 46, "temperature": 4, "precipitation": 0.4,
     "mps": 5.1, "code": "S", "deg": 180.0},
    {"start": "2024-03-02T00:00:00", "end": "2024-03-02T06:00:00", "period": 0,
     "symbol": "Cloudy", "number": 4, "temperature": -5, "precipitation": 0,
     "mps": 1.2, "code": "N", "deg": 2.0},
]


def build_feed(
    last_update: str = "2024-03-01T05:00:00",
    next_update: str = "2099-01-01T00:00:00",
    entries: list[dict] | None = None,
) -> str:
    """Build a yr.no forecast document."""
    entries = DEFAULT_ENTRIES if entries is None else entries
    return FEED_TEMPLATE.format(
        last_update=last_update,
        next_update=next_update,
        entries="\n".join(ENTRY_TEMPLATE.format(**e) for e in entries),
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def feed_xml():
    """A forecast that stays valid until 2099."""
    return build_feed().encode("utf-8")


@pytest.fixture
def stale_feed_xml():
    """A forecast whose next update is long overdue."""
    return build_feed(next_update="2024-03-01T11:00:00").encode("utf-8")


@pytest.fixture
def cache_path(temp_dir):
    """Path of the cache artifact inside the temporary directory."""
    return temp_dir / "woozyforecast.xml"


@pytest.fixture
def make_feed():
    """Factory for forecast documents with custom timestamps or entries."""

    def _make(**kwargs) -> bytes:
        return build_feed(**kwargs).encode("utf-8")

    return _make
