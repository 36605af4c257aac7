"""Decoding of the yr.no forecast XML into forecast models."""

import logging
import re
import xml.etree.ElementTree as ET
from datetime import datetime

from pydantic import ValidationError

from ..errors import ParseError
from ..models.forecast import ForecastDocument

logger = logging.getLogger(__name__)

# Feed timestamps carry no timezone and are read as local time
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
TIME_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")

# (element, {xml attribute: model field}) for the nested values of a <time> element
_ENTRY_CHILDREN = {
    "symbol": ("symbol", {"name": "name", "number": "number"}),
    "precipitation": ("precipitation", {"value": "value", "minvalue": "min", "maxvalue": "max"}),
    "windDirection": ("wind_direction", {"deg": "deg", "code": "code", "name": "name"}),
    "windSpeed": ("wind_speed", {"mps": "mps", "name": "name"}),
    "temperature": ("temperature", {"unit": "unit", "value": "value"}),
    "pressure": ("pressure", {"unit": "unit", "value": "value"}),
}


def parse_feed_time(value: str) -> datetime:
    """Parse a feed timestamp into a timezone-aware local datetime."""
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise ParseError(f"Invalid timestamp {value!r}: expected {TIME_FORMAT}")
    try:
        naive = datetime.strptime(value, TIME_FORMAT)
    except ValueError as e:
        raise ParseError(f"Invalid timestamp {value!r}: expected {TIME_FORMAT}") from e
    return naive.astimezone()


def decode_element_time(elem: ET.Element | None) -> datetime:
    """Decode the text content of an element as a feed timestamp."""
    if elem is None:
        raise ParseError("Missing timestamp element")
    return parse_feed_time(elem.text or "")


def decode_attr_time(elem: ET.Element | None, name: str) -> datetime:
    """Decode an attribute value as a feed timestamp."""
    if elem is None:
        raise ParseError(f"Missing element for timestamp attribute '{name}'")
    value = elem.get(name)
    if value is None:
        raise ParseError(f"Missing timestamp attribute '{name}' on <{elem.tag}>")
    return parse_feed_time(value)


def _attrs(elem: ET.Element | None, mapping: dict[str, str]) -> dict[str, str]:
    """Collect the attributes present on an element under their model names."""
    if elem is None:
        return {}
    return {field: elem.get(attr) for attr, field in mapping.items() if elem.get(attr) is not None}


def _text(elem: ET.Element, path: str) -> str:
    found = elem.find(path)
    if found is None or found.text is None:
        return ""
    return found.text.strip()


def _parse_entry(time_elem: ET.Element) -> dict:
    entry: dict = {
        "from": decode_attr_time(time_elem, "from"),
        "to": decode_attr_time(time_elem, "to"),
    }
    period = time_elem.get("period")
    if period is not None:
        entry["period"] = period

    for tag, (field, mapping) in _ENTRY_CHILDREN.items():
        entry[field] = _attrs(time_elem.find(tag), mapping)

    return entry


def parse_forecast(content: bytes | str) -> ForecastDocument:
    """Parse a complete forecast document.

    Raises:
        ParseError: If the XML is malformed, a timestamp cannot be decoded or
            a value does not fit the forecast model.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Malformed forecast XML: {e}") from e

    if root.tag != "weatherdata":
        raise ParseError(f"Unexpected root element <{root.tag}>")

    location_elem = root.find("location")
    location: dict = {}
    if location_elem is not None:
        location = {
            "name": _text(location_elem, "name"),
            "type": _text(location_elem, "type"),
            "country": _text(location_elem, "country"),
            "timezone": _attrs(
                location_elem.find("timezone"),
                {"id": "id", "utcoffsetMinutes": "utc_offset_minutes"},
            ),
        }

    meta_elem = root.find("meta")
    if meta_elem is None:
        raise ParseError("Missing <meta> element")
    sun_elem = root.find("sun")

    data = {
        "credit": _attrs(root.find("credit/link"), {"url": "url", "text": "text"}),
        "location": location,
        "meta": {
            "last_update": decode_element_time(meta_elem.find("lastupdate")),
            "next_update": decode_element_time(meta_elem.find("nextupdate")),
        },
        "sun": {
            "rise": decode_attr_time(sun_elem, "rise"),
            "set": decode_attr_time(sun_elem, "set"),
        },
        "forecast": [_parse_entry(t) for t in root.findall("forecast/tabular/time")],
    }

    try:
        document = ForecastDocument.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid forecast document: {e}") from e

    logger.debug(
        f"Parsed forecast for {document.location.name} with {len(document.forecast)} entries"
    )
    return document
