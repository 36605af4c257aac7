"""Console report for a loaded forecast."""

from datetime import datetime

from pydantic import BaseModel

from ..models.config import DEFAULT_DATE_FORMAT, DEFAULT_ICON_SET, IconSetName
from ..models.forecast import ForecastDocument, ForecastEntry
from .icons import ICON_SETS, IconSet

DAY_KEY_FORMAT = "%Y%m%d"
PERIOD_WIDTH = 9  # "Evening: "


class ReportOptions(BaseModel):
    """Presentation settings for the report."""

    date_format: str = DEFAULT_DATE_FORMAT
    icon_set: IconSetName = DEFAULT_ICON_SET

    @property
    def icons(self) -> IconSet:
        return ICON_SETS[self.icon_set]


def group_by_day(entries: list[ForecastEntry]) -> dict[str, list[ForecastEntry]]:
    """Group entries by the local date they start on, ordered by date.

    Entries keep their original order within a day.
    """
    groups: dict[str, list[ForecastEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.start.strftime(DAY_KEY_FORMAT), []).append(entry)
    return {key: groups[key] for key in sorted(groups)}


def render_header(document: ForecastDocument, options: ReportOptions | None = None) -> list[str]:
    """Location with today's sunrise, sunset and hours of daylight."""
    icons = (options or ReportOptions()).icons
    location = document.location
    rise = document.sun.rise.astimezone().strftime("%H:%M")
    sunset = document.sun.set.astimezone().strftime("%H:%M")
    return [
        f"{location.country} / {location.name} | {icons.sun} {icons.sunrise} {rise} "
        f"{icons.sunset} {sunset} ({document.sun_hours:.1f} hours)",
        "",
    ]


def render_entry(entry: ForecastEntry, icons: IconSet) -> str:
    """One forecast window as a single line."""
    label = f"{entry.period_name}:" if entry.period_name else ""
    return (
        f" {label:<{PERIOD_WIDTH}} {icons.sky_icon(entry.symbol.name)}"
        f"    {icons.thermometer} {entry.temperature.value}{icons.celsius}"
        f"    {icons.umbrella}  {entry.precipitation.value:.1f}mm"
        f"    {icons.wind_speed}  {entry.wind_speed.mps:.1f} m/s "
        f"{icons.wind_icon(entry.wind_direction.code)}"
    )


def render_forecast(
    document: ForecastDocument, days: int, options: ReportOptions | None = None
) -> list[str]:
    """Per-day forecast blocks for the first ``days`` days.

    ``days`` is clamped to the number of days present in the forecast.
    """
    options = options or ReportOptions()
    groups = list(group_by_day(document.forecast).values())
    days = max(0, min(days, len(groups)))

    lines = []
    for entries in groups[:days]:
        lines.append(entries[0].start.strftime(options.date_format))
        lines.extend(render_entry(entry, options.icons) for entry in entries)
        lines.append("")
    return lines


def render_footer(document: ForecastDocument, now: datetime | None = None) -> list[str]:
    """Forecast age and the attribution required by the provider."""
    meta = document.meta
    return [
        f"Forecast issued {meta.hours_since_update(now):.1f} hours ago, "
        f"next update in {meta.hours_to_next_update(now):.1f} hours",
        "",
        f"{document.credit.text}.",
        document.credit.url,
    ]


def render_report(
    document: ForecastDocument,
    days: int,
    options: ReportOptions | None = None,
    now: datetime | None = None,
) -> str:
    """Complete report: header, per-day forecast and footer."""
    lines = [
        *render_header(document, options),
        *render_forecast(document, days, options),
        *render_footer(document, now),
    ]
    return "\n".join(lines)
