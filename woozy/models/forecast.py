"""Forecast data models for the yr.no XML feed."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

PERIOD_NAMES = {
    0: "Night",
    1: "Morning",
    2: "Day",
    3: "Evening",
}


class Credit(BaseModel):
    """Attribution link that must accompany the forecast."""

    url: str = ""
    text: str = ""


class Timezone(BaseModel):
    """Timezone of the forecast location."""

    id: str = ""
    utc_offset_minutes: str = ""


class Location(BaseModel):
    """Forecast location."""

    name: str = ""
    type: str = ""
    country: str = ""
    timezone: Timezone = Field(default_factory=Timezone)


class Meta(BaseModel):
    """When the forecast was issued and when it will be replaced."""

    last_update: datetime
    next_update: datetime

    def hours_since_update(self, now: datetime | None = None) -> float:
        """Hours elapsed since the forecast was issued."""
        now = now or datetime.now().astimezone()
        return (now - self.last_update).total_seconds() / 3600

    def hours_to_next_update(self, now: datetime | None = None) -> float:
        """Hours until the next forecast is due (negative when overdue)."""
        now = now or datetime.now().astimezone()
        return (self.next_update - now).total_seconds() / 3600

    def is_stale(self, now: datetime | None = None) -> bool:
        """True once the declared next update is no longer in the future."""
        now = now or datetime.now().astimezone()
        return self.next_update <= now


class Sun(BaseModel):
    """Sunrise and sunset for the current day."""

    rise: datetime
    set: datetime


class Pressure(BaseModel):
    unit: str = ""
    value: float = 0.0


class Precipitation(BaseModel):
    value: float = 0.0
    min: float = 0.0
    max: float = 0.0


class Symbol(BaseModel):
    """Sky condition, e.g. 'Partly cloudy'."""

    name: str = ""
    number: int = 0


class Temperature(BaseModel):
    unit: str = ""
    value: int = 0


class WindDirection(BaseModel):
    deg: float = 0.0
    code: str = ""
    name: str = ""


class WindSpeed(BaseModel):
    mps: float = 0.0
    name: str = ""


class ForecastEntry(BaseModel):
    """A single forecast window from the tabular forecast."""

    model_config = ConfigDict(populate_by_name=True)

    start: datetime = Field(alias="from")
    end: datetime = Field(alias="to")
    period: int = 0
    pressure: Pressure = Field(default_factory=Pressure)
    precipitation: Precipitation = Field(default_factory=Precipitation)
    symbol: Symbol = Field(default_factory=Symbol)
    temperature: Temperature = Field(default_factory=Temperature)
    wind_direction: WindDirection = Field(default_factory=WindDirection)
    wind_speed: WindSpeed = Field(default_factory=WindSpeed)

    @model_validator(mode="after")
    def check_time_range(self) -> "ForecastEntry":
        """Ensure the window does not end before it starts."""
        if self.start > self.end:
            raise ValueError(f"Forecast window ends before it starts: {self.start} > {self.end}")
        return self

    @property
    def period_name(self) -> str:
        """Return the period of day as text, or an empty string for unknown codes."""
        return PERIOD_NAMES.get(self.period, "")


class ForecastDocument(BaseModel):
    """Complete forecast for one location."""

    credit: Credit = Field(default_factory=Credit)
    location: Location = Field(default_factory=Location)
    meta: Meta
    sun: Sun
    forecast: list[ForecastEntry] = Field(default_factory=list)

    @property
    def sun_hours(self) -> float:
        """Hours between sunrise and sunset."""
        return (self.sun.set - self.sun.rise).total_seconds() / 3600
