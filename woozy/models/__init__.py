"""Data models for woozy."""

from .config import Configuration
from .forecast import ForecastDocument, ForecastEntry, Meta

__all__ = [
    "Configuration",
    "ForecastDocument",
    "ForecastEntry",
    "Meta",
]
