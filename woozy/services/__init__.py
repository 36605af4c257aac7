"""Services for fetching, caching and decoding forecasts."""

from .cache import ForecastCache
from .fetcher import ForecastFetcher
from .forecast_parser import parse_forecast
from .loader import ForecastLoader

__all__ = ["ForecastCache", "ForecastFetcher", "ForecastLoader", "parse_forecast"]
