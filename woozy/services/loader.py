"""Loads a valid forecast from the cache, fetching a new one when needed."""

import logging

from ..errors import LoadError
from ..models.forecast import ForecastDocument
from .cache import ForecastCache
from .fetcher import ForecastFetcher

logger = logging.getLogger(__name__)


class ForecastLoader:
    """Combines the cache and the fetcher into a single load operation."""

    def __init__(self, cache: ForecastCache, fetcher: ForecastFetcher):
        self.cache = cache
        self.fetcher = fetcher

    def load(self, place: str, force_clear: bool = False) -> ForecastDocument:
        """Return a forecast for a place, using the cache while it is valid.

        Fetch errors propagate unchanged; a stale cache is never used as a
        fallback.

        Raises:
            NetworkError: If the provider cannot be reached.
            RemoteError: If the provider answers with anything but 200.
            LoadError: If the fetched forecast cannot be stored or read back.
        """
        document, valid = self.cache.read(force_clear=force_clear)
        if valid and document is not None:
            logger.debug("Using cached forecast")
            return document

        logger.debug(f"No valid cached forecast, fetching {place}")
        if not self.fetcher.fetch(place):
            raise LoadError("failed to load forecast: could not write cache")

        # Trust what was just fetched even if its next update is already due
        document, valid = self.cache.read(assume_valid=True)
        if not valid or document is None:
            raise LoadError("failed to load forecast")

        logger.debug("Loaded fresh forecast")
        return document
