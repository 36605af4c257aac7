"""Fetches the forecast XML from yr.no into the cache."""

import logging

import httpx

from .. import __version__
from ..errors import NetworkError, RemoteError
from .cache import ForecastCache

logger = logging.getLogger(__name__)

YR_BASE_URL = "http://www.yr.no"
DEFAULT_USER_AGENT = f"woozy/{__version__}, https://github.com/gummiboll/woozy"


class ForecastFetcher:
    """Downloads a forecast and stores the raw response in the cache."""

    def __init__(
        self,
        cache: ForecastCache,
        base_url: str = YR_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
    ):
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self._client = client

    def forecast_url(self, place: str) -> str:
        """Build the forecast URL for a yr.no place path."""
        return f"{self.base_url}/place/{place}/forecast.xml"

    def fetch(self, place: str) -> bool:
        """Download the forecast for a place and write it to the cache.

        Returns the result of the cache write. The cache is left untouched
        when the request fails.

        Raises:
            NetworkError: If the provider cannot be reached.
            RemoteError: If the provider answers with anything but 200.
        """
        url = self.forecast_url(place)
        headers = {"User-Agent": self.user_agent}
        logger.debug(f"Fetching forecast from {url}")

        try:
            if self._client is not None:
                response = self._client.get(url, headers=headers)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    response = client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Connection error fetching forecast: {e}")
            raise NetworkError(f"Cannot reach {url}: {e}") from e

        if response.status_code != 200:
            logger.error(f"HTTP error fetching forecast: {response.status_code}")
            raise RemoteError(response.status_code, url)

        return self.cache.write(response.content)
