"""Exceptions raised while loading configuration and forecasts."""


class WoozyError(Exception):
    """Base class for all woozy errors."""


class ParseError(WoozyError):
    """A timestamp or forecast document could not be decoded."""


class NetworkError(WoozyError):
    """The forecast provider could not be reached."""


class RemoteError(WoozyError):
    """The forecast provider answered with a non-200 status."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Failed to load forecast from {url} (HTTP {status_code})")


class LoadError(WoozyError):
    """A freshly fetched forecast could not be read back from the cache."""


class ConfigError(WoozyError):
    """The configuration file could not be read or written."""
