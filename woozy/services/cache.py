"""Single-file cache for the raw forecast XML."""

import logging
import tempfile
from datetime import datetime
from pathlib import Path

from ..errors import ParseError
from ..models.forecast import ForecastDocument
from .forecast_parser import parse_forecast

logger = logging.getLogger(__name__)

DEFAULT_CACHE_PATH = Path(tempfile.gettempdir()) / "woozyforecast.xml"


class ForecastCache:
    """File cache whose validity is the forecast's own next-update time."""

    def __init__(self, path: Path | str = DEFAULT_CACHE_PATH):
        self.path = Path(path)

    def read(
        self,
        force_clear: bool = False,
        assume_valid: bool = False,
        now: datetime | None = None,
    ) -> tuple[ForecastDocument | None, bool]:
        """Read the cached forecast.

        Returns a ``(document, valid)`` pair. The document is ``None`` whenever
        ``valid`` is false. A stale forecast is removed from disk unless
        ``assume_valid`` is set.
        """
        if force_clear:
            self.clear()
            return None, False

        try:
            content = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug(f"No cached forecast at {self.path}")
            return None, False
        except OSError as e:
            logger.warning(f"Failed to read cached forecast {self.path}: {e}")
            return None, False

        try:
            document = parse_forecast(content)
        except ParseError as e:
            logger.warning(f"Failed to decode cached forecast {self.path}: {e}")
            return None, False

        if not assume_valid and document.meta.is_stale(now):
            logger.debug(f"Cached forecast expired at {document.meta.next_update}")
            self._remove()
            return None, False

        return document, True

    def write(self, data: bytes) -> bool:
        """Store the raw forecast, replacing any previous one."""
        try:
            self.path.write_bytes(data)
        except OSError as e:
            logger.warning(f"Failed to cache forecast to {self.path}: {e}")
            return False

        logger.debug(f"Cached {len(data)} bytes to {self.path}")
        return True

    def clear(self) -> None:
        """Remove the cached forecast if there is one."""
        logger.info("Clearing cache")
        self._remove()

    def _remove(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove cached forecast {self.path}: {e}")
