"""Configuration model using Pydantic for validation."""

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".woozy"
EXAMPLE_PLACE = "Sweden/Västerbotten/Estersmark"
EXAMPLE_DAYS = 3

IconSetName = Literal["emoji", "text"]
DEFAULT_DATE_FORMAT = "%B %d (%A):"
DEFAULT_ICON_SET: IconSetName = "emoji"


def default_config_path() -> Path:
    """Return the per-user configuration file path."""
    return Path.home() / CONFIG_FILE_NAME


class Configuration(BaseModel):
    """User configuration stored as JSON in the home directory."""

    place: str
    days: int = Field(default=0, ge=0)  # 0 defers to --days
    date_format: str = DEFAULT_DATE_FORMAT
    icon_set: IconSetName = DEFAULT_ICON_SET

    @field_validator("place")
    @classmethod
    def validate_place(cls, v: str) -> str:
        """Validate that the place looks like a yr.no path."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("Place must not be empty")
        return v

    def resolve_days(self, cli_days: int) -> int:
        """Return the configured number of days, falling back to the CLI value."""
        return self.days or cli_days

    @classmethod
    def load(cls, path: Path | str) -> "Configuration":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Cannot decode {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    @classmethod
    def write_example(cls, path: Path | str) -> None:
        """Write a placeholder configuration the user is expected to edit."""
        path = Path(path)
        example = {"place": EXAMPLE_PLACE, "days": EXAMPLE_DAYS}
        try:
            path.write_text(json.dumps(example, indent="\t", ensure_ascii=False), encoding="utf-8")
            path.chmod(0o600)
        except OSError as e:
            raise ConfigError(f"Cannot create {path}: {e}") from e
        logger.info(f"Created example configuration in {path}")

    @classmethod
    def load_or_bootstrap(cls, path: Path | str) -> tuple["Configuration | None", bool]:
        """Load configuration, creating an example file on first run.

        Returns a ``(configuration, bootstrapped)`` pair. When the file did not
        exist an example is written and ``(None, True)`` is returned so the
        caller can ask the user to edit it and rerun.
        """
        try:
            return cls.load(path), False
        except FileNotFoundError:
            cls.write_example(path)
            return None, True
