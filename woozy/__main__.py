"""Entry point for running woozy as a module."""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .components.report import ReportOptions, render_report
from .errors import WoozyError
from .models.config import Configuration, default_config_path
from .services.cache import ForecastCache
from .services.fetcher import ForecastFetcher
from .services.loader import ForecastLoader

_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "WARNING", log_file: Path | None = None) -> None:
    """Configure logging to stderr and, optionally, a rotating log file.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a log file to write as well
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file is not None:
        try:
            # Rotate at 1MB, keep 3 backup files
            handlers.append(
                RotatingFileHandler(
                    log_file,
                    maxBytes=1024 * 1024,
                    backupCount=3,
                    encoding="utf-8",
                )
            )
        except OSError as e:
            print(f"Cannot write log file {log_file}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="woozy",
        description="Woozy - weather forecast from yr.no in your terminal",
    )
    parser.add_argument(
        "--cache-clear",
        action="store_true",
        help="Force cache clear",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=3,
        help="Number of days to print when the configuration does not set one (default: 3)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: ~/.woozy)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log messages to this file",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        from . import __version__

        print(f"woozy v{__version__}")
        return 0

    setup_logging("DEBUG" if args.verbose else "WARNING", args.log_file)

    config_path = args.config or default_config_path()
    try:
        config, bootstrapped = Configuration.load_or_bootstrap(config_path)
    except WoozyError as e:
        print(f"Failed to load/create configuration: {e}")
        return 1

    if bootstrapped or config is None:
        print(f"Configuration file not found, created an example in {config_path}")
        print(".. edit it and restart woozy")
        return 1

    if args.cache_clear:
        print("Clearing cache")

    cache = ForecastCache()
    loader = ForecastLoader(cache, ForecastFetcher(cache))
    try:
        document = loader.load(config.place, force_clear=args.cache_clear)
    except WoozyError as e:
        _logger.debug("Forecast load failed", exc_info=True)
        print(f"Failed to load weather for {config.place}: {e}")
        return 1

    options = ReportOptions(date_format=config.date_format, icon_set=config.icon_set)
    print(render_report(document, config.resolve_days(args.days), options))
    return 0


if __name__ == "__main__":
    sys.exit(main())
