"""Woozy - a terminal weather forecast built on the yr.no XML feed."""

__version__ = "0.2.0"
