"""Tests for forecast cache."""

from datetime import datetime
from pathlib import Path

import pytest

from woozy.services.cache import DEFAULT_CACHE_PATH, ForecastCache


class TestCacheRead:
    """Tests for reading the cached forecast."""

    @pytest.fixture
    def cache(self, cache_path):
        """Create a cache instance for testing."""
        return ForecastCache(cache_path)

    def test_missing_file(self, cache):
        """Test that a missing cache is invalid."""
        document, valid = cache.read()
        assert document is None
        assert valid is False

    def test_valid_forecast(self, cache, feed_xml):
        """Test that a forecast with a future next update is valid."""
        cache.write(feed_xml)

        document, valid = cache.read()
        assert valid is True
        assert document is not None
        assert document.location.name == "Estersmark"
        assert cache.path.exists()

    def test_stale_forecast_removed(self, cache, stale_feed_xml):
        """Test that an expired forecast is discarded and deleted."""
        cache.write(stale_feed_xml)

        document, valid = cache.read()
        assert valid is False
        assert document is None
        assert not cache.path.exists()

    def test_stale_forecast_assumed_valid(self, cache, stale_feed_xml):
        """Test that assume_valid skips the staleness check."""
        cache.write(stale_feed_xml)

        document, valid = cache.read(assume_valid=True)
        assert valid is True
        assert document is not None
        assert cache.path.exists()

    def test_staleness_uses_given_time(self, cache, make_feed):
        """Test staleness relative to an explicit current time."""
        cache.write(make_feed(next_update="2024-03-01T11:00:00"))

        _, valid = cache.read(now=datetime(2024, 3, 1, 10).astimezone())
        assert valid is True

        _, valid = cache.read(now=datetime(2024, 3, 1, 11).astimezone())
        assert valid is False
        assert not cache.path.exists()

    def test_force_clear_removes_valid_forecast(self, cache, feed_xml):
        """Test that force_clear deletes even a valid forecast."""
        cache.write(feed_xml)

        document, valid = cache.read(force_clear=True)
        assert valid is False
        assert document is None
        assert not cache.path.exists()

    def test_force_clear_wins_over_assume_valid(self, cache, feed_xml):
        """Test that force_clear short-circuits before reading."""
        cache.write(feed_xml)

        _, valid = cache.read(force_clear=True, assume_valid=True)
        assert valid is False
        assert not cache.path.exists()

    def test_force_clear_without_file(self, cache):
        """Test that clearing a missing cache does not raise."""
        document, valid = cache.read(force_clear=True)
        assert (document, valid) == (None, False)


class TestCacheWrite:
    """Tests for writing the cached forecast."""

    def test_write_is_verbatim(self, cache_path, feed_xml):
        """Test that bytes are stored without re-encoding."""
        cache = ForecastCache(cache_path)
        assert cache.write(feed_xml) is True
        assert cache_path.read_bytes() == feed_xml

    def test_write_overwrites(self, cache_path, feed_xml):
        """Test that a write replaces existing content."""
        cache = ForecastCache(cache_path)
        cache.write(b"old content that is much longer than the new content")
        cache.write(feed_xml)
        assert cache_path.read_bytes() == feed_xml

    def test_write_failure_returns_false(self, temp_dir, feed_xml):
        """Test that a failed write is reported, not raised."""
        cache = ForecastCache(temp_dir / "missing-dir" / "woozyforecast.xml")
        assert cache.write(feed_xml) is False


class TestCacheCorruption:
    """Tests for handling corrupted cache files."""

    def test_corrupted_file(self, cache_path):
        """Test that undecodable content is reported invalid."""
        cache_path.write_text("not valid xml <<<")
        document, valid = ForecastCache(cache_path).read()
        assert (document, valid) == (None, False)

    def test_truncated_file(self, cache_path, feed_xml):
        """Test that a partially written forecast is reported invalid."""
        cache_path.write_bytes(feed_xml[: len(feed_xml) // 2])
        _, valid = ForecastCache(cache_path).read(assume_valid=True)
        assert valid is False

    def test_bad_timestamp(self, cache_path, make_feed):
        """Test that a forecast with a bad timestamp is reported invalid."""
        cache_path.write_bytes(make_feed(last_update="yesterday"))
        _, valid = ForecastCache(cache_path).read(assume_valid=True)
        assert valid is False


class TestCacheClear:
    """Tests for clearing the cache."""

    def test_clear(self, cache_path, feed_xml):
        cache = ForecastCache(cache_path)
        cache.write(feed_xml)
        cache.clear()
        assert not cache_path.exists()

    def test_clear_nonexistent(self, cache_path):
        """Test clearing a cache that doesn't exist (should not error)."""
        ForecastCache(cache_path).clear()

    def test_clear_directory_does_not_raise(self, cache_path):
        """Test that an unremovable cache path is logged, not raised."""
        cache_path.mkdir()
        document, valid = ForecastCache(cache_path).read(force_clear=True)
        assert (document, valid) == (None, False)

    def test_stale_unlink_failure_does_not_raise(self, cache_path, stale_feed_xml, monkeypatch):
        """Test that failing to delete a stale forecast still reports it invalid."""
        cache = ForecastCache(cache_path)
        cache.write(stale_feed_xml)

        def mock_unlink(*args, **kwargs):
            raise PermissionError("Permission denied")

        monkeypatch.setattr(Path, "unlink", mock_unlink)
        document, valid = cache.read()
        assert (document, valid) == (None, False)


def test_default_path_in_temp_dir():
    """Test that the default cache lives in the system temp directory."""
    assert ForecastCache().path == DEFAULT_CACHE_PATH
    assert DEFAULT_CACHE_PATH.name == "woozyforecast.xml"
    assert isinstance(DEFAULT_CACHE_PATH, Path)
