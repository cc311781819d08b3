"""Tests for config error types."""
from pathlib import Path

from kitconfig.errors import ConfigError, ConfigIOError, DecodeError, InvalidInputError, UnknownKeyError


def test_invalid_input():
    e = InvalidInputError()
    assert str(e) == "config path is empty"
    assert isinstance(e, ConfigError)


def test_io_error():
    e = ConfigIOError(Path("/tmp/kh/config.json"), "Permission denied")
    assert "/tmp/kh/config.json" in str(e)
    assert "Permission denied" in str(e)
    assert e.path == Path("/tmp/kh/config.json")
    assert isinstance(e, ConfigError)


def test_io_error_no_detail():
    e = ConfigIOError("config.json")
    assert str(e) == "cannot access config file config.json"


def test_decode_error():
    e = DecodeError("config.json", "Invalid JSON")
    assert "config.json" in str(e)
    assert "Invalid JSON" in str(e)
    assert isinstance(e, ConfigError)


def test_unknown_key():
    e = UnknownKeyError("log_levels")
    assert str(e) == "unknown configuration key: log_levels"
    assert e.key == "log_levels"
    assert isinstance(e, ConfigError)
