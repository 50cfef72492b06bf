"""
Tests for logging configuration.
"""

import logging

from errandctl.logging_config import HttpNoiseFilter, get_logging_config


def make_record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


class TestHttpNoiseFilter:

    def test_drops_http_debug_records(self):
        noise_filter = HttpNoiseFilter()
        assert not noise_filter.filter(make_record("httpx", logging.INFO))
        assert not noise_filter.filter(make_record("httpcore.connection", logging.DEBUG))

    def test_keeps_http_warnings(self):
        assert HttpNoiseFilter().filter(make_record("httpx", logging.WARNING))

    def test_keeps_own_records(self):
        assert HttpNoiseFilter().filter(make_record("errandctl.director", logging.DEBUG))


def test_level_is_applied():
    config = get_logging_config("info")

    assert config["loggers"]["errandctl"]["level"] == "INFO"
    assert config["root"]["level"] == "INFO"
    assert config["filters"]["http_noise_filter"]["min_level"] == logging.WARNING


def test_debug_lets_http_logs_through():
    config = get_logging_config(logging.DEBUG)

    assert config["loggers"]["errandctl"]["level"] == "DEBUG"
    assert config["filters"]["http_noise_filter"]["min_level"] == logging.DEBUG


def test_logs_go_to_stderr():
    config = get_logging_config()

    assert config["handlers"]["default"]["stream"] == "ext://sys.stderr"
