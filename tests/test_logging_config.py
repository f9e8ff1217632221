# tests/test_logging_config.py

import logging

from core.constants import DEFAULT_LOG_LEVEL
from core.logging_config import configure_logging, resolve_log_level


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "ERROR")
    assert resolve_log_level("debug") == logging.DEBUG


def test_environment_level(monkeypatch):
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "info")
    assert resolve_log_level() == logging.INFO


def test_unknown_level_falls_back(monkeypatch):
    monkeypatch.delenv("ROSTER_LOG_LEVEL", raising=False)
    assert resolve_log_level("chatty") == DEFAULT_LOG_LEVEL
    assert resolve_log_level() == DEFAULT_LOG_LEVEL


def test_configure_logging_returns_package_logger():
    assert configure_logging().name == "roster"
