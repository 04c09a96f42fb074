from __future__ import annotations

import logging

import pytest

from dashboard_client.logging_utils import configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _our_handlers(root):
    return [handler for handler in root.handlers if handler.get_name() == "dashboard_client"]


def test_installs_single_handler(root_logger):
    configure_logging("INFO")
    configure_logging("INFO")

    assert len(_our_handlers(root_logger)) == 1


def test_explicit_level_wins(root_logger, monkeypatch):
    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "ERROR")

    configure_logging("debug")

    assert root_logger.level == logging.DEBUG


def test_level_from_environment(root_logger, monkeypatch):
    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "WARNING")

    configure_logging()

    assert root_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(root_logger):
    configure_logging("chatty")

    assert root_logger.level == logging.INFO
