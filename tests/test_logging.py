import logging

import pytest

from basketball.utils.logging import ROOT_LOGGER_NAME, get_logger


@pytest.fixture
def fresh_root(monkeypatch):
    root = logging.getLogger(ROOT_LOGGER_NAME)
    monkeypatch.setattr(root, "handlers", [])
    old_level = root.level
    try:
        yield root
    finally:
        root.setLevel(old_level)


def test_unknown_env_level_falls_back_to_warning(fresh_root, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    logger = get_logger("trajectory_simulator")
    assert logger.name == "basketball.trajectory_simulator"
    assert fresh_root.level == logging.WARNING
    assert len(fresh_root.handlers) == 1


def test_env_level_is_applied(fresh_root, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_logger()
    assert fresh_root.level == logging.DEBUG


def test_unknown_explicit_level_raises(fresh_root):
    with pytest.raises(ValueError):
        get_logger(log_level="verbose")
