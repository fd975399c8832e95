"""Tests for GameConfig validation and loguru wiring."""
from __future__ import annotations

import io

import pytest
from loguru import logger

from tick_defense import Game, GameConfig, configure_logging
from tick_defense.types import ConfigError


def test_defaults():
    config = GameConfig()
    assert config.tick_duration == 0.6
    assert config.seed is None
    assert config.chronicle_size == 256


@pytest.mark.parametrize("kwargs", [
    {"tick_duration": 0},
    {"tick_duration": -0.6},
    {"chronicle_size": -1},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        GameConfig(tick_duration=0)


def test_frozen():
    with pytest.raises(AttributeError):
        GameConfig().seed = 3  # type: ignore[misc]


def test_configure_logging_captures_status_lines():
    sink = io.StringIO()
    handler_id = configure_logging("INFO", sink=sink)
    try:
        Game(GameConfig(seed=1)).start()
    finally:
        logger.remove(handler_id)
        logger.disable("tick_defense")
    assert "Wave 1 incoming!" in sink.getvalue()


def test_configure_logging_keeps_host_handlers():
    host = io.StringIO()
    host_id = logger.add(host, format="{message}")
    handler_id = configure_logging("INFO", sink=io.StringIO())
    try:
        logger.info("host message")
    finally:
        logger.remove(handler_id)
        logger.remove(host_id)
        logger.disable("tick_defense")
    assert "host message" in host.getvalue()


def test_configure_logging_replaces_its_own_handler():
    first, second = io.StringIO(), io.StringIO()
    configure_logging("INFO", sink=first)
    handler_id = configure_logging("INFO", sink=second)
    try:
        Game(GameConfig(seed=1)).start()
    finally:
        logger.remove(handler_id)
        logger.disable("tick_defense")
    assert first.getvalue() == ""
    assert "Wave 1 incoming!" in second.getvalue()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigError):
        configure_logging("LOUD")


def test_rejected_commands_logged_at_debug():
    sink = io.StringIO()
    handler_id = configure_logging("DEBUG", sink=sink)
    try:
        Game(GameConfig(seed=1)).pause()
    finally:
        logger.remove(handler_id)
        logger.disable("tick_defense")
    assert "rejected Pause()" in sink.getvalue()
