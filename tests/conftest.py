"""Shared test fixtures for the escape room."""

import logging

import pytest
import structlog
from structlog.testing import CapturingLoggerFactory, LogCapture

from escaperoom.app import EscapeRoom, _get_data_path, create_app
from escaperoom.config import Config
from escaperoom.engine.loader import load_rooms
from escaperoom.engine.state import GameState, new_game_state
from escaperoom.engine.world import Room


@pytest.fixture(autouse=True)
def _configure_test_logging():
    """Keep log lines in memory instead of on the game screen."""
    structlog.configure(
        processors=[structlog.processors.add_log_level],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory=CapturingLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def log_capture() -> LogCapture:
    capture = LogCapture()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, capture]
    )
    return capture


@pytest.fixture
def rooms() -> list[Room]:
    return load_rooms(_get_data_path())


@pytest.fixture
def state(rooms: list[Room]) -> GameState:
    return new_game_state(rooms)


@pytest.fixture
def test_config() -> Config:
    return Config(clear_screen=False)


@pytest.fixture
def app(test_config: Config) -> EscapeRoom:
    return create_app(test_config)
