"""Console application for the escape room."""

import sys
from importlib import resources
from pathlib import Path
from typing import TextIO

import structlog
from jinja2 import Environment

from .config import Config
from .engine.commands import WIN_MESSAGE, handle_command
from .engine.loader import load_rooms
from .engine.state import GameState, new_game_state
from .logging import configure_logging, get_logger
from .view import CLEAR_SCREEN, create_environment, render_view

logger = get_logger(__name__)


def _get_data_path() -> Path:
    """Locate room.toml via importlib.resources (works when installed in a venv)."""
    return resources.files("escaperoom.data").joinpath("room.toml")


class EscapeRoom:
    """Reads commands line by line and redraws the screen after each one."""

    def __init__(self, config: Config, state: GameState, env: Environment):
        self.config = config
        self.state = state
        self.env = env

    def render(self, message: str | None = None) -> str:
        return render_view(self.env, self.state, message)

    def _draw(self, stdout: TextIO, message: str | None = None) -> None:
        if self.config.clear_screen:
            stdout.write(CLEAR_SCREEN)
        print(self.render(message), file=stdout)
        stdout.flush()

    def process_line(self, line: str) -> str:
        """Run one command and return its message."""
        player = self.state.player
        carried = len(player.items)
        locked = [obj for obj in player.current_room.objects if obj.needs_items()]

        message = handle_command(self.state, line)
        unlocked = [obj.name for obj in locked if not obj.needs_items()]

        with structlog.contextvars.bound_contextvars(turn=self.state.turns):
            logger.debug("command_processed", command=line, message=message)
            if len(player.items) > carried:
                logger.info("items_found", items=player.items[carried:])
            if unlocked:
                logger.info("item_used", objects=unlocked)
            if message == WIN_MESSAGE:
                logger.info("room_escaped")
        return message

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Play until the input stream closes."""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout

        self._draw(stdout)
        try:
            for line in stdin:
                message = self.process_line(line.rstrip("\r\n"))
                self._draw(stdout, message)
        except KeyboardInterrupt:
            logger.info("interrupted", turns=self.state.turns)
            return
        logger.info("input_closed", turns=self.state.turns)


def create_app(config: Config | None = None) -> EscapeRoom:
    """Load the room data and build a ready-to-run game.

    Logging is configured from ``config`` unless that has already been done,
    so nothing is printed onto the game screen.
    """
    config = config or Config.from_env()
    if not structlog.is_configured():
        configure_logging(
            log_level=config.log_level,
            log_file=config.log_file,
            json_logs=config.json_logs,
        )

    data_path = config.data_file or _get_data_path()
    rooms = load_rooms(data_path)
    logger.info(
        "rooms_loaded",
        rooms=len(rooms),
        objects=sum(len(room.objects) for room in rooms),
    )

    return EscapeRoom(config, new_game_state(rooms), create_environment())
