"""Render the game screen from the current state."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .engine.commands import get_inventory, get_object_names
from .engine.state import GameState

# Moves the cursor home after wiping the terminal.
CLEAR_SCREEN = "\x1b[2J\x1b[0;0f"

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=False,
        undefined=StrictUndefined,
    )


def render_view(
    env: Environment, state: GameState, message: str | None = None
) -> str:
    """Render the full screen: help, room objects, inventory, last message.

    The message block is left out only when ``message`` is None, that is
    before the first command.
    """
    return env.get_template("view.txt").render(
        objects=get_object_names(state),
        items=get_inventory(state),
        message=message,
    )
