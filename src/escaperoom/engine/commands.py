"""Command parsing and dispatch.

handle_command(state, raw_input) -> str is the main entry point. It splits
the line into words, picks the command shape and returns the message to show.
Everything a command changes is mutated in place on the GameState.
"""

from .state import GameState
from .world import ESCAPE_MESSAGE

WIN_MESSAGE = "YOUR'E FREE"
INVALID_COMMAND = "invalid command"

# Only the exact lowercase keyword starts a use command.
USE_KEYWORD = "use"


def _split_words(raw_input: str) -> list[str]:
    """Split on single spaces. Repeated spaces produce empty words."""
    return raw_input.split(" ")


def _cmd_interact(state: GameState, action: str, object_name: str) -> str:
    """Handle ``<action> <object>``."""
    message = state.player.interact_with_object(object_name.lower(), action.lower())
    if message == ESCAPE_MESSAGE:
        return WIN_MESSAGE
    return message


def _cmd_use(state: GameState, item_name: str, object_name: str) -> str:
    """Handle ``use <item> <object>``."""
    return state.player.use_item(item_name.lower(), object_name.lower())


def handle_command(state: GameState, raw_input: str) -> str:
    """Process one input line and return the response text."""
    state.turns += 1
    words = _split_words(raw_input)

    match words:
        case [action, object_name]:
            return _cmd_interact(state, action, object_name)
        case [keyword, item_name, object_name] if keyword == USE_KEYWORD:
            return _cmd_use(state, item_name, object_name)
        case _:
            return INVALID_COMMAND


def get_object_names(state: GameState) -> list[str]:
    """Names of the objects in the player's current room."""
    return state.player.current_room.object_names()


def get_inventory(state: GameState) -> list[str]:
    """Items the player is carrying, in the order they were found."""
    return list(state.player.items)
