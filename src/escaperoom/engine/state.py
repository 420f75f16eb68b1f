"""Mutable play state: the player, the game's room sequence and their owner.

Game and Player share one room sequence: the player always stands in
``game.current_room()``.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .world import Room


class OutOfRoomsError(IndexError):
    """Raised when advancing past the last room of a game."""


@dataclass
class Player:
    """The player's inventory and the room they are in."""

    current_room: Room
    items: list[str] = field(default_factory=list)

    def get_item(self, name: str) -> str | None:
        """Find an inventory item by name, ignoring case.

        Returns the item as it is spelled in the inventory.
        """
        name = name.lower()
        for item in self.items:
            if item.lower() == name:
                return item
        return None

    def add_items(self, items: Iterable[str]) -> None:
        self.items.extend(items)

    def interact_with_object(self, object_name: str, action: str) -> str:
        """Perform ``action`` on an object in the current room."""
        obj = self.current_room.get_object(object_name)
        if obj is None:
            return f"{object_name} not found in room"

        result = obj.interact(action)
        if result.items:
            self.add_items(result.items)
            return f"{result.description}\nfound items: {','.join(result.items)}"
        return result.description

    def use_item(self, item_name: str, object_name: str) -> str:
        """Use an inventory item on an object in the current room."""
        item = self.get_item(item_name)
        if item is None:
            return f"{item_name} not found in inventory"

        obj = self.current_room.get_object(object_name)
        if obj is None:
            return f"{object_name} not found"

        return obj.use_item(item).description


@dataclass
class Game:
    """An ordered sequence of rooms and the index of the one being played."""

    rooms: list[Room]
    current_room_index: int = 0

    def __post_init__(self) -> None:
        if not self.rooms:
            raise ValueError("a game needs at least one room")
        if not 0 <= self.current_room_index < len(self.rooms):
            raise OutOfRoomsError(
                f"room index {self.current_room_index} outside 0..{len(self.rooms) - 1}"
            )

    def current_room(self) -> Room:
        return self.rooms[self.current_room_index]

    def has_next_room(self) -> bool:
        return self.current_room_index + 1 < len(self.rooms)

    def next_room(self) -> Room:
        """Advance to and return the next room.

        Raises OutOfRoomsError, leaving the index untouched, when the
        current room is the last one.
        """
        if not self.has_next_room():
            raise OutOfRoomsError(
                f"no room after index {self.current_room_index}"
            )
        self.current_room_index += 1
        return self.rooms[self.current_room_index]


@dataclass
class GameState:
    """Everything one play-through mutates."""

    game: Game
    player: Player
    turns: int = 0

    def advance_room(self) -> Room:
        """Move game and player on to the next room together."""
        room = self.game.next_room()
        self.player.current_room = room
        return room


def new_game_state(rooms: list[Room]) -> GameState:
    """Create a fresh game with the player in the first room."""
    game = Game(rooms=rooms)
    return GameState(game=game, player=Player(current_room=game.current_room()))
