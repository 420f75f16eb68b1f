"""Fixtures of the escape room: objects, the rooms holding them and results.

RoomObjects are the only part of the world that changes during play: their
``items`` are drained on the first successful interaction and their
``needed_items`` are cleared once the right item is used on them.
"""

from dataclasses import dataclass, field

# Returned by interacting with an unlocked, empty Door.
ESCAPE_MESSAGE = "You escaped the room!"

ESCAPE_OBJECT = "Door"


@dataclass(frozen=True)
class Result:
    """The outcome of one interaction: a description and any items yielded."""

    description: str
    items: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.items is not None:
            object.__setattr__(self, "items", tuple(self.items) or None)


@dataclass
class RoomObject:
    """Something in a room the player can act on."""

    name: str
    description: str
    items: list[str] = field(default_factory=list)
    needed_items: list[str] = field(default_factory=list)
    actions: frozenset[str] = frozenset({"open"})

    def has_items(self) -> bool:
        return len(self.items) != 0

    def needs_items(self) -> bool:
        return len(self.needed_items) != 0

    def is_item_needed(self, item: str) -> bool:
        return item in self.needed_items

    def take_items(self) -> list[str]:
        """Hand over the contained items, leaving the object empty."""
        items = self.items
        self.items = []
        return items

    def remove_needed_items(self) -> None:
        self.needed_items = []

    def interact(self, action: str) -> Result:
        """Try ``action`` on this object."""
        if action not in self.actions:
            return Result(f"cannot {action} {self.name}")
        if self.needs_items():
            return Result(self.description)
        if self.has_items():
            return Result(f"You {action} the {self.name}", self.take_items())
        if self.name == ESCAPE_OBJECT:
            return Result(ESCAPE_MESSAGE)
        return Result("didn't find anything useful")

    def use_item(self, item: str) -> Result:
        """Try to unlock this object with ``item``.

        A single matching item clears every needed item at once.
        """
        if not self.is_item_needed(item):
            return Result(f"Could not use {item} on {self.name}")
        self.remove_needed_items()
        return Result(f" Used {item} -> {self.name}")


@dataclass
class Room:
    """An ordered collection of RoomObjects."""

    objects: list[RoomObject] = field(default_factory=list)

    def get_object(self, name: str) -> RoomObject | None:
        """Find an object by name, ignoring case. First match wins."""
        name = name.lower()
        for obj in self.objects:
            if obj.name.lower() == name:
                return obj
        return None

    def object_names(self) -> list[str]:
        return [obj.name for obj in self.objects]
