"""Parse the room data file into Room objects.

The file is TOML with one ``[[rooms]]`` table per room, each holding an
array of ``[[rooms.objects]]`` tables. Rooms are played in file order.
"""

import tomllib
from pathlib import Path
from typing import Any

from .world import Room, RoomObject

_OBJECT_KEYS = {"name", "description", "items", "needed_items", "actions"}
_DEFAULT_ACTIONS = ("open",)


class RoomDataError(ValueError):
    """The room data file is malformed."""


def _string_list(fields: dict[str, Any], key: str, where: str) -> list[str]:
    value = fields.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RoomDataError(f"{where}: {key!r} must be a list of strings")
    return list(value)


def _parse_object(fields: Any, where: str) -> RoomObject:
    """One ``[[rooms.objects]]`` table."""
    if not isinstance(fields, dict):
        raise RoomDataError(f"{where}: must be a table")

    unknown = set(fields) - _OBJECT_KEYS
    if unknown:
        raise RoomDataError(f"{where}: unknown keys {sorted(unknown)}")

    name = fields.get("name")
    if not isinstance(name, str) or not name:
        raise RoomDataError(f"{where}: missing 'name'")

    actions = _string_list(fields, "actions", where) or list(_DEFAULT_ACTIONS)
    return RoomObject(
        name=name,
        description=str(fields.get("description", "")),
        items=_string_list(fields, "items", where),
        needed_items=_string_list(fields, "needed_items", where),
        actions=frozenset(action.lower() for action in actions),
    )


def _parse_room(fields: Any, room_n: int) -> Room:
    if not isinstance(fields, dict):
        raise RoomDataError(f"room {room_n}: must be a table")

    objects = fields.get("objects", [])
    if not isinstance(objects, list):
        raise RoomDataError(f"room {room_n}: 'objects' must be an array of tables")

    return Room(
        objects=[
            _parse_object(obj, f"room {room_n}, object {obj_n}")
            for obj_n, obj in enumerate(objects, start=1)
        ]
    )


def load_rooms(data_path: Path) -> list[Room]:
    """Parse the room file and return fresh Rooms in play order.

    Raises RoomDataError when the file is not valid TOML or does not have
    the expected shape.
    """
    with data_path.open("rb") as fh:
        try:
            data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise RoomDataError(f"{data_path}: {exc}") from exc

    rooms_data = data.get("rooms", [])
    if not isinstance(rooms_data, list):
        raise RoomDataError(f"{data_path}: 'rooms' must be an array of tables")

    try:
        rooms = [
            _parse_room(fields, room_n)
            for room_n, fields in enumerate(rooms_data, start=1)
        ]
    except RoomDataError as exc:
        raise RoomDataError(f"{data_path}: {exc}") from exc

    if not rooms:
        raise RoomDataError(f"{data_path}: no rooms defined")
    return rooms
