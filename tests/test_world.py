"""Tests for room objects and rooms."""

from escaperoom.engine.world import ESCAPE_MESSAGE, Result, Room, RoomObject


def _chest(**overrides) -> RoomObject:
    fields = dict(
        name="Chest",
        description="The chest is padlocked",
        items=["coin", "rope"],
        needed_items=["padlock key", "crowbar"],
        actions=frozenset({"open", "search"}),
    )
    fields.update(overrides)
    return RoomObject(**fields)


def test_result_empty_items_become_none():
    """A Result with no items carries None."""
    assert Result("nothing").items is None
    assert Result("nothing", []).items is None
    assert Result("found", ["a"]).items == ("a",)


def test_interact_action_not_permitted():
    """Unknown verbs are refused without side effects."""
    chest = _chest(needed_items=[])
    result = chest.interact("kick")
    assert result.description == "cannot kick Chest"
    assert result.items is None
    assert chest.items == ["coin", "rope"]


def test_interact_locked_returns_description():
    """A locked object answers every permitted action with its description."""
    chest = _chest()
    for action in ("open", "search"):
        result = chest.interact(action)
        assert result.description == "The chest is padlocked"
        assert result.items is None
    assert chest.items == ["coin", "rope"]


def test_interact_yields_items_once():
    """Items are handed over on the first interaction only."""
    chest = _chest(needed_items=[])
    first = chest.interact("search")
    assert first.description == "You search the Chest"
    assert first.items == ("coin", "rope")
    assert not chest.has_items()

    second = chest.interact("open")
    assert second.description == "didn't find anything useful"
    assert second.items is None


def test_take_items_replaces_list():
    """take_items hands over the live list and leaves a new empty one."""
    chest = _chest()
    original = chest.items
    taken = chest.take_items()
    assert taken is original
    assert chest.items == []
    assert chest.items is not original


def test_door_escapes_when_open_and_empty():
    """The Door yields the escape message once unlocked and empty."""
    door = RoomObject("Door", "Locked tight", needed_items=[])
    assert door.interact("open").description == ESCAPE_MESSAGE


def test_escape_only_for_exact_door_name():
    """Only an object named exactly "Door" lets the player escape."""
    door = RoomObject("door", "Locked tight")
    assert door.interact("open").description == "didn't find anything useful"


def test_use_wrong_item():
    """Using an item that isn't needed changes nothing."""
    chest = _chest()
    result = chest.use_item("coin")
    assert result.description == "Could not use coin on Chest"
    assert chest.needs_items()


def test_use_item_clears_all_needed_items():
    """One matching item unlocks the object completely."""
    chest = _chest()
    result = chest.use_item("crowbar")
    assert result.description == " Used crowbar -> Chest"
    assert not chest.needs_items()
    assert not chest.is_item_needed("padlock key")
    assert not chest.is_item_needed("crowbar")


def test_use_item_does_not_hand_over_items():
    """Unlocking needs a follow-up action to collect the contents."""
    chest = _chest()
    result = chest.use_item("crowbar")
    assert result.items is None
    assert chest.items == ["coin", "rope"]


def test_is_item_needed_is_case_sensitive():
    chest = _chest()
    assert chest.is_item_needed("crowbar")
    assert not chest.is_item_needed("Crowbar")


def test_room_get_object_ignores_case():
    """Object lookup ignores case."""
    door = RoomObject("Door", "")
    room = Room([door, RoomObject("Bag", "")])
    assert room.get_object("DOOR") is door
    assert room.get_object("door") is door
    assert room.get_object("Door") is door
    assert room.get_object("window") is None


def test_room_get_object_first_match_wins():
    first = RoomObject("Box", "first")
    second = RoomObject("box", "second")
    room = Room([first, second])
    assert room.get_object("BOX") is first


def test_room_object_names_in_order():
    room = Room([RoomObject("Door", ""), RoomObject("Drawer", ""), RoomObject("Bag", "")])
    assert room.object_names() == ["Door", "Drawer", "Bag"]
