"""Tests for InputManager"""

import pytest

from inputio.errors import InputTypeError, ValidationError
from inputio.input.input_history import HistoryTracker
from inputio.input.input_manager import InputManager
from inputio.input.input_map import MappingTable


@pytest.fixture
def manager(keys, clock):
    manager = InputManager(keys, history=HistoryTracker(clock))
    manager.mapping.add(
        {"action": "up", "keys": ["w", "up"]},
        {"action": "fire", "keys": ["space"], "buttons": ["left"]},
        {"action": "run", "keys": ["shift"]},
    )
    return manager


def press(manager, key):
    return manager.on_key_event(key, manager.keys.ACTION_PRESS, 0)


def release(manager, key):
    return manager.on_key_event(key, manager.keys.ACTION_RELEASE, 0)


def test_manager_initialization(keys):
    """Manager creates its own table and tracker"""
    manager = InputManager(keys)
    assert isinstance(manager.mapping, MappingTable)
    assert isinstance(manager.history, HistoryTracker)
    assert manager.prevent_default == "action"


def test_key_translation(manager, keys):
    """Backend keys translate to key codes"""
    assert manager.key_code_for(keys.W) == "KeyW"
    assert manager.key_code_for(keys.LEFT_SHIFT) == "ShiftLeft"
    assert manager.key_code_for(12345) is None


def test_button_translation():
    """moderngl_window buttons translate to button codes"""
    assert InputManager.button_code_for(1) == 0
    assert InputManager.button_code_for(2) == 2
    assert InputManager.button_code_for(3) == 1
    assert InputManager.button_code_for(4) == 3
    assert InputManager.button_code_for(15) == 14
    assert InputManager.button_code_for(16) is None
    assert InputManager.button_code_for(0) is None


def test_key_press_activates_action(manager, keys, clock):
    """Pressing a bound key activates its action"""
    press(manager, keys.W)

    assert manager.is_key_down("w")
    assert manager.is_action_active("up")
    clock.advance(300)
    assert manager.action_duration("up") == 300

    release(manager, keys.W)
    assert not manager.is_key_down("w")
    assert not manager.is_action_active("up")


def test_action_or_reduction_through_events(manager, keys, clock):
    """w, up, release w, release up: the action flips only twice"""
    press(manager, keys.W)
    clock.advance(10)
    press(manager, keys.UP)
    clock.advance(10)
    release(manager, keys.W)
    assert manager.is_action_active("up")
    clock.advance(10)
    release(manager, keys.UP)

    history = manager.action_history("up")
    assert [(r.state, r.start) for r in history.records] == [(False, 30), (True, 0)]


def test_shared_name_keys(manager, keys):
    """Either shift key drives an action bound to 'shift'"""
    press(manager, keys.RIGHT_SHIFT)
    assert manager.is_action_active("run")
    assert manager.is_key_down("shift")
    assert not manager.is_key_down("left shift")

    press(manager, keys.LEFT_SHIFT)
    release(manager, keys.RIGHT_SHIFT)
    assert manager.is_action_active("run")
    release(manager, keys.LEFT_SHIFT)
    assert not manager.is_action_active("run")


def test_mouse_and_key_share_action(manager, keys):
    """A button and a key feed the same action"""
    manager.on_mouse_press_event(10, 20, 1)
    assert manager.is_button_down("left")
    assert manager.is_action_active("fire")

    press(manager, keys.SPACE)
    manager.on_mouse_release_event(10, 20, 1)
    assert manager.is_action_active("fire")

    release(manager, keys.SPACE)
    assert not manager.is_action_active("fire")
    assert len(manager.action_history("fire").records) == 2


def test_repeat_and_unknown_events_are_ignored(manager, keys):
    """Key repeats and unknown keys record nothing"""
    assert manager.on_key_event(keys.W, keys.ACTION_REPEAT, 0) is False
    assert not manager.is_action_active("up")

    assert press(manager, 12345) is False
    assert manager.on_mouse_press_event(0, 0, 42) is False


def test_unbound_keys_still_tracked(manager, keys):
    """Raw histories exist for keys without actions"""
    press(manager, keys.A)
    assert manager.is_key_down("a")
    assert manager.mapping.get_actions(keys=["a"]) == set()


def test_prevent_default_action(manager, keys):
    """'action' consumes only events for bound inputs"""
    assert press(manager, keys.W) is True
    assert release(manager, keys.W) is True
    assert press(manager, keys.A) is False
    assert manager.on_mouse_press_event(0, 0, 1) is True
    assert manager.on_mouse_press_event(0, 0, 2) is False


def test_prevent_default_all_and_none(manager, keys):
    """'all' consumes everything, 'none' nothing"""
    manager.prevent_default = "all"
    assert press(manager, keys.A) is True
    assert press(manager, 12345) is True
    assert manager.on_mouse_press_event(0, 0, 3) is True

    manager.prevent_default = "none"
    assert press(manager, keys.W) is False
    assert manager.on_mouse_press_event(0, 0, 1) is False


def test_prevent_default_validation(manager):
    """Invalid prevent_default values raise"""
    with pytest.raises(InputTypeError):
        manager.prevent_default = 1
    with pytest.raises(ValidationError):
        manager.prevent_default = "some"
    assert manager.prevent_default == "action"


def test_prevent_default_constructor_validation(keys):
    """The constructor validates prevent_default"""
    with pytest.raises(ValidationError):
        InputManager(keys, prevent_default="sometimes")


def test_remapping_applies_to_new_events(manager, keys):
    """After set(), the old key no longer drives the action"""
    manager.mapping.set({"action": "up", "keys": ["up"]})

    press(manager, keys.W)
    assert not manager.is_action_active("up")
    press(manager, keys.UP)
    assert manager.is_action_active("up")


def test_query_unknown_names(manager):
    """Queries with unknown names raise ValidationError"""
    with pytest.raises(ValidationError):
        manager.is_key_down("hyperspace")
    with pytest.raises(ValidationError):
        manager.is_button_down("thumb")


def test_injected_empty_table_is_kept(keys, clock):
    """An empty table passed in is used, and later mappings on it apply"""
    table = MappingTable()
    tracker = HistoryTracker(clock)
    manager = InputManager(keys, mapping=table, history=tracker)
    assert manager.mapping is table
    assert manager.history is tracker

    table.add({"action": "up", "keys": ["w"]})
    assert press(manager, keys.W) is True
    assert manager.is_action_active("up")
    assert tracker.history_for_action("up").current_state is True
