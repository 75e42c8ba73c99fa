import pytest

from brickgame.constants import ACTION_MOVE, ACTION_ROTATE_RIGHT, KEY_DOWN, KEY_LEFT, KEY_SPACE
from brickgame.events.bus import EVENT_CONTROLS, EVENT_KEY_PRESS, EventBus
from brickgame.systems.input import InputSystem, KeyBinding
from tests.helpers import record

KEY_A = 97  # arcade.key.A, left unbound by default


def test_arrow_keys_emit_move_intents():
    bus = EventBus()
    InputSystem(bus)
    controls = record(bus, EVENT_CONTROLS)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_LEFT, modifiers=0)
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_DOWN, modifiers=0)

    assert controls[0].data["coords"] == {"action": ACTION_MOVE, "offset_x": -1, "offset_y": 0}
    assert controls[1].data["coords"] == {"action": ACTION_MOVE, "offset_x": 0, "offset_y": 1}
    assert not controls[0].data.get("auto")


def test_space_rotates_and_unbound_keys_are_ignored():
    bus = EventBus()
    system = InputSystem(bus)
    controls = record(bus, EVENT_CONTROLS)

    assert system.handle_key_press(KEY_SPACE)
    assert not system.handle_key_press(KEY_A)
    assert len(controls) == 1
    assert controls[0].data["coords"]["action"] == ACTION_ROTATE_RIGHT


def test_custom_bindings():
    bus = EventBus()
    system = InputSystem(bus, bindings=())
    system.register(KeyBinding(KEY_A, {"action": ACTION_ROTATE_RIGHT}))
    assert list(system.bindings) == [KEY_A]
    with pytest.raises(ValueError):
        system.register(KeyBinding(KEY_A, {"action": ACTION_MOVE}))
