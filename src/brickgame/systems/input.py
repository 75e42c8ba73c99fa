from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping

from brickgame.constants import (
    ACTION_MOVE,
    ACTION_ROTATE_RIGHT,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
)
from brickgame.events.bus import EVENT_CONTROLS, EVENT_KEY_PRESS, Event, EventBus


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Keyboard key mapped to the coordinates of a controls intent."""
    key: int
    coords: Mapping[str, Any] = field(default_factory=dict)


DEFAULT_KEY_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(KEY_LEFT, {"action": ACTION_MOVE, "offset_x": -1, "offset_y": 0}),
    KeyBinding(KEY_RIGHT, {"action": ACTION_MOVE, "offset_x": 1, "offset_y": 0}),
    KeyBinding(KEY_DOWN, {"action": ACTION_MOVE, "offset_x": 0, "offset_y": 1}),
    KeyBinding(KEY_SPACE, {"action": ACTION_ROTATE_RIGHT}),
)


class InputSystem:
    """Translates key presses into user-originated controls events."""

    def __init__(self, event_bus: EventBus, bindings: Iterable[KeyBinding] = DEFAULT_KEY_BINDINGS):
        self.event_bus = event_bus
        self._bindings: Dict[int, KeyBinding] = {}
        for binding in bindings:
            self.register(binding)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def register(self, binding: KeyBinding) -> None:
        if binding.key in self._bindings:
            raise ValueError(f"Binding for key {binding.key} already exists")
        self._bindings[binding.key] = binding

    @property
    def bindings(self) -> Mapping[int, KeyBinding]:
        return dict(self._bindings)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        binding = self._bindings.get(symbol)
        if binding is None:
            return False
        self.event_bus.emit(EVENT_CONTROLS, coords=dict(binding.coords))
        return True

    def on_key_press(self, sender: Any, event: Event) -> None:
        symbol = event.data.get("symbol")
        if symbol is None:
            return
        self.handle_key_press(int(symbol), int(event.data.get("modifiers") or 0))
