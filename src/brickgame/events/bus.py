from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from blinker import Signal


class Event:
    """A typed message with a data mapping that seals once dispatched."""

    __slots__ = ("_type", "_data", "_propagation_stopped", "_dispatched")

    def __init__(self, type: str, data: Mapping[str, Any] | None = None) -> None:
        if not type:
            raise TypeError("Event type must be provided")
        self._type = type
        self._data: Dict[str, Any] = dict(data or {})
        self._propagation_stopped = False
        self._dispatched = False

    @property
    def type(self) -> str:
        return self._type

    @property
    def data(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data)

    @property
    def dispatched(self) -> bool:
        return self._dispatched

    @property
    def propagation_stopped(self) -> bool:
        return self._propagation_stopped

    def add_data(self, key: str, value: Any) -> "Event":
        if self._dispatched:
            raise RuntimeError(f"Event '{self._type}' was already dispatched; its data is sealed")
        self._data[key] = value
        return self

    def stop_propagation(self) -> "Event":
        self._propagation_stopped = True
        return self

    def _seal(self) -> None:
        self._dispatched = True

    def __repr__(self) -> str:
        return f"Event({self._type!r}, {self._data!r})"


Handler = Callable[[Any, Event], None]


class EventBus:
    """Synchronous event bus leveraging blinker Signal objects.

    Handlers are called as ``handler(sender, event)`` in registration order.
    Publishing from inside a handler runs the nested dispatch to completion
    before the outer one continues. Each dispatch iterates a snapshot of the
    receivers: a handler removed mid-dispatch is skipped if it has not run yet,
    and a handler added mid-dispatch first runs on the next publish.
    """

    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Handler) -> Handler:
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)
        return fn

    def subscribe_once(self, name: str, fn: Handler) -> Handler:
        """Subscribe ``fn`` for a single invocation; returns the registered wrapper."""

        def once(sender: Any, event: Event) -> None:
            self.unsubscribe(name, once)
            fn(sender, event)

        once.__wrapped__ = fn  # type: ignore[attr-defined]
        return self.subscribe(name, once)

    def unsubscribe(self, name: str, fn: Handler) -> None:
        sig = self._signals.get(name)
        if sig is None:
            return
        for receiver in list(sig.receivers.values()):
            if receiver == fn or getattr(receiver, "__wrapped__", None) == fn:
                sig.disconnect(receiver)

    def unsubscribe_all(self, name: str) -> None:
        self._signals.pop(name, None)

    def has_subscribers(self, name: str) -> bool:
        sig = self._signals.get(name)
        return bool(sig and sig.receivers)

    def publish(self, event: Event) -> Event:
        event._seal()
        sig = self._signals.get(event.type)
        if sig is None:
            return event
        # Receivers are stored strongly (subscribe passes weak=False), so the
        # values here are the handlers themselves, never weakrefs.
        for receiver_id, receiver in list(sig.receivers.items()):
            if event.propagation_stopped:
                break
            if self._signals.get(event.type) is not sig or receiver_id not in sig.receivers:
                continue
            receiver(self, event)
        return event

    def emit(self, name: str, **payload: Any) -> Event:
        return self.publish(Event(name, payload))


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_CONTROLS = "controls_event"                  # payload: coords={action, offset_x, offset_y}, auto=bool


# ============================================================================
# MOVEMENT & COLLISIONS
# ============================================================================
EVENT_OUT_OF_BOUNDS = "out_of_bounds"              # payload: errors=frozenset[BoundsViolation]
EVENT_POSITION_CHANGED = "block_position_changed"  # payload: old_position=Fragment, new_position=Fragment
EVENT_BEFORE_RENDER = "pre_render_matrix"          # payload: grid=Grid (stage combined with the falling brick)
EVENT_NEW_FRAGMENT = "new_block_generated"         # payload: fragment=Fragment, grid=Grid, next_grid=Grid


# ============================================================================
# LOCKING & ROWS
# ============================================================================
EVENT_CYCLE_ENDED = "cycle_ended"                  # payload: fragment=Fragment
EVENT_BEFORE_CLEAR = "pre_update_matrix"           # payload: grid=Grid (stage with the brick merged in)
EVENT_ROWS_CLEARED = "full_lines_found"            # payload: count=int, rows=tuple[int, ...]


# ============================================================================
# SCORE & SPEED
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, score_history=tuple[int, ...]
EVENT_LEVEL_UPDATED = "level_updated"              # payload: speed=int, level=int, score=int
EVENT_SPEED_CHANGED = "update_speed"               # payload: speed=int, level=int, score=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: fragment=Fragment, score=int
