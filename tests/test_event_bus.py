import pytest

from brickgame.events.bus import Event, EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, event):
        received.update(event.data)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_handlers_run_in_registration_order():
    bus = EventBus()
    calls = []
    bus.subscribe("ping", lambda sender, event: calls.append("first"))
    bus.subscribe("ping", lambda sender, event: calls.append("second"))
    bus.emit("ping")
    assert calls == ["first", "second"]


def test_subscribe_once_runs_a_single_time():
    bus = EventBus()
    calls = []

    def handler(sender, event):
        calls.append(event.data["n"])

    bus.subscribe_once("ping", handler)
    bus.emit("ping", n=1)
    bus.emit("ping", n=2)
    assert calls == [1]
    assert not bus.has_subscribers("ping")


def test_unsubscribe_matches_bound_methods_and_once_wrappers():
    bus = EventBus()

    class Listener:
        def __init__(self):
            self.count = 0

        def on_ping(self, sender, event):
            self.count += 1

    listener = Listener()
    bus.subscribe("ping", listener.on_ping)
    bus.unsubscribe("ping", listener.on_ping)
    bus.emit("ping")
    assert listener.count == 0

    bus.subscribe_once("ping", listener.on_ping)
    bus.unsubscribe("ping", listener.on_ping)
    bus.emit("ping")
    assert listener.count == 0


def test_unsubscribe_all_and_unknown_names():
    bus = EventBus()
    calls = []
    bus.subscribe("ping", lambda sender, event: calls.append(1))
    bus.unsubscribe_all("ping")
    bus.unsubscribe("never_registered", print)
    bus.emit("ping")
    assert calls == []


def test_stop_propagation_skips_later_handlers():
    bus = EventBus()
    calls = []

    def first(sender, event):
        calls.append("first")
        event.stop_propagation()

    bus.subscribe("ping", first)
    bus.subscribe("ping", lambda sender, event: calls.append("second"))
    event = bus.emit("ping")
    assert calls == ["first"]
    assert event.propagation_stopped


def test_nested_publish_completes_before_outer_continues():
    bus = EventBus()
    calls = []

    def outer_first(sender, event):
        calls.append("outer-1")
        bus.emit("inner")

    bus.subscribe("outer", outer_first)
    bus.subscribe("outer", lambda sender, event: calls.append("outer-2"))
    bus.subscribe("inner", lambda sender, event: calls.append("inner"))
    bus.emit("outer")
    assert calls == ["outer-1", "inner", "outer-2"]


def test_handler_removed_mid_dispatch_is_skipped():
    bus = EventBus()
    calls = []

    def second(sender, event):
        calls.append("second")

    def first(sender, event):
        calls.append("first")
        bus.unsubscribe("ping", second)

    bus.subscribe("ping", first)
    bus.subscribe("ping", second)
    bus.emit("ping")
    assert calls == ["first"]


def test_handler_added_mid_dispatch_runs_next_time():
    bus = EventBus()
    calls = []

    def late(sender, event):
        calls.append("late")

    def first(sender, event):
        calls.append("first")
        if not bus.has_subscribers("done"):
            bus.subscribe("done", late)
            bus.subscribe("ping", late)

    bus.subscribe("ping", first)
    bus.emit("ping")
    assert calls == ["first"]
    bus.emit("ping")
    assert calls == ["first", "first", "late"]


def test_event_data_is_sealed_after_dispatch():
    event = Event("ping", {"a": 1})
    event.add_data("b", 2)
    assert dict(event.data) == {"a": 1, "b": 2}
    with pytest.raises(TypeError):
        event.data["c"] = 3  # type: ignore[index]

    EventBus().publish(event)
    assert event.dispatched
    with pytest.raises(RuntimeError):
        event.add_data("c", 3)


def test_event_requires_a_type():
    with pytest.raises(TypeError):
        Event("")
