"""Unit tests for EventBus."""
from __future__ import annotations

import pytest
from lumen.bus import POINTER_LEAVE, POINTER_MOVE, RESIZE, EventBus


def test_listen_and_flush():
    """Emitted signals are only delivered on flush."""
    bus = EventBus()
    received = []

    def listener(signal: str, payload: dict) -> None:
        received.append((signal, payload))

    bus.listen(RESIZE, listener)
    bus.emit(RESIZE, width=800, height=600)
    assert received == []

    assert bus.flush() == 1
    assert received == [(RESIZE, {"width": 800, "height": 600})]


def test_emit_without_listener_is_noop():
    bus = EventBus()
    bus.emit("nobody", value=1)
    assert bus.flush() == 1


def test_arrival_order_preserved():
    bus = EventBus()
    order = []
    bus.listen(POINTER_MOVE, lambda s, p: order.append(p["x"]))
    for x in (3, 1, 2):
        bus.emit(POINTER_MOVE, x=x, y=0)
    bus.flush()
    assert order == [3, 1, 2]


def test_unlisten_stops_delivery():
    bus = EventBus()
    received = []

    def listener(signal: str, payload: dict) -> None:
        received.append(payload)

    bus.listen(RESIZE, listener)
    bus.unlisten(RESIZE, listener)
    bus.emit(RESIZE, width=1, height=1)
    bus.flush()
    assert received == []
    assert bus.listener_count(RESIZE) == 0


def test_unlisten_unknown_listener_is_safe():
    bus = EventBus()
    bus.unlisten(RESIZE, lambda s, p: None)
    bus.listen(RESIZE, lambda s, p: None)
    bus.unlisten(RESIZE, lambda s, p: None)
    assert bus.listener_count(RESIZE) == 1


def test_listener_count_totals():
    bus = EventBus()
    bus.listen(RESIZE, lambda s, p: None)
    bus.listen(POINTER_MOVE, lambda s, p: None)
    bus.listen(POINTER_MOVE, lambda s, p: None)
    assert bus.listener_count() == 3
    assert bus.listener_count(POINTER_MOVE) == 2


def test_signals_emitted_during_flush_wait_for_next_flush():
    bus = EventBus()
    seen = []

    def relay(signal: str, payload: dict) -> None:
        seen.append(signal)
        bus.emit(POINTER_MOVE, x=0, y=0)

    bus.listen(RESIZE, relay)
    bus.listen(POINTER_MOVE, lambda s, p: seen.append(s))
    bus.emit(RESIZE, width=1, height=1)
    bus.flush()
    assert seen == [RESIZE]
    bus.flush()
    assert seen == [RESIZE, POINTER_MOVE]


def test_clear_drops_pending():
    bus = EventBus()
    received = []
    bus.listen(RESIZE, lambda s, p: received.append(p))
    bus.emit(RESIZE, width=1, height=1)
    bus.clear()
    assert bus.flush() == 0
    assert received == []


def test_resize_burst_keeps_only_latest():
    bus = EventBus()
    sizes = []
    bus.listen(RESIZE, lambda s, p: sizes.append((p["width"], p["height"])))
    for width in (100, 200, 300):
        bus.emit(RESIZE, width=width, height=50)
    assert bus.pending == 1
    assert bus.flush() == 1
    assert sizes == [(300, 50)]


def test_coalesced_signal_moves_to_latest_position():
    bus = EventBus()
    order = []
    bus.listen(RESIZE, lambda s, p: order.append(s))
    bus.listen(POINTER_MOVE, lambda s, p: order.append(s))
    bus.emit(RESIZE, width=1, height=1)
    bus.emit(POINTER_MOVE, x=0, y=0)
    bus.emit(RESIZE, width=2, height=2)
    bus.flush()
    assert order == [POINTER_MOVE, RESIZE]


def test_pointer_moves_are_never_coalesced():
    bus = EventBus()
    for x in range(5):
        bus.emit(POINTER_MOVE, x=x, y=0)
    assert POINTER_MOVE not in bus.coalesced
    assert bus.flush() == 5


def test_coalesce_set_is_configurable():
    bus = EventBus(coalesce=())
    bus.emit(RESIZE, width=1, height=1)
    bus.emit(RESIZE, width=2, height=2)
    assert bus.flush() == 2


@pytest.mark.parametrize(
    "signal,payload",
    [
        (RESIZE, {"width": 10}),
        (RESIZE, {}),
        (POINTER_MOVE, {"y": 3}),
    ],
)
def test_missing_payload_fields_raise(signal, payload):
    bus = EventBus()
    with pytest.raises(ValueError, match=signal):
        bus.emit(signal, **payload)
    assert bus.pending == 0


def test_pointer_leave_needs_no_payload():
    bus = EventBus()
    bus.emit(POINTER_LEAVE)
    assert bus.flush() == 1
