"""Host input signals (resize, pointer) queued until the next frame."""
from __future__ import annotations

from typing import Any, Callable, Iterable

Listener = Callable[[str, dict[str, Any]], None]

RESIZE = "resize"
POINTER_MOVE = "pointer_move"
POINTER_LEAVE = "pointer_leave"

# Payload keys a host must supply for each built-in signal.
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    RESIZE: ("width", "height"),
    POINTER_MOVE: ("x", "y"),
    POINTER_LEAVE: (),
}


class EventBus:
    """Queues host signals and hands them to listeners once per frame.

    Signals named in ``coalesce`` keep only their most recent emission per
    frame: a window drag that fires a dozen resize events causes a single
    rebuild. The surviving emission takes the queue position of the latest
    one. Every other signal is delivered in arrival order, so pointer-move
    samples all survive.
    """

    def __init__(self, coalesce: Iterable[str] = (RESIZE,)) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._pending: list[tuple[str, dict[str, Any]]] = []
        self._coalesce = frozenset(coalesce)

    @property
    def coalesced(self) -> frozenset[str]:
        return self._coalesce

    @property
    def pending(self) -> int:
        return len(self._pending)

    def listen(self, signal: str, listener: Listener) -> None:
        self._listeners.setdefault(signal, []).append(listener)

    def unlisten(self, signal: str, listener: Listener) -> None:
        group = self._listeners.get(signal)
        if group is None or listener not in group:
            return
        group.remove(listener)
        if not group:
            del self._listeners[signal]

    def listener_count(self, signal: str | None = None) -> int:
        if signal is not None:
            return len(self._listeners.get(signal, ()))
        return sum(len(group) for group in self._listeners.values())

    def emit(self, signal: str, **payload: Any) -> None:
        missing = [key for key in REQUIRED_FIELDS.get(signal, ()) if key not in payload]
        if missing:
            raise ValueError(f"{signal} signal is missing {', '.join(missing)}")
        if signal in self._coalesce:
            self._pending = [entry for entry in self._pending if entry[0] != signal]
        self._pending.append((signal, payload))

    def flush(self) -> int:
        """Deliver the signals queued before this call; returns how many."""
        batch, self._pending = self._pending, []
        for signal, payload in batch:
            for listener in tuple(self._listeners.get(signal, ())):
                listener(signal, payload)
        return len(batch)

    def clear(self) -> None:
        self._pending.clear()
