"""FrameScheduler - per-frame driver, input wiring, and teardown."""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from typing import Any, Callable

from lumen.bus import POINTER_LEAVE, POINTER_MOVE, RESIZE, EventBus, Listener
from lumen.canvas import Canvas
from lumen.clock import MAX_FRAME_DELTA, FrameClock
from lumen.types import Cursor, Simulator
from lumen.viewport import Viewport

logger = logging.getLogger(__name__)

# A pointer counts as moving for this long after its last move sample.
MOVE_WINDOW = 0.1

ResizeHook = Callable[[Viewport], None]


@dataclass(eq=False)
class Mount:
    simulator: Simulator
    canvas: Canvas
    active: bool = True
    built_for: int = -1


class FrameScheduler:
    def __init__(
        self,
        viewport: Viewport,
        bus: EventBus,
        seed: int | None = None,
        max_delta: float = MAX_FRAME_DELTA,
    ) -> None:
        self._viewport = viewport
        self._bus = bus
        self._clock = FrameClock(max_delta)
        self._mounts: list[Mount] = []
        self._resize_hooks: list[ResizeHook] = []
        self._listeners: list[tuple[str, Listener]] = []
        self._session: object | None = None

        self._pointer = (0.0, 0.0)
        self._pointer_active = False
        self._last_move = float("-inf")
        self._moves: list[tuple[float, float]] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def running(self) -> bool:
        return self._session is not None

    @property
    def mounts(self) -> tuple[Mount, ...]:
        return tuple(self._mounts)

    @property
    def cursor(self) -> Cursor:
        x, y = self._pointer
        moving = (
            self._pointer_active
            and self._clock.elapsed - self._last_move <= MOVE_WINDOW
        )
        return Cursor(
            x=x,
            y=y,
            active=self._pointer_active,
            moving=moving,
            moves=tuple(self._moves),
        )

    # -- Registration --

    def mount(self, simulator: Simulator, canvas: Canvas) -> Mount:
        handle = Mount(simulator, canvas)
        self._mounts.append(handle)
        if self.running:
            self._build(handle)
        return handle

    def unmount(self, handle: Mount) -> None:
        handle.active = False
        try:
            self._mounts.remove(handle)
        except ValueError:
            return
        handle.canvas.clear()

    def on_resize(self, hook: ResizeHook) -> None:
        """Register a one-shot painter run on start and after every resize."""
        self._resize_hooks.append(hook)
        if self.running and not self._viewport.is_degenerate:
            hook(self._viewport)

    # -- Lifecycle --

    def start(self) -> None:
        if self._session is not None:
            return
        session = object()
        self._session = session

        def on_resize(signal: str, payload: dict[str, Any]) -> None:
            if self._session is not session:
                return
            self._viewport.resize(
                payload["width"], payload["height"], payload.get("dpr")
            )
            self.rebuild()

        def on_pointer_move(signal: str, payload: dict[str, Any]) -> None:
            if self._session is not session:
                return
            self._pointer = (float(payload["x"]), float(payload["y"]))
            self._pointer_active = True
            self._last_move = self._clock.elapsed
            self._moves.append(self._pointer)

        def on_pointer_leave(signal: str, payload: dict[str, Any]) -> None:
            if self._session is not session:
                return
            self._pointer_active = False

        self._listeners = [
            (RESIZE, on_resize),
            (POINTER_MOVE, on_pointer_move),
            (POINTER_LEAVE, on_pointer_leave),
        ]
        for signal, listener in self._listeners:
            self._bus.listen(signal, listener)

        self._clock.reset()
        self.rebuild()
        logger.info(
            "scheduler started with %d simulator(s), seed %d",
            len(self._mounts), self._seed,
        )

    def stop(self) -> None:
        """Tear down: drop listeners, mounts and pending signals in one pass."""
        if self._session is None:
            return
        self._session = None
        for signal, listener in self._listeners:
            self._bus.unlisten(signal, listener)
        self._listeners = []
        self._bus.clear()
        for handle in self._mounts:
            handle.active = False
        self._mounts.clear()
        self._moves.clear()
        logger.info("scheduler stopped after %d frame(s)", self._clock.frame_number)

    def rebuild(self) -> None:
        """Full re-initialization of every painter and simulator population."""
        if self._viewport.is_degenerate:
            logger.debug("skipping rebuild for degenerate viewport %s", self._viewport.size)
            return
        for hook in self._resize_hooks:
            hook(self._viewport)
        for handle in self._mounts:
            self._build(handle)

    def _build(self, handle: Mount) -> None:
        if self._viewport.is_degenerate:
            return
        if not handle.canvas.available:
            logger.warning(
                "%s has no drawing surface; it will step without drawing",
                type(handle.simulator).__name__,
            )
        handle.simulator.init(self._viewport.size, self._rng)
        handle.built_for = self._viewport.generation

    # -- Per frame --

    def frame(self, now: float) -> bool:
        """Run one frame at timestamp ``now`` (seconds). False once stopped."""
        if self._session is None:
            return False
        self._bus.flush()
        if self._session is None:
            return False

        self._clock.advance(now)
        if self._viewport.is_degenerate:
            self._moves.clear()
            return True

        ctx = self._clock.context(self._rng)
        cursor = self.cursor

        cleared: set[int] = set()
        for handle in self._mounts:
            if id(handle.canvas) not in cleared:
                handle.canvas.clear()
                cleared.add(id(handle.canvas))

        for handle in list(self._mounts):
            if not handle.active:
                continue
            if handle.built_for != self._viewport.generation:
                self._build(handle)
            handle.simulator.tick(ctx, cursor)
            handle.simulator.draw(handle.canvas)

        self._moves.clear()
        return True
