"""lumen - A small real-time engine for generative, cursor-reactive backdrops."""

from lumen.bus import EventBus
from lumen.canvas import Canvas
from lumen.clock import MAX_FRAME_DELTA, FrameClock, clamp_delta
from lumen.scheduler import FrameScheduler, Mount
from lumen.spatial import SpatialHash
from lumen.types import IDLE_CURSOR, Cursor, FrameContext, Simulator, Size, ViewportError
from lumen.viewport import Viewport

__all__ = [
    "Canvas",
    "Cursor",
    "EventBus",
    "FrameClock",
    "FrameContext",
    "FrameScheduler",
    "IDLE_CURSOR",
    "MAX_FRAME_DELTA",
    "Mount",
    "Simulator",
    "Size",
    "SpatialHash",
    "Viewport",
    "ViewportError",
    "clamp_delta",
]
