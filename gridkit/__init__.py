"""Grid item interaction runtime: pixel/grid transforms and gesture state."""

from gridkit.api import (
    DroppingPosition,
    GridDragEvent,
    GridItemCallbacks,
    GridItemSpec,
    GridParameters,
    GridResizeEvent,
    PixelPosition,
    PixelRect,
    PixelSize,
    ResizeHandle,
)
from gridkit.input import GridItemController, GridItemRegistry
from gridkit.runtime.errors import GestureError, InvalidGestureSequenceError

__version__ = "0.1.0"

__all__ = [
    "DroppingPosition",
    "GestureError",
    "GridDragEvent",
    "GridItemCallbacks",
    "GridItemController",
    "GridItemRegistry",
    "GridItemSpec",
    "GridParameters",
    "GridResizeEvent",
    "InvalidGestureSequenceError",
    "PixelPosition",
    "PixelRect",
    "PixelSize",
    "ResizeHandle",
]
