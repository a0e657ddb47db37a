"""Public gesture event types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any

from gridkit.api.geometry import PixelPosition, PixelRect
from gridkit.api.nodes import ItemNode


class ResizeHandle(StrEnum):
    """Compass token of the dragged resize handle."""

    N = "n"
    S = "s"
    E = "e"
    W = "w"
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"


class EdgeMotion(Enum):
    """Which edge of one axis follows the pointer."""

    NONE = "none"
    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class HandleAxes:
    """Per-axis edge motion for one resize handle."""

    horizontal: EdgeMotion
    vertical: EdgeMotion


HANDLE_AXES: dict[ResizeHandle, HandleAxes] = {
    ResizeHandle.N: HandleAxes(EdgeMotion.NONE, EdgeMotion.START),
    ResizeHandle.S: HandleAxes(EdgeMotion.NONE, EdgeMotion.END),
    ResizeHandle.E: HandleAxes(EdgeMotion.END, EdgeMotion.NONE),
    ResizeHandle.W: HandleAxes(EdgeMotion.START, EdgeMotion.NONE),
    ResizeHandle.NE: HandleAxes(EdgeMotion.END, EdgeMotion.START),
    ResizeHandle.NW: HandleAxes(EdgeMotion.START, EdgeMotion.START),
    ResizeHandle.SE: HandleAxes(EdgeMotion.END, EdgeMotion.END),
    ResizeHandle.SW: HandleAxes(EdgeMotion.START, EdgeMotion.END),
}

_NO_HANDLE = HandleAxes(EdgeMotion.NONE, EdgeMotion.NONE)


def handle_axes(handle: ResizeHandle | str | None) -> HandleAxes:
    """Return edge motion for a handle token; ``None`` moves no edge."""
    if handle is None:
        return _NO_HANDLE
    return HANDLE_AXES[ResizeHandle(str(handle).strip().lower())]


@dataclass(frozen=True, slots=True)
class DroppingPosition:
    """Pixel position of an external drag hovering the grid."""

    left: float
    top: float
    event: Any = None

    def same_place(self, other: DroppingPosition | None) -> bool:
        """Return whether ``other`` sits at the same pixel position."""
        if other is None:
            return False
        return self.left == other.left and self.top == other.top


@dataclass(frozen=True, slots=True)
class GridDragEvent:
    """Payload of drag notifications."""

    event: Any
    node: ItemNode | None
    new_position: PixelPosition


@dataclass(frozen=True, slots=True)
class GridResizeEvent:
    """Payload of resize notifications."""

    event: Any
    node: ItemNode | None
    size: PixelRect
    handle: ResizeHandle


DragCallback = Callable[[str, int, int, GridDragEvent], object]
ResizeCallback = Callable[[str, int, int, GridResizeEvent], object]


@dataclass(frozen=True, slots=True)
class GridItemCallbacks:
    """Host notification slots; any slot may be left empty."""

    on_drag_start: DragCallback | None = None
    on_drag: DragCallback | None = None
    on_drag_stop: DragCallback | None = None
    on_resize_start: ResizeCallback | None = None
    on_resize: ResizeCallback | None = None
    on_resize_stop: ResizeCallback | None = None


__all__ = [
    "DragCallback",
    "DroppingPosition",
    "EdgeMotion",
    "GridDragEvent",
    "GridItemCallbacks",
    "GridResizeEvent",
    "HANDLE_AXES",
    "HandleAxes",
    "ResizeCallback",
    "ResizeHandle",
    "handle_axes",
]
