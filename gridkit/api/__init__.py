"""Public gridkit API contracts."""

from gridkit.api.geometry import (
    GridParameters,
    GridPoint,
    GridRect,
    GridSpan,
    PixelPosition,
    PixelRect,
    PixelSize,
    ResizeConstraints,
)
from gridkit.api.gestures import (
    DroppingPosition,
    EdgeMotion,
    GridDragEvent,
    GridItemCallbacks,
    GridResizeEvent,
    HandleAxes,
    ResizeHandle,
    handle_axes,
)
from gridkit.api.items import GridItemSpec
from gridkit.api.logging import JsonFormatter, LoggingConfig
from gridkit.api.nodes import ItemNode, NodeRect, PositionedAncestor, StaticAncestor, StaticNode

__all__ = [
    "DroppingPosition",
    "EdgeMotion",
    "GridDragEvent",
    "GridItemCallbacks",
    "GridItemSpec",
    "GridParameters",
    "GridPoint",
    "GridRect",
    "GridResizeEvent",
    "GridSpan",
    "HandleAxes",
    "ItemNode",
    "JsonFormatter",
    "LoggingConfig",
    "NodeRect",
    "PixelPosition",
    "PixelRect",
    "PixelSize",
    "PositionedAncestor",
    "ResizeConstraints",
    "ResizeHandle",
    "StaticAncestor",
    "StaticNode",
    "handle_axes",
]
