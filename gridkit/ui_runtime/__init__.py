"""Grid item coordinate transform and gesture state machines."""

from gridkit.ui_runtime.drag_state import DragAccumulator, DragUpdate, node_offset
from gridkit.ui_runtime.dropping import inject_dropping_position
from gridkit.ui_runtime.grid_transform import (
    clamp,
    column_width,
    grid_span_px,
    grid_to_pixel,
    pixel_to_grid,
    resize_constraints,
    size_pixel_to_grid,
)
from gridkit.ui_runtime.resize_direction import resolve_resize
from gridkit.ui_runtime.resize_state import ResizeAccumulator, ResizePhase, ResizeUpdate
from gridkit.ui_runtime.style import RenderMode, create_style, item_class_names

__all__ = [
    "DragAccumulator",
    "DragUpdate",
    "RenderMode",
    "ResizeAccumulator",
    "ResizePhase",
    "ResizeUpdate",
    "clamp",
    "column_width",
    "create_style",
    "grid_span_px",
    "grid_to_pixel",
    "inject_dropping_position",
    "item_class_names",
    "node_offset",
    "pixel_to_grid",
    "resize_constraints",
    "resolve_resize",
    "size_pixel_to_grid",
]
