"""Grid <-> pixel coordinate transform for grid items.

Pixel offsets are measured from the content origin of the grid: cell ``x``
starts at ``x * (column_width + margin_x)``. Container padding only narrows
the usable width when computing the column width.
"""

from __future__ import annotations

import math

from gridkit.api.geometry import (
    GridParameters,
    GridPoint,
    GridSpan,
    PixelPosition,
    PixelRect,
    PixelSize,
    ResizeConstraints,
)
from gridkit.api.gestures import EdgeMotion, ResizeHandle, handle_axes


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; ``lower`` wins if they cross."""
    return max(min(value, upper), lower)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up."""
    return math.floor(value + 0.5)


def column_width(params: GridParameters) -> float:
    """Return the pixel width of one column."""
    usable = params.container_width - params.margin_x * (params.cols - 1) - params.padding_x * 2
    return usable / params.cols


def grid_span_px(units: float, cell_size: float, margin: float) -> float:
    """Return the pixel extent of ``units`` cells separated by ``margin``.

    Infinite spans stay infinite so unbounded max constraints pass through.
    """
    if not math.isfinite(units):
        return units
    return max(0.0, units * cell_size + max(0.0, units - 1) * margin)


def grid_to_pixel(
    params: GridParameters,
    x: int,
    y: int,
    w: int,
    h: int,
    drag_position: PixelPosition | None = None,
    resize_box: PixelRect | PixelSize | None = None,
) -> PixelRect:
    """Return the pixel box of a grid rect, honoring live gesture overrides.

    A drag override replaces top/left. A resize override replaces width/height,
    and top/left too when it carries them and no drag override is present.
    """
    col_width = column_width(params)
    if resize_box is not None:
        width = float(resize_box.width)
        height = float(resize_box.height)
    else:
        width = grid_span_px(w, col_width, params.margin_x)
        height = grid_span_px(h, params.row_height, params.margin_y)

    if drag_position is not None:
        top = float(drag_position.top)
        left = float(drag_position.left)
    elif isinstance(resize_box, PixelRect):
        top = float(resize_box.top)
        left = float(resize_box.left)
    else:
        top = y * (params.row_height + params.margin_y)
        left = x * (col_width + params.margin_x)
    return PixelRect(top=top, left=left, width=width, height=height)


def pixel_to_grid(
    params: GridParameters,
    top: float,
    left: float,
    w: int,
    h: int,
    handle: ResizeHandle | str | None = None,
) -> GridPoint:
    """Return the nearest grid cell for a pixel offset.

    The result stays inside the grid for a ``w`` x ``h`` item. While a handle
    drags the start edge of an axis the span is provisional, so only the grid
    extent bounds that axis.
    """
    axes = handle_axes(handle)
    col_width = column_width(params)
    x = round_half_up(left / (col_width + params.margin_x))
    y = round_half_up(top / (params.row_height + params.margin_y))
    x_limit = params.cols if axes.horizontal is EdgeMotion.START else params.cols - w
    y_limit = params.max_rows if axes.vertical is EdgeMotion.START else params.max_rows - h
    return GridPoint(x=int(clamp(x, 0, x_limit)), y=int(clamp(y, 0, y_limit)))


def size_pixel_to_grid(
    params: GridParameters,
    width: float,
    height: float,
    x: int,
    y: int,
    handle: ResizeHandle | str | None = None,
) -> GridSpan:
    """Return the nearest grid span for a pixel size.

    End-edge resizes may not grow past the far side of the grid from ``x``/``y``.
    Start-edge resizes keep the far edge anchored and grow toward the origin,
    so they are bounded by the whole grid instead.
    """
    axes = handle_axes(handle)
    col_width = column_width(params)
    w = round_half_up((width + params.margin_x) / (col_width + params.margin_x))
    h = round_half_up((height + params.margin_y) / (params.row_height + params.margin_y))
    w_limit = params.cols if axes.horizontal is EdgeMotion.START else params.cols - x
    h_limit = params.max_rows if axes.vertical is EdgeMotion.START else params.max_rows - y
    return GridSpan(w=int(clamp(w, 0, w_limit)), h=int(clamp(h, 0, h_limit)))


def resize_constraints(
    params: GridParameters,
    min_w: float,
    min_h: float,
    max_w: float,
    max_h: float,
) -> ResizeConstraints:
    """Return pixel min/max sizes for the resize gesture layer.

    The max width never exceeds one full row of columns.
    """
    col_width = column_width(params)
    full_row = grid_span_px(params.cols, col_width, params.margin_x)
    return ResizeConstraints(
        min_size=PixelSize(
            width=grid_span_px(min_w, col_width, params.margin_x),
            height=grid_span_px(min_h, params.row_height, params.margin_y),
        ),
        max_size=PixelSize(
            width=min(grid_span_px(max_w, col_width, params.margin_x), full_row),
            height=grid_span_px(max_h, params.row_height, params.margin_y),
        ),
    )


__all__ = [
    "clamp",
    "column_width",
    "grid_span_px",
    "grid_to_pixel",
    "pixel_to_grid",
    "resize_constraints",
    "round_half_up",
    "size_pixel_to_grid",
]
