"""Drag gesture accumulator for one grid item."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridkit.api.geometry import GridParameters, PixelPosition
from gridkit.api.items import GridItemSpec
from gridkit.api.nodes import ItemNode
from gridkit.runtime.errors import InvalidGestureSequenceError
from gridkit.ui_runtime.grid_transform import clamp, column_width, grid_span_px, pixel_to_grid

logger = logging.getLogger(__name__)

_ORIGIN = PixelPosition(top=0.0, left=0.0)


@dataclass(frozen=True, slots=True)
class DragUpdate:
    """Grid cell and pixel position reported for one drag event."""

    x: int
    y: int
    position: PixelPosition


def node_offset(node: ItemNode | None, transform_scale: float = 1.0) -> PixelPosition | None:
    """Return the node's rendered offset inside its positioned ancestor.

    Viewport rects are divided by ``transform_scale`` and the ancestor's scroll
    offset is added back. ``None`` when the node is detached.
    """
    if node is None:
        return None
    parent = node.offset_parent
    if parent is None:
        return None
    parent_rect = parent.bounding_client_rect()
    client_rect = node.bounding_client_rect()
    left = client_rect.left / transform_scale - parent_rect.left / transform_scale
    top = client_rect.top / transform_scale - parent_rect.top / transform_scale
    return PixelPosition(
        top=top + float(parent.scroll_top),
        left=left + float(parent.scroll_left),
    )


class DragAccumulator:
    """Track the pixel position of one item across a drag gesture."""

    def __init__(self) -> None:
        self._dragging = False
        self._position = _ORIGIN

    @property
    def dragging(self) -> bool:
        return self._dragging

    @property
    def position(self) -> PixelPosition:
        return self._position

    def start(
        self,
        node: ItemNode | None,
        *,
        params: GridParameters,
        item: GridItemSpec,
        transform_scale: float = 1.0,
    ) -> DragUpdate | None:
        """Begin a drag at the node's rendered offset.

        Returns ``None`` without touching state when the node has no
        positioned ancestor.
        """
        if self._dragging:
            raise InvalidGestureSequenceError(item.item_id, "start", "drag started while already dragging")
        position = node_offset(node, transform_scale)
        if position is None:
            logger.debug("drag_start_skipped item=%s reason=no_positioned_ancestor", item.item_id)
            return None
        self._position = position
        self._dragging = True
        return self._update(params, item)

    def move(
        self,
        node: ItemNode | None,
        delta_x: float,
        delta_y: float,
        *,
        params: GridParameters,
        item: GridItemSpec,
        bounded: bool = False,
    ) -> DragUpdate:
        """Advance the running position by a pointer delta.

        Bounded moves subtract the container padding from the accumulated
        position on every call, so repeated zero-delta bounded moves walk the
        item toward the container origin by one padding each.
        """
        if not self._dragging:
            raise InvalidGestureSequenceError(item.item_id, "move", "drag move received before drag start")
        top = self._position.top + float(delta_y)
        left = self._position.left + float(delta_x)

        parent = node.offset_parent if node is not None else None
        if bounded and parent is not None:
            bottom_boundary = float(parent.client_height) - grid_span_px(
                item.h, params.row_height, params.margin_y
            )
            top = clamp(top - params.padding_y, 0.0, bottom_boundary)
            right_boundary = params.container_width - grid_span_px(
                item.w, column_width(params), params.margin_x
            )
            left = clamp(left - params.padding_x, 0.0, right_boundary)

        self._position = PixelPosition(top=top, left=left)
        return self._update(params, item)

    def stop(self, *, params: GridParameters, item: GridItemSpec) -> DragUpdate:
        """Finish the drag, reporting the last position, and reset."""
        if not self._dragging:
            raise InvalidGestureSequenceError(item.item_id, "stop", "drag stop received before drag start")
        update = self._update(params, item)
        self.reset()
        return update

    def reset(self) -> None:
        self._dragging = False
        self._position = _ORIGIN

    def _update(self, params: GridParameters, item: GridItemSpec) -> DragUpdate:
        point = pixel_to_grid(params, self._position.top, self._position.left, item.w, item.h)
        return DragUpdate(x=point.x, y=point.y, position=self._position)


__all__ = ["DragAccumulator", "DragUpdate", "node_offset"]
