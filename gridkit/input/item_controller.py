"""Per-item controller composing drag and resize gesture state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from gridkit.api.geometry import GridParameters, PixelPosition, PixelRect, PixelSize, ResizeConstraints
from gridkit.api.gestures import (
    DroppingPosition,
    GridDragEvent,
    GridItemCallbacks,
    GridResizeEvent,
    ResizeHandle,
)
from gridkit.api.items import GridItemSpec
from gridkit.api.nodes import ItemNode
from gridkit.runtime.config import RuntimeConfig, get_runtime_config
from gridkit.runtime.errors import GestureError, RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from gridkit.ui_runtime.drag_state import DragAccumulator, DragUpdate
from gridkit.ui_runtime.dropping import inject_dropping_position
from gridkit.ui_runtime.grid_transform import grid_to_pixel, resize_constraints
from gridkit.ui_runtime.resize_state import ResizeAccumulator, ResizePhase, ResizeUpdate
from gridkit.ui_runtime.style import RenderMode, create_style, item_class_names

logger = logging.getLogger(__name__)


class GridItemController:
    """Gesture controller for one grid item.

    Host props (item, grid parameters, callbacks) are replaced through
    :meth:`update` on every render; gesture state lives in the two
    accumulators and is dropped by :meth:`teardown`.
    """

    def __init__(
        self,
        item: GridItemSpec,
        params: GridParameters,
        callbacks: GridItemCallbacks | None = None,
        *,
        config: RuntimeConfig | None = None,
    ) -> None:
        self._item = item
        self._params = params
        self._callbacks = callbacks if callbacks is not None else GridItemCallbacks()
        self._config = config if config is not None else get_runtime_config()
        self._drag = DragAccumulator()
        self._resize = ResizeAccumulator()
        self._previous_dropping: DroppingPosition | None = None

    @property
    def item(self) -> GridItemSpec:
        return self._item

    @property
    def item_id(self) -> str:
        return self._item.item_id

    @property
    def params(self) -> GridParameters:
        return self._params

    @property
    def drag_state(self) -> DragAccumulator:
        return self._drag

    @property
    def resize_state(self) -> ResizeAccumulator:
        return self._resize

    @property
    def dragging(self) -> bool:
        return self._drag.dragging

    @property
    def drag_position(self) -> PixelPosition:
        return self._drag.position

    @property
    def resizing(self) -> bool:
        return self._resize.resizing

    @property
    def dropping(self) -> bool:
        return self._previous_dropping is not None

    @property
    def transform_scale(self) -> float:
        if self._item.transform_scale is not None:
            return float(self._item.transform_scale)
        return self._config.render.transform_scale

    @property
    def bounded(self) -> bool:
        if self._item.is_bounded is not None:
            return bool(self._item.is_bounded)
        return self._config.gesture.bounded_drag

    def update(
        self,
        *,
        item: GridItemSpec | None = None,
        params: GridParameters | None = None,
        callbacks: GridItemCallbacks | None = None,
    ) -> None:
        """Replace host-supplied props for the next gesture event or render."""
        if item is not None:
            if item.item_id != self._item.item_id:
                raise ValueError(f"controller for {self._item.item_id!r} cannot take item {item.item_id!r}")
            self._item = item
        if params is not None:
            self._params = params
        if callbacks is not None:
            self._callbacks = callbacks

    def pixel_rect(self) -> PixelRect:
        """Return the box to render, tracking any live gesture."""
        item = self._item
        return grid_to_pixel(
            self._params,
            item.x,
            item.y,
            item.w,
            item.h,
            self._drag.position if self._drag.dragging else None,
            self._resize.box,
        )

    def resize_constraints(self) -> ResizeConstraints:
        """Return pixel size limits for the resize gesture layer."""
        item = self._item
        return resize_constraints(self._params, item.min_w, item.min_h, item.max_w, item.max_h)

    def style(self, mode: RenderMode | str | None = None) -> dict[str, str]:
        """Return the position descriptor for the current box."""
        resolved = self._config.render.mode if mode is None else RenderMode(mode)
        return create_style(self.pixel_rect(), resolved, self._params.container_width)

    def class_names(self, mode: RenderMode | str | None = None) -> str:
        resolved = self._config.render.mode if mode is None else RenderMode(mode)
        return item_class_names(
            class_name=self._item.class_name,
            static=self._item.static,
            resizing=self.resizing,
            draggable=self._item.draggable,
            dragging=self.dragging,
            dropping=self.dropping,
            css_transforms=resolved is RenderMode.TRANSFORM,
        )

    def on_drag_start(self, event: Any, node: ItemNode | None) -> DragUpdate | None:
        """Handle a drag start from the gesture layer."""
        if not self._item.draggable:
            return None
        update = self._drag.start(
            node, params=self._params, item=self._item, transform_scale=self.transform_scale
        )
        if update is None:
            return None
        self._emit_drag("start", self._callbacks.on_drag_start, event, node, update)
        return update

    def on_drag(self, event: Any, node: ItemNode | None, delta_x: float, delta_y: float) -> DragUpdate:
        """Handle a drag move; raises if no drag is active."""
        update = self._drag.move(
            node, delta_x, delta_y, params=self._params, item=self._item, bounded=self.bounded
        )
        self._emit_drag("move", self._callbacks.on_drag, event, node, update)
        return update

    def on_drag_stop(self, event: Any, node: ItemNode | None) -> DragUpdate:
        """Handle a drag stop; raises if no drag is active."""
        update = self._drag.stop(params=self._params, item=self._item)
        self._emit_drag("stop", self._callbacks.on_drag_stop, event, node, update)
        return update

    def on_resize_start(
        self, event: Any, node: ItemNode | None, size: PixelSize, handle: ResizeHandle | str
    ) -> ResizeUpdate | None:
        return self._on_resize_event(ResizePhase.START, event, node, size, handle)

    def on_resize(
        self, event: Any, node: ItemNode | None, size: PixelSize, handle: ResizeHandle | str
    ) -> ResizeUpdate | None:
        return self._on_resize_event(ResizePhase.RESIZE, event, node, size, handle)

    def on_resize_stop(
        self, event: Any, node: ItemNode | None, size: PixelSize, handle: ResizeHandle | str
    ) -> ResizeUpdate | None:
        return self._on_resize_event(ResizePhase.STOP, event, node, size, handle)

    def sync_dropping_position(self, dropping: DroppingPosition | None, node: ItemNode | None) -> bool:
        """Feed this render's external dropping position into the drag pipeline."""
        previous = self._previous_dropping
        self._previous_dropping = dropping
        return inject_dropping_position(self, dropping, previous, node)

    def teardown(self) -> None:
        """Discard all gesture state."""
        if self._drag.dragging or self._resize.resizing:
            logger.debug(
                "gesture_discarded item=%s dragging=%s resizing=%s",
                self.item_id,
                self._drag.dragging,
                self._resize.resizing,
            )
        self._drag.reset()
        self._resize.reset()
        self._previous_dropping = None

    def _on_resize_event(
        self,
        phase: ResizePhase,
        event: Any,
        node: ItemNode | None,
        size: PixelSize,
        handle: ResizeHandle | str,
    ) -> ResizeUpdate | None:
        if not self._item.resizable and not self._resize.resizing:
            return None
        anchor = self.pixel_rect()
        update = self._resize.apply(phase, anchor, size, handle, params=self._params, item=self._item)
        if self._config.gesture.trace_enabled:
            logger.debug(
                "gesture_resize phase=%s item=%s handle=%s w=%d h=%d box=%s",
                phase.value,
                self.item_id,
                update.handle.value,
                update.w,
                update.h,
                update.size,
            )
        callback = {
            ResizePhase.START: self._callbacks.on_resize_start,
            ResizePhase.RESIZE: self._callbacks.on_resize,
            ResizePhase.STOP: self._callbacks.on_resize_stop,
        }[phase]
        if callback is not None:
            payload = GridResizeEvent(event=event, node=node, size=update.size, handle=update.handle)
            self._notify(callback, update.w, update.h, payload)
        return update

    def _emit_drag(
        self,
        phase: str,
        callback: Callable[[str, int, int, GridDragEvent], object] | None,
        event: Any,
        node: ItemNode | None,
        update: DragUpdate,
    ) -> None:
        if self._config.gesture.trace_enabled:
            logger.debug(
                "gesture_drag phase=%s item=%s x=%d y=%d top=%.2f left=%.2f",
                phase,
                self.item_id,
                update.x,
                update.y,
                update.position.top,
                update.position.left,
            )
        if callback is None:
            return
        payload = GridDragEvent(event=event, node=node, new_position=update.position)
        self._notify(callback, update.x, update.y, payload)

    def _notify(self, callback: Callable[..., object], first: int, second: int, payload: object) -> None:
        try:
            callback(self.item_id, first, second, payload)
        except GestureError:
            raise
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(
                logger,
                f"grid item callback failed item={self.item_id}",
                level=logging.WARNING,
            )


__all__ = ["GridItemController"]
