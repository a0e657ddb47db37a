"""Arena of grid item controllers keyed by item id."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import numpy as np

from gridkit.api.geometry import GridParameters
from gridkit.api.gestures import GridItemCallbacks
from gridkit.api.items import GridItemSpec
from gridkit.input.item_controller import GridItemController
from gridkit.runtime.config import RuntimeConfig, get_runtime_config
from gridkit.runtime.logging import setup_logging
from gridkit.ui_runtime.grid_transform import column_width, grid_to_pixel

logger = logging.getLogger(__name__)


class GridItemRegistry:
    """Create, refresh and discard one controller per item identity."""

    def __init__(self, *, config: RuntimeConfig | None = None) -> None:
        self._config = config if config is not None else get_runtime_config()
        self._controllers: dict[str, GridItemController] = {}
        setup_logging(self._config)

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._controllers

    def __iter__(self) -> Iterator[GridItemController]:
        return iter(tuple(self._controllers.values()))

    def ids(self) -> tuple[str, ...]:
        return tuple(self._controllers)

    def get(self, item_id: str) -> GridItemController | None:
        return self._controllers.get(item_id)

    def controller_for(
        self,
        item: GridItemSpec,
        params: GridParameters,
        callbacks: GridItemCallbacks | None = None,
    ) -> GridItemController:
        """Return the item's controller, creating it or refreshing its props."""
        controller = self._controllers.get(item.item_id)
        if controller is None:
            controller = GridItemController(item, params, callbacks, config=self._config)
            self._controllers[item.item_id] = controller
            logger.debug("grid_item_registered item=%s", item.item_id)
            return controller
        controller.update(item=item, params=params, callbacks=callbacks)
        return controller

    def discard(self, item_id: str) -> bool:
        """Tear down and forget one controller."""
        controller = self._controllers.pop(item_id, None)
        if controller is None:
            return False
        controller.teardown()
        logger.debug("grid_item_discarded item=%s", item_id)
        return True

    def retain(self, item_ids: Iterable[str]) -> tuple[str, ...]:
        """Discard controllers whose item left the layout; return removed ids."""
        keep = set(item_ids)
        removed = tuple(item_id for item_id in self._controllers if item_id not in keep)
        for item_id in removed:
            self.discard(item_id)
        return removed

    def clear(self) -> None:
        for item_id in tuple(self._controllers):
            self.discard(item_id)

    def pixel_boxes(self, params: GridParameters) -> np.ndarray:
        """Return ``(N, 4)`` boxes as ``top, left, width, height`` in :meth:`ids` order.

        Items with a live drag or resize report their override box.
        """
        controllers = tuple(self._controllers.values())
        if not controllers:
            return np.zeros((0, 4), dtype=np.float64)
        cells = np.array(
            [(c.item.x, c.item.y, c.item.w, c.item.h) for c in controllers],
            dtype=np.float64,
        )
        col_width = column_width(params)
        x, y, w, h = cells.T
        boxes = np.empty((len(controllers), 4), dtype=np.float64)
        boxes[:, 0] = y * (params.row_height + params.margin_y)
        boxes[:, 1] = x * (col_width + params.margin_x)
        boxes[:, 2] = np.maximum(0.0, w * col_width + np.maximum(0.0, w - 1) * params.margin_x)
        boxes[:, 3] = np.maximum(0.0, h * params.row_height + np.maximum(0.0, h - 1) * params.margin_y)
        for index, controller in enumerate(controllers):
            if controller.dragging or controller.resizing:
                item = controller.item
                rect = grid_to_pixel(
                    params,
                    item.x,
                    item.y,
                    item.w,
                    item.h,
                    controller.drag_state.position if controller.dragging else None,
                    controller.resize_state.box,
                )
                boxes[index] = (rect.top, rect.left, rect.width, rect.height)
        return boxes


__all__ = ["GridItemRegistry"]
