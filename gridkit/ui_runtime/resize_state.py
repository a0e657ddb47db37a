"""Resize gesture accumulator for one grid item."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from gridkit.api.geometry import GridParameters, PixelRect, PixelSize
from gridkit.api.gestures import ResizeHandle
from gridkit.api.items import GridItemSpec
from gridkit.ui_runtime.grid_transform import clamp, size_pixel_to_grid
from gridkit.ui_runtime.resize_direction import resolve_resize


class ResizePhase(StrEnum):
    """Which resize event fired."""

    START = "start"
    RESIZE = "resize"
    STOP = "stop"


@dataclass(frozen=True, slots=True)
class ResizeUpdate:
    """Grid span and corrected pixel box reported for one resize event."""

    w: int
    h: int
    size: PixelRect
    handle: ResizeHandle


class ResizeAccumulator:
    """Track the live pixel box of one item across a resize gesture."""

    def __init__(self) -> None:
        self._box: PixelRect | None = None

    @property
    def resizing(self) -> bool:
        return self._box is not None

    @property
    def box(self) -> PixelRect | None:
        return self._box

    def apply(
        self,
        phase: ResizePhase | str,
        anchor: PixelRect,
        size: PixelSize | PixelRect,
        handle: ResizeHandle | str,
        *,
        params: GridParameters,
        item: GridItemSpec,
    ) -> ResizeUpdate:
        """Correct ``size`` for ``handle`` against ``anchor`` and clamp to grid bounds.

        Pixel anchoring runs first; grid min/max bounds are applied to the
        resulting span. The live box is stored for start/resize and cleared on
        stop.
        """
        resolved_phase = ResizePhase(phase)
        resolved_handle = ResizeHandle(str(handle).strip().lower())
        corrected = resolve_resize(resolved_handle, anchor, size, params.container_width)

        span = size_pixel_to_grid(
            params, corrected.width, corrected.height, item.x, item.y, resolved_handle
        )
        w = int(clamp(span.w, max(item.min_w, 1), item.max_w))
        h = int(clamp(span.h, item.min_h, item.max_h))

        self._box = None if resolved_phase is ResizePhase.STOP else corrected
        return ResizeUpdate(w=w, h=h, size=corrected, handle=resolved_handle)

    def reset(self) -> None:
        self._box = None


__all__ = ["ResizeAccumulator", "ResizePhase", "ResizeUpdate"]
