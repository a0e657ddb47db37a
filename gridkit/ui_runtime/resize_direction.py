"""Direction-aware correction of a proposed resize box."""

from __future__ import annotations

from gridkit.api.geometry import PixelRect, PixelSize
from gridkit.api.gestures import EdgeMotion, ResizeHandle, handle_axes


def _resolve_axis(
    motion: EdgeMotion,
    anchor_start: float,
    anchor_length: float,
    proposed_length: float,
    limit: float | None,
) -> tuple[float, float]:
    proposed_length = max(0.0, float(proposed_length))
    if motion is EdgeMotion.START:
        far_edge = anchor_start + anchor_length
        start = max(0.0, far_edge - proposed_length)
        return start, far_edge - start
    if motion is EdgeMotion.END:
        length = proposed_length
        if limit is not None and anchor_start + length > limit:
            length = max(0.0, limit - anchor_start)
        return float(anchor_start), length
    return float(anchor_start), proposed_length


def resolve_resize(
    handle: ResizeHandle | str,
    anchor: PixelRect,
    proposed: PixelSize | PixelRect,
    container_width: float,
) -> PixelRect:
    """Return the full box after resizing ``anchor`` to ``proposed`` via ``handle``.

    The edges opposite the dragged handle keep their pixel coordinate. Start
    edges never cross the container origin and end edges never cross the
    container's right side; there is no bottom bound.
    """
    axes = handle_axes(handle)
    left, width = _resolve_axis(
        axes.horizontal, anchor.left, anchor.width, proposed.width, container_width
    )
    top, height = _resolve_axis(axes.vertical, anchor.top, anchor.height, proposed.height, None)
    return PixelRect(top=top, left=left, width=width, height=height)


__all__ = ["resolve_resize"]
