"""Drive the drag pipeline from an external drag-and-drop position."""

from __future__ import annotations

from typing import Any, Protocol

from gridkit.api.geometry import PixelPosition
from gridkit.api.gestures import DroppingPosition
from gridkit.api.nodes import ItemNode


class DragTarget(Protocol):
    """Drag entry points the injector feeds synthetic events into."""

    @property
    def dragging(self) -> bool:
        """Return whether a drag gesture is active."""

    @property
    def drag_position(self) -> PixelPosition:
        """Return the running pixel position of the active drag."""

    def on_drag_start(self, event: Any, node: ItemNode | None) -> object | None:
        """Begin a drag gesture; ``None`` when the start was ignored."""

    def on_drag(self, event: Any, node: ItemNode | None, delta_x: float, delta_y: float) -> object:
        """Advance a drag gesture by a pixel delta."""


def inject_dropping_position(
    target: DragTarget,
    current: DroppingPosition | None,
    previous: DroppingPosition | None,
    node: ItemNode | None,
) -> bool:
    """Reconcile this render's dropping position into drag events.

    An idle target gets a synthetic drag start. A dragging target whose
    dropping position differs from ``previous`` gets a synthetic move that
    lands the drag on ``current``: the delta is taken from the target's
    running drag position, so a position that left and came back does not
    jump. Returns whether the target accepted an event.
    """
    if current is None or node is None:
        return False
    if not target.dragging:
        return target.on_drag_start(current.event, node) is not None
    if current.same_place(previous):
        return False
    position = target.drag_position
    target.on_drag(current.event, node, current.left - position.left, current.top - position.top)
    return True


__all__ = ["DragTarget", "inject_dropping_position"]
