from __future__ import annotations

from dataclasses import dataclass, field

from gridkit.api.gestures import GridItemCallbacks
from gridkit.api.nodes import NodeRect, StaticAncestor, StaticNode

ALL_SLOTS = (
    "on_drag_start",
    "on_drag",
    "on_drag_stop",
    "on_resize_start",
    "on_resize",
    "on_resize_stop",
)


@dataclass(slots=True)
class RecordingCallbacks:
    calls: list[tuple[str, str, int, int, object]] = field(default_factory=list)

    def slot(self, name: str):
        def _record(item_id: str, first: int, second: int, payload: object) -> None:
            self.calls.append((name, item_id, first, second, payload))

        return _record

    def bundle(self, *names: str) -> GridItemCallbacks:
        selected = names or ALL_SLOTS
        return GridItemCallbacks(**{name: self.slot(name) for name in selected})

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


def make_node(
    left: float,
    top: float,
    *,
    parent_left: float = 0.0,
    parent_top: float = 0.0,
    scroll_left: float = 0.0,
    scroll_top: float = 0.0,
    client_height: float = 600.0,
) -> StaticNode:
    parent = StaticAncestor(
        rect=NodeRect(left=parent_left, top=parent_top),
        scroll_left=scroll_left,
        scroll_top=scroll_top,
        client_height=client_height,
    )
    return StaticNode(rect=NodeRect(left=left, top=top), offset_parent=parent)
