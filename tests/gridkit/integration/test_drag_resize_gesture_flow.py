from __future__ import annotations

from dataclasses import replace

import pytest

from gridkit.api.geometry import GridParameters, PixelSize
from gridkit.api.gestures import DroppingPosition, GridItemCallbacks
from gridkit.api.items import GridItemSpec
from gridkit.input.registry import GridItemRegistry
from gridkit.runtime.config import RuntimeConfig
from tests.gridkit.helpers import make_node


class _Layout:
    """Host that commits grid coordinates reported on gesture stop."""

    def __init__(self, items: list[GridItemSpec]) -> None:
        self.items = {item.item_id: item for item in items}
        self.events: list[tuple[str, str, int, int]] = []

    def callbacks(self) -> GridItemCallbacks:
        return GridItemCallbacks(
            on_drag_start=self._record("drag_start"),
            on_drag=self._record("drag"),
            on_drag_stop=self._commit_move,
            on_resize_start=self._record("resize_start"),
            on_resize=self._record("resize"),
            on_resize_stop=self._commit_size,
        )

    def _record(self, name: str):
        def _callback(item_id: str, first: int, second: int, payload: object) -> None:
            self.events.append((name, item_id, first, second))

        return _callback

    def _commit_move(self, item_id: str, x: int, y: int, payload: object) -> None:
        self.events.append(("drag_stop", item_id, x, y))
        self.items[item_id] = replace(self.items[item_id], x=x, y=y)

    def _commit_size(self, item_id: str, w: int, h: int, payload: object) -> None:
        self.events.append(("resize_stop", item_id, w, h))
        self.items[item_id] = replace(self.items[item_id], w=w, h=h)

    def render(self, registry: GridItemRegistry, params: GridParameters) -> None:
        for item in self.items.values():
            registry.controller_for(item, params, self.callbacks())
        registry.retain(self.items)


def test_drag_then_resize_commits_new_layout(params: GridParameters, runtime_config: RuntimeConfig) -> None:
    layout = _Layout(
        [
            GridItemSpec(item_id="a", x=0, y=0, w=2, h=1),
            GridItemSpec(item_id="b", x=0, y=5, w=1, h=1),
        ]
    )
    registry = GridItemRegistry(config=runtime_config)
    layout.render(registry, params)

    mover = registry.get("a")
    assert mover is not None
    node = make_node(0, 0)
    mover.on_drag_start("down", node)
    mover.on_drag("move", node, 150, 40)
    mover.on_drag("move", node, 150, 45)
    mover.on_drag_stop("up", node)
    layout.render(registry, params)

    assert layout.items["a"].rect.x == 3
    assert layout.items["a"].rect.y == 2
    assert mover.pixel_rect().top == pytest.approx(80)
    assert mover.pixel_rect().left == pytest.approx(3 * ((1200 - 130) / 12 + 10))

    sizer = registry.get("b")
    assert sizer is not None
    anchor = sizer.pixel_rect()
    sizer.on_resize_start(None, node, anchor.size, "se")
    sizer.on_resize(None, node, PixelSize(width=200, height=70), "se")
    sizer.on_resize_stop(None, node, PixelSize(width=280, height=110), "se")
    layout.render(registry, params)

    assert (layout.items["b"].w, layout.items["b"].h) == (3, 3)
    assert not sizer.resizing
    assert [event[0] for event in layout.events] == [
        "drag_start",
        "drag",
        "drag",
        "drag_stop",
        "resize_start",
        "resize",
        "resize_stop",
    ]
    assert layout.events[-2] == ("resize", "b", 2, 2)

    boxes = registry.pixel_boxes(params)
    assert boxes.shape == (2, 4)
    assert boxes[1, 2] == pytest.approx(sizer.pixel_rect().width)


def test_external_drop_walks_placeholder_through_drag(
    params: GridParameters, runtime_config: RuntimeConfig
) -> None:
    layout = _Layout([GridItemSpec(item_id="drop", x=0, y=0, w=1, h=1)])
    registry = GridItemRegistry(config=runtime_config)
    layout.render(registry, params)
    placeholder = registry.get("drop")
    assert placeholder is not None
    node = make_node(120, 45)

    for left, top in ((120, 45), (220, 85), (220, 85)):
        placeholder.sync_dropping_position(DroppingPosition(left=left, top=top), node)
        layout.render(registry, params)

    assert placeholder.dropping
    assert [event[:2] for event in layout.events] == [("drag_start", "drop"), ("drag", "drop")]
    assert layout.events[1][2:] == (2, 2)

    placeholder.sync_dropping_position(None, node)
    placeholder.on_drag_stop("drop", node)
    assert layout.events[-1] == ("drag_stop", "drop", 2, 2)
    assert (layout.items["drop"].x, layout.items["drop"].y) == (2, 2)


def test_removed_item_loses_in_flight_gesture(params: GridParameters, runtime_config: RuntimeConfig) -> None:
    layout = _Layout([GridItemSpec(item_id="gone", x=1, y=1, w=1, h=1)])
    registry = GridItemRegistry(config=runtime_config)
    layout.render(registry, params)
    controller = registry.get("gone")
    assert controller is not None
    controller.on_drag_start(None, make_node(100, 40))

    layout.items.clear()
    layout.render(registry, params)

    assert "gone" not in registry
    assert not controller.dragging
