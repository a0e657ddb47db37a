from __future__ import annotations

import pytest

from gridkit.api.geometry import GridParameters, PixelPosition
from gridkit.api.items import GridItemSpec
from gridkit.api.nodes import NodeRect, StaticNode
from gridkit.runtime.errors import InvalidGestureSequenceError
from gridkit.ui_runtime.drag_state import DragAccumulator, node_offset
from tests.gridkit.helpers import make_node

ITEM = GridItemSpec(item_id="a", x=0, y=0, w=2, h=1)


def test_start_reads_offset_inside_positioned_ancestor(params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(150, 170, parent_left=100, parent_top=120)
    update = drag.start(node, params=params, item=ITEM)
    assert update is not None
    assert update.position == PixelPosition(top=50, left=50)
    assert (update.x, update.y) == (1, 1)
    assert drag.dragging


def test_start_accounts_for_scroll_and_transform_scale(params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(200, 100, scroll_left=30, scroll_top=40)
    update = drag.start(node, params=params, item=ITEM, transform_scale=2.0)
    assert update is not None
    assert update.position == PixelPosition(top=90, left=130)


def test_start_without_positioned_ancestor_is_noop(params: GridParameters) -> None:
    drag = DragAccumulator()
    detached = StaticNode(rect=NodeRect(left=10, top=10))
    assert drag.start(detached, params=params, item=ITEM) is None
    assert drag.start(None, params=params, item=ITEM) is None
    assert not drag.dragging
    assert drag.position == PixelPosition(top=0, left=0)
    assert node_offset(detached) is None


def test_move_before_start_raises(params: GridParameters) -> None:
    drag = DragAccumulator()
    with pytest.raises(InvalidGestureSequenceError) as excinfo:
        drag.move(make_node(0, 0), 5, 5, params=params, item=ITEM)
    assert excinfo.value.phase == "move"
    assert excinfo.value.item_id == "a"


def test_stop_before_start_raises(params: GridParameters) -> None:
    with pytest.raises(InvalidGestureSequenceError):
        DragAccumulator().stop(params=params, item=ITEM)


def test_second_start_is_rejected(params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(0, 0)
    drag.start(node, params=params, item=ITEM)
    with pytest.raises(InvalidGestureSequenceError):
        drag.start(node, params=params, item=ITEM)
    assert drag.dragging


def test_move_accumulates_deltas_and_converts_to_cells(flat_params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(0, 0)
    drag.start(node, params=flat_params, item=ITEM)
    drag.move(node, 120, 40, params=flat_params, item=ITEM)
    update = drag.move(node, 40, 30, params=flat_params, item=ITEM)
    assert update.position == PixelPosition(top=70, left=160)
    assert (update.x, update.y) == (2, 1)


def test_stop_reports_last_position_and_resets(flat_params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(0, 0)
    drag.start(node, params=flat_params, item=ITEM)
    drag.move(node, 310, 220, params=flat_params, item=ITEM)
    update = drag.stop(params=flat_params, item=ITEM)
    assert update.position == PixelPosition(top=220, left=310)
    assert (update.x, update.y) == (3, 2)
    assert not drag.dragging
    assert drag.position == PixelPosition(top=0, left=0)


def test_bounded_move_clamps_into_container(flat_params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(0, 0, client_height=500)
    drag.start(node, params=flat_params, item=ITEM)
    far = drag.move(node, 5000, 5000, params=flat_params, item=ITEM, bounded=True)
    assert far.position == PixelPosition(top=400, left=800)
    back = drag.move(node, -9000, -9000, params=flat_params, item=ITEM, bounded=True)
    assert back.position == PixelPosition(top=0, left=0)


def test_bounded_move_subtracts_container_padding(params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(50, 50, client_height=400)
    drag.start(node, params=params, item=ITEM)
    update = drag.move(node, 0, 0, params=params, item=ITEM, bounded=True)
    assert update.position == PixelPosition(top=40, left=40)


def test_repeated_bounded_moves_drift_by_padding(params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(50, 50, client_height=400)
    drag.start(node, params=params, item=ITEM)
    positions = [drag.move(node, 0, 0, params=params, item=ITEM, bounded=True).position for _ in range(3)]
    assert positions == [
        PixelPosition(top=40, left=40),
        PixelPosition(top=30, left=30),
        PixelPosition(top=20, left=20),
    ]


def test_bounded_move_keeps_item_inside_for_any_deltas(params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(0, 0, client_height=450)
    item = GridItemSpec(item_id="b", x=0, y=0, w=3, h=2)
    drag.start(node, params=params, item=item)
    right_limit = 1200 - (3 * ((1200 - 110 - 20) / 12) + 20)
    bottom_limit = 450 - (2 * 30 + 10)
    deltas = [(37, 12), (-500, 80), (9999, -3), (-13, 9999), (250, -250), (-1, -1), (4000, 4000)]
    for delta_x, delta_y in deltas:
        update = drag.move(node, delta_x, delta_y, params=params, item=item, bounded=True)
        assert 0 <= update.position.left <= right_limit + 1e-9
        assert 0 <= update.position.top <= bottom_limit + 1e-9


def test_unbounded_move_ignores_container(flat_params: GridParameters) -> None:
    drag = DragAccumulator()
    node = make_node(0, 0, client_height=100)
    drag.start(node, params=flat_params, item=ITEM)
    update = drag.move(node, -50, 5000, params=flat_params, item=ITEM)
    assert update.position == PixelPosition(top=5000, left=-50)
    assert (update.x, update.y) == (0, 50)
