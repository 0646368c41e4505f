"""Tests for drag projection."""

from collections.abc import Callable

import numpy as np
import pytest

from swipe_selector.core.gesture import GestureProjector, project
from swipe_selector.core.items import ItemState

HORIZONTAL = np.array([1.0, 0.0])


class TestProject:
    """Tests for project."""

    def test_along_axis(self) -> None:
        assert project((100, 0), HORIZONTAL, 100) == pytest.approx(1)

    def test_ignores_perpendicular_motion(self) -> None:
        assert project((50, 80), HORIZONTAL, 100) == pytest.approx(0.5)

    def test_vertical_axis(self) -> None:
        assert project((0, 50), np.array([0.0, -1.0]), 100) == pytest.approx(-0.5)


class TestGestureProjector:
    """Tests for GestureProjector."""

    def test_start_resets(self) -> None:
        projector = GestureProjector(HORIZONTAL, 100)
        projector.start(3)
        assert projector.dragging
        assert projector.logical_front == 3
        assert projector.increment == 0

    def test_move_offsets_every_item(self, make_items: Callable[[int], list[ItemState]]) -> None:
        items = make_items(5)
        projector = GestureProjector(HORIZONTAL, 100)
        projector.start(0)
        projector.move((-160, 0), items)
        assert [item.shown_index for item in items] == pytest.approx([3.4, 4.4, 0.4, 1.4, 2.4])
        assert projector.logical_front == 2

    def test_item_near_wrap_slot_becomes_front(
        self, make_items: Callable[[int], list[ItemState]]
    ) -> None:
        items = make_items(5)
        projector = GestureProjector(HORIZONTAL, 100)
        projector.start(0)
        projector.move((60, 0), items)
        assert items[4].shown_index == pytest.approx(4.6)
        assert projector.logical_front == 4

    def test_small_drag_keeps_front(self, make_items: Callable[[int], list[ItemState]]) -> None:
        items = make_items(5)
        projector = GestureProjector(HORIZONTAL, 100)
        projector.start(0)
        projector.move((30, 0), items)
        assert projector.logical_front == 0

    def test_move_is_relative_to_drag_start(
        self, make_items: Callable[[int], list[ItemState]]
    ) -> None:
        """Should measure displacement from where the drag started."""
        items = make_items(5)
        projector = GestureProjector(HORIZONTAL, 100)
        projector.start(0)
        projector.move((-100, 0), items)
        projector.move((-100, 0), items)
        assert items[1].shown_index == pytest.approx(0)

    def test_end(self, make_items: Callable[[int], list[ItemState]]) -> None:
        items = make_items(5)
        projector = GestureProjector(HORIZONTAL, 100)
        projector.start(0)
        projector.move((-100, 0), items)
        assert projector.end() == 1
        assert not projector.dragging
