"""Shared pytest fixtures for swipe-selector tests."""

from collections.abc import Callable

import pytest

from swipe_selector.adapters.manual_driver import ManualAnimationDriver
from swipe_selector.core.config import arm_counts, load_options
from swipe_selector.core.items import ItemState
from swipe_selector.core.selector import ChangeEvent, ItemSpec, Selector, build_item_maps


@pytest.fixture
def manual_driver() -> ManualAnimationDriver:
    """Provide a fresh manually-clocked animation driver.

    Returns:
        ManualAnimationDriver: A driver whose clock only moves when advanced.
    """
    return ManualAnimationDriver()


@pytest.fixture
def five_items() -> list[ItemSpec]:
    """Provide five keyed items with descriptors.

    Returns:
        list[ItemSpec]: Items "a" through "e", keyed by their payload.
    """
    return [ItemSpec(payload=name, key=name, descriptor=name.upper()) for name in "abcde"]


@pytest.fixture
def changes() -> list[ChangeEvent]:
    """Provide a list that collects change events."""
    return []


@pytest.fixture
def selector(
    five_items: list[ItemSpec],
    manual_driver: ManualAnimationDriver,
    changes: list[ChangeEvent],
) -> Selector:
    """Provide a contracted five-item selector showing three items.

    The selector uses the manual driver and records change events into
    the ``changes`` fixture.

    Returns:
        Selector: One item per arm, two on the hidden arc.
    """
    return Selector(
        five_items,
        manual_driver,
        {"show": 3, "hide": True},
        on_change=changes.append,
    )


@pytest.fixture
def expanded_selector(selector: Selector, manual_driver: ManualAnimationDriver) -> Selector:
    """Provide the five-item selector after its expansion has settled."""
    selector.expand_items()
    manual_driver.run_until_idle()
    return selector


@pytest.fixture
def make_items() -> Callable[[int], list[ItemState]]:
    """Provide a factory for bare items, each settled on its own slot.

    Returns:
        Callable: Takes an item count and returns items sharing default maps.

    Example:
        def test_rotation(make_items):
            items = make_items(4)
            assert [item.current_index for item in items] == [0, 1, 2, 3]
    """

    def factory(count: int) -> list[ItemState]:
        options = load_options(None)
        left, right, hidden = arm_counts(count, options.show, options.hide)
        maps = build_item_maps(options, count, left, right, hidden)
        items = [ItemState(payload=i, index=i, key=str(i), maps=maps) for i in range(count)]
        for item in items:
            item.settle(item.index)
        return items

    return factory
