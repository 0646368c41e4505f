"""Circular index arithmetic and render collation - platform agnostic."""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def between(num: float, bound1: float, bound2: float) -> bool:
    """Whether ``num`` lies strictly inside the interval, in either order."""
    return min(bound1, bound2) < num < max(bound1, bound2)


def bound(num: float, lower: float, upper: float) -> float:
    """Clamp ``num`` to ``[lower, upper]``."""
    return max(lower, min(upper, num))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def index_to_position(current: int, item: int, total: int) -> int:
    """Slot of ``item`` when ``current`` is at the front.

    Always in ``[0, total)``; the front item itself is at slot 0.
    """
    return ((item - current) % total + total) % total


def shortest_distance(current: int, target: int, total: int) -> int:
    """Signed hop count from ``current`` to ``target`` around the circle.

    The magnitude never exceeds half the circle. An exactly opposite target
    is reached in the positive direction.
    """
    distance = index_to_position(current, target, total)
    if distance > total / 2:
        distance -= total
    return distance


def nearest_equivalent(
    value: float, reference: float, total: int, direction: int = 0
) -> float:
    """The index congruent to ``value`` modulo ``total`` closest to ``reference``.

    Ties go to the lower candidate unless ``direction`` is positive.
    """
    lower = value + math.floor((reference - value) / total) * total
    upper = lower + total
    lower_gap = reference - lower
    upper_gap = upper - reference
    if lower_gap < upper_gap:
        return lower
    if upper_gap < lower_gap:
        return upper
    return upper if direction > 0 else lower


@dataclass(frozen=True)
class CircularSequence(Generic[T]):
    """A lazy, restartable walk around a fixed-size sequence.

    Iteration starts at ``start`` and wraps past the end. A bounded walk
    stops after one full lap; an unbounded one never stops. Each call to
    ``iter()`` starts a fresh walk over the same items, which are referenced,
    not copied.
    """

    items: Sequence[T]
    start: int = 0
    bounded: bool = False

    def __iter__(self) -> Iterator[T]:
        count = len(self.items)
        if count == 0:
            return
        index = self.start % count
        drawn = 0
        while not self.bounded or drawn < count:
            yield self.items[index]
            index = (index + 1) % count
            drawn += 1


def collate_for_render(
    items: Sequence[T],
    current_index: int,
    right_count: int,
    left_count: int,
) -> list[T]:
    """Order items for drawing, last element topmost.

    Starting from the current item, the right and left neighbours are
    interleaved moving outward, nearest first. Items beyond both visible
    arms (the hidden arc) follow. The whole list is then reversed so the
    farthest items are drawn first and the current item last.

    Args:
        items: Every item of the carousel, in input order.
        current_index: Index of the item at the front.
        right_count: Visible items on the right arm.
        left_count: Visible items on the left arm.

    Returns:
        Every item exactly once, in draw order.
    """
    walk = iter(CircularSequence(items, current_index, bounded=True))

    current = next(walk, None)
    if current is None:
        return []

    right_items = [next(walk) for _ in range(right_count)]
    hidden_count = len(items) - 1 - right_count - left_count
    hidden_items = [next(walk) for _ in range(hidden_count)]
    left_items = [next(walk) for _ in range(left_count)]
    left_items.reverse()

    ordered = [current]
    while left_items and right_items:
        ordered.append(right_items.pop(0))
        ordered.append(left_items.pop(0))

    # An even item count leaves the right arm one longer than the left
    ordered.extend(right_items)
    ordered.extend(left_items)
    ordered.extend(hidden_items)

    ordered.reverse()
    return ordered
