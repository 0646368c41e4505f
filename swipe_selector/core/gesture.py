"""Projection of drag gestures onto the carousel's index axis."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from swipe_selector.core.circular import index_to_position, round_half_up
from swipe_selector.core.items import ItemState

Displacement = tuple[float, float]


def project(
    displacement: Displacement, unit_vector: np.ndarray, scroll_distance: float
) -> float:
    """Index increment for a drag displacement.

    Args:
        displacement: The drag's ``(dx, dy)`` since it started.
        unit_vector: Scroll axis, unit length.
        scroll_distance: Drag distance worth one whole index.

    Returns:
        The displacement's component along the axis, in indices.
    """
    return float(np.dot(np.asarray(displacement, dtype=float), unit_vector)) / scroll_distance


@dataclass
class GestureProjector:
    """Tracks one drag and positions items under it.

    While the drag is live, each item is shown at its slot relative to
    ``front_index`` offset by the projected increment, wrapped modulo the
    item count. Whichever item crosses into the front slot becomes the
    logical front, to be committed when the drag ends.
    """

    unit_vector: np.ndarray
    scroll_distance: float
    front_index: int = 0
    dragging: bool = field(default=False, init=False)
    increment: float = field(default=0.0, init=False)
    logical_front: int = field(default=0, init=False)

    def start(self, front_index: int) -> None:
        self.front_index = front_index
        self.logical_front = front_index
        self.increment = 0.0
        self.dragging = True

    def move(self, displacement: Displacement, items: Sequence[ItemState]) -> float:
        """Update every item's shown index for the current displacement.

        Returns:
            The projected index increment.
        """
        self.increment = project(displacement, self.unit_vector, self.scroll_distance)
        total = len(items)
        for item in items:
            base = index_to_position(self.front_index, item.index, total)
            shown = (base + self.increment) % total
            slot = round_half_up(shown)
            if (slot < 1 or slot == total) and self.logical_front != item.index:
                self.logical_front = item.index
            item.set_shown_index(shown)
        return self.increment

    def end(self) -> int:
        """Finish the drag.

        Returns:
            The item index that should become the front.
        """
        self.dragging = False
        return self.logical_front
