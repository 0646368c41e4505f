"""Per-item carousel state.

An item knows two indices. ``current_index`` is the slot it last settled on
(an integer in ``[0, N)``, slot 0 being the front). ``shown_index`` is where
it is rendered right now; it moves continuously during drags and
animations and may briefly sit on ``N`` or beyond while a rotation wraps.
The shown index is held in three animated handles (location, scale and
opacity), each read through the selector's shared interpolation maps.
"""

from dataclasses import dataclass
from typing import Any

from swipe_selector.core.animation import AnimatedValue, AnimatedValueXY, Tween
from swipe_selector.core.interpolation import Interpolation2DMap, InterpolationMap
from swipe_selector.ports.animation import Easing


@dataclass(frozen=True)
class ItemMaps:
    """The interpolation maps shared by every item of one selector."""

    location: Interpolation2DMap
    scale: Interpolation2DMap
    opacity: InterpolationMap
    descriptor_opacity: InterpolationMap


class ItemState:
    """One carousel slot: payload, identity and animated position.

    Attributes:
        payload: The host's visual content, opaque to the engine.
        index: Position of the item in the input ordering.
        key: Stable identity key.
        descriptor: Optional label shown near the front slot.
        location: Animated handle driving the screen position.
        scale: Animated handle driving the size.
        opacity: Animated handle driving the opacity.
    """

    def __init__(
        self,
        payload: Any,
        index: int,
        key: str,
        maps: ItemMaps,
        descriptor: str | None = None,
    ) -> None:
        self.payload = payload
        self.index = index
        self.key = key
        self.descriptor = descriptor
        self.maps = maps

        self.location = AnimatedValueXY()
        self.scale = AnimatedValueXY()
        self.opacity = AnimatedValue()

        self._current_index = 0

    def __repr__(self) -> str:
        return (
            f"ItemState(index={self.index}, key={self.key!r}, "
            f"current_index={self._current_index}, shown_index={self.shown_index:.3f})"
        )

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def shown_index(self) -> float:
        return self.location.x.value

    def set_current_index(self, index: int) -> None:
        """Record the settled slot without moving the item."""
        self._current_index = index

    def set_shown_index(self, value: float) -> None:
        """Move the item to ``value`` immediately, on every animated handle."""
        self.location.set_value(value, value)
        self.scale.set_value(value, value)
        self.opacity.set_value(value)

    def settle(self, index: int, shown: float | None = None) -> None:
        """Set the settled slot and show the item there (or at ``shown``)."""
        self._current_index = index
        self.set_shown_index(index if shown is None else shown)

    def tweens_to(self, to_value: float, duration: float, easing: Easing) -> list[Tween]:
        """Tweens moving every handle from where it is now to ``to_value``."""
        handles = [
            self.location.x,
            self.location.y,
            self.scale.x,
            self.scale.y,
            self.opacity,
        ]
        return [
            Tween(handle, handle.value, to_value, duration, easing) for handle in handles
        ]

    # Rendered geometry

    @property
    def position(self) -> tuple[float, float]:
        return (
            self.maps.location.x(self.location.x.value),
            self.maps.location.y(self.location.y.value),
        )

    @property
    def size_scale(self) -> tuple[float, float]:
        return (
            self.maps.scale.x(self.scale.x.value),
            self.maps.scale.y(self.scale.y.value),
        )

    @property
    def alpha(self) -> float:
        return self.maps.opacity(self.opacity.value)

    @property
    def descriptor_alpha(self) -> float:
        if not self.descriptor:
            return 0.0
        return self.maps.descriptor_opacity(self.opacity.value)
