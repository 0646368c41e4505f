"""The selector aggregate: items, maps and the operations a host calls.

A host UI builds one ``Selector`` per carousel, hands it an animation driver
and forwards drag events to it. Everything it needs to render comes back
through ``collate_for_render`` (draw order) and each item's ``position``,
``size_scale``, ``alpha`` and ``descriptor_alpha``.

Example:
    selector = Selector(["a", "b", "c", "d", "e"], driver, {"show": 3, "hide": True})
    selector.expand_items()
    selector.transition_to(2)
"""

import warnings
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

import numpy as np

from swipe_selector.core.circular import collate_for_render, index_to_position
from swipe_selector.core.config import (
    SelectorOptions,
    arm_counts,
    load_options,
    resolve_scaling,
    resolve_scroll_vector,
)
from swipe_selector.core.easing import Easing, get_easing
from swipe_selector.core.errors import ConfigurationError, IdentityWarning
from swipe_selector.core.gesture import Displacement, GestureProjector
from swipe_selector.core.interpolation import (
    build_2d_interpolation_map,
    build_interpolation_map,
    prepare_bounds,
    window_interpolation_map,
)
from swipe_selector.core.items import ItemMaps, ItemState
from swipe_selector.core.logging import get_logger
from swipe_selector.core.transitions import TransitionOrchestrator
from swipe_selector.ports.animation import AnimationDriver

logger = get_logger(__name__)


@dataclass(frozen=True)
class ItemSpec:
    """Host description of one item.

    Attributes:
        payload: Visual content, opaque to the engine.
        key: Stable identity key; generated when omitted.
        descriptor: Optional label shown near the front slot.
    """

    payload: Any
    key: str | None = None
    descriptor: str | None = None


@dataclass(frozen=True)
class ChangeEvent:
    """Passed to ``on_change`` when a new item is committed to the front."""

    index: int
    item: ItemState


ChangeCallback = Callable[[ChangeEvent], None]
DoneCallback = Callable[[], None]


def build_item_maps(
    options: SelectorOptions,
    item_count: int,
    left_count: int,
    right_count: int,
    hide_count: int,
) -> ItemMaps:
    """Build the location, scale, opacity and descriptor maps for one layout."""
    scaling = options.scaling_options

    def bounds_for(center, left, right, kind, depth):
        return prepare_bounds(
            center,
            left,
            right,
            scaling.pad_left_items,
            scaling.pad_right_items,
            resolve_scaling(kind),
            depth,
            scaling.vanishing_gap,
        )

    location = build_2d_interpolation_map(
        bounds_for(
            {"x": 0.0, "y": 0.0},
            options.left_point.as_dict(),
            options.right_point.as_dict(),
            scaling.location_scaling,
            scaling.location_scaling_depth,
        ),
        right_count,
        left_count,
        hide_count,
    )
    scale = build_2d_interpolation_map(
        bounds_for(
            {"x": 1.0, "y": 1.0},
            {"x": 0.0, "y": 0.0},
            {"x": 0.0, "y": 0.0},
            scaling.size_scaling,
            scaling.size_scaling_depth,
        ),
        right_count,
        left_count,
        hide_count,
    )
    opacity = build_interpolation_map(
        bounds_for(
            {"opacity": 1.0},
            {"opacity": 0.5},
            {"opacity": 0.5},
            scaling.opacity_scaling,
            scaling.opacity_scaling_depth,
        ),
        right_count,
        left_count,
        hide_count,
        "opacity",
    )
    # Labels only show around the front slot
    descriptor_opacity = window_interpolation_map(
        opacity,
        default=0.0,
        ranges=[(0, 1), (item_count - 1, item_count)],
    )
    return ItemMaps(location, scale, opacity, descriptor_opacity)


def _as_spec(item: Any) -> ItemSpec:
    if isinstance(item, ItemSpec):
        return item
    return ItemSpec(payload=item)


def _ignore_front(on_complete: DoneCallback | None) -> Callable[[int], None] | None:
    if on_complete is None:
        return None
    return lambda front: on_complete()


class Selector:
    """A circular carousel of items, one of which is current.

    Attributes:
        options: The validated options.
        driver: Animation driver running every animation.
        on_change: Called when a transition commits a new current item.
    """

    def __init__(
        self,
        items: Sequence[Any],
        driver: AnimationDriver,
        options: Mapping[str, Any] | SelectorOptions | None = None,
        on_change: ChangeCallback | None = None,
    ) -> None:
        self.options = load_options(options)
        self.driver = driver
        self.on_change = on_change
        self._easing: Easing = get_easing(self.options.easing)
        self._unit_vector = resolve_scroll_vector(
            self.options.scroll_direction,
            self.options.left_point,
            self.options.right_point,
            self.options.custom_vector,
        )

        specs = [_as_spec(item) for item in items]
        if specs and self.options.default_index >= len(specs):
            raise ConfigurationError(
                f"default_index {self.options.default_index} out of range "
                f"[0, {len(specs)})"
            )
        self._current_index = self.options.default_index if specs else 0
        self._build(specs)

    # Read-only state

    @property
    def items(self) -> list[ItemState]:
        return list(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_item(self) -> ItemState | None:
        if 0 <= self._current_index < len(self._items):
            return self._items[self._current_index]
        return None

    @property
    def left_count(self) -> int:
        return self._left_count

    @property
    def right_count(self) -> int:
        return self._right_count

    @property
    def hide_count(self) -> int:
        return self._hide_count

    @property
    def unit_vector(self) -> np.ndarray:
        return self._unit_vector

    @property
    def maps(self) -> ItemMaps:
        return self._maps

    @property
    def is_transitioning(self) -> bool:
        return self._orchestrator.is_transitioning

    @property
    def is_dragging(self) -> bool:
        return self._gesture.dragging

    # Construction and updates

    def _build(self, specs: Sequence[ItemSpec], laid_out: bool = False) -> None:
        count = len(specs)
        self._left_count, self._right_count, self._hide_count = arm_counts(
            count, self.options.show, self.options.hide
        )
        self._maps = build_item_maps(
            self.options, count, self._left_count, self._right_count, self._hide_count
        )
        self._items = [
            ItemState(
                payload=spec.payload,
                index=index,
                key=spec.key if spec.key is not None else str(uuid4()),
                maps=self._maps,
                descriptor=spec.descriptor,
            )
            for index, spec in enumerate(specs)
        ]
        self._orchestrator = TransitionOrchestrator(
            self._items,
            self.driver,
            front_index=self._current_index,
            hop_depth=self.options.hop_depth,
            on_interrupted=self._sync_front,
        )
        self._gesture = GestureProjector(
            self._unit_vector,
            self.options.simple_scroll_distance,
            front_index=self._current_index,
        )
        if laid_out:
            for item in self._items:
                item.settle(index_to_position(self._current_index, item.index, count))

        logger.info(
            "selector_built",
            items=count,
            left=self._left_count,
            right=self._right_count,
            hidden=self._hide_count,
            current=self._current_index,
        )

    def _laid_out(self) -> bool:
        # Contracted items are all anchored on the front slot
        return any(item.current_index != 0 for item in self._items)

    def set_items(self, items: Sequence[Any]) -> None:
        """Replace the item list.

        When every key matches the existing items in the same order, payloads
        and descriptors are patched in place and nothing moves. Otherwise the
        selector is rebuilt, keeping the current item (by key) at the front
        when it survives.

        Args:
            items: Payloads or ``ItemSpec`` instances.
        """
        specs = [_as_spec(item) for item in items]
        keys = [spec.key for spec in specs]
        supplied = [key for key in keys if key is not None]
        duplicates = sorted(key for key, seen in Counter(supplied).items() if seen > 1)

        if duplicates:
            logger.warning("duplicate_item_keys", keys=duplicates)
            warnings.warn(
                f"Duplicate item keys {duplicates}; rebuilding all items",
                IdentityWarning,
                stacklevel=2,
            )
        elif keys == [item.key for item in self._items]:
            for item, spec in zip(self._items, specs):
                item.payload = spec.payload
                item.descriptor = spec.descriptor
            logger.debug("items_patched", items=len(specs))
            return

        self._orchestrator.cancel()
        laid_out = self._laid_out()
        current = self.current_item
        current_key = current.key if current is not None else None
        if current_key is not None and not duplicates and current_key in keys:
            self._current_index = keys.index(current_key)
        elif specs:
            self._current_index = min(self._current_index, len(specs) - 1)
        else:
            self._current_index = 0

        logger.info("items_rebuilt", items=len(specs), current=self._current_index)
        self._build(specs, laid_out=laid_out)

    def update_options(self, options: Mapping[str, Any] | SelectorOptions) -> None:
        """Apply new options, rebuilding maps and items if anything changed."""
        validated = load_options(options)
        if validated == self.options:
            return
        self._orchestrator.cancel()
        self.options = validated
        self._easing = get_easing(validated.easing)
        self._unit_vector = resolve_scroll_vector(
            validated.scroll_direction,
            validated.left_point,
            validated.right_point,
            validated.custom_vector,
        )
        specs = [ItemSpec(item.payload, item.key, item.descriptor) for item in self._items]
        self._build(specs, laid_out=self._laid_out())

    # Transitions

    def _sync_front(self, front: int) -> None:
        """Adopt the orchestrator's front, notifying ``on_change`` if it moved.

        Runs on commit and also when a rotation is interrupted after some of
        its hops completed, so ``current_index`` always names the item drawn
        on top.
        """
        previous = self._current_index
        self._current_index = front
        if front != previous and self.on_change is not None:
            self.on_change(ChangeEvent(index=front, item=self._items[front]))

    def _commit(self, on_complete: DoneCallback | None) -> Callable[[int], None]:
        def commit(front: int) -> None:
            self._sync_front(front)
            if on_complete is not None:
                on_complete()

        return commit

    def _duration(self, duration: float | None) -> float:
        # Zero is a valid instant jump; negatives are rejected downstream
        return self.options.transition_duration if duration is None else duration

    def transition_to(
        self,
        index: Any,
        on_complete: DoneCallback | None = None,
        duration: float | None = None,
    ) -> int:
        """Animate the item at ``index`` to the front.

        Args:
            index: Input-order index of the item to bring forward.
            on_complete: Called once the rotation commits.
            duration: Total duration in ms; defaults to the configured one.

        Returns:
            The signed hop count chosen.

        Raises:
            ConfigurationError: If ``index`` is not an integer in range.
        """
        return self._orchestrator.transition_to(
            index,
            self._commit(on_complete),
            self._duration(duration),
            self._easing,
        )

    def transition(
        self,
        distance: Any,
        on_complete: DoneCallback | None = None,
        duration: float | None = None,
    ) -> None:
        """Animate a rotation by ``distance`` slots (0 settles in place)."""
        self._orchestrator.transition(
            distance,
            self._commit(on_complete),
            self._duration(duration),
            self._easing,
        )

    def expand_items(self, on_complete: DoneCallback | None = None) -> bool:
        """Spread the items from the center onto their slots.

        Returns:
            True if the expansion started, False when not contracted.
        """
        return self._orchestrator.expand(
            _ignore_front(on_complete), self.options.transition_duration, self._easing
        )

    def contract_items(self, on_complete: DoneCallback | None = None) -> None:
        """Gather every item onto the center slot."""
        self._orchestrator.contract(
            _ignore_front(on_complete), self.options.transition_duration, self._easing
        )

    # Gesture hooks

    def on_drag_start(self, displacement: Displacement = (0.0, 0.0)) -> None:
        """Begin a drag, superseding any transition in flight."""
        self._orchestrator.cancel()
        self._gesture.start(self._orchestrator.front_index)
        if displacement != (0.0, 0.0):
            self._gesture.move(displacement, self._items)

    def on_drag_move(self, displacement: Displacement) -> float:
        """Follow the drag; returns the projected index increment."""
        if not self._gesture.dragging:
            self.on_drag_start()
        return self._gesture.move(displacement, self._items)

    def on_drag_end(
        self,
        displacement: Displacement,
        on_complete: DoneCallback | None = None,
    ) -> int:
        """Release the drag and settle onto the item that reached the front.

        Returns:
            The index of the new front item.
        """
        if not self._gesture.dragging:
            self.on_drag_start()
        if self._items:
            self._gesture.move(displacement, self._items)
        front = self._gesture.end()
        logger.info(
            "drag_committed",
            front=front,
            increment=round(self._gesture.increment, 3),
        )
        self._orchestrator.settle_to_front(
            front,
            self._commit(on_complete),
            self.options.settle_duration,
            self._easing,
        )
        return front

    # Rendering

    def collate_for_render(self) -> list[ItemState]:
        """Items in draw order; the front item comes last (topmost)."""
        front = (
            self._gesture.logical_front
            if self._gesture.dragging
            else self._orchestrator.front_index
        )
        return collate_for_render(
            self._items, front, self._right_count, self._left_count
        )
