"""Animated rotation of the carousel.

A rotation by ``d`` slots is played as ``|d|`` single-slot hops, strictly one
after the other. Hop durations come from sampling a logarithmic curve over
``[0, |d|] -> [0, duration]`` and taking first differences, so long
rotations get their eased feel from the schedule rather than from per-hop
easing. After every hop the items are re-anchored on the item that just
reached the front.

A request arriving while another rotation is in flight supersedes it: the
running animations are stopped, whatever progress they made is kept, and
the new rotation is computed from the last item that fully settled at the
front.

Example:
    orchestrator = TransitionOrchestrator(items, driver)
    orchestrator.transition_to(3, on_complete=lambda front: print(front))
"""

from collections.abc import Callable, Sequence
from enum import Enum, auto
from numbers import Integral
from typing import Any

from swipe_selector.core.animation import Animation, Tween, run_parallel
from swipe_selector.core.circular import (
    between,
    index_to_position,
    nearest_equivalent,
    round_half_up,
    shortest_distance,
)
from swipe_selector.core.easing import linear
from swipe_selector.core.errors import ConfigurationError
from swipe_selector.core.items import ItemState
from swipe_selector.core.logging import get_logger
from swipe_selector.core.scalers import Range, scale_logarithmic
from swipe_selector.ports.animation import AnimationDriver, Easing

logger = get_logger(__name__)

DEFAULT_DURATION = 1000.0

CommitCallback = Callable[[int], None]


class TransitionState(Enum):
    """Whether any item is being animated by the orchestrator."""

    IDLE = auto()
    TRANSITIONING = auto()


def hop_durations(distance: int, duration: float, depth: int = 1) -> list[float]:
    """Split ``duration`` across the hops of a ``distance`` slot rotation.

    Args:
        distance: Signed hop count; only its magnitude matters.
        duration: Total duration, in milliseconds.
        depth: Depth of the logarithmic time curve.

    Returns:
        One non-negative duration per hop, summing to ``duration``.
        With a positive depth the durations shrink hop after hop.
    """
    hops = abs(distance)
    if hops == 0:
        return []
    curve = scale_logarithmic(Range(0, hops), Range(0, duration), depth)
    marks = [curve(hop) for hop in range(hops + 1)]
    return [end - start for start, end in zip(marks, marks[1:])]


def _as_index(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def _check_duration(duration: float) -> float:
    if duration < 0:
        raise ConfigurationError(f"Duration must not be negative, got {duration!r}")
    return duration


class TransitionOrchestrator:
    """Sequences animated rotations, settles, expansion and contraction.

    Attributes:
        items: The carousel items, in input order.
        driver: Animation driver running every tween.
        front_index: Item that last settled at the front.
        hop_depth: Depth of the logarithmic hop timing curve.
        on_interrupted: Called with ``front_index`` whenever work in flight
            is stopped before committing, whether by the driver or by
            ``cancel``.
    """

    def __init__(
        self,
        items: Sequence[ItemState],
        driver: AnimationDriver,
        front_index: int = 0,
        hop_depth: int = 1,
        on_interrupted: CommitCallback | None = None,
    ) -> None:
        self.items = list(items)
        self.driver = driver
        self.front_index = front_index
        self.hop_depth = hop_depth
        self.on_interrupted = on_interrupted
        self.state = TransitionState.IDLE
        self._generation = 0
        self._active: list[Animation] = []

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def is_transitioning(self) -> bool:
        return self.state is TransitionState.TRANSITIONING

    # Public operations

    def transition_to(
        self,
        target: Any,
        on_complete: CommitCallback | None = None,
        duration: float = DEFAULT_DURATION,
        easing: Easing = linear,
    ) -> int:
        """Rotate so that item ``target`` ends at the front.

        The rotation takes the shorter way around; an exactly opposite target
        is reached rotating in the positive direction.

        Args:
            target: Index of the item to bring to the front.
            on_complete: Called with the new front index once committed.
            duration: Total duration in milliseconds.
            easing: Easing of the settle played when no hop is needed.

        Returns:
            The signed hop count chosen.

        Raises:
            ConfigurationError: If ``target`` is not an integer in
                ``[0, len(items))``.
        """
        index = _as_index(target, "Transition target")
        if not 0 <= index < self.total:
            raise ConfigurationError(
                f"Transition target {index} out of range [0, {self.total})"
            )
        distance = shortest_distance(self.front_index, index, self.total)
        self.transition(distance, on_complete, duration, easing)
        return distance

    def transition(
        self,
        distance: Any,
        on_complete: CommitCallback | None = None,
        duration: float = DEFAULT_DURATION,
        easing: Easing = linear,
    ) -> None:
        """Rotate by ``distance`` slots.

        A positive distance brings the items on the right toward the front.
        A zero distance plays a settle in place.

        Args:
            distance: Signed number of slots to rotate.
            on_complete: Called with the new front index once committed.
            duration: Total duration in milliseconds.
            easing: Easing of the settle played when ``distance`` is zero.

        Raises:
            ConfigurationError: If ``distance`` is not an integer or
                ``duration`` is negative.
        """
        hops = _as_index(distance, "Transition distance")
        _check_duration(duration)
        generation = self._begin()

        if hops == 0 or self.total <= 1:
            self._settle(generation, duration, easing, on_complete)
            return

        durations = hop_durations(hops, duration, self.hop_depth)
        step = 1 if hops > 0 else -1
        target = index_to_position(0, self.front_index + hops, self.total)
        logger.info(
            "transition_started",
            front=self.front_index,
            target=target,
            distance=hops,
            duration_ms=duration,
        )
        self._run_hop(generation, step, durations, on_complete)

    def settle_to_front(
        self,
        front_index: int,
        on_complete: CommitCallback | None = None,
        duration: float = DEFAULT_DURATION,
        easing: Easing = linear,
    ) -> None:
        """Make ``front_index`` the front and settle every item on its slot.

        Items animate from wherever they are shown to the nearest equivalent
        of their new slot, so nothing crosses the circle.
        """
        _check_duration(duration)
        generation = self._begin()
        self.front_index = front_index
        for item in self.items:
            item.set_current_index(index_to_position(front_index, item.index, self.total))
        self._settle(generation, duration, easing, on_complete)

    def expand(
        self,
        on_complete: CommitCallback | None = None,
        duration: float = DEFAULT_DURATION,
        easing: Easing = linear,
    ) -> bool:
        """Spread the items from the center out onto their slots.

        Only runs from the contracted state, where every item sits on the
        front slot (shown at 0 or N).

        Returns:
            True if the expansion started.
        """
        total = self.total
        if any(between(item.shown_index, 0, total) for item in self.items):
            logger.info("expand_skipped", reason="not_contracted")
            return False

        generation = self._begin()
        tweens: list[Tween] = []
        for item in self.items:
            final = index_to_position(self.front_index, item.index, total)
            # Leave from whichever wrap boundary is closer to the final slot
            start = round_half_up(final / total) * total
            item.settle(0, shown=start)
            tweens.extend(item.tweens_to(final, duration, easing))

        def done(finished: bool) -> None:
            if not self._still_current(generation, finished, "expand"):
                return
            self._anchor_items()
            self._finish(on_complete)

        self._start(tweens, done)
        return True

    def contract(
        self,
        on_complete: CommitCallback | None = None,
        duration: float = DEFAULT_DURATION,
        easing: Easing = linear,
    ) -> None:
        """Gather every item onto the front slot via the nearest wrap boundary."""
        generation = self._begin()
        total = self.total
        tweens: list[Tween] = []
        for item in self.items:
            final = round_half_up(item.shown_index / total) * total
            tweens.extend(item.tweens_to(final, duration, easing))

        def done(finished: bool) -> None:
            if not self._still_current(generation, finished, "contract"):
                return
            for item in self.items:
                item.settle(0)
            self._finish(on_complete)

        self._start(tweens, done)

    def cancel(self) -> None:
        """Stop whatever is in flight, keeping partial progress."""
        if not self.is_transitioning:
            return
        self._generation += 1
        active, self._active = self._active, []
        for animation in active:
            self.driver.stop(animation)
        self._interrupted()

    # Internals

    def _interrupted(self) -> None:
        self._active = []
        self.state = TransitionState.IDLE
        if self.on_interrupted is not None:
            self.on_interrupted(self.front_index)

    def _begin(self) -> int:
        if self.is_transitioning:
            logger.info("transition_superseded", front=self.front_index)
            self.cancel()
        self._generation += 1
        self.state = TransitionState.TRANSITIONING
        return self._generation

    def _still_current(self, generation: int, finished: bool, phase: str) -> bool:
        if generation != self._generation:
            return False
        if not finished:
            logger.info("transition_interrupted", phase=phase, front=self.front_index)
            self._interrupted()
            return False
        return True

    def _finish(self, on_complete: CommitCallback | None) -> None:
        self._active = []
        self.state = TransitionState.IDLE
        logger.info("transition_committed", front=self.front_index)
        if on_complete is not None:
            on_complete(self.front_index)

    def _start(self, tweens: Sequence[Tween], done: Callable[[bool], None]) -> None:
        started = run_parallel(self.driver, tweens, done)
        # Tweens may complete synchronously and start the next phase first
        self._active.extend(animation for animation in started if not animation.done)

    def _anchor_items(self) -> None:
        for item in self.items:
            item.settle(index_to_position(self.front_index, item.index, self.total))

    def _settle(
        self,
        generation: int,
        duration: float,
        easing: Easing,
        on_complete: CommitCallback | None,
    ) -> None:
        tweens: list[Tween] = []
        for item in self.items:
            # Settle toward whichever copy of the slot is on the near side
            destination = nearest_equivalent(item.current_index, item.shown_index, self.total)
            tweens.extend(item.tweens_to(destination, duration, easing))

        def done(finished: bool) -> None:
            if not self._still_current(generation, finished, "settle"):
                return
            for item in self.items:
                item.settle(item.current_index)
            self._finish(on_complete)

        self._start(tweens, done)

    def _run_hop(
        self,
        generation: int,
        step: int,
        durations: list[float],
        on_complete: CommitCallback | None,
    ) -> None:
        if generation != self._generation:
            return
        if not durations:
            self._finish(on_complete)
            return

        duration, remaining = durations[0], durations[1:]
        total = self.total

        tweens: list[Tween] = []
        for item in self.items:
            # The front item leaves through the wrap slot when rotating forward
            if step > 0 and item.current_index == 0 and item.shown_index < 0.5:
                item.set_shown_index(item.shown_index + total)
            destination = nearest_equivalent(
                item.current_index - step, item.shown_index, total, direction=-step
            )
            tweens.extend(item.tweens_to(destination, duration, linear))

        def hop_done(finished: bool) -> None:
            if not self._still_current(generation, finished, "hop"):
                return
            self._active = []
            self.front_index = (self.front_index + step) % total
            self._anchor_items()
            logger.debug(
                "hop_completed",
                front=self.front_index,
                remaining=len(remaining),
            )
            self._run_hop(generation, step, remaining, on_complete)

        self._start(tweens, hop_done)
