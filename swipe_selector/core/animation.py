"""Animated values and composite animation helpers.

``AnimatedValue`` is the engine-side handle an ``AnimationDriver`` moves.
``Animation`` is the record a driver keeps per running tween; drivers call
``step`` as time passes and ``complete`` when the tween ends or is stopped.
``run_parallel`` groups tweens so they start together and report once.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from swipe_selector.ports.animation import (
    Animatable,
    AnimationDriver,
    CompletionCallback,
    Easing,
)


class AnimatedValue:
    """A single numeric value driven by animations."""

    def __init__(self, value: float = 0.0) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        self._value = float(value)

    def __repr__(self) -> str:
        return f"AnimatedValue({self._value!r})"


class AnimatedValueXY:
    """A pair of animated values for 2D properties."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = AnimatedValue(x)
        self.y = AnimatedValue(y)

    def set_value(self, x: float, y: float) -> None:
        self.x.set_value(x)
        self.y.set_value(y)


@dataclass(eq=False)
class Animation:
    """A tween of one animatable value.

    Attributes:
        target: The value being driven.
        from_value: Value at time zero.
        to_value: Value once finished.
        duration: Duration in milliseconds.
        easing: Curve mapping normalized time to progress.
        on_complete: Completion callback, invoked at most once.
        elapsed: Milliseconds advanced so far.
        done: Whether the completion callback has fired.
    """

    target: Animatable
    from_value: float
    to_value: float
    duration: float
    easing: Easing
    on_complete: CompletionCallback
    elapsed: float = 0.0
    done: bool = field(default=False, init=False)

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    def start(self) -> None:
        """Put the target at the start value."""
        self.target.set_value(self.from_value)

    def step(self, dt: float) -> bool:
        """Advance by ``dt`` milliseconds and update the target.

        Returns:
            True once the end value has been reached.
        """
        self.elapsed += dt
        eased = self.easing(self.progress)
        self.target.set_value(self.from_value + (self.to_value - self.from_value) * eased)
        return self.progress >= 1.0

    def complete(self, finished: bool) -> None:
        """Report completion once; later calls are ignored."""
        if self.done:
            return
        self.done = True
        if finished:
            self.target.set_value(self.to_value)
        self.on_complete(finished)


class Tween(NamedTuple):
    """Arguments of one ``AnimationDriver.animate`` call, minus the callback."""

    target: Animatable
    from_value: float
    to_value: float
    duration: float
    easing: Easing


def run_parallel(
    driver: AnimationDriver,
    tweens: Sequence[Tween],
    on_complete: Callable[[bool], None],
) -> list[Animation]:
    """Start every tween together and report once all of them have ended.

    Args:
        driver: Driver that runs the tweens.
        tweens: Tweens to start.
        on_complete: Called once with True when every tween finished, or
            False when at least one was stopped early.

    Returns:
        The started animations, for stopping them as a group.
    """
    if not tweens:
        on_complete(True)
        return []

    pending = len(tweens)
    all_finished = True

    def on_one_complete(finished: bool) -> None:
        nonlocal pending, all_finished
        pending -= 1
        all_finished = all_finished and finished
        if pending == 0:
            on_complete(all_finished)

    return [
        driver.animate(
            tween.target,
            tween.from_value,
            tween.to_value,
            tween.duration,
            tween.easing,
            on_one_complete,
        )
        for tween in tweens
    ]
