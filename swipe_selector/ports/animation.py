"""Animation protocols.

The engine never owns a clock. It describes what should move (an
``Animatable`` value, from where to where, for how long, with which easing)
and hands that to an ``AnimationDriver`` supplied by the host. The driver
reports back through a completion callback receiving ``finished``: True when
the animation ran to its end, False when it was stopped early.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from swipe_selector.core.animation import Animation

Easing = Callable[[float], float]
CompletionCallback = Callable[[bool], None]


class Animatable(Protocol):
    """A numeric value an animation can drive."""

    @property
    def value(self) -> float:
        """The current value."""
        ...

    def set_value(self, value: float) -> None:
        """Overwrite the current value.

        Args:
            value: The new value.
        """
        ...


class AnimationDriver(Protocol):
    """Protocol for the timing primitive of the host UI framework.

    Implementations advance animations over time and must invoke each
    animation's completion callback exactly once.
    """

    def animate(
        self,
        target: Animatable,
        from_value: float,
        to_value: float,
        duration: float,
        easing: Easing,
        on_complete: CompletionCallback,
    ) -> "Animation":
        """Start animating ``target`` from ``from_value`` to ``to_value``.

        Args:
            target: The value to drive.
            from_value: Value at the start of the animation.
            to_value: Value at the end of the animation.
            duration: Duration in milliseconds.
            easing: Curve mapping normalized time to progress.
            on_complete: Called once with ``finished``.

        Returns:
            The running animation, usable with ``stop``.
        """
        ...

    def stop(self, animation: "Animation") -> None:
        """Stop an animation, reporting ``finished=False`` if still running.

        Args:
            animation: An animation returned by ``animate``.
        """
        ...
