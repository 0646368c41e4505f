"""Animation driver advanced by explicit clock ticks.

Nothing moves until the caller advances the clock, which makes every
animation deterministic. Used by tests and headless rendering.

Example:
    driver = ManualAnimationDriver()
    selector = Selector(items, driver)
    selector.transition_to(2)
    driver.run_until_idle()
"""

from swipe_selector.core.animation import Animation
from swipe_selector.core.logging import get_logger
from swipe_selector.ports.animation import Animatable, CompletionCallback, Easing

logger = get_logger(__name__)

FRAME_MS = 16.0


class ManualAnimationDriver:
    """Runs animations on a clock the caller advances.

    Attributes:
        now: Milliseconds advanced since the driver was created.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._animations: list[Animation] = []

    @property
    def active_count(self) -> int:
        return len(self._animations)

    @property
    def is_idle(self) -> bool:
        return not self._animations

    def animate(
        self,
        target: Animatable,
        from_value: float,
        to_value: float,
        duration: float,
        easing: Easing,
        on_complete: CompletionCallback,
    ) -> Animation:
        animation = Animation(target, from_value, to_value, duration, easing, on_complete)
        animation.start()
        if duration <= 0:
            animation.complete(True)
            return animation
        self._animations.append(animation)
        return animation

    def stop(self, animation: Animation) -> None:
        if animation.done:
            return
        if animation in self._animations:
            self._animations.remove(animation)
        animation.complete(False)

    def advance(self, ms: float) -> None:
        """Move the clock forward by ``ms`` and complete finished animations.

        Animations started by completion callbacks during this tick begin
        on the next one.
        """
        self.now += ms
        for animation in list(self._animations):
            if animation.done:
                continue
            if animation.step(ms):
                self._animations.remove(animation)
                animation.complete(True)

    def run_until_idle(self, step: float = FRAME_MS, max_steps: int = 100_000) -> int:
        """Advance in ``step`` increments until nothing is running.

        Returns:
            The number of steps taken.

        Raises:
            RuntimeError: If animations are still running after ``max_steps``.
        """
        steps = 0
        while self._animations:
            if steps >= max_steps:
                raise RuntimeError(
                    f"Animations still running after {max_steps} steps"
                )
            self.advance(step)
            steps += 1
        return steps

    def finish_all(self) -> None:
        """Jump every running animation, and any it chains into, to its end."""
        while self._animations:
            for animation in list(self._animations):
                if animation.done:
                    continue
                self._animations.remove(animation)
                animation.complete(True)

    def interrupt_all(self) -> None:
        """Stop every running animation where it is."""
        logger.debug("animations_interrupted", count=len(self._animations))
        for animation in list(self._animations):
            self.stop(animation)
