"""Animation driver ticking on the running asyncio event loop.

Frames are scheduled with ``loop.call_later`` while anything is animating
and stop once the driver is idle. Completion callbacks run on the loop,
so a chain of hops proceeds without any task awaiting it.
"""

import asyncio

from swipe_selector.core.animation import Animation
from swipe_selector.core.logging import get_logger
from swipe_selector.ports.animation import Animatable, CompletionCallback, Easing

logger = get_logger(__name__)


class AsyncioAnimationDriver:
    """Drives animations from frame callbacks on the event loop.

    Must be used from inside a running loop.

    Attributes:
        frame_ms: Interval between frames, in milliseconds.
    """

    def __init__(self, frame_ms: float = 16.0) -> None:
        self.frame_ms = frame_ms
        self._animations: list[Animation] = []
        self._handle: asyncio.TimerHandle | None = None
        self._last_tick = 0.0
        self._idle = asyncio.Event()
        self._idle.set()

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
        self._idle.clear()
        self._schedule()
        return animation

    def stop(self, animation: Animation) -> None:
        if animation.done:
            return
        if animation in self._animations:
            self._animations.remove(animation)
        animation.complete(False)
        self._check_idle()

    async def wait_idle(self) -> None:
        """Wait until no animation is running."""
        await self._idle.wait()

    def close(self) -> None:
        """Stop ticking and interrupt everything still running."""
        if self._animations:
            logger.debug("animations_interrupted", count=len(self._animations))
        for animation in list(self._animations):
            self.stop(animation)
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        if self._handle is not None:
            return
        loop = asyncio.get_running_loop()
        self._last_tick = loop.time()
        self._handle = loop.call_later(self.frame_ms / 1000, self._tick)

    def _tick(self) -> None:
        self._handle = None
        loop = asyncio.get_running_loop()
        now = loop.time()
        elapsed_ms = (now - self._last_tick) * 1000
        self._last_tick = now

        for animation in list(self._animations):
            if animation.done:
                continue
            if animation.step(elapsed_ms):
                self._animations.remove(animation)
                animation.complete(True)

        if self._animations:
            self._schedule()
        self._check_idle()

    def _check_idle(self) -> None:
        if not self._animations:
            self._idle.set()
