"""Animation driver factory.

Supported drivers:
- "asyncio": Frame ticks on the running event loop
- "manual": Clock advanced explicitly by the caller, for tests and headless use

Example:
    driver = create_animation_driver("manual")
    driver = create_animation_driver("asyncio", frame_ms=8.0)
"""

from __future__ import annotations

from typing import Union

from swipe_selector.adapters.asyncio_driver import AsyncioAnimationDriver
from swipe_selector.adapters.manual_driver import ManualAnimationDriver

DriverType = Union[AsyncioAnimationDriver, ManualAnimationDriver]


def create_animation_driver(kind: str, **kwargs: float) -> DriverType:
    """Create an animation driver of the given kind.

    Args:
        kind: "asyncio" or "manual".
        **kwargs: Driver options:
            - frame_ms: Frame interval for the "asyncio" driver.

    Returns:
        A driver implementing the AnimationDriver protocol.

    Raises:
        ValueError: If the kind is not supported.
    """
    if kind == "asyncio":
        return AsyncioAnimationDriver(**kwargs)

    if kind == "manual":
        if kwargs:
            raise ValueError(f"Unexpected options for manual driver: {sorted(kwargs)}")
        return ManualAnimationDriver()

    raise ValueError(
        f"Unsupported animation driver: {kind!r}. Supported drivers: 'asyncio', 'manual'"
    )
