"""Adapters for host animation timing.

This module contains implementations of the AnimationDriver protocol.
"""

from swipe_selector.adapters.asyncio_driver import AsyncioAnimationDriver
from swipe_selector.adapters.factory import create_animation_driver
from swipe_selector.adapters.manual_driver import ManualAnimationDriver

__all__ = [
    "AsyncioAnimationDriver",
    "ManualAnimationDriver",
    "create_animation_driver",
]
