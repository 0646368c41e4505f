"""Ports (interfaces) for the engine.

This module contains Protocol definitions for the collaborators the engine
does not implement itself, chiefly the host framework's animation timing.
"""

from swipe_selector.ports.animation import (
    Animatable,
    AnimationDriver,
    CompletionCallback,
    Easing,
)

__all__ = [
    "Animatable",
    "AnimationDriver",
    "CompletionCallback",
    "Easing",
]
