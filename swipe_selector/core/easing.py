"""Easing curves for animated transitions.

Each curve maps normalized time ``t`` in ``[0, 1]`` onto animation progress
in ``[0, 1]``.
"""

from collections.abc import Callable

from swipe_selector.core.errors import ConfigurationError

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Linear interpolation - no easing."""
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in."""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out."""
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out."""
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in."""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out."""
    t -= 1
    return t * t * t + 1


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out."""
    if t < 0.5:
        return 4 * t * t * t
    return 1 - pow(-2 * t + 2, 3) / 2


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
}


def get_easing(name: str) -> Easing:
    """Get an easing function by name.

    Args:
        name: One of the keys of ``EASINGS``.

    Returns:
        The easing function.

    Raises:
        ConfigurationError: If no easing has that name.
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown easing: {name!r}. Available: {', '.join(sorted(EASINGS))}"
        ) from None
