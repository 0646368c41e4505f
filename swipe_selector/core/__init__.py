"""Core carousel engine.

This module contains the platform-agnostic geometry, index arithmetic and
transition sequencing of the swipe selector.
"""

from swipe_selector.core.animation import (
    AnimatedValue,
    AnimatedValueXY,
    Animation,
    Tween,
    run_parallel,
)
from swipe_selector.core.circular import (
    CircularSequence,
    between,
    bound,
    collate_for_render,
    index_to_position,
    nearest_equivalent,
    round_half_up,
    shortest_distance,
)
from swipe_selector.core.config import (
    Point,
    ScalingKind,
    ScalingOptions,
    ScrollDirection,
    SelectorOptions,
    arm_counts,
    load_options,
    resolve_scroll_vector,
)
from swipe_selector.core.easing import EASINGS, get_easing
from swipe_selector.core.errors import (
    ConfigurationError,
    DegenerateInputError,
    ErrorCategory,
    IdentityWarning,
    SelectorError,
)
from swipe_selector.core.gesture import GestureProjector, project
from swipe_selector.core.interpolation import (
    Bounds,
    Interpolation2DMap,
    InterpolationMap,
    build_2d_interpolation_map,
    build_interpolation_map,
    prepare_bounds,
    window_interpolation_map,
)
from swipe_selector.core.items import ItemMaps, ItemState
from swipe_selector.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from swipe_selector.core.scalers import (
    Range,
    build_inverse,
    scale_linear,
    scale_logarithmic,
    scale_sqrt,
)
from swipe_selector.core.selector import ChangeEvent, ItemSpec, Selector
from swipe_selector.core.transitions import (
    TransitionOrchestrator,
    TransitionState,
    hop_durations,
)

__all__ = [
    # Animation
    "AnimatedValue",
    "AnimatedValueXY",
    "Animation",
    "Tween",
    "run_parallel",
    # Circular arithmetic
    "CircularSequence",
    "between",
    "bound",
    "collate_for_render",
    "index_to_position",
    "nearest_equivalent",
    "round_half_up",
    "shortest_distance",
    # Configuration
    "Point",
    "ScalingKind",
    "ScalingOptions",
    "ScrollDirection",
    "SelectorOptions",
    "arm_counts",
    "load_options",
    "resolve_scroll_vector",
    # Easing
    "EASINGS",
    "get_easing",
    # Error handling
    "ConfigurationError",
    "DegenerateInputError",
    "ErrorCategory",
    "IdentityWarning",
    "SelectorError",
    # Gestures
    "GestureProjector",
    "project",
    # Interpolation
    "Bounds",
    "Interpolation2DMap",
    "InterpolationMap",
    "build_2d_interpolation_map",
    "build_interpolation_map",
    "prepare_bounds",
    "window_interpolation_map",
    # Items
    "ItemMaps",
    "ItemState",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
    # Scalers
    "Range",
    "build_inverse",
    "scale_linear",
    "scale_logarithmic",
    "scale_sqrt",
    # Selector
    "ChangeEvent",
    "ItemSpec",
    "Selector",
    # Transitions
    "TransitionOrchestrator",
    "TransitionState",
    "hop_durations",
]
