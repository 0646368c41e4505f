"""Selector configuration models and their resolution.

Options are validated with pydantic and accept both the snake_case field
names and the camelCase names hosts usually pass (``leftPoint``,
``scalingOptions``, ``simpleScrollDistance``...). Resolution helpers turn the
validated options into what the engine consumes: arm counts, scale builders
and the scroll unit vector.
"""

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from swipe_selector.core.circular import bound
from swipe_selector.core.easing import EASINGS
from swipe_selector.core.errors import ConfigurationError
from swipe_selector.core.logging import get_logger
from swipe_selector.core.scalers import (
    ScaleBuilder,
    scale_linear,
    scale_logarithmic,
    scale_sqrt,
)

logger = get_logger(__name__)

MIN_VANISHING_GAP = 0.0
MAX_VANISHING_GAP = 0.45


class ScalingKind(str, Enum):
    """Scaling applied to size, location or opacity animation."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    SQRT = "sqrt"


class ScrollDirection(str, Enum):
    """How a drag displacement is projected onto the index axis."""

    HORIZONTAL = "horizontal"  # dragging right increases the index
    VERTICAL = "vertical"
    ADAPTIVE = "adaptive"  # follows the line between the vanishing points
    CUSTOM = "custom"


_SCALE_BUILDERS: dict[ScalingKind, ScaleBuilder] = {
    ScalingKind.LINEAR: scale_linear,
    ScalingKind.LOGARITHMIC: scale_logarithmic,
    ScalingKind.SQRT: scale_sqrt,
}


class _OptionsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class Point(_OptionsModel):
    """A 2D coordinate, in the host's screen units."""

    x: float = 0.0
    y: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


class ScalingOptions(_OptionsModel):
    """Curve selection and sampling options for the interpolation maps."""

    size_scaling: ScalingKind = ScalingKind.LINEAR
    size_scaling_depth: int = 1
    location_scaling: ScalingKind = ScalingKind.LINEAR
    location_scaling_depth: int = 1
    opacity_scaling: ScalingKind = ScalingKind.LINEAR
    opacity_scaling_depth: int = 1
    pad_right_items: int = Field(0, ge=0)
    pad_left_items: int = Field(0, ge=0)
    vanishing_gap: float = 0.25

    @field_validator("vanishing_gap")
    @classmethod
    def clamp_vanishing_gap(cls, value: float) -> float:
        clamped = bound(value, MIN_VANISHING_GAP, MAX_VANISHING_GAP)
        if clamped != value:
            logger.warning(
                "vanishing_gap_clamped",
                requested=value,
                clamped=clamped,
            )
        return clamped


class SelectorOptions(_OptionsModel):
    """Every option a host can pass to a selector.

    Attributes:
        show: Cap on the number of visible items when ``hide`` is set.
        hide: Move items beyond ``show`` onto the hidden arc.
        left_point: Target coordinate of the left vanishing point.
        right_point: Target coordinate of the right vanishing point.
        scaling_options: Curves and sampling options for the maps.
        scroll_direction: How drags are projected onto the index axis.
        custom_vector: Scroll vector used with ``ScrollDirection.CUSTOM``.
        simple_scroll_distance: Drag distance worth one index.
        default_index: Item at the front initially.
        transition_duration: Duration of a full rotation or expansion, in ms.
        settle_duration: Duration of the settle after a drag, in ms.
        easing: Name of the easing used for settles and expansion.
        hop_depth: Depth of the logarithmic hop timing curve.
    """

    show: int = Field(3, ge=1)
    hide: bool = False
    left_point: Point = Point(x=-150, y=25)
    right_point: Point = Point(x=150, y=25)
    scaling_options: ScalingOptions = ScalingOptions()
    scroll_direction: ScrollDirection = ScrollDirection.HORIZONTAL
    custom_vector: Point = Point(x=1, y=0)
    simple_scroll_distance: float = Field(100.0, gt=0)
    default_index: int = Field(0, ge=0)
    transition_duration: float = Field(1000.0, gt=0)
    settle_duration: float = Field(150.0, ge=0)
    easing: str = "ease_in_out_quad"
    hop_depth: int = 1

    @field_validator("easing")
    @classmethod
    def known_easing(cls, value: str) -> str:
        if value not in EASINGS:
            raise ValueError(f"unknown easing {value!r}")
        return value


def load_options(options: Mapping[str, Any] | SelectorOptions | None = None) -> SelectorOptions:
    """Validate host-supplied options.

    Args:
        options: A mapping using field names or camelCase aliases, an already
            validated ``SelectorOptions``, or None for the defaults.

    Returns:
        The validated options.

    Raises:
        ConfigurationError: If any option fails validation.
    """
    if options is None:
        return SelectorOptions()
    if isinstance(options, SelectorOptions):
        return options
    try:
        return SelectorOptions.model_validate(dict(options))
    except ValidationError as ex:
        raise ConfigurationError.from_exception(ex) from ex


def arm_counts(item_count: int, show: int, hide: bool) -> tuple[int, int, int]:
    """Split the items other than the front one across the arms.

    Returns:
        ``(left_count, right_count, hidden_count)``. The right arm gets the
        extra item when the visible count is even.
    """
    if hide:
        shown = int(bound(item_count, 0, show))
        hidden = max(item_count - show, 0)
    else:
        shown = item_count
        hidden = 0

    others = max(shown - 1, 0)
    left = others // 2
    right = math.ceil(others / 2)
    return left, right, hidden


def resolve_scaling(kind: ScalingKind) -> ScaleBuilder:
    """Turn a scaling option into its scale builder."""
    return _SCALE_BUILDERS.get(kind, scale_linear)


def _unit(vector: np.ndarray) -> np.ndarray | None:
    norm = float(np.linalg.norm(vector))
    if norm == 0:
        return None
    return vector / norm


def resolve_scroll_vector(
    direction: ScrollDirection,
    left_point: Point | None = None,
    right_point: Point | None = None,
    custom_vector: Point | None = None,
) -> np.ndarray:
    """Resolve a scroll direction to a unit vector.

    Args:
        direction: The configured scroll direction.
        left_point: Left vanishing point, used by ``ADAPTIVE``.
        right_point: Right vanishing point, used by ``ADAPTIVE``.
        custom_vector: Vector used by ``CUSTOM``.

    Returns:
        A numpy array of shape ``(2,)`` with unit length.

    Raises:
        ConfigurationError: If a custom vector has zero length.
    """
    horizontal = np.array([1.0, 0.0])

    if direction is ScrollDirection.VERTICAL:
        return np.array([0.0, -1.0])

    if direction is ScrollDirection.ADAPTIVE:
        left = left_point or Point(x=-1, y=0)
        right = right_point or Point(x=1, y=0)
        axis = _unit(np.array([right.x - left.x, right.y - left.y]))
        return horizontal if axis is None else axis

    if direction is ScrollDirection.CUSTOM:
        custom = custom_vector or Point(x=1, y=0)
        axis = _unit(np.array([custom.x, custom.y]))
        if axis is None:
            raise ConfigurationError("Custom scroll vector must have a non-zero length")
        return axis

    return horizontal
