"""Interpolation maps from a continuous carousel index to screen values.

The index space of an ``N`` item carousel is ``[0, N]`` where both ends are
the front slot. It is split into three arms, sampled independently:

* the right arm, slots ``0..R`` plus a vanishing sample just past ``R``;
* the hidden arm, the next ``H`` slots, running from the right target value
  over to the left target value;
* the left arm, a vanishing sample just before the first left slot, the
  ``L`` left slots, and the wrap slot ``N`` closing the circle.

Padding slots are sampled on top of the visible ones so the curvature near
a vanishing point is already shaped by the time the last visible item is
reached, and then spliced out again. The result is a piecewise linear table
per tracked property that every item of one selector shares.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

import numpy as np

from swipe_selector.core.errors import DegenerateInputError
from swipe_selector.core.scalers import (
    InverseFunction,
    Range,
    ScaleBuilder,
    build_inverse,
    scale_linear,
)


@dataclass(frozen=True)
class ArmBounds:
    """Target values and sampling options for the left or right arm.

    Attributes:
        point: Target value per property label (e.g. ``{"x": 150, "y": 25}``)
            reached at the arm's vanishing point.
        pad_points: Extra slots sampled beyond the visible ones and removed
            afterwards.
        scale: Scale builder used to sample the arm.
        depth: Depth handed to the scale builder.
        vanishing_gap: Offset of the vanishing sample past the last slot.
    """

    point: Mapping[str, float]
    pad_points: int = 0
    scale: ScaleBuilder = scale_linear
    depth: int = 1
    vanishing_gap: float = 0.25


@dataclass(frozen=True)
class HiddenArmBounds:
    """Sampling options for the hidden arm."""

    scale: ScaleBuilder = scale_linear
    depth: int = 1


@dataclass(frozen=True)
class Bounds:
    """Everything needed to build one interpolation map."""

    center: Mapping[str, float]
    left: ArmBounds
    right: ArmBounds
    hidden: HiddenArmBounds = field(default_factory=HiddenArmBounds)


def prepare_bounds(
    center: Mapping[str, float],
    left: Mapping[str, float],
    right: Mapping[str, float],
    pad_left: int,
    pad_right: int,
    scale: ScaleBuilder,
    depth: int,
    vanishing_gap: float,
) -> Bounds:
    """Build symmetric :class:`Bounds` sharing one scale, depth and gap."""
    return Bounds(
        center=dict(center),
        left=ArmBounds(dict(left), pad_left, scale, depth, vanishing_gap),
        right=ArmBounds(dict(right), pad_right, scale, depth, vanishing_gap),
        hidden=HiddenArmBounds(scale, depth),
    )


@dataclass(frozen=True)
class InterpolationMap:
    """A piecewise linear lookup table for one tracked property.

    Attributes:
        input_range: Strictly increasing carousel indices, from 0 to N.
        output_range: Property value at each index.
        label: Name of the tracked property.
        right_length: Number of leading samples forming the right arm.
        left_length: Number of trailing samples forming the left arm.
        right_inverse: Optional value-to-index lookup over the right arm.
        left_inverse: Optional value-to-index lookup over the left arm.
    """

    input_range: tuple[float, ...]
    output_range: tuple[float, ...]
    label: str = "x"
    right_length: int = 0
    left_length: int = 0
    right_inverse: InverseFunction | None = field(default=None, compare=False)
    left_inverse: InverseFunction | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if len(self.input_range) != len(self.output_range):
            raise DegenerateInputError(
                f"Interpolation map for {self.label!r} has "
                f"{len(self.input_range)} inputs but {len(self.output_range)} outputs"
            )
        if len(self.input_range) < 2:
            raise DegenerateInputError(
                f"Interpolation map for {self.label!r} needs at least 2 samples"
            )
        if any(b <= a for a, b in zip(self.input_range, self.input_range[1:])):
            raise DegenerateInputError(
                f"Interpolation map for {self.label!r} has a non-increasing input range"
            )

    @property
    def span(self) -> float:
        """Index at which the map wraps back onto its start."""
        return self.input_range[-1]

    def __call__(self, index: float) -> float:
        """Look up the property value at a (possibly wrapped) carousel index."""
        start, span = self.input_range[0], self.span
        if index < start or index > span:
            index = start + (index - start) % (span - start)
        return float(np.interp(index, self.input_range, self.output_range))

    def with_inverses(self) -> "InterpolationMap":
        """Return a copy carrying one inverse lookup per visible arm.

        The full map is not monotonic around the circle, so the right and
        left arms each get their own lookup.
        """
        right = build_inverse(
            self.input_range[: self.right_length],
            self.output_range[: self.right_length],
        )
        left = build_inverse(
            self.input_range[-self.left_length :],
            self.output_range[-self.left_length :],
        )
        return replace(self, right_inverse=right, left_inverse=left)


@dataclass(frozen=True)
class Interpolation2DMap:
    """Two interpolation maps sharing one input range."""

    x: InterpolationMap
    y: InterpolationMap

    @property
    def input_range(self) -> tuple[float, ...]:
        return self.x.input_range

    def __call__(self, index: float) -> tuple[float, float]:
        return self.x(index), self.y(index)


def _arm_indices(
    right_count: int,
    left_count: int,
    hidden_count: int,
    right_pad: int,
    left_pad: int,
    right_gap: float,
    left_gap: float,
) -> tuple[list[float], list[float], list[float]]:
    next_index = 0

    right_max = right_count + right_pad
    right_arm = [float(i) for i in range(next_index, right_max + 1)]
    right_arm.append(right_max + right_gap)
    next_index = right_max + 1

    hidden_arm = [float(i) for i in range(next_index, next_index + hidden_count)]
    next_index += hidden_count

    left_max = (next_index - 1) + left_pad + left_count
    left_arm = [next_index - left_gap]
    left_arm.extend(float(i) for i in range(next_index, left_max + 1))
    # Wrap slot, the transition back to the front
    left_arm.append(float(left_max + 1))

    return right_arm, hidden_arm, left_arm


def _sample(
    indices: Sequence[float],
    domain: Range,
    values: Range,
    scale: ScaleBuilder,
    depth: int,
) -> list[float]:
    if not indices:
        return []
    if domain.start == domain.end:
        return [values.start] * len(indices)
    curve = scale(domain, values, depth)
    return [curve(index) for index in indices]


def build_interpolation_map(
    bounds: Bounds,
    right_count: int,
    left_count: int,
    hidden_count: int = 0,
    label: str = "x",
    with_inverse: bool = False,
) -> InterpolationMap:
    """Build the interpolation map of one property.

    Args:
        bounds: Target values and sampling options per arm.
        right_count: Visible items on the right arm.
        left_count: Visible items on the left arm.
        hidden_count: Items on the hidden arm.
        label: Property label to read from the bounds' points.
        with_inverse: Attach per-arm inverse lookups to the result.

    Returns:
        The map over ``[0, right_count + hidden_count + left_count + 1]``.
    """
    right, left = bounds.right, bounds.left
    center_value = bounds.center[label]
    right_value = right.point[label]
    left_value = left.point[label]

    right_arm, hidden_arm, left_arm = _arm_indices(
        right_count,
        left_count,
        hidden_count,
        right.pad_points,
        left.pad_points,
        right.vanishing_gap,
        left.vanishing_gap,
    )

    right_out = _sample(
        right_arm,
        Range(right_arm[0], right_arm[-1]),
        Range(center_value, right_value),
        right.scale,
        right.depth,
    )
    hidden_out = _sample(
        hidden_arm,
        Range(right_arm[-1], left_arm[0]),
        Range(right_value, left_value),
        bounds.hidden.scale,
        bounds.hidden.depth,
    )
    # Walked from the wrap slot back toward the far left so both ends meet the center
    left_out = _sample(
        left_arm,
        Range(left_arm[-1], left_arm[0]),
        Range(center_value, left_value),
        left.scale,
        left.depth,
    )

    # Splice the padding back out, keeping the vanishing samples
    right_out = right_out[: right_count + 1] + right_out[-1:]
    left_out = left_out[:1] + left_out[1 + left.pad_points :]

    right_in, hidden_in, left_in = _arm_indices(
        right_count,
        left_count,
        hidden_count,
        0,
        0,
        right.vanishing_gap,
        left.vanishing_gap,
    )

    # A zero gap puts the vanishing sample on top of the last slot
    if right.vanishing_gap == 0:
        right_in, right_out = right_in[:-1], right_out[:-1]
    if left.vanishing_gap == 0:
        left_in, left_out = left_in[1:], left_out[1:]

    result = InterpolationMap(
        input_range=tuple(right_in + hidden_in + left_in),
        output_range=tuple(right_out + hidden_out + left_out),
        label=label,
        right_length=len(right_in),
        left_length=len(left_in),
    )
    return result.with_inverses() if with_inverse else result


def build_2d_interpolation_map(
    bounds: Bounds,
    right_count: int,
    left_count: int,
    hidden_count: int = 0,
    with_inverse: bool = False,
) -> Interpolation2DMap:
    """Build the ``x`` and ``y`` maps of a 2D property."""
    return Interpolation2DMap(
        x=build_interpolation_map(
            bounds, right_count, left_count, hidden_count, "x", with_inverse
        ),
        y=build_interpolation_map(
            bounds, right_count, left_count, hidden_count, "y", with_inverse
        ),
    )


def window_interpolation_map(
    source: InterpolationMap,
    default: float,
    ranges: Sequence[tuple[float, float]],
) -> InterpolationMap:
    """Force every sample outside the given closed intervals to ``default``.

    Args:
        source: Map to window.
        default: Value used outside every interval.
        ranges: ``(start, end)`` index intervals whose samples are kept.

    Returns:
        A new map sharing the source's input range.
    """
    def keep(index: float) -> bool:
        return any(start <= index <= end for start, end in ranges)

    outputs = tuple(
        value if keep(index) else default
        for index, value in zip(source.input_range, source.output_range)
    )
    return replace(source, output_range=outputs, right_inverse=None, left_inverse=None)
