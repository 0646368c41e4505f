"""Scaling functions used to shape the carousel arms.

Every builder takes an input range and an output range and returns a plain
callable mapping one onto the other. The linear builder interpolates
straight; the logarithmic and square-root builders normalize the input to
[0, 1], bend it ``|depth|`` times and stretch it back onto the output range.
A positive depth compresses motion toward the far end of the range (which
is what makes items near a vanishing point appear to move less per index),
a negative depth applies the inverse curve.

Example:
    from swipe_selector.core.scalers import Range, scale_logarithmic

    curve = scale_logarithmic(Range(0, 4), Range(0, 1000))
    curve(1)  # ~ 399.5
"""

import math
from collections.abc import Callable, Sequence
from typing import NamedTuple

import numpy as np

from swipe_selector.core.errors import DegenerateInputError

ScaleFunction = Callable[[float], float]
InverseFunction = Callable[[float], float]


class Range(NamedTuple):
    """A closed numeric interval given by its two ends (either order)."""

    start: float
    end: float


ScaleBuilder = Callable[[Range, Range, int], ScaleFunction]

_E = math.e


def _normalize(value: float, input_range: Range) -> float:
    # Callers must not hand over zero-width input ranges
    return (value - input_range.start) / (input_range.end - input_range.start)


def _stretch(fraction: float, output_range: Range) -> float:
    return output_range.start + fraction * (output_range.end - output_range.start)


def _iterated(
    input_range: Range,
    output_range: Range,
    depth: int,
    forward: Callable[[float], float],
    backward: Callable[[float], float],
) -> ScaleFunction:
    bend = forward if depth > 0 else backward
    passes = abs(depth)

    def scale(value: float) -> float:
        fraction = _normalize(value, input_range)
        for _ in range(passes):
            fraction = bend(fraction)
        return _stretch(fraction, output_range)

    return scale


def scale_linear(input_range: Range, output_range: Range, depth: int = 1) -> ScaleFunction:
    """Linear interpolation from ``input_range`` onto ``output_range``.

    ``depth`` is accepted so every builder shares one signature; it is ignored.
    """

    def scale(value: float) -> float:
        return _stretch(_normalize(value, input_range), output_range)

    return scale


def scale_logarithmic(
    input_range: Range, output_range: Range, depth: int = 1
) -> ScaleFunction:
    """Logarithmic mapping, ``x -> ln(1 + (e - 1) x)`` applied ``depth`` times.

    A negative depth applies the exact inverse ``x -> (e^x - 1) / (e - 1)``
    instead. A depth of zero degenerates to :func:`scale_linear`.
    """
    if depth == 0:
        return scale_linear(input_range, output_range)

    return _iterated(
        input_range,
        output_range,
        depth,
        forward=lambda x: math.log(1 + (_E - 1) * x),
        backward=lambda x: (math.exp(x) - 1) / (_E - 1),
    )


def scale_sqrt(input_range: Range, output_range: Range, depth: int = 1) -> ScaleFunction:
    """Square-root mapping applied ``depth`` times; negative depth squares."""
    if depth == 0:
        return scale_linear(input_range, output_range)

    return _iterated(
        input_range,
        output_range,
        depth,
        forward=math.sqrt,
        backward=lambda x: x * x,
    )


def build_inverse(
    input_range: Sequence[float], output_range: Sequence[float]
) -> InverseFunction:
    """Build a lookup from output values back to input values.

    The samples must be monotonic in their outputs, either increasing or
    decreasing. The returned callable finds the bracketing segment and
    interpolates linearly inside it; values beyond the sampled outputs clamp
    to the first or last input.

    Args:
        input_range: Sampled inputs, in sample order.
        output_range: Sampled outputs, parallel to ``input_range``.

    Returns:
        A callable mapping an output value to its input.

    Raises:
        DegenerateInputError: If the lengths differ, fewer than two samples
            are given, or the outputs are not monotonic.
    """
    if len(input_range) != len(output_range):
        raise DegenerateInputError(
            f"Input and output ranges differ in length: "
            f"{len(input_range)} != {len(output_range)}"
        )
    if len(input_range) < 2:
        raise DegenerateInputError(
            f"Inverse lookup needs at least 2 samples, got {len(input_range)}"
        )

    inputs = np.asarray(input_range, dtype=float)
    outputs = np.asarray(output_range, dtype=float)

    # Direction is detected once; decreasing caches are stored reversed
    if outputs[0] > outputs[-1]:
        inputs = inputs[::-1].copy()
        outputs = outputs[::-1].copy()

    if np.any(np.diff(outputs) < 0):
        raise DegenerateInputError("Inverse lookup needs monotonic output samples")

    def inverse(value: float) -> float:
        return float(np.interp(value, outputs, inputs))

    return inverse
