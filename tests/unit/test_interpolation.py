"""Tests for interpolation map construction."""

import pytest

from swipe_selector.core.errors import DegenerateInputError
from swipe_selector.core.interpolation import (
    InterpolationMap,
    build_2d_interpolation_map,
    build_interpolation_map,
    prepare_bounds,
    window_interpolation_map,
)
from swipe_selector.core.scalers import scale_linear, scale_logarithmic

CENTER = {"x": 0.0, "y": 0.0}
LEFT = {"x": -150.0, "y": 25.0}
RIGHT = {"x": 150.0, "y": 25.0}


def location_bounds(gap: float = 0.25, pad_left: int = 0, pad_right: int = 0, scale=scale_linear):
    return prepare_bounds(CENTER, LEFT, RIGHT, pad_left, pad_right, scale, 1, gap)


class TestBuildInterpolationMap:
    """Tests for build_interpolation_map."""

    def test_input_range_layout(self) -> None:
        """Should lay out right, hidden and left samples in order."""
        result = build_interpolation_map(location_bounds(), 1, 1, 2)
        assert result.input_range == (0, 1, 1.25, 2, 3, 3.75, 4, 5)

    def test_output_values(self) -> None:
        """Should reach the arm targets at the vanishing samples."""
        result = build_interpolation_map(location_bounds(), 1, 1, 2)
        expected = (0, 120, 150, 60, -60, -150, -120, 0)
        assert result.output_range == pytest.approx(expected)

    def test_both_ends_are_the_center(self) -> None:
        result = build_interpolation_map(location_bounds(), 2, 2)
        assert result(0) == pytest.approx(0)
        assert result(result.span) == pytest.approx(0)
        assert result.span == 5

    def test_lookups_fold_around_the_circle(self) -> None:
        """Should treat indices outside [0, N] modulo N."""
        result = build_interpolation_map(location_bounds(), 1, 1, 2)
        assert result(6) == pytest.approx(result(1))
        assert result(-1) == pytest.approx(result(4))

    def test_padding_is_spliced_out(self) -> None:
        """Should sample pad slots and then drop them."""
        result = build_interpolation_map(location_bounds(pad_right=1), 1, 1)
        assert result.input_range == (0, 1, 1.25, 1.75, 2, 3)
        assert result(1) == pytest.approx(150 / 2.25)

    def test_zero_gap_drops_vanishing_samples(self) -> None:
        """Should keep the input range strictly increasing."""
        result = build_interpolation_map(location_bounds(gap=0), 1, 1)
        assert result.input_range == (0, 1, 2, 3)
        assert result.output_range == pytest.approx((0, 150, -150, 0))

    def test_single_hidden_slot(self) -> None:
        """Should sample a one-slot hidden arm between the vanishing points."""
        result = build_interpolation_map(location_bounds(), 1, 1, 1)
        assert result(2) == pytest.approx(0)

    @pytest.mark.parametrize(("right", "left", "hidden"), [(0, 0, 0), (1, 0, 0), (0, 0, 3)])
    def test_degenerate_arms(self, right: int, left: int, hidden: int) -> None:
        """Should build a valid map with empty arms."""
        result = build_interpolation_map(location_bounds(), right, left, hidden)
        assert result.span == right + left + hidden + 1
        assert result(0) == pytest.approx(0)

    def test_logarithmic_arm_moves_less_near_vanishing_point(self) -> None:
        result = build_interpolation_map(location_bounds(scale=scale_logarithmic), 3, 3)
        first_step = result(1) - result(0)
        last_step = result(3) - result(2)
        assert first_step > last_step > 0

    def test_inverses_round_trip(self) -> None:
        """Should recover indices from values on each visible arm."""
        result = build_interpolation_map(location_bounds(), 2, 2, with_inverse=True)
        assert result.right_inverse is not None
        assert result.left_inverse is not None
        for index in (0, 0.5, 1, 2):
            assert result.right_inverse(result(index)) == pytest.approx(index)
        for index in (3, 3.5, 4, 5):
            assert result.left_inverse(result(index)) == pytest.approx(index)


class TestInterpolationMap:
    """Tests for InterpolationMap validation."""

    def test_rejects_mismatched_lengths(self) -> None:
        with pytest.raises(DegenerateInputError):
            InterpolationMap(input_range=(0, 1, 2), output_range=(0, 1))

    def test_rejects_single_sample(self) -> None:
        with pytest.raises(DegenerateInputError):
            InterpolationMap(input_range=(0,), output_range=(0,))

    def test_rejects_non_increasing_input(self) -> None:
        with pytest.raises(DegenerateInputError):
            InterpolationMap(input_range=(0, 1, 1), output_range=(0, 1, 2))


class TestBuild2DInterpolationMap:
    """Tests for build_2d_interpolation_map."""

    def test_maps_both_axes(self) -> None:
        result = build_2d_interpolation_map(location_bounds(), 1, 1, 2)
        x, y = result(1.25)
        assert x == pytest.approx(150)
        assert y == pytest.approx(25)
        assert result(0) == pytest.approx((0, 0))


class TestWindowInterpolationMap:
    """Tests for window_interpolation_map."""

    def test_keeps_only_windowed_samples(self) -> None:
        opacity = build_interpolation_map(
            prepare_bounds(
                {"opacity": 1}, {"opacity": 0.5}, {"opacity": 0.5}, 0, 0, scale_linear, 1, 0.25
            ),
            1,
            1,
            2,
            "opacity",
        )
        windowed = window_interpolation_map(opacity, 0.0, [(0, 1), (4, 5)])
        assert windowed.input_range == opacity.input_range
        assert windowed(0) == pytest.approx(1)
        assert windowed(1) == pytest.approx(0.6)
        assert windowed(2) == pytest.approx(0)
        assert windowed(4) == pytest.approx(0.6)
        assert windowed(5) == pytest.approx(1)
