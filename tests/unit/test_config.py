"""Tests for selector options and their resolution."""

import numpy as np
import pytest
from pydantic import ValidationError

from swipe_selector.core.config import (
    MAX_VANISHING_GAP,
    Point,
    ScalingKind,
    ScalingOptions,
    ScrollDirection,
    SelectorOptions,
    arm_counts,
    load_options,
    resolve_scaling,
    resolve_scroll_vector,
)
from swipe_selector.core.errors import ConfigurationError, ErrorCategory
from swipe_selector.core.scalers import scale_linear, scale_logarithmic, scale_sqrt


class TestLoadOptions:
    """Tests for load_options."""

    def test_defaults(self) -> None:
        options = load_options(None)
        assert options.show == 3
        assert options.hide is False
        assert options.left_point == Point(x=-150, y=25)
        assert options.right_point == Point(x=150, y=25)
        assert options.scaling_options.vanishing_gap == 0.25
        assert options.simple_scroll_distance == 100
        assert options.easing == "ease_in_out_quad"

    def test_accepts_camel_case(self) -> None:
        options = load_options(
            {
                "leftPoint": {"x": -200, "y": 0},
                "simpleScrollDistance": 50,
                "scalingOptions": {"sizeScaling": "logarithmic", "padLeftItems": 2},
            }
        )
        assert options.left_point.x == -200
        assert options.simple_scroll_distance == 50
        assert options.scaling_options.size_scaling is ScalingKind.LOGARITHMIC
        assert options.scaling_options.pad_left_items == 2

    def test_accepts_field_names(self) -> None:
        options = load_options({"default_index": 2, "scroll_direction": "vertical"})
        assert options.default_index == 2
        assert options.scroll_direction is ScrollDirection.VERTICAL

    def test_passes_through_validated_options(self) -> None:
        options = SelectorOptions(show=5)
        assert load_options(options) is options

    def test_clamps_vanishing_gap(self) -> None:
        """Should clamp an oversized vanishing gap instead of rejecting it."""
        options = load_options({"scalingOptions": {"vanishingGap": 0.9}})
        assert options.scaling_options.vanishing_gap == MAX_VANISHING_GAP == 0.45

    def test_clamps_negative_vanishing_gap(self) -> None:
        assert ScalingOptions(vanishing_gap=-0.2).vanishing_gap == 0

    @pytest.mark.parametrize(
        "raw",
        [
            {"show": 0},
            {"simpleScrollDistance": 0},
            {"easing": "bounce"},
            {"unknownOption": True},
            {"scalingOptions": {"padRightItems": -1}},
            {"scalingOptions": {"opacityScaling": "cubic"}},
        ],
    )
    def test_rejects_invalid_options(self, raw: dict) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_options(raw)
        assert exc_info.value.category is ErrorCategory.CONFIGURATION
        assert exc_info.value.original_error is not None

    def test_options_are_frozen(self) -> None:
        options = load_options(None)
        with pytest.raises(ValidationError):
            options.show = 4


class TestArmCounts:
    """Tests for arm_counts."""

    def test_hidden_items(self) -> None:
        """Should cap the visible items at show when hiding."""
        assert arm_counts(5, 3, True) == (1, 1, 2)

    def test_no_hiding_shows_everything(self) -> None:
        assert arm_counts(5, 3, False) == (2, 2, 0)

    def test_even_visible_count_favours_right(self) -> None:
        assert arm_counts(4, 3, False) == (1, 2, 0)

    def test_fewer_items_than_show(self) -> None:
        assert arm_counts(2, 5, True) == (0, 1, 0)

    def test_empty(self) -> None:
        assert arm_counts(0, 3, True) == (0, 0, 0)

    @pytest.mark.parametrize("count", range(1, 10))
    def test_every_other_item_is_placed(self, count: int) -> None:
        left, right, hidden = arm_counts(count, 3, True)
        assert left + right + hidden == count - 1


class TestResolveScaling:
    """Tests for resolve_scaling."""

    def test_known_kinds(self) -> None:
        assert resolve_scaling(ScalingKind.LINEAR) is scale_linear
        assert resolve_scaling(ScalingKind.LOGARITHMIC) is scale_logarithmic
        assert resolve_scaling(ScalingKind.SQRT) is scale_sqrt


class TestResolveScrollVector:
    """Tests for resolve_scroll_vector."""

    def test_horizontal(self) -> None:
        np.testing.assert_allclose(resolve_scroll_vector(ScrollDirection.HORIZONTAL), [1, 0])

    def test_vertical(self) -> None:
        np.testing.assert_allclose(resolve_scroll_vector(ScrollDirection.VERTICAL), [0, -1])

    def test_adaptive_follows_vanishing_points(self) -> None:
        vector = resolve_scroll_vector(
            ScrollDirection.ADAPTIVE, Point(x=0, y=0), Point(x=30, y=40)
        )
        np.testing.assert_allclose(vector, [0.6, 0.8])

    def test_adaptive_falls_back_to_horizontal(self) -> None:
        """Should use the horizontal axis when the points coincide."""
        point = Point(x=10, y=10)
        vector = resolve_scroll_vector(ScrollDirection.ADAPTIVE, point, point)
        np.testing.assert_allclose(vector, [1, 0])

    def test_custom_is_normalized(self) -> None:
        vector = resolve_scroll_vector(
            ScrollDirection.CUSTOM, custom_vector=Point(x=3, y=-4)
        )
        np.testing.assert_allclose(vector, [0.6, -0.8])

    def test_custom_zero_vector(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_scroll_vector(ScrollDirection.CUSTOM, custom_vector=Point(x=0, y=0))
