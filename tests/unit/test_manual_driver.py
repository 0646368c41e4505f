"""Tests for the manually clocked animation driver."""

import pytest

from swipe_selector.adapters.asyncio_driver import AsyncioAnimationDriver
from swipe_selector.adapters.factory import create_animation_driver
from swipe_selector.adapters.manual_driver import ManualAnimationDriver
from swipe_selector.core.animation import AnimatedValue
from swipe_selector.core.easing import linear


class TestManualAnimationDriver:
    """Tests for ManualAnimationDriver."""

    def test_nothing_moves_without_advancing(self, manual_driver: ManualAnimationDriver) -> None:
        value = AnimatedValue(5)
        manual_driver.animate(value, 0, 10, 100, linear, lambda finished: None)
        assert value.value == 0
        assert manual_driver.active_count == 1
        assert not manual_driver.is_idle

    def test_advance_interpolates(self, manual_driver: ManualAnimationDriver) -> None:
        value = AnimatedValue()
        manual_driver.animate(value, 0, 10, 100, linear, lambda finished: None)
        manual_driver.advance(40)
        assert value.value == pytest.approx(4)
        assert manual_driver.now == 40

    def test_completion_callback(self, manual_driver: ManualAnimationDriver) -> None:
        results: list[bool] = []
        manual_driver.animate(AnimatedValue(), 0, 1, 100, linear, results.append)
        steps = manual_driver.run_until_idle(step=10)
        assert steps == 10
        assert results == [True]
        assert manual_driver.is_idle

    def test_zero_duration_completes_immediately(
        self, manual_driver: ManualAnimationDriver
    ) -> None:
        results: list[bool] = []
        value = AnimatedValue()
        manual_driver.animate(value, 0, 3, 0, linear, results.append)
        assert results == [True]
        assert value.value == 3
        assert manual_driver.is_idle

    def test_stop_reports_unfinished(self, manual_driver: ManualAnimationDriver) -> None:
        results: list[bool] = []
        value = AnimatedValue()
        animation = manual_driver.animate(value, 0, 10, 100, linear, results.append)
        manual_driver.advance(50)
        manual_driver.stop(animation)
        manual_driver.stop(animation)
        assert results == [False]
        assert value.value == pytest.approx(5)

    def test_chained_animation_starts_next_tick(
        self, manual_driver: ManualAnimationDriver
    ) -> None:
        """Should not step an animation started during the same tick."""
        second = AnimatedValue()

        def chain(finished: bool) -> None:
            manual_driver.animate(second, 0, 10, 100, linear, lambda done: None)

        manual_driver.animate(AnimatedValue(), 0, 1, 100, linear, chain)
        manual_driver.advance(100)
        assert second.value == 0
        manual_driver.advance(50)
        assert second.value == pytest.approx(5)

    def test_finish_all_follows_chains(self, manual_driver: ManualAnimationDriver) -> None:
        second = AnimatedValue()

        def chain(finished: bool) -> None:
            manual_driver.animate(second, 0, 10, 100, linear, lambda done: None)

        manual_driver.animate(AnimatedValue(), 0, 1, 100, linear, chain)
        manual_driver.finish_all()
        assert second.value == 10
        assert manual_driver.is_idle

    def test_interrupt_all(self, manual_driver: ManualAnimationDriver) -> None:
        results: list[bool] = []
        for _ in range(3):
            manual_driver.animate(AnimatedValue(), 0, 1, 100, linear, results.append)
        manual_driver.interrupt_all()
        assert results == [False, False, False]
        assert manual_driver.is_idle

    def test_run_until_idle_gives_up(self, manual_driver: ManualAnimationDriver) -> None:
        manual_driver.animate(AnimatedValue(), 0, 1, 1000, linear, lambda finished: None)
        with pytest.raises(RuntimeError):
            manual_driver.run_until_idle(step=1, max_steps=10)


class TestCreateAnimationDriver:
    """Tests for create_animation_driver."""

    def test_manual(self) -> None:
        assert isinstance(create_animation_driver("manual"), ManualAnimationDriver)

    def test_asyncio(self) -> None:
        driver = create_animation_driver("asyncio", frame_ms=8.0)
        assert isinstance(driver, AsyncioAnimationDriver)
        assert driver.frame_ms == 8.0

    def test_manual_rejects_options(self) -> None:
        with pytest.raises(ValueError):
            create_animation_driver("manual", frame_ms=8.0)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unsupported animation driver"):
            create_animation_driver("pygame")
