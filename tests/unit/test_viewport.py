"""Unit tests for ViewportTracker."""

import pytest
import pytest_check as check

from talknative.client.viewport import DEFAULT_THRESHOLD, ViewportTracker


class TestIsNearBottom:
    """Tests for bottom detection."""

    def test_near_bottom_before_any_report(self) -> None:
        assert ViewportTracker().is_near_bottom() is True

    def test_content_fits_viewport(self) -> None:
        tracker = ViewportTracker()
        tracker.update(position=0, content_size=300, viewport_size=500)

        assert tracker.is_near_bottom() is True

    def test_exactly_at_bottom(self) -> None:
        tracker = ViewportTracker()
        tracker.update(position=1500, content_size=2000, viewport_size=500)

        assert tracker.distance_from_bottom == 0
        assert tracker.is_near_bottom() is True

    @pytest.mark.parametrize(
        ("position", "expected"),
        [(1500, True), (1460, True), (1452, True), (1451, False), (0, False)],
    )
    def test_threshold(self, position: float, expected: bool) -> None:
        tracker = ViewportTracker(threshold=48)
        tracker.update(position=position, content_size=2000, viewport_size=500)

        assert tracker.is_near_bottom() is expected

    def test_zero_threshold_requires_exact_bottom(self) -> None:
        tracker = ViewportTracker(threshold=0)
        tracker.update(position=1499, content_size=2000, viewport_size=500)

        assert tracker.is_near_bottom() is False

    def test_content_growth_moves_bottom_away(self) -> None:
        """New content below a stationary viewport counts as scrolled up."""
        tracker = ViewportTracker(threshold=10)
        tracker.update(position=1500, content_size=2000, viewport_size=500)
        tracker.update(position=1500, content_size=2600, viewport_size=500)

        assert tracker.is_near_bottom() is False


class TestUpdate:
    """Tests for recording scroll geometry and spotting user scrolls."""

    def test_first_report_is_not_a_user_scroll(self) -> None:
        assert ViewportTracker().update(100, 2000, 500) is False

    def test_scrolling_up_is_user_scroll(self) -> None:
        tracker = ViewportTracker()
        tracker.update(1500, 2000, 500)

        assert tracker.update(1200, 2000, 500) is True

    def test_scrolling_down_is_user_scroll(self) -> None:
        tracker = ViewportTracker()
        tracker.update(1000, 2000, 500)

        assert tracker.update(1300, 2000, 500) is True

    def test_content_growth_without_movement_is_not_user_scroll(self) -> None:
        tracker = ViewportTracker()
        tracker.update(1500, 2000, 500)

        assert tracker.update(1500, 2400, 500) is False

    def test_sub_pixel_jitter_ignored(self) -> None:
        tracker = ViewportTracker()
        tracker.update(1500, 2000, 500)

        assert tracker.update(1500.2, 2000, 500) is False

    def test_negative_position_clamped(self) -> None:
        """Overscroll bounce above the top is treated as the top."""
        tracker = ViewportTracker()
        tracker.update(-30, 2000, 500)

        assert tracker.distance_from_bottom == 1500


class TestAutoScroll:
    """Tests for telling app-driven scrolls apart from the user's."""

    def test_auto_scroll_steps_are_not_user_scrolls(self) -> None:
        tracker = ViewportTracker()
        tracker.update(1000, 2000, 500)
        tracker.begin_auto_scroll()

        check.is_false(tracker.update(1250, 2000, 500))
        check.is_true(tracker.auto_scrolling)
        check.is_false(tracker.update(1500, 2000, 500))
        check.is_false(tracker.auto_scrolling)

    def test_user_scroll_detected_after_auto_scroll_lands(self) -> None:
        tracker = ViewportTracker()
        tracker.update(1000, 2000, 500)
        tracker.begin_auto_scroll()
        tracker.update(1500, 2000, 500)

        assert tracker.update(1400, 2000, 500) is True

    def test_scrolling_up_during_auto_scroll_is_user_scroll(self) -> None:
        """Dragging away mid-animation counts as the user and cancels the auto-scroll."""
        tracker = ViewportTracker()
        tracker.update(1500, 2000, 500)
        tracker.begin_auto_scroll()

        check.is_true(tracker.update(1100, 2400, 500))
        check.is_false(tracker.auto_scrolling)
        check.is_true(tracker.update(1300, 2400, 500))


def test_default_threshold() -> None:
    assert ViewportTracker().threshold == DEFAULT_THRESHOLD


def test_negative_threshold_rejected() -> None:
    with pytest.raises(ValueError, match="threshold"):
        ViewportTracker(threshold=-1)
