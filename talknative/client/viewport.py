"""Scroll position tracking for bottom-aware autoscroll."""

DEFAULT_THRESHOLD = 48.0

# Position changes smaller than this are layout jitter, not scrolling.
_MIN_SCROLL_DELTA = 0.5


class ViewportTracker:
    """Remembers the last scroll geometry reported by the display surface.

    Sizes are in pixels. ``position`` is the offset of the top of the
    viewport inside the content. Scrolls started by the app itself are
    announced with ``begin_auto_scroll`` so they are not mistaken for the
    user's.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        if threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        self.threshold = threshold
        self._position: float | None = None
        self._content_size = 0.0
        self._viewport_size = 0.0
        self._auto_scrolling = False

    @property
    def auto_scrolling(self) -> bool:
        return self._auto_scrolling

    def begin_auto_scroll(self) -> None:
        """Mark the scroll events until the bottom is reached as app-driven."""
        self._auto_scrolling = True

    def update(self, position: float, content_size: float, viewport_size: float) -> bool:
        """Record new scroll geometry.

        Returns:
            True if the user moved the viewport, in either direction.
        """
        position = max(position, 0.0)
        delta = 0.0 if self._position is None else position - self._position
        moved = abs(delta) >= _MIN_SCROLL_DELTA
        self._position = position
        self._content_size = max(content_size, 0.0)
        self._viewport_size = max(viewport_size, 0.0)

        if self._auto_scrolling:
            # Only the user scrolls up; that also cancels the pending auto-scroll.
            if moved and delta < 0:
                self._auto_scrolling = False
                return True
            if self.distance_from_bottom < 1.0:
                self._auto_scrolling = False
            return False
        return moved

    @property
    def distance_from_bottom(self) -> float:
        if self._position is None:
            return 0.0
        return max(self._content_size - self._viewport_size - self._position, 0.0)

    def is_near_bottom(self) -> bool:
        """Whether new content should pull the viewport down.

        True before any geometry is reported and whenever the content fits
        inside the viewport.
        """
        if self._position is None or self._content_size <= self._viewport_size:
            return True
        return self.distance_from_bottom <= self.threshold
