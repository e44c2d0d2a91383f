"""Advance the page index when the user scrolls near the bottom of the content."""
import logging

from config import SCROLL_THRESHOLD

logger = logging.getLogger(__name__)


def is_near_bottom(
    scroll_top: float,
    viewport_height: float,
    content_height: float,
    threshold: float = SCROLL_THRESHOLD,
) -> bool:
    """True when the remaining distance to the end of the content is within *threshold*."""
    return viewport_height + scroll_top >= content_height - threshold


class ScrollAdvancer:
    """Turns downward near-bottom scrolls into single-step page advances.

    Scroll areas also report their position when they mount or resize. Only
    events whose position moved down since the previous event count, and
    content that fits in the viewport cannot be scrolled at all.

    *advance* is called with no arguments and must itself refuse to move past
    the last page; it returns True when the page actually changed.
    """

    def __init__(self, advance, threshold: float = SCROLL_THRESHOLD):
        self.advance = advance
        self.threshold = threshold
        self._attached = True
        self._last_top = 0.0

    @property
    def attached(self) -> bool:
        return self._attached

    def on_scroll(self, scroll_top: float, viewport_height: float, content_height: float) -> bool:
        if not self._attached:
            return False
        moved_down = scroll_top > self._last_top
        self._last_top = scroll_top
        if not moved_down or content_height <= viewport_height:
            return False
        if not is_near_bottom(scroll_top, viewport_height, content_height, self.threshold):
            return False
        advanced = bool(self.advance())
        if advanced:
            logger.debug("Scrolled near bottom, advanced page")
        return advanced

    def detach(self) -> None:
        self._attached = False
