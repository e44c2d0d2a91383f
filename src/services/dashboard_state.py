"""Dashboard state: the collection, the query, and every mutator over them.

All mutators run on one event loop. Each one finishes by recomputing the view
with ``derive`` and writing the clamped page index back into the query, so a
later mutator never sees a stale page count.
"""
import logging

from config import PAGE_SIZE, SCROLL_THRESHOLD, SEARCH_DEBOUNCE_SECONDS
from src.models.user import Collection
from src.services.debounce import Debouncer
from src.services.query import DerivedView, QueryState, clamp_page, company_options, derive
from src.services.scroll import ScrollAdvancer

logger = logging.getLogger(__name__)


class DashboardState:

    def __init__(
        self,
        page_size: int = PAGE_SIZE,
        debounce_delay: float = SEARCH_DEBOUNCE_SECONDS,
        scheduler=None,
        scroll_threshold: float = SCROLL_THRESHOLD,
    ):
        self.collection = Collection()
        self.query = QueryState(page_size=page_size)
        self.view = DerivedView()
        self.debouncer = Debouncer(self.set_search_text, delay=debounce_delay, scheduler=scheduler)
        self.scroller = ScrollAdvancer(self.advance_page, threshold=scroll_threshold)
        self._subscribers = []

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, callback):
        """Call *callback(view)* after every recompute. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def close(self) -> None:
        """Tear down: no pending debounce commit fires, scroll events are ignored."""
        self.debouncer.close()
        self.scroller.detach()
        self._subscribers.clear()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_collection(self, collection: Collection) -> None:
        self.collection = collection
        self._recompute()

    def apply_seed(self, seed: dict) -> None:
        """Seed search text / company filter from the page address."""
        if not seed:
            return
        self.query = self.query.copy(**seed)
        self._recompute()

    def input_search(self, value: str | None) -> None:
        """Raw keystroke; committed after the debounce quiet period."""
        self.debouncer.push(value or "")

    def set_search_text(self, value: str | None) -> None:
        self.query = self.query.copy(search_text=value or "")
        self._recompute()

    def set_company_filter(self, value: str | None) -> None:
        self.query = self.query.copy(company_filter=value or "")
        self._recompute()

    def toggle_sort(self) -> None:
        self.query = self.query.copy(sort_direction=self.query.sort_direction.flipped())
        self._recompute()

    def change_page(self, direction: int) -> None:
        """Prev/next buttons: step by *direction*, clamped to the valid range."""
        target = clamp_page(self.query.page_index + direction, self.view.page_count)
        if target != self.query.page_index:
            self.query = self.query.copy(page_index=target)
            self._recompute()

    def advance_page(self) -> bool:
        """Scroll-driven: move forward exactly one page if one exists."""
        if self.query.page_index >= self.view.page_count:
            return False
        self.query = self.query.copy(page_index=self.query.page_index + 1)
        self._recompute()
        return True

    def on_scroll(self, scroll_top: float, viewport_height: float, content_height: float) -> bool:
        return self.scroller.on_scroll(scroll_top, viewport_height, content_height)

    # ------------------------------------------------------------------
    # Derived data
    # ------------------------------------------------------------------

    @property
    def companies(self) -> list[str]:
        return company_options(self.collection)

    def _recompute(self) -> None:
        self.view = derive(self.collection, self.query)
        if self.view.page_index != self.query.page_index:
            self.query = self.query.copy(page_index=self.view.page_index)
        for callback in list(self._subscribers):
            callback(self.view)
