"""Tests for the dashboard state: mutators, recompute and teardown."""

import pytest

from src.models import Collection
from src.services.dashboard_state import DashboardState
from src.services.query import SortDirection
from conftest import make_collection


@pytest.fixture
def state(clock, users):
    s = DashboardState(page_size=5, debounce_delay=0.3, scheduler=clock.schedule)
    s.set_collection(users)
    return s


def at_bottom(state):
    """Scroll area mounts at the top, then the user scrolls to its end."""
    state.on_scroll(scroll_top=0, viewport_height=500, content_height=1000)
    return state.on_scroll(scroll_top=500, viewport_height=500, content_height=1000)


class TestScrollPagination:

    def test_twelve_records_advance_to_last_page_and_stop(self, state):
        assert state.view.page_count == 3
        assert state.query.page_index == 1

        at_bottom(state)
        assert state.query.page_index == 2
        at_bottom(state)
        assert state.query.page_index == 3
        assert not at_bottom(state)
        assert state.query.page_index == 3

    def test_mount_events_on_wide_screen_stay_on_first_page(self, state):
        # Five cards fit the viewport; each refresh remounts the area at 0
        for _ in range(3):
            assert not state.on_scroll(scroll_top=0, viewport_height=648, content_height=590)
        assert state.query.page_index == 1

    def test_scroll_away_from_bottom_does_nothing(self, state):
        assert not state.on_scroll(scroll_top=0, viewport_height=500, content_height=1000)
        assert state.query.page_index == 1

    def test_scroll_shows_only_current_page(self, state):
        at_bottom(state)
        assert state.view.current_page_items == state.view.filtered_sorted[5:10]


class TestPageButtons:

    def test_change_page_is_clamped(self, state):
        state.change_page(-1)
        assert state.query.page_index == 1
        state.change_page(1)
        state.change_page(1)
        state.change_page(1)
        assert state.query.page_index == 3
        state.change_page(-1)
        assert state.query.page_index == 2


class TestFilters:

    def test_search_is_debounced(self, state, clock):
        for t, value in [(0.0, "a"), (0.05, "al"), (0.1, "ali"), (0.3, "alice")]:
            clock.advance_to(t)
            state.input_search(value)
        assert state.query.search_text == ""
        clock.advance_to(1.0)
        assert state.query.search_text == "alice"
        assert [r.name for r in state.view.filtered_sorted] == ["Alice Cooper"]

    def test_filter_change_clamps_page(self, state):
        state.change_page(1)
        state.change_page(1)
        state.set_company_filter("Acme")
        assert state.query.page_index == 1
        assert state.view.page_count == 1
        assert 1 <= state.query.page_index <= max(1, state.view.page_count)

    def test_no_matches_keeps_page_at_one(self, state):
        state.set_search_text("zzz")
        assert state.view.page_count == 0
        assert state.query.page_index == 1
        assert not at_bottom(state)
        state.change_page(1)
        assert state.query.page_index == 1

    def test_direct_change_and_pending_commit_last_write_wins(self, state, clock):
        state.input_search("alice")
        state.set_search_text("clem")
        clock.advance_to(1.0)
        assert state.query.search_text == "alice"

    def test_search_commit_keeps_scrolled_page(self, state, clock):
        state.input_search("e")
        at_bottom(state)
        assert state.query.page_index == 2
        clock.advance_to(1.0)
        assert state.query.search_text == "e"
        assert state.view.page_count == 3
        assert state.query.page_index == 2

    def test_company_change_keeps_page_when_still_valid(self, state):
        state.change_page(1)
        state.set_company_filter("")
        assert state.query.page_index == 2

    def test_toggle_sort(self, state):
        first = state.view.current_page_items[0].name
        state.toggle_sort()
        assert state.query.sort_direction is SortDirection.DESCENDING
        assert state.view.filtered_sorted[-1].name == first

    def test_companies_follow_collection(self, state):
        assert state.companies[0] == "Romaguera-Crona"
        assert "Acme" in state.companies


class TestLifecycle:

    def test_seed_before_ready_applies_once_loaded(self, clock, users):
        s = DashboardState(page_size=5, scheduler=clock.schedule)
        s.apply_seed({"search_text": "ali", "company_filter": "Acme"})
        assert s.view.filtered_sorted == ()
        s.set_collection(users)
        assert [r.name for r in s.view.filtered_sorted] == ["Alice Cooper", "Alina Stone"]

    def test_failed_collection_derives_empty_view(self, clock):
        s = DashboardState(scheduler=clock.schedule)
        s.set_collection(Collection.failed("boom"))
        assert s.view.current_page_items == ()
        assert s.query.page_index == 1

    def test_subscribers_receive_every_view(self, state):
        seen = []
        unsubscribe = state.subscribe(seen.append)
        state.toggle_sort()
        state.change_page(1)
        assert len(seen) == 2
        assert seen[-1] is state.view
        unsubscribe()
        state.toggle_sort()
        assert len(seen) == 2

    def test_close_cancels_debounce_and_detaches_scroll(self, state, clock):
        seen = []
        state.subscribe(seen.append)
        state.input_search("alice")
        state.close()
        clock.advance_to(1.0)
        assert state.query.search_text == ""
        assert not at_bottom(state)
        assert state.query.page_index == 1
        assert seen == []

    def test_small_collection_single_page(self, clock):
        s = DashboardState(page_size=5, scheduler=clock.schedule)
        s.set_collection(make_collection(["John", "Bob", "Rose"]))
        assert s.view.page_count == 1
        assert not at_bottom(s)
