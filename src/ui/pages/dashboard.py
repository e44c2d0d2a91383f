"""User dashboard page -- search, filter, sort and page through the directory."""
import asyncio
import logging

from nicegui import ui

from src.models.user import LoadStatus
from src.services import CollectionStore, DashboardState, seed_from_params
from src.ui.components import page_header, user_card
from src.ui.components.helpers import GRADIENT_BUTTON, INPUT_PROPS, page_label, sort_label
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def dashboard_page(
    preferences,
    search: str | None = None,
    company: str | None = None,
    store: CollectionStore | None = None,
):
    """Render the user dashboard.

    Args:
        preferences: Process-wide PreferenceStore (dark theme).
        search: Optional search text from the URL query string.
        company: Optional company filter from the URL query string.
        store: Collection store to load from; a fresh one per page by default.
    """
    content = build_layout(preferences)
    store = store or CollectionStore()

    state = DashboardState(
        scheduler=lambda delay, callback: ui.timer(delay, callback, once=True),
    )
    seed = seed_from_params({"search": search, "company": company})

    with content:
        page_header("User Dashboard", subtitle="Browse the user directory.", icon="groups")

        @ui.refreshable
        def _body():
            collection = state.collection
            if collection.status is LoadStatus.PENDING:
                with ui.row().classes("w-full justify-center py-16"):
                    ui.spinner(size="6em", thickness=4).classes("text-primary")
                return

            if collection.status is LoadStatus.FAILED:
                with ui.card().classes("w-full bg-negative text-white p-4 items-center"):
                    ui.label(f"Error: {collection.reason}").classes("text-h6 font-semibold")
                return

            _controls()
            _results()

        def _controls():
            with ui.row().classes("w-full items-center gap-4 flex-wrap"):
                search_input = ui.input(
                    label="Search by name",
                    value=state.query.search_text,
                ).props(f"clearable {INPUT_PROPS}").classes("w-full sm:w-1/3")
                search_input.props('prepend-inner-icon="search"')
                search_input.on_value_change(lambda e: state.input_search(e.value))

                options = {"": "Select Company"}
                options.update({name: name for name in state.companies})
                if state.query.company_filter and state.query.company_filter not in options:
                    # Seeded from the URL with a name (or casing) not in the list
                    options[state.query.company_filter] = state.query.company_filter
                ui.select(
                    options,
                    value=state.query.company_filter,
                    label="Company",
                    on_change=lambda e: state.set_company_filter(e.value),
                ).props(INPUT_PROPS).classes("w-full sm:w-1/3")

        @ui.refreshable
        def _results():
            view = state.view
            with ui.scroll_area(on_scroll=_on_scroll).classes("w-full h-[60vh]"):
                if not view.current_page_items:
                    ui.label("No users match your filters.").classes(
                        "text-body2 text-secondary"
                    )
                with ui.element("div").classes(
                    "w-full grid gap-8 sm:grid-cols-1 md:grid-cols-2 lg:grid-cols-3 xl:grid-cols-4"
                ):
                    for user in view.current_page_items:
                        user_card(user)

            with ui.row().classes("w-full items-center justify-between mt-4"):
                ui.button(
                    sort_label(state.query.sort_direction), on_click=state.toggle_sort,
                ).props("rounded").classes(GRADIENT_BUTTON)

            with ui.row().classes("w-full items-center justify-center gap-4 mt-4"):
                prev_btn = ui.button("Prev", on_click=lambda: state.change_page(-1)).props(
                    "rounded"
                ).classes(GRADIENT_BUTTON)
                ui.label(page_label(view.page_index, view.page_count)).classes(
                    "text-body1 font-semibold text-primary"
                )
                next_btn = ui.button("Next", on_click=lambda: state.change_page(1)).props(
                    "rounded"
                ).classes(GRADIENT_BUTTON)
                prev_btn.set_enabled(view.has_prev)
                next_btn.set_enabled(view.has_next)

        def _on_scroll(e):
            # Advancing replaces the page, which rebuilds the scroll area at the top
            state.on_scroll(e.vertical_position, e.vertical_container_size, e.vertical_size)

        _body()

    def _on_view_change(_view):
        if state.collection.status is LoadStatus.READY:
            _results.refresh()

    state.subscribe(_on_view_change)
    ui.context.client.on_disconnect(state.close)

    async def _load():
        collection = await asyncio.get_event_loop().run_in_executor(None, store.load)
        logger.debug("Collection %s, seeding query with %r", collection.status.value, seed)
        state.apply_seed(seed)
        state.set_collection(collection)
        _body.refresh()

    ui.timer(0.1, _load, once=True)
