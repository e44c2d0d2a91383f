"""Shared layout: header with theme toggle, and content area."""
from nicegui import ui

from config import APP_TITLE
from src.ui.components.helpers import GRADIENT_BUTTON


def build_layout(preferences, title: str = APP_TITLE):
    """Create the page layout and apply the persisted theme.

    Returns the main content container.
    """
    ui.colors(
        primary="#4F46E5",
        secondary="#5f6368",
        accent="#DB2777",
        positive="#34a853",
        negative="#ea4335",
    )

    dark = ui.dark_mode(value=preferences.value)

    def _toggle_dark():
        dark.value = not dark.value
        preferences.write(dark.value)
        toggle_btn.props(f"icon={_toggle_icon(dark.value)}")

    with ui.header().classes("items-center justify-between px-4 bg-primary"):
        ui.label(title).classes("text-h5 font-extrabold text-white")
        toggle_btn = ui.button(
            icon=_toggle_icon(dark.value), on_click=_toggle_dark,
        ).props("round").classes(GRADIENT_BUTTON).tooltip("Toggle dark mode")

    # Main content container
    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content


def _toggle_icon(dark: bool) -> str:
    return "toggle_on" if dark else "toggle_off"
