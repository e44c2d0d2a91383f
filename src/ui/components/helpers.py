"""Shared UI helper functions and design tokens for user display."""

from nicegui import ui

from config import AVATAR_URL_TEMPLATE


# ─── Design Tokens ────────────────────────────────────────────────────────────

CARD_CLASSES = "w-full p-5"
INPUT_PROPS = "outlined dense"
GRADIENT_BUTTON = "bg-gradient-to-r from-teal-500 via-green-400 to-blue-500 text-white"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def avatar_src(user) -> str:
    """Avatar image URL for a user record."""
    return AVATAR_URL_TEMPLATE.format(id=user.id)


def page_label(page_index: int, page_count: int) -> str:
    return f"Page {page_index} of {page_count}"


def sort_label(direction) -> str:
    return f"Sort by Name ({direction.label})"
