"""User summary card component."""
from nicegui import ui

from src.ui.components.helpers import CARD_CLASSES, avatar_src


def user_card(user):
    """Render a card for a single user: avatar, name, email, phone and company."""
    with ui.card().classes(f"{CARD_CLASSES} items-center text-center"):
        ui.image(avatar_src(user)).props("loading=lazy").classes(
            "w-28 h-28 rounded-full"
        )
        ui.label(user.name).classes("text-h6 font-semibold")
        ui.label(user.email).classes("text-body2 text-secondary")
        ui.label(user.phone).classes("text-body2 text-secondary")
        ui.label(user.company.name).classes("text-body2 text-secondary")
