"""Reusable UI components."""
from src.ui.components.user_card import user_card
from src.ui.components.helpers import avatar_src, page_header

__all__ = ["user_card", "avatar_src", "page_header"]
