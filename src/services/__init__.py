"""Services package."""
from src.services.dashboard_state import DashboardState
from src.services.debounce import Debouncer
from src.services.preferences import PreferenceStore, SqlKeyValueStore
from src.services.query import (
    DerivedView, QueryState, SortDirection, company_options, derive,
)
from src.services.scroll import ScrollAdvancer, is_near_bottom
from src.services.url_seed import seed_from_params
from src.services.user_directory import CollectionStore, UserDirectoryClient, UserDirectoryError

__all__ = [
    "DashboardState",
    "Debouncer",
    "PreferenceStore",
    "SqlKeyValueStore",
    "DerivedView",
    "QueryState",
    "SortDirection",
    "company_options",
    "derive",
    "ScrollAdvancer",
    "is_near_bottom",
    "seed_from_params",
    "CollectionStore",
    "UserDirectoryClient",
    "UserDirectoryError",
]
