"""Query state and the filter -> sort -> paginate derivation.

``derive`` is a pure function and recomputes the whole view from scratch on
every call. The directory is small enough that an O(n log n) pass per
keystroke is fine; there is no incremental maintenance.
"""
import math
from dataclasses import dataclass, field, replace
from enum import Enum

from pyuca import Collator

from config import PAGE_SIZE
from src.models.user import Collection, UserRecord


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING

    @property
    def label(self) -> str:
        return "A-Z" if self is SortDirection.ASCENDING else "Z-A"


@dataclass
class QueryState:
    search_text: str = ""
    company_filter: str = ""  # empty means no filter
    sort_direction: SortDirection = SortDirection.ASCENDING
    page_index: int = 1
    page_size: int = PAGE_SIZE

    def copy(self, **changes) -> "QueryState":
        return replace(self, **changes)


@dataclass(frozen=True)
class DerivedView:
    filtered_sorted: tuple[UserRecord, ...] = field(default_factory=tuple)
    page_count: int = 0
    page_index: int = 1
    current_page_items: tuple[UserRecord, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.filtered_sorted)

    @property
    def has_prev(self) -> bool:
        return self.page_index > 1

    @property
    def has_next(self) -> bool:
        return self.page_index < self.page_count


def matches(record: UserRecord, search_text: str, company_filter: str) -> bool:
    """Case-insensitive name substring AND (no filter OR exact company name)."""
    if search_text.lower() not in record.name.lower():
        return False
    if company_filter:
        return record.company.name.lower() == company_filter.lower()
    return True


_collator = Collator()


def _name_key(record: UserRecord) -> tuple:
    """Unicode collation key, so accented names sort with their base letter."""
    return _collator.sort_key(record.name.lower())


def page_count(total: int, page_size: int) -> int:
    """Number of pages for *total* items; 0 when there are none."""
    return math.ceil(total / page_size) if total > 0 else 0


def clamp_page(page_index: int, pages: int) -> int:
    return min(max(page_index, 1), max(1, pages))


def derive(collection: Collection, query: QueryState) -> DerivedView:
    """Compute the displayed page from the raw collection and query."""
    if not collection.is_ready:
        return DerivedView()

    filtered = [
        r for r in collection.items
        if matches(r, query.search_text, query.company_filter)
    ]
    filtered.sort(
        key=_name_key,
        reverse=query.sort_direction is SortDirection.DESCENDING,
    )

    pages = page_count(len(filtered), query.page_size)
    current = clamp_page(query.page_index, pages)
    start = (current - 1) * query.page_size
    end = current * query.page_size
    return DerivedView(
        filtered_sorted=tuple(filtered),
        page_count=pages,
        page_index=current,
        current_page_items=tuple(filtered[start:end]),
    )


def company_options(collection: Collection) -> list[str]:
    """Distinct company names in order of first appearance."""
    seen: dict[str, None] = {}
    for record in collection.items:
        seen.setdefault(record.company.name, None)
    return list(seen)
