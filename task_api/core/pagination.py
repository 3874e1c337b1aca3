"""Pagination — pure value objects for paged, sorted and filtered list queries.

Invariants:
    - page is zero-based, size >= 1
    - SortOrder.field is always a public (camelCase) field name from the caller's whitelist
    - parse_sort never returns an unknown field (raises InvalidRequestError instead)

Design Decisions:
    - Frozen dataclasses: a PageRequest is built once per request and never mutated
    - Sort syntax "field" or "field,asc|desc": matches the query string clients already send
"""

import math
from dataclasses import dataclass

from task_api.core.domain_types import SortDirection, TaskPriority, TaskStatus
from task_api.core.errors import InvalidRequestError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and sort order."""
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: SortOrder = SortOrder("id")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class TaskFilters:
    """Optional, independent task filters. None means no constraint."""
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_to_id: int | None = None


def parse_sort(raw: str, allowed: frozenset[str]) -> SortOrder:
    """Parse "field" or "field,direction" against a whitelist of sortable fields."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) > 2 or not parts[0]:
        raise InvalidRequestError(f"Malformed sort parameter: '{raw}'", "sort")
    field = parts[0]
    if field not in allowed:
        raise InvalidRequestError(
            f"Cannot sort by '{field}'. Allowed: {', '.join(sorted(allowed))}",
            "sort",
        )
    if len(parts) == 1:
        return SortOrder(field)
    try:
        direction = SortDirection(parts[1].lower())
    except ValueError:
        raise InvalidRequestError(
            f"Sort direction must be 'asc' or 'desc', got '{parts[1]}'", "sort",
        )
    return SortOrder(field, direction)


def count_pages(total: int, size: int) -> int:
    return math.ceil(total / size) if size else 0
