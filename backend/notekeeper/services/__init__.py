# Business Logic Services
from .listing import (
    filter_by_view,
    filter_by_search,
    sort_notes,
    select_notes,
    count_notes,
)

__all__ = [
    "filter_by_view",
    "filter_by_search",
    "sort_notes",
    "select_notes",
    "count_notes",
]
