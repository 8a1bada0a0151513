"""Split item lists into pages and fill in their templates."""

from .errors import OutOfRangeError, PaginationError
from .jump_buttons import join_page_groups, visible_page_groups
from .page_math import items_for_page, total_pages
from .paginated_list import PaginatedList, nearest_valid_page, render_page
from .placeholders import PLACEHOLDERS, PlaceholderExpander

__all__ = [
    "PLACEHOLDERS",
    "OutOfRangeError",
    "PaginatedList",
    "PaginationError",
    "PlaceholderExpander",
    "items_for_page",
    "join_page_groups",
    "nearest_valid_page",
    "render_page",
    "total_pages",
    "visible_page_groups",
]
