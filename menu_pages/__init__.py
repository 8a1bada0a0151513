"""Render lists as navigable, multi-page text menus.

Each page is a header, a page of items and a footer with previous/next buttons
and numbered page-jump buttons. The package works on templates containing
``%name%`` placeholders and returns the completed template; turning that text
into coloured, clickable output is left to the caller's renderer.

Exports
-------
- ``PaginatedList``: binds items to options and renders pages.
- ``ListOptions`` / ``ListOptionsBuilder``: immutable templates and layout.
- ``OutOfRangeError``: raised by strict page rendering.
- ``app`` / ``main``: the ``menu-pages`` command line.

Examples
--------
>>> from menu_pages import ListOptions, PaginatedList
>>> options = ListOptions(header_template="", footer_template="", items_per_page=2)
>>> PaginatedList(["one", "two", "three"], options).render_page(2)
'three'
"""

from __future__ import annotations

from .cli import app, main
from .options import ListOptions, ListOptionsBuilder, OptionsError
from .paginator import (
    OutOfRangeError,
    PaginatedList,
    PaginationError,
    nearest_valid_page,
    render_page,
)

__all__ = [
    "ListOptions",
    "ListOptionsBuilder",
    "OptionsError",
    "OutOfRangeError",
    "PaginatedList",
    "PaginationError",
    "app",
    "main",
    "nearest_valid_page",
    "render_page",
]
