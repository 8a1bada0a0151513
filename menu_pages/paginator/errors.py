"""Exceptions raised while paginating lists."""

from __future__ import annotations


class PaginationError(ValueError):
    """Base class for pagination failures."""


class OutOfRangeError(PaginationError):
    """Raised when a requested page lies outside ``[1, total_pages]``.

    Attributes
    ----------
    page : int
        The page that was requested.
    total_pages : int
        The number of pages the list holds; ``0`` when it has no items.
    """

    def __init__(self, page: int, total_pages: int) -> None:
        self.page = page
        self.total_pages = total_pages
        if page < 1:
            msg = f"Page index must be >= 1, got {page}"
        else:
            msg = (
                "Page index must be <= the total number of pages "
                f"({total_pages}), got {page}"
            )
        super().__init__(msg)


__all__ = ["OutOfRangeError", "PaginationError"]
