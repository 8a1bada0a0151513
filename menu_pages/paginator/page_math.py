"""Page boundary arithmetic shared by the paginator and its templates."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def total_pages(item_count: int, items_per_page: int) -> int:
    """Return ``ceil(item_count / items_per_page)``.

    Examples
    --------
    >>> total_pages(5, 2)
    3
    >>> total_pages(0, 10)
    0
    """
    if items_per_page < 1:
        msg = f"items_per_page must be >= 1, got {items_per_page}"
        raise ValueError(msg)
    return -(-item_count // items_per_page)


def first_index_on_page(page: int, items_per_page: int) -> int:
    """Return the 0-based index of the first item shown on ``page``."""
    return (page - 1) * items_per_page


def items_for_page(
    items: cabc.Sequence[str], page: int, items_per_page: int
) -> cabc.Sequence[str]:
    """Return the contiguous slice of ``items`` displayed on ``page``.

    The caller is expected to have validated ``page``; pages past the end
    yield an empty slice.

    Examples
    --------
    >>> items_for_page(["a", "b", "c", "d", "e"], 2, 2)
    ['c', 'd']
    >>> items_for_page(["a", "b", "c", "d", "e"], 3, 2)
    ['e']
    """
    start = first_index_on_page(page, items_per_page)
    if start < 0:
        return items[0:0]
    stop = min(len(items), page * items_per_page)
    return items[start:stop]


__all__ = ["first_index_on_page", "items_for_page", "total_pages"]
