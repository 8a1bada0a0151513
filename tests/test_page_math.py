"""Unit tests for page boundary arithmetic."""

from __future__ import annotations

import math

import pytest

from menu_pages.paginator import items_for_page, total_pages


@pytest.mark.parametrize("items_per_page", [1, 2, 3, 7, 10])
@pytest.mark.parametrize("item_count", [0, 1, 2, 9, 10, 11, 23])
def test_total_pages_is_ceiling(item_count: int, items_per_page: int) -> None:
    """Page count should round partial pages up."""
    expected = math.ceil(item_count / items_per_page)
    actual = total_pages(item_count, items_per_page)
    assert actual == expected, (
        f"expected {expected} pages for {item_count} items at {items_per_page}, "
        f"got {actual}"
    )


def test_total_pages_rejects_empty_pages() -> None:
    """A page size below one cannot paginate anything."""
    with pytest.raises(ValueError, match="items_per_page"):
        total_pages(5, 0)


@pytest.mark.parametrize("items_per_page", [1, 2, 4, 5])
def test_pages_partition_items(items_per_page: int) -> None:
    """Slices should cover every item once, with only the last page short."""
    items = [f"item-{index}" for index in range(17)]
    pages = total_pages(len(items), items_per_page)
    slices = [
        list(items_for_page(items, page, items_per_page))
        for page in range(1, pages + 1)
    ]

    flattened = [item for chunk in slices for item in chunk]
    assert flattened == items, "expected pages to reassemble the original list"
    assert all(len(chunk) == items_per_page for chunk in slices[:-1]), (
        "expected every page but the last to be full"
    )
    assert 1 <= len(slices[-1]) <= items_per_page, (
        f"expected last page size within 1..{items_per_page}, got {len(slices[-1])}"
    )


def test_items_for_page_matches_worked_example() -> None:
    """Five items at two per page put c and d on page two."""
    items = ["a", "b", "c", "d", "e"]
    assert total_pages(len(items), 2) == 3, "expected three pages"
    assert items_for_page(items, 2, 2) == ["c", "d"], "expected page two to be c, d"
    assert items_for_page(items, 3, 2) == ["e"], "expected last page to hold e"


def test_items_for_page_outside_range_is_empty() -> None:
    """Unvalidated pages should slice to nothing rather than wrap around."""
    items = ["a", "b", "c"]
    assert list(items_for_page(items, 0, 2)) == [], "expected page 0 to be empty"
    assert list(items_for_page(items, 5, 2)) == [], "expected page 5 to be empty"
