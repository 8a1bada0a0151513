"""Choose and join the page-jump buttons shown in a list footer.

Only pages inside the start window, the end window, or the current page get a
button. Runs of consecutive visible pages form groups, and a group separator
marks each skipped range, giving footers such as ``1 2 3 … 5 … 8 9 10``.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def is_visible(
    index: int, *, page: int, total_pages: int, start_window: int, end_window: int
) -> bool:
    """Return whether page ``index`` gets a jump button."""
    return index <= start_window or index > total_pages - end_window or index == page


def visible_page_groups(
    page: int, total_pages: int, start_window: int, end_window: int
) -> list[list[int]]:
    """Return the visible page numbers split into runs without gaps.

    Examples
    --------
    >>> visible_page_groups(5, 10, 3, 3)
    [[1, 2, 3], [5], [8, 9, 10]]
    >>> visible_page_groups(2, 4, 3, 3)
    [[1, 2, 3, 4]]
    """
    groups: list[list[int]] = []
    current: list[int] = []
    last_visible = 1
    for index in range(1, total_pages + 1):
        if not is_visible(
            index,
            page=page,
            total_pages=total_pages,
            start_window=start_window,
            end_window=end_window,
        ):
            continue
        if index - last_visible > 1 and current:
            groups.append(current)
            current = []
        current.append(index)
        last_visible = index
    if current:
        groups.append(current)
    return groups


def join_page_groups(
    groups: cabc.Iterable[cabc.Sequence[int]],
    render_button: cabc.Callable[[int], str],
    *,
    page_separator: str,
    group_separator: str,
) -> str:
    """Render every page in ``groups`` and join them with literal separators."""
    return group_separator.join(
        page_separator.join(render_button(index) for index in group)
        for group in groups
    )


__all__ = ["is_visible", "join_page_groups", "visible_page_groups"]
