"""Assemble the header, items and footer of one page of a list.

:class:`PaginatedList` binds an item sequence to :class:`ListOptions` and
produces the completed template for a page: every placeholder substituted,
ready to hand to a rich-text renderer. Nothing is cached; each call recomputes
the page from the items and options.

Examples
--------
>>> from menu_pages.options import ListOptions
>>> options = ListOptions(
...     header_template="%topic% (%first_item_on_page_index%-"
...     "%last_item_on_page_index%)",
...     footer_template="Page %current_page%/%total_pages%",
...     topic_template="Letters",
...     items_per_page=2,
...     space_after_header=False,
...     space_before_footer=False,
... )
>>> paginated = PaginatedList(["a", "b", "c", "d", "e"], options)
>>> print(paginated.render_page(2))
Letters (3-4)
c
d
Page 2/3
>>> print(paginated.nearest_valid_page(99).splitlines()[-1])
Page 3/3
"""

from __future__ import annotations

import logging
import typing as typ

from ..options import ListOptions
from .errors import OutOfRangeError
from .page_math import items_for_page
from .placeholders import PlaceholderExpander

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n"


class PaginatedList:
    """Render pages of a list of item templates."""

    def __init__(
        self, items: cabc.Sequence[str], options: ListOptions | None = None
    ) -> None:
        """Bind ``items`` to ``options``.

        Parameters
        ----------
        items : Sequence[str]
            Item templates in display order. They may contain placeholders and
            are expanded like the header and footer. The sequence is only read.
        options : ListOptions, optional
            Layout and templates; defaults to :class:`ListOptions` defaults.
        """
        self.items = items
        self.options = options or ListOptions()
        self._expander = PlaceholderExpander(self.items, self.options)

    @property
    def total_pages(self) -> int:
        """Return the number of pages; ``0`` when there are no items."""
        return self._expander.total_pages

    def items_for_page(self, page: int) -> cabc.Sequence[str]:
        """Return the raw item templates shown on ``page``."""
        self._check_page(page)
        return items_for_page(self.items, page, self.options.items_per_page)

    def expand(self, template: str, page: int) -> str:
        """Return ``template`` with placeholders resolved against ``page``."""
        return self._expander.expand(template, page)

    def jump_buttons(self, page: int) -> str:
        """Return the page-jump buttons for ``page``."""
        return self._expander.jump_buttons(page)

    def render_page(self, page: int) -> str:
        """Return the completed template for ``page``.

        Raises
        ------
        OutOfRangeError
            If ``page`` is below 1 or above :attr:`total_pages`. A list with no
            items has no valid page.
        """
        self._check_page(page)
        return self._assemble(page)

    def nearest_valid_page(self, page: int) -> str:
        """Return the completed template for the page closest to ``page``.

        Pages below 1 become 1 and pages past the end become the last page.
        A list with no items renders page 1 with no item lines instead of
        failing.
        """
        clamped = max(1, min(self.total_pages, page))
        if clamped != page:
            logger.debug("Clamped page %d to %d", page, clamped)
        if self.total_pages == 0:
            return self._assemble(clamped)
        return self.render_page(clamped)

    def _check_page(self, page: int) -> None:
        if page < 1 or page > self.total_pages:
            raise OutOfRangeError(page, self.total_pages)

    def _assemble(self, page: int) -> str:
        logger.debug("Rendering page %d of %d", page, self.total_pages)
        options = self.options
        fragments: list[str] = []

        if options.header_template.strip():
            fragments.append(self.expand(options.header_template, page))
            if options.space_after_header:
                fragments.append("")

        shown = items_for_page(self.items, page, options.items_per_page)
        fragments.append(
            options.item_separator.join(self.expand(item, page) for item in shown)
        )

        if options.footer_template.strip():
            if options.space_before_footer:
                fragments.append("")
            fragments.append(self.expand(options.footer_template, page))

        return PAGE_SEPARATOR.join(fragments)


def render_page(
    items: cabc.Sequence[str], options: ListOptions | None, page: int
) -> str:
    """Render ``page`` of ``items``; raises :class:`OutOfRangeError` when invalid."""
    return PaginatedList(items, options).render_page(page)


def nearest_valid_page(
    items: cabc.Sequence[str], options: ListOptions | None, page: int
) -> str:
    """Render the page of ``items`` nearest to ``page`` without failing."""
    return PaginatedList(items, options).nearest_valid_page(page)


__all__ = ["PAGE_SEPARATOR", "PaginatedList", "nearest_valid_page", "render_page"]
