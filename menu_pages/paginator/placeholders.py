"""Expand ``%name%`` placeholders in list templates.

Templates are scanned once from left to right. A ``%`` switches between
copying literal text and reading a placeholder name; the closing ``%``
resolves the name (case-insensitively) against a fixed vocabulary. Unknown
names and an unterminated trailing ``%name`` expand to nothing.

Several placeholders expand to other templates from :class:`ListOptions`
(``%topic%``, the previous/next buttons, ``%page_jumpers%`` and the jump
buttons themselves). Those nested templates are expanded against the same
page. A template placeholder that is already being expanded further up the
chain expands to nothing, so a template that refers to itself cannot recurse
forever.

Examples
--------
>>> from menu_pages.options import ListOptions
>>> expander = PlaceholderExpander(["a", "b", "c"], ListOptions(items_per_page=2))
>>> expander.expand("Page %current_page%/%TOTAL_PAGES%", 1)
'Page 1/2'
>>> expander.expand("100%", 1)
'100'
"""

from __future__ import annotations

import logging
import typing as typ

from .. import _constants
from .jump_buttons import join_page_groups, visible_page_groups
from .page_math import first_index_on_page, items_for_page, total_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ..options import ListOptions

logger = logging.getLogger(__name__)

PLACEHOLDERS: frozenset[str] = frozenset(
    {
        "topic",
        "color",
        "first_item_on_page_index",
        "last_item_on_page_index",
        "total_items",
        "current_page",
        "total_pages",
        "previous_page_button",
        "next_page_button",
        "next_page_index",
        "previous_page_index",
        "command",
        "page_jumpers",
        "page_jump_buttons",
    }
)

_Active = frozenset[str]


class PlaceholderExpander:
    """Substitute placeholders for one item list and its options."""

    def __init__(self, items: cabc.Sequence[str], options: ListOptions) -> None:
        self.items = items
        self.options = options

    @property
    def total_pages(self) -> int:
        """Return the number of pages the items fill."""
        return total_pages(len(self.items), self.options.items_per_page)

    def expand(self, template: str, page: int) -> str:
        """Return ``template`` with every placeholder resolved for ``page``."""
        return self._expand(template, page, frozenset())

    def jump_buttons(self, page: int) -> str:
        """Return the joined page-jump buttons for ``page``."""
        return self._jump_buttons(page, frozenset({"page_jump_buttons"}))

    def _expand(self, template: str, page: int, active: _Active) -> str:
        output: list[str] = []
        name: list[str] = []
        reading_name = False
        for char in template:
            if char == _constants.PLACEHOLDER_DELIMITER:
                if reading_name:
                    output.append(self._resolve("".join(name).lower(), page, active))
                name = []
                reading_name = not reading_name
                continue
            if reading_name:
                name.append(char)
            else:
                output.append(char)
        if reading_name:
            logger.debug("Dropping unterminated placeholder %r", "".join(name))
        return "".join(output)

    def _resolve(self, name: str, page: int, active: _Active) -> str:
        options = self.options
        match name:
            case "topic":
                return self._nested(name, options.topic_template, page, active)
            case "color":
                return options.color_code
            case "first_item_on_page_index":
                return str(first_index_on_page(page, options.items_per_page) + 1)
            case "last_item_on_page_index":
                first = first_index_on_page(page, options.items_per_page)
                shown = items_for_page(self.items, page, options.items_per_page)
                return str(first + len(shown))
            case "total_items":
                return str(len(self.items))
            case "current_page":
                return str(page)
            case "total_pages":
                return str(self.total_pages)
            case "previous_page_button":
                if page > 1:
                    return self._nested(
                        name, options.previous_button_template, page, active
                    )
                return ""
            case "next_page_button":
                if page < self.total_pages:
                    return self._nested(
                        name, options.next_button_template, page, active
                    )
                return ""
            case "next_page_index":
                return str(page + 1)
            case "previous_page_index":
                return str(page - 1)
            case "command":
                return options.command_name
            case "page_jumpers":
                if self.total_pages > 2:
                    return self._nested(
                        name, options.page_jumpers_template, page, active
                    )
                return ""
            case "page_jump_buttons":
                if name in active:
                    logger.debug("Skipping recursive placeholder %r", name)
                    return ""
                return self._jump_buttons(page, active | {name})
            case _:
                logger.debug("Dropping unknown placeholder %r", name)
                return ""

    def _nested(self, name: str, template: str, page: int, active: _Active) -> str:
        if name in active:
            logger.debug("Skipping recursive placeholder %r", name)
            return ""
        return self._expand(template, page, active | {name})

    def _jump_buttons(self, page: int, active: _Active) -> str:
        options = self.options
        groups = visible_page_groups(
            page,
            self.total_pages,
            options.page_jumper_start_window,
            options.page_jumper_end_window,
        )

        def _render_button(index: int) -> str:
            if index == page:
                return self._expand(
                    options.page_jumper_current_page_template, index, active
                )
            template = options.page_jumper_page_template.replace(
                _constants.TARGET_PAGE_PLACEHOLDER, str(index)
            )
            return self._expand(template, index, active)

        return join_page_groups(
            groups,
            _render_button,
            page_separator=options.page_jumper_page_separator,
            group_separator=options.page_jumper_group_separator,
        )


__all__ = ["PLACEHOLDERS", "PlaceholderExpander"]
