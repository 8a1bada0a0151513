"""Typed dataclasses describing paginated list options."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .. import _constants

if typ.TYPE_CHECKING:
    from .builder import ListOptionsBuilder

RGB = tuple[int, int, int]


class OptionsError(ValueError):
    """Raised when list options are invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ListOptions:
    """Templates and layout values used to build every page of a list.

    Attributes
    ----------
    header_template : str
        Template rendered above the items; skipped when blank.
    footer_template : str
        Template rendered below the items; skipped when blank.
    previous_button_template, next_button_template : str
        Templates behind ``%previous_page_button%`` and ``%next_page_button%``.
    page_jumpers_template : str
        Template behind ``%page_jumpers%``; usually wraps
        ``%page_jump_buttons%``.
    page_jumper_page_separator, page_jumper_group_separator : str
        Literal strings placed between jump buttons and between button groups.
    page_jumper_current_page_template, page_jumper_page_template : str
        Templates for the current page's jump button and every other button.
    topic_template : str
        Template behind ``%topic%``.
    command_name : str
        Literal value of ``%command%``.
    accent_color : tuple[int, int, int]
        RGB triple rendered by ``%color%``.
    space_after_header, space_before_footer : bool
        Insert a blank line after the header or before the footer.
    item_separator : str
        Literal string joining the items of a page.
    items_per_page : int
        Page size; at least 1.
    page_jumper_start_window, page_jumper_end_window : int
        Number of leading and trailing pages that always get a jump button.
    """

    header_template: str = _constants.DEFAULT_HEADER_TEMPLATE
    footer_template: str = _constants.DEFAULT_FOOTER_TEMPLATE
    previous_button_template: str = _constants.DEFAULT_PREVIOUS_BUTTON_TEMPLATE
    next_button_template: str = _constants.DEFAULT_NEXT_BUTTON_TEMPLATE
    page_jumpers_template: str = _constants.DEFAULT_PAGE_JUMPERS_TEMPLATE
    page_jumper_page_separator: str = _constants.DEFAULT_PAGE_JUMPER_PAGE_SEPARATOR
    page_jumper_group_separator: str = _constants.DEFAULT_PAGE_JUMPER_GROUP_SEPARATOR
    page_jumper_current_page_template: str = (
        _constants.DEFAULT_PAGE_JUMPER_CURRENT_PAGE_TEMPLATE
    )
    page_jumper_page_template: str = _constants.DEFAULT_PAGE_JUMPER_PAGE_TEMPLATE
    topic_template: str = _constants.DEFAULT_TOPIC_TEMPLATE
    command_name: str = _constants.DEFAULT_COMMAND_NAME
    accent_color: RGB = _constants.DEFAULT_ACCENT_COLOR
    space_after_header: bool = True
    space_before_footer: bool = True
    item_separator: str = _constants.DEFAULT_ITEM_SEPARATOR
    items_per_page: int = _constants.DEFAULT_ITEMS_PER_PAGE
    page_jumper_start_window: int = _constants.DEFAULT_PAGE_JUMPER_START_WINDOW
    page_jumper_end_window: int = _constants.DEFAULT_PAGE_JUMPER_END_WINDOW

    def __post_init__(self) -> None:
        """Reject layout values that cannot produce a page."""
        if self.items_per_page < 1:
            msg = f"items_per_page must be >= 1, got {self.items_per_page}"
            raise OptionsError(msg)
        for name in ("page_jumper_start_window", "page_jumper_end_window"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise OptionsError(msg)
        if len(self.accent_color) != 3 or any(
            not 0 <= component <= 0xFF for component in self.accent_color
        ):
            msg = (
                "accent_color must be three values in 0-255, "
                f"got {self.accent_color!r}"
            )
            raise OptionsError(msg)

    @property
    def color_code(self) -> str:
        """Return the accent colour as a ``#rrggbb`` string."""
        red, green, blue = self.accent_color
        return f"#{red:02x}{green:02x}{blue:02x}"

    @classmethod
    def builder(cls) -> ListOptionsBuilder:
        """Return a builder seeded with the default options."""
        from .builder import ListOptionsBuilder

        return ListOptionsBuilder()

    def to_builder(self) -> ListOptionsBuilder:
        """Return a builder seeded with these options."""
        from .builder import ListOptionsBuilder

        return ListOptionsBuilder(self)


OPTION_FIELDS: tuple[str, ...] = tuple(field.name for field in dc.fields(ListOptions))


__all__ = ["OPTION_FIELDS", "RGB", "ListOptions", "OptionsError"]
