"""Fluent builder producing immutable :class:`ListOptions` values.

Examples
--------
>>> from menu_pages.options import ListOptions
>>> options = (
...     ListOptions.builder()
...     .with_topic_template("Homes")
...     .with_items_per_page(5)
...     .with_accent_color("#ff0000")
...     .build()
... )
>>> options.color_code
'#ff0000'
>>> options.items_per_page
5
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .helpers import ColorValue, _parse_color
from .models import OPTION_FIELDS, ListOptions, OptionsError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from typing import Self


class ListOptionsBuilder:
    """Collect option overrides and validate them once in :meth:`build`."""

    def __init__(self, base: ListOptions | None = None) -> None:
        self._values: dict[str, typ.Any] = dc.asdict(base or ListOptions())

    def _set(self, name: str, value: object) -> Self:
        self._values[name] = value
        return self

    def update(self, values: cabc.Mapping[str, typ.Any]) -> Self:
        """Apply several overrides keyed by ``ListOptions`` field name."""
        unknown = sorted(set(values) - set(OPTION_FIELDS))
        if unknown:
            msg = f"Unknown list options: {', '.join(unknown)}"
            raise OptionsError(msg)
        for name, value in values.items():
            if name == "accent_color":
                self.with_accent_color(value)
            else:
                self._set(name, value)
        return self

    def with_header_template(self, template: str) -> Self:
        return self._set("header_template", template)

    def with_footer_template(self, template: str) -> Self:
        return self._set("footer_template", template)

    def with_previous_button_template(self, template: str) -> Self:
        return self._set("previous_button_template", template)

    def with_next_button_template(self, template: str) -> Self:
        return self._set("next_button_template", template)

    def with_page_jumpers_template(self, template: str) -> Self:
        return self._set("page_jumpers_template", template)

    def with_page_jumper_page_separator(self, separator: str) -> Self:
        return self._set("page_jumper_page_separator", separator)

    def with_page_jumper_group_separator(self, separator: str) -> Self:
        return self._set("page_jumper_group_separator", separator)

    def with_page_jumper_current_page_template(self, template: str) -> Self:
        return self._set("page_jumper_current_page_template", template)

    def with_page_jumper_page_template(self, template: str) -> Self:
        return self._set("page_jumper_page_template", template)

    def with_topic_template(self, template: str) -> Self:
        return self._set("topic_template", template)

    def with_command_name(self, command: str) -> Self:
        return self._set("command_name", command)

    def with_accent_color(self, color: ColorValue) -> Self:
        """Set the accent colour from RGB values, an int, or a hex string."""
        return self._set("accent_color", _parse_color(color))

    def with_space_after_header(self, enabled: bool) -> Self:  # noqa: FBT001
        return self._set("space_after_header", enabled)

    def with_space_before_footer(self, enabled: bool) -> Self:  # noqa: FBT001
        return self._set("space_before_footer", enabled)

    def with_item_separator(self, separator: str) -> Self:
        return self._set("item_separator", separator)

    def with_items_per_page(self, count: int) -> Self:
        return self._set("items_per_page", count)

    def with_page_jumper_start_window(self, count: int) -> Self:
        return self._set("page_jumper_start_window", count)

    def with_page_jumper_end_window(self, count: int) -> Self:
        return self._set("page_jumper_end_window", count)

    def build(self) -> ListOptions:
        """Return validated, immutable options.

        Raises
        ------
        OptionsError
            If the page size is below one, a jump-button window is negative, or
            the accent colour is out of range.
        """
        return ListOptions(**self._values)


__all__ = ["ListOptionsBuilder"]
