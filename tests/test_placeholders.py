"""Unit tests for placeholder expansion.

These tests drive :class:`PlaceholderExpander` with compact, markup-free
templates so each placeholder's value is easy to read in the assertions.
"""

from __future__ import annotations

import logging

import pytest

from menu_pages.options import ListOptions
from menu_pages.paginator import PLACEHOLDERS, PlaceholderExpander


def _options(**overrides: object) -> ListOptions:
    """Return terse options suited to asserting exact expansions."""
    values: dict[str, object] = {
        "items_per_page": 2,
        "topic_template": "Letters",
        "command_name": "letters",
        "accent_color": (0x12, 0x34, 0x56),
        "previous_button_template": "<%previous_page_index%",
        "next_button_template": "%next_page_index%>",
        "page_jumpers_template": "[%page_jump_buttons%]",
        "page_jumper_page_separator": ",",
        "page_jumper_group_separator": "~",
        "page_jumper_current_page_template": "*%current_page%*",
        "page_jumper_page_template": "p%target_page_index%",
        "page_jumper_start_window": 1,
        "page_jumper_end_window": 1,
    }
    values.update(overrides)
    return ListOptions(**values)  # type: ignore[arg-type]


@pytest.fixture
def expander() -> PlaceholderExpander:
    """Five letters at two per page: three pages."""
    return PlaceholderExpander(["a", "b", "c", "d", "e"], _options())


def test_plain_template_is_unchanged(expander: PlaceholderExpander) -> None:
    """Templates without placeholders should pass straight through."""
    template = "plain [link](https://example.invalid) text"
    assert expander.expand(template, 1) == template


@pytest.mark.parametrize(
    ("template", "page", "expected"),
    [
        ("%topic%", 1, "Letters"),
        ("%color%", 1, "#123456"),
        ("%command%", 1, "letters"),
        ("%current_page%/%total_pages%", 2, "2/3"),
        ("%previous_page_index%|%next_page_index%", 2, "1|3"),
        (
            "%first_item_on_page_index%-%last_item_on_page_index% of %total_items%",
            2,
            "3-4 of 5",
        ),
        (
            "%first_item_on_page_index%-%last_item_on_page_index% of %total_items%",
            3,
            "5-5 of 5",
        ),
        ("%Current_Page% %TOPIC%", 2, "2 Letters"),
    ],
)
def test_simple_placeholders(
    expander: PlaceholderExpander, template: str, page: int, expected: str
) -> None:
    """Value placeholders should render against the requested page."""
    actual = expander.expand(template, page)
    assert actual == expected, f"expected {expected!r} for {template!r}, got {actual!r}"


@pytest.mark.parametrize(
    ("page", "expected"),
    [(1, "|2>"), (2, "<1|3>"), (3, "<2|")],
)
def test_navigation_buttons_are_conditional(
    expander: PlaceholderExpander, page: int, expected: str
) -> None:
    """Previous is hidden on the first page and next on the last."""
    actual = expander.expand("%previous_page_button%|%next_page_button%", page)
    assert actual == expected, f"page {page}: expected {expected!r}, got {actual!r}"


def test_page_jumpers_render_when_more_than_two_pages(
    expander: PlaceholderExpander,
) -> None:
    """Three pages are enough to show the jump buttons."""
    assert expander.expand("%page_jumpers%", 2) == "[p1,*2*,p3]"


def test_page_jumpers_hidden_for_two_pages() -> None:
    """Two pages already have previous/next, so jumpers are omitted."""
    expander = PlaceholderExpander(["a", "b", "c", "d"], _options())
    assert expander.expand("%page_jumpers%", 1) == ""


def test_jump_buttons_direct_call_with_two_pages() -> None:
    """Calling the generator directly still works for short lists."""
    expander = PlaceholderExpander(["a", "b", "c", "d"], _options())
    assert expander.jump_buttons(1) == "*1*,p2"


def test_jump_buttons_group_skipped_ranges() -> None:
    """Ten pages with windows of three should show three groups on page five."""
    options = _options(page_jumper_start_window=3, page_jumper_end_window=3)
    expander = PlaceholderExpander([str(index) for index in range(20)], options)
    actual = expander.expand("%page_jump_buttons%", 5)
    assert actual == "p1,p2,p3~*5*~p8,p9,p10", f"unexpected buttons {actual!r}"


def test_jump_button_templates_expand_against_target_page() -> None:
    """Other-page buttons see the target page as the current page."""
    options = _options(page_jumper_page_template="%target_page_index%:%current_page%")
    expander = PlaceholderExpander(["a", "b", "c", "d", "e"], options)
    assert expander.jump_buttons(1) == "*1*~3:3"


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("a%bogus%b", "ab"),
        ("50% off", "50"),
        ("100%% sure", "100 sure"),
        ("%target_page_index%", ""),
    ],
)
def test_unknown_and_malformed_placeholders_are_dropped(
    expander: PlaceholderExpander, template: str, expected: str
) -> None:
    """Unknown names and unterminated delimiters expand to nothing."""
    actual = expander.expand(template, 1)
    assert actual == expected, f"expected {expected!r} for {template!r}, got {actual!r}"


@pytest.mark.parametrize(
    ("color", "expected"),
    [((0, 0, 0), "#000000"), ((255, 255, 255), "#ffffff"), ((1, 2, 3), "#010203")],
)
def test_color_is_always_seven_characters(
    color: tuple[int, int, int], expected: str
) -> None:
    """Accent colours render as zero-padded ``#rrggbb`` codes."""
    expander = PlaceholderExpander(["a"], _options(accent_color=color))
    actual = expander.expand("%color%", 1)
    assert actual == expected, f"expected {expected!r}, got {actual!r}"
    assert len(actual) == 7, f"expected 7 characters, got {len(actual)}"


def test_self_referencing_topic_expands_once() -> None:
    """A template naming itself should not recurse forever."""
    expander = PlaceholderExpander(["a"], _options(topic_template="%topic% list"))
    assert expander.expand("%topic%", 1) == " list"


def test_self_referencing_button_expands_once() -> None:
    """A previous button that nests itself only renders its literal text."""
    options = _options(previous_button_template="back%previous_page_button%")
    expander = PlaceholderExpander(["a", "b", "c"], options)
    assert expander.expand("%previous_page_button%", 2) == "back"


def test_every_placeholder_resolves(expander: PlaceholderExpander) -> None:
    """Each known placeholder should expand without raising."""
    for name in sorted(PLACEHOLDERS):
        assert isinstance(expander.expand(f"%{name}%", 2), str), name


def test_unknown_placeholder_is_logged(
    expander: PlaceholderExpander, caplog: pytest.LogCaptureFixture
) -> None:
    """Dropped placeholders leave a debug record for template authors."""
    caplog.set_level(logging.DEBUG, logger="menu_pages.paginator.placeholders")
    expander.expand("%bogus%", 1)
    assert "bogus" in caplog.text, "expected the unknown name in the debug log"
