"""Cyclopts CLI entrypoint for previewing paginated list menus.

The ``menu-pages`` console script loads item templates and list options from
YAML files and prints the completed template for a page, exactly as it would
be handed to a rich-text renderer. It is useful for checking templates while
writing them, without wiring the list into an application first.

Examples
--------
Render the second page using custom options:

>>> from menu_pages.cli import app
>>> app.run(
...     ["render", "items.yaml", "--page", "2", "--options", "menu.yaml"]
... )  # doctest: +SKIP

Report how many pages a list fills:

>>> from menu_pages.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .options import ListOptions, load_items, load_list_options
from .paginator import OutOfRangeError, PaginatedList

app = App(name="menu-pages", config=cyclopts.config.Env("MENU_PAGES_", command=False))  # type: ignore[unknown-argument]


def _build_list(items_path: Path, options_path: Path | None) -> PaginatedList:
    """Load items and options from disk into a :class:`PaginatedList`."""
    options = load_list_options(options_path) if options_path else ListOptions()
    return PaginatedList(load_items(items_path), options)


@app.command(help="Print the completed template for one page of a list.")
def render(
    items: typ.Annotated[
        Path, Parameter(help="YAML file listing the item templates")
    ],
    *,
    page: typ.Annotated[
        int, Parameter(help="Page number to render", env_var="MENU_PAGES_PAGE")
    ] = 1,
    options: typ.Annotated[
        Path | None,
        Parameter(help="YAML file with list options", env_var="MENU_PAGES_OPTIONS"),
    ] = None,
    nearest: typ.Annotated[
        bool,
        Parameter(help="Clamp out-of-range pages instead of failing"),
    ] = False,
) -> None:
    """Render one page of the list described by ``items`` and ``options``.

    Parameters
    ----------
    items : Path
        YAML sequence of item templates, or a mapping with an ``items`` list.
    page : int, optional
        1-based page to render; defaults to the first page.
    options : Path or None, optional
        YAML options file; when ``None`` the stock options are used.
    nearest : bool, optional
        When ``True``, render the closest existing page rather than failing
        on an out-of-range ``page``.

    Returns
    -------
    None
        The completed template is printed to stdout.

    Raises
    ------
    SystemExit
        With status 1 when ``page`` is out of range and ``nearest`` is unset.
    """
    paginated = _build_list(items, options)
    if nearest:
        print(paginated.nearest_valid_page(page))
        return
    try:
        rendered = paginated.render_page(page)
    except OutOfRangeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(rendered)


@app.command(help="Report how many items and pages a list holds.")
def count(
    items: typ.Annotated[
        Path, Parameter(help="YAML file listing the item templates")
    ],
    *,
    options: typ.Annotated[
        Path | None,
        Parameter(help="YAML file with list options", env_var="MENU_PAGES_OPTIONS"),
    ] = None,
) -> None:
    """Print the item count, page size and page count for a list."""
    paginated = _build_list(items, options)
    print(
        f"{len(paginated.items)} items, "
        f"{paginated.options.items_per_page} per page, "
        f"{paginated.total_pages} pages"
    )


def main() -> None:
    """Invoke the Cyclopts application behind the ``menu-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
