"""Load list options and item lists from YAML files."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .builder import ListOptionsBuilder
from .helpers import _coerce_bool, _coerce_int, _coerce_str
from .models import ListOptions, OptionsError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

_BOOL_FIELDS = frozenset({"space_after_header", "space_before_footer"})
_INT_FIELDS = frozenset(
    {"items_per_page", "page_jumper_start_window", "page_jumper_end_window"}
)


def load_list_options(path: Path) -> ListOptions:
    """Load a YAML options file into validated :class:`ListOptions`.

    Parameters
    ----------
    path : Path
        YAML document whose top-level mapping (or nested ``options`` mapping)
        is keyed by ``ListOptions`` field names. Omitted keys keep their
        defaults and an ``items`` key is ignored, so one file can hold both.

    Returns
    -------
    ListOptions
        Immutable options ready to paginate a list.

    Raises
    ------
    FileNotFoundError
        If the file does not exist at ``path``.
    OptionsError
        If the document is not a mapping, names an unknown option, or holds a
        value that fails validation.

    Examples
    --------
    >>> from pathlib import Path
    >>> options = load_list_options(Path("menu.yaml"))  # doctest: +SKIP
    >>> options.items_per_page  # doctest: +SKIP
    8
    """
    loaded = _load_yaml(path)
    if loaded is None:
        return ListOptions()
    if not isinstance(loaded, dict):
        msg = "Top-level options YAML structure must be a mapping."
        raise OptionsError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    nested = raw.get("options")
    if isinstance(nested, dict):
        raw = dict(nested)
    raw.pop("items", None)
    return build_list_options(raw)


def build_list_options(payload: cabc.Mapping[str, typ.Any]) -> ListOptions:
    """Build :class:`ListOptions` from a plain mapping of overrides."""
    values: dict[str, typ.Any] = {}
    for name, value in payload.items():
        key = str(name)
        if key in _BOOL_FIELDS:
            values[key] = _coerce_bool(value, key)
        elif key in _INT_FIELDS:
            values[key] = _coerce_int(value, key)
        elif key == "accent_color":
            values[key] = value
        else:
            values[key] = _coerce_str(value)
    return ListOptionsBuilder().update(values).build()


def load_items(path: Path) -> list[str]:
    """Load the item templates to paginate from a YAML file.

    The document may be a sequence, or a mapping with an ``items`` sequence.
    Scalars are converted to text; ``null`` entries become empty items.
    """
    loaded = _load_yaml(path)
    match loaded:
        case None:
            return []
        case list():
            entries = loaded
        case dict() if isinstance(loaded.get("items"), list):
            entries = loaded["items"]
        case dict() if loaded.get("items") is None:
            return []
        case _:
            msg = "Items YAML must be a sequence or a mapping with an 'items' list."
            raise OptionsError(msg)
    return [_coerce_str(entry) for entry in entries]


def _load_yaml(path: Path) -> object:
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        return loader.load(handle)


__all__ = ["build_list_options", "load_items", "load_list_options"]
