"""Utility helpers shared by the options builder and loader."""

from __future__ import annotations

import typing as typ

from .models import RGB, OptionsError

ColorValue = typ.Union[RGB, list[int], int, str]

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def _parse_color(value: ColorValue) -> RGB:
    """Normalize a colour given as RGB values, a 24-bit int, or a hex string."""
    match value:
        case bool():
            msg = f"Cannot interpret {value!r} as a colour."
            raise OptionsError(msg)
        case int():
            if not 0 <= value <= 0xFFFFFF:
                msg = f"Colour {value:#x} is outside 0x000000-0xffffff."
                raise OptionsError(msg)
            return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
        case str() as text:
            digits = text.strip().removeprefix("#")
            if len(digits) != 6:
                msg = f"Colour '{text}' must have six hex digits."
                raise OptionsError(msg)
            try:
                packed = int(digits, 16)
            except ValueError as exc:
                msg = f"Colour '{text}' is not valid hex."
                raise OptionsError(msg) from exc
            return _parse_color(packed)
        case tuple() | list() if len(value) == 3:
            components = tuple(
                _coerce_int(component, "accent_color") for component in value
            )
            return typ.cast("RGB", components)
        case _:
            msg = f"Cannot interpret {value!r} as a colour."
            raise OptionsError(msg)


def _coerce_bool(value: object, name: str) -> bool:
    """Return ``value`` as a bool, accepting common YAML-ish spellings."""
    match value:
        case bool():
            return value
        case str() as text if text.strip().lower() in _TRUE_STRINGS:
            return True
        case str() as text if text.strip().lower() in _FALSE_STRINGS:
            return False
        case _:
            msg = f"Option '{name}' expects a boolean, got {value!r}."
            raise OptionsError(msg)


def _coerce_int(value: object, name: str) -> int:
    """Return ``value`` as an int, rejecting bools and non-numeric text."""
    if isinstance(value, bool):
        msg = f"Option '{name}' expects an integer, got {value!r}."
        raise OptionsError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            msg = f"Option '{name}' expects an integer, got {value!r}."
            raise OptionsError(msg) from exc
    msg = f"Option '{name}' expects an integer, got {value!r}."
    raise OptionsError(msg)


def _coerce_str(value: object) -> str:
    """Return ``value`` as text; ``None`` becomes the empty template."""
    if value is None:
        return ""
    return str(value)


__all__ = [
    "ColorValue",
    "_coerce_bool",
    "_coerce_int",
    "_coerce_str",
    "_parse_color",
]
