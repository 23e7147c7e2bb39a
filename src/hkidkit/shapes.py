"""Conversions between Identifier and the value shapes used by form widgets.

Widgets hand identifiers around in one of three shapes:

- a single combined string, e.g. ``"K123456(8)"``
- ``{"hkidPrefix": "K123456", "checkDigit": "8"}``
- ``{"hkid_main": "K123456", "hkid_checkdigit": "8"}``

The engine only ever sees (body_text, check_text) pairs or raw strings;
these helpers convert at the boundary.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from hkidkit.models import Identifier

__all__ = [
    "ValueShape",
    "SHAPE_KEYS",
    "detect_shape",
    "split_value",
    "to_shape",
]


class ValueShape(StrEnum):
    """External representation of an identifier value."""

    COMBINED = "combined"
    PREFIX_CHECK = "prefix_check"
    MAIN_CHECKDIGIT = "main_checkdigit"


# Field names (body, check) for the two-field shapes
SHAPE_KEYS: dict[ValueShape, tuple[str, str]] = {
    ValueShape.PREFIX_CHECK: ("hkidPrefix", "checkDigit"),
    ValueShape.MAIN_CHECKDIGIT: ("hkid_main", "hkid_checkdigit"),
}


def detect_shape(value: Any) -> ValueShape | None:
    """Identify which shape a widget value uses.

    Parameters
    ----------
    value : Any
        Widget value.

    Returns
    -------
    ValueShape | None
        Detected shape, or None if the value matches none of them.
    """
    if value is None or isinstance(value, str):
        return ValueShape.COMBINED
    if isinstance(value, Mapping):
        for shape, keys in SHAPE_KEYS.items():
            if any(key in value for key in keys):
                return shape
    return None


def split_value(value: Any) -> tuple[Any, Any]:
    """Split a widget value into (body_text, check_text).

    Combined strings are returned whole as the body with no separate check
    character; the normalizer extracts a trailing check from them.

    Parameters
    ----------
    value : Any
        Widget value in any supported shape.

    Returns
    -------
    tuple[Any, Any]
        (body_text, check_text); missing parts are None.

    Raises
    ------
    TypeError
        If the value is in none of the supported shapes.
    """
    shape = detect_shape(value)
    if shape is None:
        raise TypeError(f"unsupported identifier value of type {type(value).__name__}")
    if shape is ValueShape.COMBINED:
        return value, None
    body_key, check_key = SHAPE_KEYS[shape]
    return value.get(body_key), value.get(check_key)


def to_shape(identifier: Identifier, shape: ValueShape = ValueShape.COMBINED) -> str | dict[str, str]:
    """Render an identifier in a widget shape.

    Parameters
    ----------
    identifier : Identifier
        Verified identifier.
    shape : ValueShape, optional
        Target shape, by default COMBINED.

    Returns
    -------
    str | dict[str, str]
        Display string for COMBINED, otherwise a two-key dictionary.
    """
    if shape is ValueShape.COMBINED:
        return identifier.display
    body_key, check_key = SHAPE_KEYS[shape]
    return {body_key: identifier.body.body, check_key: identifier.check}
