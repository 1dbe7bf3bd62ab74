"""
Data type checks for arbitrary values.

Used to decide which utility definition an untyped arbitrary value like
`text-[#fff]` or `text-[2rem]` belongs to.
"""

from __future__ import annotations

import re

from chuk_mcp_tailwind.constants import DataType
from chuk_mcp_tailwind.core.dimension import parse_dimension

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_COLOR_FUNCTIONS = (
    "rgb(",
    "rgba(",
    "hsl(",
    "hsla(",
    "hwb(",
    "lab(",
    "lch(",
    "oklab(",
    "oklch(",
    "color(",
    "color-mix(",
    "light-dark(",
)

_NAMED_COLORS = frozenset(
    {
        "transparent",
        "currentcolor",
        "black",
        "white",
        "red",
        "green",
        "blue",
        "yellow",
        "orange",
        "purple",
        "pink",
        "gray",
        "grey",
        "silver",
        "maroon",
        "navy",
        "teal",
        "olive",
        "lime",
        "aqua",
        "fuchsia",
        "rebeccapurple",
    }
)

_LENGTH_UNITS = frozenset(
    {
        "px",
        "rem",
        "em",
        "ex",
        "ch",
        "lh",
        "rlh",
        "vw",
        "vh",
        "vmin",
        "vmax",
        "dvw",
        "dvh",
        "svw",
        "svh",
        "lvw",
        "lvh",
        "cqw",
        "cqh",
        "cm",
        "mm",
        "in",
        "pt",
        "pc",
    }
)

_MATH_FUNCTIONS = ("calc(", "min(", "max(", "clamp(")


def is_color(value: str) -> bool:
    lowered = value.lower()
    if _HEX_COLOR.match(value):
        return True
    if lowered in _NAMED_COLORS:
        return True
    return lowered.startswith(_COLOR_FUNCTIONS)


def is_length(value: str) -> bool:
    if value.startswith(_MATH_FUNCTIONS):
        return True
    parsed = parse_dimension(value)
    if parsed is None:
        return False
    number, unit = parsed
    return unit in _LENGTH_UNITS or (unit == "" and number == 0)


def is_percentage(value: str) -> bool:
    parsed = parse_dimension(value)
    return parsed is not None and parsed[1] == "%"


def is_number(value: str) -> bool:
    parsed = parse_dimension(value)
    return parsed is not None and parsed[1] == ""


_CHECKS = {
    DataType.COLOR: is_color,
    DataType.LENGTH: is_length,
    DataType.PERCENTAGE: is_percentage,
    DataType.NUMBER: is_number,
}


def matches_data_type(value: str, data_type: DataType) -> bool:
    """
    Check whether a value can be used as the given data type.

    Variable references can stand in for any type.
    """
    if value.startswith("var("):
        return True
    return _CHECKS[data_type](value)

