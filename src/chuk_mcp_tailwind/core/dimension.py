"""
Dimension primitives - numbers with units.

`16px` -> (16.0, "px"), `0.25rem` -> (0.25, "rem"), `50%` -> (50.0, "%").
"""

from __future__ import annotations

import re
from functools import lru_cache

_DIMENSION = re.compile(r"^(-?(?:\d+\.?\d*|\.\d+))([a-zA-Z%]*)$")
_BARE_NUMBER = re.compile(r"^\d+(?:\.\d+)?$")

# Spacing multipliers are steps of a quarter
SPACING_STEP = 0.25


@lru_cache(maxsize=4096)
def parse_dimension(text: str) -> tuple[float, str] | None:
    """
    Parse a dimension into (value, unit).

    The unit is empty for plain numbers. Returns None if the text is
    not a single dimension.
    """
    match = _DIMENSION.match(text.strip())
    if match is None:
        return None
    return float(match.group(1)), match.group(2).lower()


def format_number(value: float) -> str:
    """Format a float without trailing zeros (16.0 -> '16', 0.5 -> '0.5')."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def is_bare_number(text: str) -> bool:
    """True for plain non-negative numbers like `4` or `1.5`."""
    return bool(_BARE_NUMBER.match(text))


def is_valid_spacing_multiplier(value: str | float) -> bool:
    """
    True if the value is a non-negative multiple of 0.25.

    These are the values a spacing utility accepts bare (`m-4`, `p-1.5`).
    """
    if isinstance(value, str):
        if not is_bare_number(value):
            return False
        number = float(value)
    else:
        number = value
        if number < 0:
            return False
    # `inf` and `nan` (from very long digit strings) are never steps
    return (number / SPACING_STEP).is_integer()
