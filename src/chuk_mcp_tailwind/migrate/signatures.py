"""
Utility signatures - fingerprints of the CSS a class produces.

Two classes with the same signature produce the same declarations and can
replace each other. The signature is computed from the class's CSS with
variants ignored:

    1. collect `property: value` declarations
    2. substitute theme variables with their theme values
    3. fold `calc(<dimension> * <number>)` coming from the spacing scale
    4. drop `!important`, sort, join

`bg-red-500` and `bg-[#ef4444]` both become `background-color: #ef4444`.
"""

from __future__ import annotations

import math
import re
import weakref

from chuk_mcp_tailwind.core import value_parser
from chuk_mcp_tailwind.core.dimension import format_number
from chuk_mcp_tailwind.core.value_parser import FunctionNode, ValueNode, WordNode
from chuk_mcp_tailwind.design_system.protocol import DesignSystem
from chuk_mcp_tailwind.migrate.cache import DefaultMap, caches_for

_DECLARATION = re.compile(r"^\s*(-{0,2}[a-zA-Z][a-zA-Z0-9-]*)\s*:\s*(.+?)\s*;\s*$")
_IMPORTANT = re.compile(r"\s*!important$")
_CALC_PRODUCT = re.compile(
    r"calc\(\s*(-?(?:\d+\.?\d*|\.\d+))([a-zA-Z%]*)\s*\*\s*(-?(?:\d+\.?\d*|\.\d+))([a-zA-Z%]*)\s*\)"
)

# Theme values may reference other theme values
_MAX_SUBSTITUTION_DEPTH = 8


def signatures_for(design_system: DesignSystem) -> DefaultMap[str, str | None]:
    """The memoized class text -> signature table for a design system."""
    caches = caches_for(design_system)
    if caches.signatures is None:
        # The cache must not keep its design system alive
        ref = weakref.ref(design_system)
        caches.signatures = DefaultMap(lambda text: compute_signature(ref(), text))
    return caches.signatures


def with_prefix(design_system: DesignSystem, text: str) -> str:
    """Add the design system prefix to unprefixed class text (catalog names)."""
    prefix = design_system.prefix
    if prefix and not text.startswith(f"{prefix}:"):
        return f"{prefix}:{text}"
    return text


def compute_signature(design_system: DesignSystem, text: str) -> str | None:
    """
    Compute the signature of a class.

    Returns None when the class doesn't produce any CSS.
    """
    css = design_system.candidates_to_css([with_prefix(design_system, text)])
    if not css or not css[0]:
        return None

    declarations = extract_declarations(css[0])
    if not declarations:
        return None

    normalized = sorted(
        f"{prop}: {normalize_value(design_system, value)}" for prop, value in declarations
    )
    return "; ".join(normalized)


def extract_declarations(css: str) -> list[tuple[str, str]]:
    """Pull `property: value` pairs out of generated CSS."""
    declarations: list[tuple[str, str]] = []
    for line in css.splitlines():
        if line.rstrip().endswith("{") or line.strip() == "}":
            continue
        match = _DECLARATION.match(line)
        if match:
            value = _IMPORTANT.sub("", match.group(2))
            declarations.append((match.group(1), value))
    return declarations


def normalize_value(design_system: DesignSystem, value: str) -> str:
    """Substitute theme variables and fold spacing arithmetic."""
    text = value_parser.to_css(value_parser.parse(value))
    for _ in range(_MAX_SUBSTITUTION_DEPTH):
        substituted = value_parser.to_css(
            value_parser.map_nodes(
                value_parser.parse(text),
                lambda node: _substitute_theme_variable(design_system, node),
            )
        )
        if substituted == text:
            break
        text = substituted

    return fold_calc_products(text)


def _substitute_theme_variable(design_system: DesignSystem, node: ValueNode) -> ValueNode | None:
    if not (isinstance(node, FunctionNode) and node.value == "var" and node.nodes):
        return None
    first = node.nodes[0]
    if not isinstance(first, WordNode):
        return None
    theme_value = design_system.resolve_theme_value(first.value)
    if theme_value is None:
        return None
    return WordNode(theme_value)


def fold_calc_products(value: str) -> str:
    """
    Fold `calc(a * b)` where exactly one side has a unit.

    `calc(0.25rem * 4)` -> `1rem`
    """

    def fold(match: re.Match[str]) -> str:
        left, left_unit, right, right_unit = match.groups()
        if left_unit and right_unit:
            return match.group(0)
        product = float(left) * float(right)
        if not math.isfinite(product):
            return match.group(0)
        return format_number(product) + (left_unit or right_unit)

    previous = None
    while previous != value:
        previous = value
        value = _CALC_PRODUCT.sub(fold, value)
    return value
