"""
Candidate primitives - the parsed form of a utility class.

A candidate is what a class token like `md:hover:bg-red-500/50!` parses to:
a kind, a root, an optional value and modifier, a stack of variants and an
important flag.

Candidates are frozen. Parsed candidates are shared between callers, so
"changing" one means building a new one with `Candidate.replace()`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Union

from chuk_mcp_tailwind.constants import CandidateKind, DataType

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class NamedValue:
    """A bare value from the catalog or spacing scale (`red-500`, `4`)."""

    value: str

    @property
    def is_arbitrary(self) -> bool:
        return False


@dataclass(frozen=True)
class ArbitraryValue:
    """
    A freeform value written in brackets (`[16px]`, `[color:var(--x)]`).

    The value is stored decoded: underscores are spaces, whitespace is
    collapsed and trimmed.
    """

    value: str
    data_type: DataType | None = None

    @property
    def is_arbitrary(self) -> bool:
        return True


@dataclass(frozen=True)
class NamedModifier:
    """A bare modifier (`/50`, `/tight`)."""

    value: str

    @property
    def is_arbitrary(self) -> bool:
        return False


@dataclass(frozen=True)
class ArbitraryModifier:
    """A bracketed modifier (`/[1.5rem]`)."""

    value: str

    @property
    def is_arbitrary(self) -> bool:
        return True


CandidateValue = Union[NamedValue, ArbitraryValue]
CandidateModifier = Union[NamedModifier, ArbitraryModifier]


@dataclass(frozen=True)
class Variant:
    """
    A variant prefix (`hover`, `md`, `[&>*]`).

    Named variants are looked up in the design system; arbitrary variants
    carry their own selector.
    """

    name: str
    arbitrary: bool = False


@dataclass(frozen=True)
class Candidate:
    """
    A parsed utility class.

    For arbitrary properties `root` holds the CSS property name and `value`
    is always an ArbitraryValue. Variants are ordered outer to inner.
    """

    kind: CandidateKind
    root: str
    value: CandidateValue | None = None
    modifier: CandidateModifier | None = None
    variants: tuple[Variant, ...] = field(default_factory=tuple)
    important: bool = False

    def replace(self, **changes: object) -> Candidate:
        """Return a copy with some fields overridden."""
        return replace(self, **changes)  # type: ignore[arg-type]

    def base(self) -> Candidate:
        """The candidate without variants and without the important flag."""
        return replace(self, variants=(), important=False)

    @property
    def is_arbitrary_utility(self) -> bool:
        """True for arbitrary properties and functional utilities with an arbitrary value."""
        if self.kind == CandidateKind.ARBITRARY:
            return True
        return (
            self.kind == CandidateKind.FUNCTIONAL
            and self.value is not None
            and self.value.is_arbitrary
        )

    @property
    def raw_value(self) -> str | None:
        """The freeform value text, or the bare value for named values."""
        if self.value is None:
            return None
        return self.value.value


def decode_arbitrary_value(text: str) -> str:
    """
    Decode the inside of a bracketed value.

    Unescaped underscores become spaces, `\\_` becomes a literal underscore.
    Whitespace is collapsed and trimmed. `url(...)` values are kept as-is.
    """
    if text.startswith("url("):
        return text

    chars: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text) and text[i + 1] == "_":
            chars.append("\\_")
            i += 2
            continue
        chars.append(" " if char == "_" else char)
        i += 1

    decoded = _WHITESPACE.sub(" ", "".join(chars)).strip()
    return decoded.replace("\\_", "_")


def encode_arbitrary_value(value: str) -> str:
    """Encode a decoded value for printing inside brackets."""
    if value.startswith("url("):
        return value
    return value.replace("_", "\\_").replace(" ", "_")


def print_modifier(modifier: CandidateModifier | None) -> str:
    """Print a modifier including its leading slash ('' for None)."""
    if modifier is None:
        return ""
    if modifier.is_arbitrary:
        return f"/[{encode_arbitrary_value(modifier.value)}]"
    return f"/{modifier.value}"


def print_value(value: CandidateValue) -> str:
    """Print a functional value (without the leading dash)."""
    if isinstance(value, ArbitraryValue):
        encoded = encode_arbitrary_value(value.value)
        if value.data_type is not None:
            return f"[{value.data_type.value}:{encoded}]"
        return f"[{encoded}]"
    return value.value


def print_variant(variant: Variant) -> str:
    """Print a single variant (without the trailing colon)."""
    if variant.arbitrary:
        return f"[{encode_arbitrary_value(variant.name)}]"
    return variant.name


def print_candidate(candidate: Candidate, prefix: str | None = None) -> str:
    """
    Print a candidate back to class text.

    Printing is idempotent: parsing the output and printing again yields
    the same text.
    """
    parts: list[str] = []
    if prefix:
        parts.append(prefix)
    parts.extend(print_variant(v) for v in candidate.variants)

    if candidate.kind == CandidateKind.STATIC:
        base = candidate.root
    elif candidate.kind == CandidateKind.ARBITRARY:
        value = candidate.raw_value or ""
        base = f"[{candidate.root}:{encode_arbitrary_value(value)}]"
    else:
        base = candidate.root
        if candidate.value is not None:
            base += f"-{print_value(candidate.value)}"

    base += print_modifier(candidate.modifier)
    if candidate.important:
        base += "!"

    parts.append(base)
    return ":".join(parts)
