"""
UtilityDesignSystem - the reference design system.

Turns a DesignSystemConfig into something that can:
- parse class text into candidates
- print candidates back to canonical class text
- compile candidates to CSS
- enumerate its catalog for signature indexing

Grammar:

    [prefix:]variant:variant:base[!]

    base := static-name
          | [property:value]
          | root[-value][/modifier]
    value    := named | [value] | [type:value]
    modifier := named | [value]
"""

from __future__ import annotations

import re
import textwrap
from collections.abc import Sequence
from typing import Any

from chuk_mcp_tailwind.constants import (
    OPACITY_SCALE,
    SPACING_THEME_KEY,
    CandidateKind,
    DataType,
    ModifierKind,
    UtilityKind,
)
from chuk_mcp_tailwind.core.candidate import (
    ArbitraryModifier,
    ArbitraryValue,
    Candidate,
    CandidateModifier,
    CandidateValue,
    NamedModifier,
    NamedValue,
    Variant,
    decode_arbitrary_value,
    print_candidate,
)
from chuk_mcp_tailwind.core.data_types import matches_data_type
from chuk_mcp_tailwind.core.dimension import is_bare_number, is_valid_spacing_multiplier
from chuk_mcp_tailwind.models.design_system import DesignSystemConfig, UtilityDefinition

_PROPERTY = re.compile(r"^-{0,2}[a-zA-Z][a-zA-Z0-9-]*$")
_NAMED = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_.-]*$")
_TYPED_VALUE = re.compile(r"^([a-z][a-z-]*):(.+)$", re.DOTALL)
_ESCAPE = re.compile(r"([^a-zA-Z0-9_-])")

_DATA_TYPES = {data_type.value: data_type for data_type in DataType}

Declarations = list[tuple[str, str]]


def _split_top_level(text: str, separator: str) -> list[str] | None:
    """
    Split on a separator outside of brackets and parentheses.

    Returns None if the brackets are unbalanced.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char in "[(":
            depth += 1
        elif char in "])":
            depth -= 1
            if depth < 0:
                return None
        elif char == separator and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    if depth != 0:
        return None
    parts.append(text[start:])
    return parts


def _split_modifier(base: str) -> tuple[str, str | None]:
    """Split `root-value/modifier` at the last top-level slash."""
    depth = 0
    for i in range(len(base) - 1, -1, -1):
        char = base[i]
        if char in "])":
            depth += 1
        elif char in "[(":
            depth -= 1
        elif char == "/" and depth == 0:
            return base[:i], base[i + 1 :]
    return base, None


def escape_class_name(text: str) -> str:
    """Escape class text for use in a CSS selector."""
    return _ESCAPE.sub(r"\\\1", text)


class UtilityDesignSystem:
    """
    A design system built from a DesignSystemConfig.

    Instances are treated as immutable once built: the migration caches
    are keyed by instance identity.
    """

    def __init__(self, config: DesignSystemConfig):
        """
        Initialize the design system.

        Args:
            config: Validated design system configuration
        """
        self.config = config
        self.name = config.name
        self.prefix = config.prefix
        self.theme: dict[str, str] = dict(config.theme)

        self._static: dict[str, UtilityDefinition] = {}
        self._functional: dict[str, list[UtilityDefinition]] = {}
        for utility in config.utilities:
            if utility.kind == UtilityKind.STATIC:
                self._static.setdefault(utility.name, utility)
            else:
                self._functional.setdefault(utility.name, []).append(utility)

        self._parse_cache: dict[str, tuple[Candidate, ...]] = {}
        self._class_list: list[tuple[str, list[str]]] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UtilityDesignSystem:
        """Build a design system from a plain dict (e.g. parsed YAML)."""
        return cls(DesignSystemConfig.model_validate(data))

    def __repr__(self) -> str:
        return f"UtilityDesignSystem({self.name!r}, {len(self.config.utilities)} utilities)"

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_candidate(self, text: str) -> list[Candidate]:
        """
        Parse class text into candidates.

        Ambiguous text yields several candidates (longest root first).
        Text that isn't a valid utility yields an empty list.
        """
        if text not in self._parse_cache:
            self._parse_cache[text] = tuple(self._parse(text))
        return list(self._parse_cache[text])

    def _parse(self, text: str) -> list[Candidate]:
        segments = _split_top_level(text, ":")
        if segments is None:
            return []

        if self.prefix:
            if len(segments) < 2 or segments[0] != self.prefix:
                return []
            segments = segments[1:]

        *variant_texts, base = segments

        variants: list[Variant] = []
        for variant_text in variant_texts:
            variant = self._parse_variant(variant_text)
            if variant is None:
                return []
            variants.append(variant)

        important = False
        if base.endswith("!"):
            base = base[:-1]
            important = True
        elif base.startswith("!"):
            # Legacy leading-bang spelling
            base = base[1:]
            important = True

        if not base:
            return []

        return [
            candidate.replace(variants=tuple(variants), important=important)
            for candidate in self._parse_base(base)
        ]

    def _parse_variant(self, text: str) -> Variant | None:
        if text.startswith("[") and text.endswith("]"):
            selector = decode_arbitrary_value(text[1:-1])
            if "&" not in selector:
                return None
            return Variant(selector, arbitrary=True)
        if text in self.config.variants:
            return Variant(text)
        return None

    def _parse_base(self, base: str) -> list[Candidate]:
        if base in self._static:
            return [Candidate(CandidateKind.STATIC, base)]

        body, modifier_text = _split_modifier(base)

        if body.startswith("["):
            # Arbitrary properties take no modifier
            if modifier_text is not None:
                return []
            return self._parse_arbitrary_property(body)

        modifier: CandidateModifier | None = None
        if modifier_text is not None:
            modifier = self._parse_modifier(modifier_text)
            if modifier is None:
                return []

        results: list[Candidate] = []

        if body in self._functional:
            candidate = Candidate(CandidateKind.FUNCTIONAL, body, None, modifier)
            if self._functional_declarations(candidate) is not None:
                results.append(candidate)

        # Longest root first; never split inside a bracketed value
        limit = body.find("[")
        search_area = body if limit == -1 else body[:limit]
        dashes = [i for i, char in enumerate(search_area) if char == "-"]
        for i in reversed(dashes):
            root, value_text = body[:i], body[i + 1 :]
            if root not in self._functional or not value_text:
                continue
            value = self._parse_value(value_text)
            if value is None:
                continue
            candidate = Candidate(CandidateKind.FUNCTIONAL, root, value, modifier)
            if self._functional_declarations(candidate) is not None:
                results.append(candidate)

        return results

    def _parse_arbitrary_property(self, body: str) -> list[Candidate]:
        if not body.endswith("]"):
            return []
        prop, sep, raw = body[1:-1].partition(":")
        if not sep or not _PROPERTY.match(prop):
            return []
        value = decode_arbitrary_value(raw)
        if not value:
            return []
        return [Candidate(CandidateKind.ARBITRARY, prop, ArbitraryValue(value))]

    def _parse_value(self, text: str) -> CandidateValue | None:
        if text.startswith("[") and text.endswith("]"):
            inner = text[1:-1]
            data_type: DataType | None = None
            typed = _TYPED_VALUE.match(inner)
            if typed and typed.group(1) in _DATA_TYPES:
                data_type = _DATA_TYPES[typed.group(1)]
                inner = typed.group(2)
            value = decode_arbitrary_value(inner)
            if not value:
                return None
            return ArbitraryValue(value, data_type)
        if _NAMED.match(text):
            return NamedValue(text)
        return None

    def _parse_modifier(self, text: str) -> CandidateModifier | None:
        if text.startswith("[") and text.endswith("]"):
            value = decode_arbitrary_value(text[1:-1])
            if not value:
                return None
            # `[50]` means the same as `50`
            if is_bare_number(value):
                return NamedModifier(value)
            return ArbitraryModifier(value)
        if _NAMED.match(text):
            return NamedModifier(text)
        return None

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print_candidate(self, candidate: Candidate) -> str:
        """Print a candidate, including this system's prefix."""
        return print_candidate(candidate, self.prefix)

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------

    def candidates_to_css(self, candidates: Sequence[str]) -> list[str | None]:
        """
        Compile class texts to CSS rules.

        Returns one entry per input: the rule text, or None if the text
        doesn't produce any CSS.
        """
        return [self._candidate_css(text) for text in candidates]

    def declarations_for(self, candidate: Candidate) -> Declarations | None:
        """Declarations a candidate produces, ignoring variants and important."""
        if candidate.kind == CandidateKind.STATIC:
            utility = self._static.get(candidate.root)
            return list(utility.declarations.items()) if utility else None
        if candidate.kind == CandidateKind.ARBITRARY:
            return [(candidate.root, candidate.raw_value or "")]
        return self._functional_declarations(candidate)

    def _candidate_css(self, text: str) -> str | None:
        for candidate in self.parse_candidate(text):
            declarations = self.declarations_for(candidate)
            if declarations is None:
                continue
            rule = self._render_rule(text, candidate, declarations)
            if rule is not None:
                return rule
        return None

    def _render_rule(
        self, text: str, candidate: Candidate, declarations: Declarations
    ) -> str | None:
        selector = "." + escape_class_name(text)
        wrappers: list[str] = []

        # Inner variants apply first
        for variant in reversed(candidate.variants):
            template = variant.name if variant.arbitrary else self.config.variants.get(variant.name)
            if template is None:
                return None
            if template.startswith("@"):
                wrappers.append(template)
            else:
                selector = template.replace("&", selector)

        suffix = " !important" if candidate.important else ""
        lines = "".join(f"  {prop}: {value}{suffix};\n" for prop, value in declarations)
        rule = f"{selector} {{\n{lines}}}"

        for wrapper in wrappers:
            rule = f"{wrapper} {{\n{textwrap.indent(rule, '  ')}\n}}"

        return rule

    def _functional_declarations(self, candidate: Candidate) -> Declarations | None:
        for utility in self._functional.get(candidate.root, []):
            declarations = self._compile_with(utility, candidate)
            if declarations is not None:
                return declarations
        return None

    def _compile_with(self, utility: UtilityDefinition, candidate: Candidate) -> Declarations | None:
        value = self._resolve_value(utility, candidate.value)
        if value is None:
            return None

        declarations = [(prop, value) for prop in utility.properties]
        if candidate.modifier is None:
            return declarations

        if utility.modifier == ModifierKind.OPACITY:
            alpha = self._resolve_opacity(candidate.modifier)
            if alpha is None:
                return None
            mixed = f"color-mix(in oklab, {value} {alpha}, transparent)"
            return [(prop, mixed) for prop in utility.properties]

        if utility.modifier == ModifierKind.LINE_HEIGHT:
            line_height = self._resolve_line_height(candidate.modifier)
            if line_height is None:
                return None
            return declarations + [("line-height", line_height)]

        return None

    def _resolve_value(self, utility: UtilityDefinition, value: CandidateValue | None) -> str | None:
        if value is None:
            return utility.default

        if isinstance(value, ArbitraryValue):
            if not utility.arbitrary:
                return None
            if utility.value_type is not None:
                if value.data_type is not None:
                    if value.data_type != utility.value_type:
                        return None
                elif not matches_data_type(value.value, utility.value_type):
                    return None
            return value.value

        name = value.value
        if name in utility.values:
            return utility.values[name]

        for namespace in utility.theme_keys:
            key = f"{namespace}-{name}"
            if key in self.theme:
                return f"var({key})"

        if (
            utility.spacing
            and SPACING_THEME_KEY in self.theme
            and is_valid_spacing_multiplier(name)
        ):
            return f"calc(var({SPACING_THEME_KEY}) * {name})"

        return None

    def _resolve_opacity(self, modifier: CandidateModifier) -> str | None:
        if isinstance(modifier, ArbitraryModifier):
            return modifier.value
        if is_bare_number(modifier.value) and float(modifier.value) <= 100:
            return f"{modifier.value}%"
        return None

    def _resolve_line_height(self, modifier: CandidateModifier) -> str | None:
        if isinstance(modifier, ArbitraryModifier):
            return modifier.value
        key = f"--leading-{modifier.value}"
        if key in self.theme:
            return f"var({key})"
        if SPACING_THEME_KEY in self.theme and is_valid_spacing_multiplier(modifier.value):
            return f"calc(var({SPACING_THEME_KEY}) * {modifier.value})"
        return None

    # ------------------------------------------------------------------
    # Theme and catalog
    # ------------------------------------------------------------------

    def resolve_theme_value(self, key: str) -> str | None:
        """Look up a theme variable."""
        return self.theme.get(key)

    def functional_roots(self) -> list[str]:
        """Functional utility roots in catalog order."""
        return list(self._functional.keys())

    def get_class_list(self) -> list[tuple[str, list[str]]]:
        """
        Every named class in the catalog with its supported modifiers.

        Functional utilities are expanded over their named values, their
        theme namespaces and (for spacing utilities) the spacing scale.
        """
        if self._class_list is None:
            self._class_list = self._build_class_list()
        return self._class_list

    def _build_class_list(self) -> list[tuple[str, list[str]]]:
        entries: dict[str, list[str]] = {}

        for utility in self.config.utilities:
            if utility.kind == UtilityKind.STATIC:
                entries.setdefault(utility.name, [])
                continue

            modifiers = self._catalog_modifiers(utility)
            for value in self._catalog_values(utility):
                name = utility.name if value is None else f"{utility.name}-{value}"
                entries.setdefault(name, modifiers)

        return list(entries.items())

    def _catalog_values(self, utility: UtilityDefinition) -> list[str | None]:
        values: list[str | None] = []
        if utility.default is not None:
            values.append(None)
        values.extend(utility.values)
        for namespace in utility.theme_keys:
            for key in self.theme:
                if not key.startswith(f"{namespace}-"):
                    continue
                suffix = key[len(namespace) + 1 :]
                # Skip nested keys like --text-lg--line-height
                if suffix and "--" not in suffix:
                    values.append(suffix)
        if utility.spacing and SPACING_THEME_KEY in self.theme:
            values.extend(self.config.spacing_scale)
        return values

    def _catalog_modifiers(self, utility: UtilityDefinition) -> list[str]:
        if utility.modifier == ModifierKind.OPACITY:
            return list(OPACITY_SCALE)
        if utility.modifier == ModifierKind.LINE_HEIGHT:
            leading = [
                key[len("--leading-") :] for key in self.theme if key.startswith("--leading-")
            ]
            return leading + list(self.config.spacing_scale)
        return []
