"""
Tests for arbitrary utility migration.

Tests cover:
- Canonicalization
- Named, spacing and modifier replacements
- Variable safety
- Ambiguous signatures
- Per-design-system caching
"""

import gc
from concurrent.futures import ThreadPoolExecutor

import pytest

from chuk_mcp_tailwind.constants import MAX_CANONICALIZE_PASSES
from chuk_mcp_tailwind.design_system import UtilityDesignSystem
from chuk_mcp_tailwind.migrate import (
    all_variables_are_used,
    caches_for,
    canonicalize,
    compute_signature,
    migrate_arbitrary_utilities,
    reset_caches,
    resolve,
    warm_caches,
)
from chuk_mcp_tailwind.migrate import cache as cache_module
from chuk_mcp_tailwind.migrate import engine
from conftest import build_design_system


def migrate(design_system, raw: str) -> str:
    return migrate_arbitrary_utilities(design_system, None, raw)


class TestCanonicalize:
    """Tests for canonicalization."""

    def test_arbitrary_property(self, design_system: UtilityDesignSystem):
        """Padding whitespace is dropped."""
        candidate = canonicalize(design_system, "[display:_flex_]")
        assert candidate is not None
        assert design_system.print_candidate(candidate) == "[display:flex]"

    def test_leading_important(self, design_system: UtilityDesignSystem):
        """The legacy leading bang moves to the end."""
        candidate = canonicalize(design_system, "!m-[1rem]")
        assert candidate is not None
        assert design_system.print_candidate(candidate) == "m-[1rem]!"

    def test_not_arbitrary(self, design_system: UtilityDesignSystem):
        """Named and static classes are not canonicalized."""
        assert canonicalize(design_system, "m-4") is None
        assert canonicalize(design_system, "block") is None

    def test_unparseable(self, design_system: UtilityDesignSystem):
        """Unknown classes are not canonicalized."""
        assert canonicalize(design_system, "bg-[#ff0000") is None
        assert canonicalize(design_system, "nope-[1px]") is None

    def test_never_settles(self):
        """Printing that never settles gives up."""

        class DriftingDesignSystem(UtilityDesignSystem):
            prints = 0

            def parse_candidate(self, text):
                return super().parse_candidate("[display:flex]")

            def print_candidate(self, candidate):
                self.prints += 1
                return f"[display:flex]{self.prints}"

        system = DriftingDesignSystem(build_design_system().config)
        assert canonicalize(system, "[display:flex]") is None
        assert system.prints == MAX_CANONICALIZE_PASSES
        assert migrate(system, "[display:flex]") == "[display:flex]"


class TestMigrate:
    """Tests for migrate_arbitrary_utilities on small design systems."""

    def test_canonical_only(self, design_system: UtilityDesignSystem):
        """Without an equivalent the canonical text is returned."""
        assert migrate(design_system, "[display:_flex_]") == "[display:flex]"

    def test_spacing_from_index(self, px_design_system: UtilityDesignSystem):
        """A dimension matching a catalog spacing step migrates."""
        assert migrate(px_design_system, "m-[16px]") == "m-4"

    def test_theme_color(self, design_system: UtilityDesignSystem):
        """A literal theme color migrates to its named class."""
        assert migrate(design_system, "bg-[#ff0000]") == "bg-red-500"

    def test_variants_and_important_kept(self, design_system: UtilityDesignSystem):
        """Variants and important carry over to the replacement."""
        assert migrate(design_system, "hover:bg-[#ff0000]!") == "hover:bg-red-500!"
        assert migrate(design_system, "md:[&>*]:m-[1rem]") == "md:[&>*]:m-4"

    def test_opacity_modifier(self, design_system: UtilityDesignSystem):
        """A numeric modifier is re-attached after the stripped search."""
        assert migrate(design_system, "bg-[#ff0000]/50") == "bg-red-500/50"

    def test_bracketed_modifier(self, design_system: UtilityDesignSystem):
        """`[50]` canonicalizes to `50` and survives migration."""
        assert migrate(design_system, "p-[2rem]/[50]") == "p-8/50"

    def test_spacing_derivation(self, design_system: UtilityDesignSystem):
        """Steps beyond the listed scale are derived."""
        assert migrate(design_system, "w-[64rem]") == "w-256"
        assert migrate(design_system, "[width:64rem]") == "w-256"

    def test_variable_not_dropped(self, design_system: UtilityDesignSystem):
        """A theme class that hides the variable isn't a valid replacement."""
        raw = "text-[color:var(--brand,_#000)]"
        assert migrate(design_system, raw) == raw

    def test_variable_kept(self):
        """A replacement that references the same variable is accepted."""
        system = build_design_system(
            utilities=[
                {
                    "name": "brand-color",
                    "kind": "static",
                    "declarations": {"color": "var(--brand, #000)"},
                },
            ]
        )
        assert migrate(system, "[color:var(--brand,_#000)]") == "brand-color"

    def test_ambiguous(self):
        """Several equivalent classes means no migration."""
        system = build_design_system(
            utilities=[
                {"name": "flex", "kind": "static", "declarations": {"display": "flex"}},
                {"name": "flexbox", "kind": "static", "declarations": {"display": "flex"}},
            ]
        )
        assert migrate(system, "[display:flex]") == "[display:flex]"

    def test_prefix(self):
        """Prefixed classes migrate to prefixed replacements."""
        system = build_design_system(prefix="tw")
        assert migrate(system, "tw:bg-[#ff0000]") == "tw:bg-red-500"
        assert migrate(system, "tw:hover:m-[1rem]") == "tw:hover:m-4"

    def test_non_arbitrary_untouched(self, design_system: UtilityDesignSystem):
        """Anything that isn't an arbitrary utility comes back unchanged."""
        for raw in ("m-4", "block", "!block", "nope", "bg-[#ff0000", ""):
            assert migrate(design_system, raw) == raw

    @pytest.mark.parametrize(
        "raw",
        ["w-[" + "9" * 400 + "]", "w-[" + "9" * 400 + "rem]", "[width:" + "9" * 400 + "px]"],
    )
    def test_huge_numbers_unchanged(self, design_system: UtilityDesignSystem, raw: str):
        """Values that overflow a float come back unchanged."""
        assert migrate(design_system, raw) == raw

    def test_huge_named_value_unchanged(self, design_system: UtilityDesignSystem):
        """A bare value that overflows a float isn't a utility."""
        raw = "m-" + "9" * 400
        assert design_system.parse_candidate(raw) == []
        assert migrate(design_system, raw) == raw

    def test_user_config_ignored(self, design_system: UtilityDesignSystem):
        """The user config doesn't affect the result."""
        assert migrate_arbitrary_utilities(design_system, {"any": "thing"}, "bg-[#ff0000]") == (
            "bg-red-500"
        )


class TestMigrateDefaultLibrary:
    """Tests against the built-in default design system."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("[display:flex]", "flex"),
            ("[display:_flex_]", "flex"),
            ("hover:[display:flex]", "hover:flex"),
            ("bg-[#ef4444]", "bg-red-500"),
            ("!bg-[#ef4444]", "bg-red-500!"),
            ("bg-[#ef4444]/50", "bg-red-500/50"),
            ("text-[#3b82f6]", "text-blue-500"),
            ("text-[#ef4444]/[50]", "text-red-500/50"),
            ("text-[1.125rem]", "text-lg"),
            ("md:hover:m-[1rem]", "md:hover:m-4"),
            ("p-[1px]", "p-px"),
            ("w-[64rem]", "w-256"),
            ("leading-[1.5]", "leading-normal"),
            ("opacity-[0.5]", "opacity-50"),
        ],
    )
    def test_migrates(self, default_system: UtilityDesignSystem, raw: str, expected: str):
        """Arbitrary values with a proven equivalent are rewritten."""
        assert migrate(default_system, raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "rounded-[0.25rem]",
            "bg-[#abcdef]",
            "m-[13px]",
            "[grid-template-columns:1fr_2fr]",
            "w-[calc(100%_-_1rem)]",
        ],
    )
    def test_unchanged(self, default_system: UtilityDesignSystem, raw: str):
        """Without a unique equivalent the class is kept."""
        assert migrate(default_system, raw) == raw

    @pytest.mark.parametrize(
        "raw",
        ["bg-[#ef4444]", "[display:_flex_]", "p-[1px]", "w-[64rem]", "rounded-[0.25rem]"],
    )
    def test_idempotent(self, default_system: UtilityDesignSystem, raw: str):
        """Migrating a migrated class changes nothing."""
        once = migrate(default_system, raw)
        assert migrate(default_system, once) == once

    @pytest.mark.parametrize(
        "raw",
        ["bg-[#ef4444]/50", "text-[1.125rem]", "w-[64rem]", "opacity-[0.5]", "[display:flex]"],
    )
    def test_signature_preserved(self, default_system: UtilityDesignSystem, raw: str):
        """A rewrite never changes the generated declarations."""
        migrated = migrate(default_system, raw)
        assert migrated != raw
        assert compute_signature(default_system, migrated) == compute_signature(
            default_system, raw
        )


class TestVariableSafety:
    """Tests for all_variables_are_used."""

    def test_no_variables(self, design_system: UtilityDesignSystem):
        """Candidates without variables always pass."""
        [candidate] = design_system.parse_candidate("bg-[#ff0000]")
        [replacement] = design_system.parse_candidate("bg-red-500")
        assert all_variables_are_used(design_system, candidate, replacement) is True

    def test_variable_hidden_in_theme(self, design_system: UtilityDesignSystem):
        """A theme reference doesn't count as using the variable."""
        [candidate] = design_system.parse_candidate("text-[color:var(--brand,_#000)]")
        [replacement] = design_system.parse_candidate("text-brand")
        assert all_variables_are_used(design_system, candidate, replacement) is False

    def test_variable_redefined(self):
        """A replacement that sets the variable itself is rejected."""
        system = build_design_system(
            utilities=[
                {
                    "name": "pinned-brand",
                    "kind": "static",
                    "declarations": {"--brand": "red", "color": "var(--brand, #000)"},
                },
            ]
        )
        [candidate] = system.parse_candidate("[color:var(--brand,_#000)]")
        [replacement] = system.parse_candidate("pinned-brand")
        assert all_variables_are_used(system, candidate, replacement) is False

    def test_variable_name_prefix(self):
        """`--brand` is not used by `var(--brand-dark)`."""
        system = build_design_system(
            utilities=[
                {
                    "name": "dark-brand",
                    "kind": "static",
                    "declarations": {"color": "var(--brand-dark)"},
                },
            ]
        )
        [candidate] = system.parse_candidate("[color:var(--brand)]")
        [replacement] = system.parse_candidate("dark-brand")
        assert all_variables_are_used(system, candidate, replacement) is False


class TestCaches:
    """Tests for per-design-system caching."""

    def test_base_replacement_cached(self, design_system: UtilityDesignSystem):
        """Results are cached under the base candidate text."""
        assert migrate(design_system, "hover:bg-[#ff0000]!") == "hover:bg-red-500!"
        cached = caches_for(design_system).base_replacements["bg-[#ff0000]"]
        assert cached.variants == ()
        assert cached.important is False
        assert design_system.print_candidate(cached) == "bg-red-500"

    def test_cache_hit_skips_search(self, design_system: UtilityDesignSystem, monkeypatch):
        """A cached base is reused with new variants without searching again."""
        assert migrate(design_system, "bg-[#ff0000]") == "bg-red-500"

        class NoSearch:
            def __init__(self, design_system):
                raise AssertionError("search should not run")

        monkeypatch.setattr(engine, "ReplacementSearch", NoSearch)
        assert migrate(design_system, "md:bg-[#ff0000]!") == "md:bg-red-500!"

    def test_negative_not_cached(self, design_system: UtilityDesignSystem):
        """Failed searches leave no cache entry."""
        migrate(design_system, "[display:flex]")
        assert "[display:flex]" not in caches_for(design_system).base_replacements

    def test_resolve_non_arbitrary(self, design_system: UtilityDesignSystem):
        """resolve() ignores candidates that aren't arbitrary."""
        [candidate] = design_system.parse_candidate("m-4")
        assert resolve(design_system, candidate) is None

    def test_caches_are_per_instance(self):
        """Two design systems never share caches."""
        first = build_design_system()
        second = build_design_system(theme={"--color-red-500": "#ee0000"})
        assert caches_for(first) is caches_for(first)
        assert caches_for(first) is not caches_for(second)
        assert migrate(first, "bg-[#ff0000]") == "bg-red-500"
        assert migrate(second, "bg-[#ff0000]") == "bg-[#ff0000]"

    def test_reset(self, design_system: UtilityDesignSystem):
        """reset_caches() drops cached state."""
        before = caches_for(design_system)
        reset_caches(design_system)
        assert caches_for(design_system) is not before

    def test_dropped_with_design_system(self):
        """Caches go away with their design system."""
        system = build_design_system()
        migrate(system, "bg-[#ff0000]")
        key = id(system)
        assert key in cache_module._caches

        del system
        gc.collect()
        assert key not in cache_module._caches

    def test_concurrent_migrations(self, default_system: UtilityDesignSystem):
        """Warmed caches give the same answers from several threads."""
        warm_caches(default_system)
        classes = ["bg-[#ef4444]", "m-[1rem]", "w-[64rem]", "[display:flex]"] * 25

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda raw: migrate(default_system, raw), classes))

        assert results == ["bg-red-500", "m-4", "w-256", "flex"] * 25
