"""
Tests for core primitives.

Tests cover:
- Candidate printing and arbitrary value encoding
- CSS value parsing and variable references
- Dimensions and spacing multipliers
- Data type checks
"""

from chuk_mcp_tailwind.constants import CandidateKind, DataType
from chuk_mcp_tailwind.core import (
    ArbitraryModifier,
    ArbitraryValue,
    Candidate,
    NamedModifier,
    NamedValue,
    Variant,
    decode_arbitrary_value,
    encode_arbitrary_value,
    format_number,
    is_valid_spacing_multiplier,
    matches_data_type,
    parse_dimension,
    print_candidate,
    print_modifier,
)
from chuk_mcp_tailwind.core import value_parser
from chuk_mcp_tailwind.core.value_parser import (
    FunctionNode,
    SeparatorNode,
    WalkAction,
    WordNode,
)


class TestArbitraryValueEncoding:
    """Tests for bracketed value encoding."""

    def test_underscores_become_spaces(self):
        """Underscores decode to spaces."""
        assert decode_arbitrary_value("var(--brand,_#000)") == "var(--brand, #000)"

    def test_whitespace_is_trimmed(self):
        """Leading and trailing underscores are dropped."""
        assert decode_arbitrary_value("_flex_") == "flex"
        assert decode_arbitrary_value("1px__solid") == "1px solid"

    def test_escaped_underscore(self):
        """An escaped underscore stays an underscore."""
        assert decode_arbitrary_value("a\\_b") == "a_b"
        assert encode_arbitrary_value("a_b") == "a\\_b"

    def test_url_untouched(self):
        """url() values keep their underscores."""
        assert decode_arbitrary_value("url(/img_1.png)") == "url(/img_1.png)"
        assert encode_arbitrary_value("url(/img_1.png)") == "url(/img_1.png)"

    def test_encode_spaces(self):
        """Spaces encode to underscores."""
        assert encode_arbitrary_value("var(--brand, #000)") == "var(--brand,_#000)"


class TestCandidate:
    """Tests for the Candidate model."""

    def test_arbitrary_property_is_arbitrary(self):
        """Arbitrary properties are arbitrary utilities."""
        candidate = Candidate(CandidateKind.ARBITRARY, "display", ArbitraryValue("flex"))
        assert candidate.is_arbitrary_utility is True
        assert candidate.raw_value == "flex"

    def test_functional_arbitrary_value(self):
        """Functional utilities are arbitrary only with an arbitrary value."""
        arbitrary = Candidate(CandidateKind.FUNCTIONAL, "bg", ArbitraryValue("#fff"))
        named = Candidate(CandidateKind.FUNCTIONAL, "bg", NamedValue("red-500"))
        assert arbitrary.is_arbitrary_utility is True
        assert named.is_arbitrary_utility is False

    def test_static_is_not_arbitrary(self):
        """Static utilities are never arbitrary."""
        assert Candidate(CandidateKind.STATIC, "flex").is_arbitrary_utility is False

    def test_base_strips_variants_and_important(self):
        """base() drops variants and the important flag only."""
        candidate = Candidate(
            CandidateKind.FUNCTIONAL,
            "bg",
            ArbitraryValue("#fff"),
            NamedModifier("50"),
            variants=(Variant("hover"),),
            important=True,
        )
        base = candidate.base()
        assert base.variants == ()
        assert base.important is False
        assert base.modifier == NamedModifier("50")
        assert base.value == candidate.value

    def test_candidates_are_immutable_values(self):
        """Equal fields compare equal and hash the same."""
        a = Candidate(CandidateKind.STATIC, "flex")
        b = Candidate(CandidateKind.STATIC, "flex")
        assert a == b
        assert hash(a) == hash(b)


class TestPrintCandidate:
    """Tests for printing candidates."""

    def test_print_static(self):
        """Static candidates print their name."""
        assert print_candidate(Candidate(CandidateKind.STATIC, "flex")) == "flex"

    def test_print_arbitrary_property(self):
        """Arbitrary properties print in brackets with encoded spaces."""
        candidate = Candidate(
            CandidateKind.ARBITRARY, "grid-template-columns", ArbitraryValue("1fr 2fr")
        )
        assert print_candidate(candidate) == "[grid-template-columns:1fr_2fr]"

    def test_print_typed_value(self):
        """Typed arbitrary values keep their type hint."""
        candidate = Candidate(
            CandidateKind.FUNCTIONAL,
            "text",
            ArbitraryValue("var(--brand, #000)", DataType.COLOR),
        )
        assert print_candidate(candidate) == "text-[color:var(--brand,_#000)]"

    def test_print_full_candidate(self):
        """Prefix, variants, modifier and important all print."""
        candidate = Candidate(
            CandidateKind.FUNCTIONAL,
            "bg",
            NamedValue("red-500"),
            NamedModifier("50"),
            variants=(Variant("md"), Variant("&:hover", arbitrary=True)),
            important=True,
        )
        assert print_candidate(candidate, "tw") == "tw:md:[&:hover]:bg-red-500/50!"

    def test_print_bare_root(self):
        """A functional candidate without a value prints its root."""
        assert print_candidate(Candidate(CandidateKind.FUNCTIONAL, "rounded")) == "rounded"

    def test_print_modifier(self):
        """Modifiers print with their slash."""
        assert print_modifier(None) == ""
        assert print_modifier(NamedModifier("50")) == "/50"
        assert print_modifier(ArbitraryModifier("50%")) == "/[50%]"


class TestValueParser:
    """Tests for the CSS value parser."""

    def test_parse_var_with_fallback(self):
        """var() with a fallback parses to a function node."""
        nodes = value_parser.parse("var(--brand, #000)")
        assert nodes == [
            FunctionNode(
                "var",
                [WordNode("--brand"), SeparatorNode(", "), WordNode("#000")],
            )
        ]

    def test_separators_normalized(self):
        """Whitespace runs collapse and commas keep one space."""
        nodes = value_parser.parse("1px   solid ,red")
        assert value_parser.to_css(nodes) == "1px solid, red"

    def test_round_trip(self):
        """Normalized values print back unchanged."""
        for value in ("calc(var(--spacing) * 4)", "color-mix(in oklab, #fff 50%, transparent)"):
            assert value_parser.to_css(value_parser.parse(value)) == value

    def test_quoted_strings_kept(self):
        """Parentheses inside quotes are not calls."""
        nodes = value_parser.parse('"a (b)"')
        assert nodes == [WordNode('"a (b)"')]

    def test_walk_skip_and_stop(self):
        """SKIP stops descent, STOP aborts the walk."""
        nodes = value_parser.parse("calc(var(--a) * 2) var(--b)")
        seen: list[str] = []

        def skip_calc(node):
            if isinstance(node, FunctionNode):
                seen.append(node.value)
                if node.value == "calc":
                    return WalkAction.SKIP
            return None

        assert value_parser.walk(nodes, skip_calc) is True
        assert seen == ["calc", "var"]

        def stop_at_first(node):
            return WalkAction.STOP

        assert value_parser.walk(nodes, stop_at_first) is False

    def test_map_nodes(self):
        """map_nodes replaces matching nodes."""
        nodes = value_parser.parse("calc(var(--spacing) * 4)")

        def substitute(node):
            if isinstance(node, FunctionNode) and node.value == "var":
                return WordNode("0.25rem")
            return None

        assert value_parser.to_css(value_parser.map_nodes(nodes, substitute)) == (
            "calc(0.25rem * 4)"
        )

    def test_variable_references(self):
        """Nested variable references are found in order."""
        assert value_parser.variable_references("var(--a, var(--b))") == ["--a", "--b"]
        assert value_parser.variable_references("#fff") == []


class TestDimension:
    """Tests for dimensions."""

    def test_parse_dimension(self):
        """Dimensions split into value and unit."""
        assert parse_dimension("16px") == (16.0, "px")
        assert parse_dimension("0.25REM") == (0.25, "rem")
        assert parse_dimension("50%") == (50.0, "%")
        assert parse_dimension("4") == (4.0, "")
        assert parse_dimension("-.5rem") == (-0.5, "rem")

    def test_parse_dimension_rejects(self):
        """Non-dimensions return None."""
        assert parse_dimension("flex") is None
        assert parse_dimension("1px solid") is None
        assert parse_dimension("calc(1px)") is None

    def test_format_number(self):
        """Numbers print without trailing zeros."""
        assert format_number(16.0) == "16"
        assert format_number(0.5) == "0.5"
        assert format_number(12.5) == "12.5"
        assert format_number(0.0) == "0"

    def test_spacing_multiplier_validity(self):
        """Spacing multipliers are non-negative quarter steps."""
        assert is_valid_spacing_multiplier("4") is True
        assert is_valid_spacing_multiplier("1.5") is True
        assert is_valid_spacing_multiplier("0.25") is True
        assert is_valid_spacing_multiplier(256.0) is True
        assert is_valid_spacing_multiplier("0.3") is False
        assert is_valid_spacing_multiplier("tight") is False
        assert is_valid_spacing_multiplier("4px") is False
        assert is_valid_spacing_multiplier(-1.0) is False

    def test_huge_numbers_are_not_steps(self):
        """Digit strings too long for a float are not spacing multipliers."""
        assert is_valid_spacing_multiplier("9" * 400) is False
        assert is_valid_spacing_multiplier(float("inf")) is False
        assert is_valid_spacing_multiplier(float("nan")) is False


class TestDataTypes:
    """Tests for data type checks."""

    def test_colors(self):
        """Hex, named and functional colors match."""
        assert matches_data_type("#ef4444", DataType.COLOR) is True
        assert matches_data_type("red", DataType.COLOR) is True
        assert matches_data_type("rgb(0 0 0)", DataType.COLOR) is True
        assert matches_data_type("1rem", DataType.COLOR) is False

    def test_lengths(self):
        """Units, zero and math functions are lengths."""
        assert matches_data_type("1rem", DataType.LENGTH) is True
        assert matches_data_type("0", DataType.LENGTH) is True
        assert matches_data_type("calc(100% - 1rem)", DataType.LENGTH) is True
        assert matches_data_type("4", DataType.LENGTH) is False

    def test_numbers_and_percentages(self):
        """Plain numbers and percentages are distinct."""
        assert matches_data_type("0.5", DataType.NUMBER) is True
        assert matches_data_type("50%", DataType.NUMBER) is False
        assert matches_data_type("50%", DataType.PERCENTAGE) is True

    def test_variables_match_anything(self):
        """A var() can stand in for any type."""
        for data_type in DataType:
            assert matches_data_type("var(--x)", data_type) is True
