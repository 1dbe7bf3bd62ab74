"""
Core utility-class primitives.

These are the building blocks everything else composes on:
- Candidate: A parsed utility class (kind, root, value, modifier, variants)
- NamedValue / ArbitraryValue: The value part of a functional utility
- NamedModifier / ArbitraryModifier: The `/modifier` suffix
- Variant: A `hover:` / `md:` style prefix
- value_parser: CSS value expression trees
- Dimensions: Numbers with units and spacing multipliers
"""

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
    encode_arbitrary_value,
    print_candidate,
    print_modifier,
)
from chuk_mcp_tailwind.core.data_types import matches_data_type
from chuk_mcp_tailwind.core.dimension import (
    format_number,
    is_valid_spacing_multiplier,
    parse_dimension,
)

__all__ = [
    # Candidate
    "Candidate",
    "CandidateValue",
    "CandidateModifier",
    "NamedValue",
    "ArbitraryValue",
    "NamedModifier",
    "ArbitraryModifier",
    "Variant",
    "decode_arbitrary_value",
    "encode_arbitrary_value",
    "print_candidate",
    "print_modifier",
    # Data types
    "matches_data_type",
    # Dimensions
    "format_number",
    "is_valid_spacing_multiplier",
    "parse_dimension",
]
