"""
Arbitrary utility migration - rewrite `[...]` classes to named utilities.

The pipeline:
    raw class → canonical candidate (fixed-point re-print)
    → base candidate (variants/important stripped, cached)
    → replacement search (signature index, spacing steps, functional roots)
    → validation (signature equality, variable safety)
    → migrated class
"""

from chuk_mcp_tailwind.migrate.cache import DesignSystemCaches, caches_for, reset_caches
from chuk_mcp_tailwind.migrate.engine import (
    canonicalize,
    migrate_arbitrary_utilities,
    resolve,
    warm_caches,
)
from chuk_mcp_tailwind.migrate.index import signature_index
from chuk_mcp_tailwind.migrate.search import ReplacementSearch
from chuk_mcp_tailwind.migrate.signatures import compute_signature, signatures_for
from chuk_mcp_tailwind.migrate.spacing import SpacingTable, spacing_multiplier
from chuk_mcp_tailwind.migrate.variables import all_variables_are_used

__all__ = [
    # Engine
    "canonicalize",
    "migrate_arbitrary_utilities",
    "resolve",
    "warm_caches",
    # Components
    "ReplacementSearch",
    "SpacingTable",
    "all_variables_are_used",
    "compute_signature",
    "signature_index",
    "signatures_for",
    "spacing_multiplier",
    # Caches
    "DesignSystemCaches",
    "caches_for",
    "reset_caches",
]
