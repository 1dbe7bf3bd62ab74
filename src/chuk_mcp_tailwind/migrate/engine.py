"""
Arbitrary utility migration.

Rewrites a class that uses an arbitrary value or property into a named
utility with exactly the same CSS:

    [display:_flex_]    -> [display:flex]      (canonicalized only)
    bg-[#ef4444]        -> bg-red-500
    hover:m-[1rem]!     -> hover:m-4!
    bg-[#ef4444]/50     -> bg-red-500/50

Pipeline:
    1. canonicalize  - re-print until the text is stable
    2. base cache    - strip variants/important, reuse earlier results
    3. search        - ReplacementSearch yields candidates best first
    4. validate      - same signature, all variables still referenced
    5. reassemble    - put the variants and important flag back

Any failure along the way means "no migration": the (canonicalized) input
comes back unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_tailwind.constants import MAX_CANONICALIZE_PASSES
from chuk_mcp_tailwind.core.candidate import Candidate
from chuk_mcp_tailwind.design_system.protocol import DesignSystem
from chuk_mcp_tailwind.migrate.cache import caches_for
from chuk_mcp_tailwind.migrate.index import signature_index
from chuk_mcp_tailwind.migrate.search import ReplacementSearch
from chuk_mcp_tailwind.migrate.signatures import signatures_for
from chuk_mcp_tailwind.migrate.spacing import spacing_table
from chuk_mcp_tailwind.migrate.variables import all_variables_are_used

logger = logging.getLogger(__name__)


def canonicalize(design_system: DesignSystem, raw_candidate: str) -> Candidate | None:
    """
    Parse and re-print a class until its text no longer changes.

    Only the first parse is considered. Returns None if the class doesn't
    parse, isn't an arbitrary utility, or never settles.

    Args:
        design_system: Design system to parse with
        raw_candidate: Class text as written

    Returns:
        The canonical candidate, or None
    """
    text = raw_candidate
    for _ in range(MAX_CANONICALIZE_PASSES):
        parsed = design_system.parse_candidate(text)
        if not parsed:
            return None

        candidate = parsed[0]
        if not candidate.is_arbitrary_utility:
            return None

        printed = design_system.print_candidate(candidate)
        if printed == text:
            return candidate
        text = printed

    logger.debug(f"Canonicalization of {raw_candidate!r} did not settle")
    # Fail closed: the caller falls back to the raw input, never an unsettled print
    return None


def resolve(design_system: DesignSystem, candidate: Candidate) -> Candidate | None:
    """
    Find a named replacement for a canonical arbitrary candidate.

    The search runs on the base candidate (no variants, not important) and
    successful results are cached per design system. The returned
    replacement carries the original variants and important flag.

    Args:
        design_system: Design system to search in
        candidate: Canonical candidate from canonicalize()

    Returns:
        The replacement candidate, or None if there is no proven equivalent
    """
    if not candidate.is_arbitrary_utility:
        return None

    base = candidate.base()
    base_text = design_system.print_candidate(base)
    cache = caches_for(design_system).base_replacements

    cached = cache.get(base_text)
    if cached is not None:
        return cached.replace(variants=candidate.variants, important=candidate.important)

    signatures = signatures_for(design_system)
    target_signature = signatures[base_text]
    if not isinstance(target_signature, str):
        return None

    for replacement in ReplacementSearch(design_system).candidates(target_signature, base):
        replacement_text = design_system.print_candidate(replacement)
        if signatures[replacement_text] != target_signature:
            continue

        if not all_variables_are_used(design_system, candidate, replacement):
            logger.debug(f"Rejected {replacement_text!r} for {base_text!r}: drops a variable")
            continue

        replacement = replacement.base()
        cache[base_text] = replacement
        logger.debug(f"Migrating {base_text!r} -> {replacement_text!r}")
        return replacement.replace(variants=candidate.variants, important=candidate.important)

    return None


def migrate_arbitrary_utilities(
    design_system: DesignSystem,
    user_config: Any,
    raw_candidate: str,
) -> str:
    """
    Migrate one class to a named utility with identical CSS.

    `user_config` is accepted so all template migrations share one call
    shape; this migration does not read it.

    Args:
        design_system: Design system to migrate against
        user_config: Project configuration (unused)
        raw_candidate: Class text as written

    Returns:
        The migrated class, the canonicalized class if no replacement was
        found, or the input unchanged if it isn't an arbitrary utility
    """
    candidate = canonicalize(design_system, raw_candidate)
    if candidate is None:
        return raw_candidate

    replacement = resolve(design_system, candidate)
    if replacement is None:
        return design_system.print_candidate(candidate)

    return design_system.print_candidate(replacement)


def warm_caches(design_system: DesignSystem) -> None:
    """
    Build the signature index and spacing table up front.

    Call once before migrating from several threads so the expensive
    first-use work isn't raced.
    """
    signature_index(design_system)
    spacing_table(design_system)
