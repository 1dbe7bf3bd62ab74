"""
Replacement search - candidate replacements for a signature, best first.

The search is a generator: the engine validates each yielded candidate and
stops at the first one that holds, so later (more speculative) candidates
are never built when an earlier one works.

Order:
    1. ambiguous index bucket      -> nothing
    2. empty bucket + modifier     -> search without the modifier, re-add it
    3. single-entry bucket         -> that class
    4. empty bucket                -> every functional root with the raw value
                                      (bare, spacing step, arbitrary),
                                      each with and without the modifier
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chuk_mcp_tailwind.core.candidate import (
    Candidate,
    encode_arbitrary_value,
    print_modifier,
)
from chuk_mcp_tailwind.core.dimension import format_number
from chuk_mcp_tailwind.design_system.protocol import DesignSystem
from chuk_mcp_tailwind.migrate.index import lookup
from chuk_mcp_tailwind.migrate.signatures import signatures_for, with_prefix
from chuk_mcp_tailwind.migrate.spacing import spacing_multiplier

logger = logging.getLogger(__name__)


def parse_with_prefix(design_system: DesignSystem, text: str) -> list[Candidate]:
    """Parse a catalog-style class name, adding the design system prefix if set."""
    return design_system.parse_candidate(with_prefix(design_system, text))


class ReplacementSearch:
    """
    Generates replacement candidates for arbitrary utilities.

    Usage:
        search = ReplacementSearch(design_system)
        for replacement in search.candidates(signature, base_candidate):
            ...
    """

    def __init__(self, design_system: DesignSystem):
        """
        Initialize the search.

        Args:
            design_system: Design system to search in
        """
        self.design_system = design_system
        self.signatures = signatures_for(design_system)

    def candidates(self, target_signature: str, candidate: Candidate) -> Iterator[Candidate]:
        """
        Yield replacement candidates for a base candidate, in priority order.

        Args:
            target_signature: Signature the replacement must reproduce
            candidate: The base candidate (no variants, not important)

        Yields:
            Candidates to validate; nothing if the signature is ambiguous
        """
        replacements = lookup(self.design_system, target_signature)

        # No rule for picking between several equivalent classes
        if len(replacements) > 1:
            logger.debug(f"Ambiguous signature {target_signature!r}: {replacements}")
            return

        if not replacements and candidate.modifier is not None:
            yield from self._without_modifier(candidate)

        if len(replacements) == 1:
            yield from parse_with_prefix(self.design_system, replacements[0])
        else:
            yield from self._functional_derivations(candidate)

    def _without_modifier(self, candidate: Candidate) -> Iterator[Candidate]:
        """
        Search for the candidate without its modifier, then re-add it.

        Only unmodified classes are indexed for numeric modifiers, so
        `bg-[#ef4444]/50` is found through `bg-[#ef4444]` -> `bg-red-500`.
        """
        stripped = candidate.replace(modifier=None)
        signature = self.signatures[self.design_system.print_candidate(stripped)]
        if not isinstance(signature, str):
            return

        for replacement in self.candidates(signature, stripped):
            yield replacement.replace(modifier=candidate.modifier)

    def _functional_derivations(self, candidate: Candidate) -> Iterator[Candidate]:
        """Try the raw value against every functional root."""
        value = candidate.raw_value
        if value is None:
            return

        modifier = print_modifier(candidate.modifier)
        multiplier = spacing_multiplier(self.design_system, value)
        arbitrary = f"[{encode_arbitrary_value(value)}]"

        for root in self.design_system.functional_roots():
            # Bare value
            yield from self._parse(f"{root}-{value}")
            if modifier:
                yield from self._parse(f"{root}-{value}{modifier}")

            # Spacing step: `w-[64rem]` -> `w-256`
            if multiplier is not None:
                step = format_number(multiplier)
                yield from self._parse(f"{root}-{step}")
                if modifier:
                    yield from self._parse(f"{root}-{step}{modifier}")

            # Arbitrary value on a named root
            yield from self._parse(f"{root}-{arbitrary}")
            if modifier:
                yield from self._parse(f"{root}-{arbitrary}{modifier}")

    def _parse(self, text: str) -> list[Candidate]:
        return parse_with_prefix(self.design_system, text)
