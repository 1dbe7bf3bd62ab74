"""
The design system interface the migration engine relies on.

Anything that can parse, print and compile candidates and describe its
catalog can be migrated against; UtilityDesignSystem is the reference
implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from chuk_mcp_tailwind.core.candidate import Candidate


@runtime_checkable
class DesignSystem(Protocol):
    """
    Collaborator interface for the migration engine.

    Implementations must not change while caches built from them are in
    use (see chuk_mcp_tailwind.migrate.cache).
    """

    prefix: str | None

    def parse_candidate(self, text: str) -> list[Candidate]:
        """Parse class text. May return several parses, or none."""
        ...

    def print_candidate(self, candidate: Candidate) -> str:
        """Print a candidate. Must be idempotent through parse_candidate."""
        ...

    def candidates_to_css(self, candidates: Sequence[str]) -> list[str | None]:
        """CSS for each class text, or None where it produces nothing."""
        ...

    def resolve_theme_value(self, key: str) -> str | None:
        """Look up a theme variable (`--spacing`)."""
        ...

    def get_class_list(self) -> list[tuple[str, list[str]]]:
        """Every named class in the catalog with the modifiers it supports."""
        ...

    def functional_roots(self) -> list[str]:
        """Roots of all functional utilities, in catalog order."""
        ...
