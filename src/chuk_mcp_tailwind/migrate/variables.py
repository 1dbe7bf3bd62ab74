"""
Variable safety - a replacement must keep every variable the original used.

`[color:var(--brand,_#000)]` follows `--brand` when it is overridden
higher up in the document. A replacement with the same computed value but
without `var(--brand...)` in its CSS, or one that sets `--brand` itself,
would stop following it.
"""

from __future__ import annotations

import re

from chuk_mcp_tailwind.core.candidate import Candidate
from chuk_mcp_tailwind.core.value_parser import variable_references
from chuk_mcp_tailwind.design_system.protocol import DesignSystem


def all_variables_are_used(
    design_system: DesignSystem,
    candidate: Candidate,
    replacement: Candidate,
) -> bool:
    """
    Check that every variable in the candidate's value survives in the replacement.

    Args:
        design_system: Design system both candidates belong to
        candidate: The original arbitrary candidate
        replacement: The proposed replacement

    Returns:
        True if the migration keeps all variable references
    """
    value = candidate.raw_value if candidate.is_arbitrary_utility else None
    if value is None or "var(--" not in value:
        return True

    css = design_system.candidates_to_css([design_system.print_candidate(replacement)])
    replacement_css = "\n".join(rule for rule in css if rule)

    for variable in variable_references(value):
        used = re.compile(rf"var\({re.escape(variable)}[,)]\s*")
        if not used.search(replacement_css):
            return False
        # Setting the variable would shadow an inherited override
        if f"{variable}:" in replacement_css:
            return False

    return True
