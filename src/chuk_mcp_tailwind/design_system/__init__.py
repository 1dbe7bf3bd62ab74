"""
Design systems - the catalog a candidate is migrated against.

A design system parses and prints candidates, compiles them to CSS and
enumerates its named utilities. The migration engine only depends on the
DesignSystem protocol; UtilityDesignSystem is the YAML-driven reference
implementation.
"""

from chuk_mcp_tailwind.design_system.loader import DesignSystemLoader
from chuk_mcp_tailwind.design_system.protocol import DesignSystem
from chuk_mcp_tailwind.design_system.system import UtilityDesignSystem, escape_class_name

__all__ = [
    "DesignSystem",
    "DesignSystemLoader",
    "UtilityDesignSystem",
    "escape_class_name",
]
