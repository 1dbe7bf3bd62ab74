"""
chuk-mcp-tailwind - migrate arbitrary utility classes to named utilities.

`bg-[#ef4444]` becomes `bg-red-500` when, and only when, the named
utility produces exactly the same CSS.
"""

from chuk_mcp_tailwind.design_system import DesignSystem, DesignSystemLoader, UtilityDesignSystem
from chuk_mcp_tailwind.migrate import migrate_arbitrary_utilities

__version__ = "0.1.0"

__all__ = [
    "DesignSystem",
    "DesignSystemLoader",
    "UtilityDesignSystem",
    "migrate_arbitrary_utilities",
]
