"""
MCP tool implementations.

Tools are organized by domain:
- migration - Arbitrary utility migration and signatures
- design_systems - Design system discovery
"""

from chuk_mcp_tailwind.tools.design_systems import register_design_system_tools
from chuk_mcp_tailwind.tools.migration import register_migration_tools

__all__ = [
    "register_design_system_tools",
    "register_migration_tools",
]
