#!/usr/bin/env python3
"""
Async Tailwind Utility MCP Server using chuk-mcp-server

This server provides MCP tools for migrating utility classes that use
arbitrary values (`bg-[#ef4444]`, `[display:flex]`) to the named utilities
of a design system, but only when the named utility produces exactly the
same CSS.

The server provides tools for:
- Migrating single classes and lists of classes
- Inspecting class signatures and their catalog equivalents
- Design system discovery and customization
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tailwind.constants import DESIGN_SYSTEMS_ENV
from chuk_mcp_tailwind.design_system import DesignSystemLoader
from chuk_mcp_tailwind.tools import register_design_system_tools, register_migration_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tailwind")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
DESIGN_SYSTEMS_DIR = Path(os.environ.get(DESIGN_SYSTEMS_ENV, BASE_PATH / "design-systems"))
LIBRARY_PATH = Path(__file__).parent / "design_system" / "library"

# Create loader
design_system_loader = DesignSystemLoader(
    library_path=LIBRARY_PATH,
    project_path=DESIGN_SYSTEMS_DIR,
)

# Register all tools
migration_tools = register_migration_tools(mcp, design_system_loader)
design_system_tools = register_design_system_tools(mcp, design_system_loader)

# Export tool functions for direct access
utilities_migrate = migration_tools["utilities_migrate"]
utilities_migrate_batch = migration_tools["utilities_migrate_batch"]
utilities_signature = migration_tools["utilities_signature"]

utilities_list_design_systems = design_system_tools["utilities_list_design_systems"]
utilities_describe_design_system = design_system_tools["utilities_describe_design_system"]
utilities_copy_design_system_to_project = design_system_tools[
    "utilities_copy_design_system_to_project"
]

logger.info("CHUK Tailwind MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Design systems dir: {DESIGN_SYSTEMS_DIR}")
