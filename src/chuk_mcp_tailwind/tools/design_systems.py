"""
Design system tools - MCP tools for design system discovery.

Tools for listing design systems, describing their catalogs, and copying
library design systems into the project for customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tailwind.constants import ErrorMessages, UtilityKind
from chuk_mcp_tailwind.design_system import DesignSystemLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_design_system_tools(
    mcp: ChukMCPServer,
    loader: DesignSystemLoader,
) -> dict[str, Any]:
    """
    Register design system tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The design system loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def utilities_list_design_systems() -> str:
        """
        List available design systems.

        Returns all design systems from the library and project.

        Returns:
            JSON string with list of design system summaries

        Example:
            utilities_list_design_systems()
        """
        try:
            systems = loader.list_design_systems()
            return json.dumps(
                {
                    "status": "success",
                    "design_systems": [s.model_dump() for s in systems],
                    "count": len(systems),
                }
            )
        except Exception as e:
            logger.exception("Failed to list design systems")
            return json.dumps({"status": "error", "message": str(e)})

    tools["utilities_list_design_systems"] = utilities_list_design_systems

    @mcp.tool  # type: ignore[arg-type]
    async def utilities_describe_design_system(name: str) -> str:
        """
        Get details about a design system.

        Returns the prefix, theme variables, variants and utility roots.

        Args:
            name: Design system name

        Returns:
            JSON string with design system details

        Example:
            utilities_describe_design_system(name="default")
        """
        try:
            system = loader.get_design_system(name)
            if system is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.DESIGN_SYSTEM_NOT_FOUND.format(name=name),
                    }
                )

            config = system.config
            return json.dumps(
                {
                    "status": "success",
                    "design_system": {
                        "name": config.name,
                        "description": config.description,
                        "prefix": config.prefix,
                        "theme": config.theme,
                        "variants": sorted(config.variants),
                        "static_utilities": [
                            u.name for u in config.utilities if u.kind == UtilityKind.STATIC
                        ],
                        "functional_roots": system.functional_roots(),
                        "catalog_size": len(system.get_class_list()),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe design system")
            return json.dumps({"status": "error", "message": str(e)})

    tools["utilities_describe_design_system"] = utilities_describe_design_system

    @mcp.tool  # type: ignore[arg-type]
    async def utilities_copy_design_system_to_project(name: str) -> str:
        """
        Copy a library design system into the project for customization.

        Args:
            name: Design system name

        Returns:
            JSON string with the path of the copied file

        Example:
            utilities_copy_design_system_to_project(name="default")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.DESIGN_SYSTEM_NOT_FOUND.format(name=name),
                    }
                )

            return json.dumps({"status": "success", "name": name, "path": str(path)})
        except Exception as e:
            logger.exception("Failed to copy design system")
            return json.dumps({"status": "error", "message": str(e)})

    tools["utilities_copy_design_system_to_project"] = utilities_copy_design_system_to_project

    return tools
