"""
Migration tools - MCP tools for rewriting arbitrary utilities.

Tools for migrating single classes or lists of classes, and for
inspecting the signature a class is matched on.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tailwind.constants import ErrorMessages
from chuk_mcp_tailwind.design_system import DesignSystemLoader
from chuk_mcp_tailwind.migrate import (
    compute_signature,
    migrate_arbitrary_utilities,
    signature_index,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_migration_tools(
    mcp: ChukMCPServer,
    loader: DesignSystemLoader,
) -> dict[str, Any]:
    """
    Register migration tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The design system loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def not_found(name: str) -> str:
        return json.dumps(
            {
                "status": "error",
                "message": ErrorMessages.DESIGN_SYSTEM_NOT_FOUND.format(name=name),
            }
        )

    @mcp.tool  # type: ignore[arg-type]
    async def utilities_migrate(candidate: str, design_system: str = "default") -> str:
        """
        Migrate a class with an arbitrary value to a named utility.

        The class is only rewritten when a named utility produces exactly
        the same CSS and keeps every CSS variable the original used.
        Otherwise the (canonicalized) class is returned unchanged.

        Args:
            candidate: Class to migrate (e.g. "bg-[#ef4444]", "hover:m-[1rem]")
            design_system: Name of the design system to migrate against

        Returns:
            JSON string with the migrated class

        Example:
            utilities_migrate(candidate="bg-[#ef4444]")
        """
        try:
            system = loader.get_design_system(design_system)
            if system is None:
                return not_found(design_system)

            migrated = migrate_arbitrary_utilities(system, None, candidate)

            return json.dumps(
                {
                    "status": "success",
                    "input": candidate,
                    "output": migrated,
                    "changed": migrated != candidate,
                }
            )
        except Exception as e:
            logger.exception("Failed to migrate candidate")
            return json.dumps({"status": "error", "message": str(e)})

    tools["utilities_migrate"] = utilities_migrate

    @mcp.tool  # type: ignore[arg-type]
    async def utilities_migrate_batch(
        candidates: list[str],
        design_system: str = "default",
    ) -> str:
        """
        Migrate a list of classes independently.

        Each class is migrated on its own; repeated classes reuse cached
        results.

        Args:
            candidates: Classes to migrate
            design_system: Name of the design system to migrate against

        Returns:
            JSON string with one result per class

        Example:
            utilities_migrate_batch(candidates=["bg-[#ef4444]", "flex", "m-[1rem]"])
        """
        try:
            system = loader.get_design_system(design_system)
            if system is None:
                return not_found(design_system)

            results = []
            for candidate in candidates:
                migrated = migrate_arbitrary_utilities(system, None, candidate)
                results.append(
                    {"input": candidate, "output": migrated, "changed": migrated != candidate}
                )

            return json.dumps(
                {
                    "status": "success",
                    "results": results,
                    "changed_count": sum(1 for r in results if r["changed"]),
                }
            )
        except Exception as e:
            logger.exception("Failed to migrate candidates")
            return json.dumps({"status": "error", "message": str(e)})

    tools["utilities_migrate_batch"] = utilities_migrate_batch

    @mcp.tool  # type: ignore[arg-type]
    async def utilities_signature(candidate: str, design_system: str = "default") -> str:
        """
        Show the signature and CSS of a class.

        The signature is what migration matches on: two classes with the
        same signature produce the same declarations.

        Args:
            candidate: Class to inspect
            design_system: Name of the design system

        Returns:
            JSON string with the CSS, signature and equivalent catalog classes

        Example:
            utilities_signature(candidate="bg-red-500")
        """
        try:
            system = loader.get_design_system(design_system)
            if system is None:
                return not_found(design_system)

            css = system.candidates_to_css([candidate])[0]
            signature = compute_signature(system, candidate)
            equivalents = signature_index(system).get(signature, []) if signature else []

            return json.dumps(
                {
                    "status": "success",
                    "candidate": candidate,
                    "css": css,
                    "signature": signature,
                    "equivalents": equivalents,
                }
            )
        except Exception as e:
            logger.exception("Failed to compute signature")
            return json.dumps({"status": "error", "message": str(e)})

    tools["utilities_signature"] = utilities_signature

    return tools
