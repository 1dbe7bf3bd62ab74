"""
Pydantic models for design systems.

This module provides:
- DesignSystemConfig: Complete design system definition (theme, variants, utilities)
- UtilityDefinition: A static or functional utility in the catalog
- DesignSystemMetadata: Lightweight listing info
"""

from chuk_mcp_tailwind.models.design_system import (
    DEFAULT_SPACING_SCALE,
    DEFAULT_VARIANTS,
    DesignSystemConfig,
    DesignSystemMetadata,
    UtilityDefinition,
)

__all__ = [
    "DEFAULT_SPACING_SCALE",
    "DEFAULT_VARIANTS",
    "DesignSystemConfig",
    "DesignSystemMetadata",
    "UtilityDefinition",
]
