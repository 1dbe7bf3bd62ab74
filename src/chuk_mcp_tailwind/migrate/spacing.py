"""
Spacing multipliers - express a dimension as a step of the spacing scale.

With `--spacing: 0.25rem`, `4rem` is step 16, so `w-[4rem]` can be
written `w-16`. Values in other units have no step.
"""

from __future__ import annotations

import math

from chuk_mcp_tailwind.constants import SPACING_THEME_KEY
from chuk_mcp_tailwind.core.dimension import parse_dimension
from chuk_mcp_tailwind.design_system.protocol import DesignSystem
from chuk_mcp_tailwind.migrate.cache import caches_for


class SpacingTable:
    """
    Raw value -> multiplier of the base spacing unit.

    A table without a base (the design system has no parseable
    `--spacing`) resolves everything to None.
    """

    def __init__(self, base: tuple[float, str] | None):
        self.base = base
        self._values: dict[str, float | None] = {}

    def multiplier_for(self, raw_value: str) -> float | None:
        """The multiplier for a raw value, or None if it has none."""
        if raw_value not in self._values:
            self._values[raw_value] = self._compute(raw_value)
        return self._values[raw_value]

    def _compute(self, raw_value: str) -> float | None:
        if self.base is None:
            return None
        base_value, base_unit = self.base
        if base_value == 0:
            return None

        parsed = parse_dimension(raw_value)
        if parsed is None:
            return None

        value, unit = parsed
        if unit != base_unit or not math.isfinite(value):
            return None

        return value / base_value


def spacing_table(design_system: DesignSystem) -> SpacingTable:
    """Get the spacing table for a design system, building it if needed."""
    caches = caches_for(design_system)
    if caches.spacing is None:
        base = None
        spacing = design_system.resolve_theme_value(SPACING_THEME_KEY)
        if spacing is not None:
            base = parse_dimension(spacing)
        caches.spacing = SpacingTable(base)
    return caches.spacing


def spacing_multiplier(design_system: DesignSystem, raw_value: str) -> float | None:
    """
    Map a raw dimension to a multiplier of the design system's spacing unit.

    Returns None if the design system has no spacing scale, the value
    doesn't parse, or the units differ.
    """
    return spacing_table(design_system).multiplier_for(raw_value)
