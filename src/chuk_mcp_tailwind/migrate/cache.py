"""
Per-design-system caches.

Everything the migration engine precomputes (signatures, the signature
index, the spacing table, resolved base replacements) lives in one
DesignSystemCaches struct per design system instance.

Caches are keyed by instance identity and dropped when the design system
is garbage collected. A design system must not change while its caches
are alive; call reset_caches() if it does.
"""

from __future__ import annotations

import threading
import weakref
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from chuk_mcp_tailwind.core.candidate import Candidate
from chuk_mcp_tailwind.design_system.protocol import DesignSystem

if TYPE_CHECKING:
    from chuk_mcp_tailwind.migrate.spacing import SpacingTable

K = TypeVar("K")
V = TypeVar("V")


class DefaultMap(dict[K, V]):
    """A dict that computes missing values from their key and stores them."""

    def __init__(self, factory: Callable[[K], V]):
        super().__init__()
        self._factory = factory

    def __missing__(self, key: K) -> V:
        value = self._factory(key)
        self[key] = value
        return value


@dataclass
class DesignSystemCaches:
    """
    All cached state for one design system.

    signatures          class text -> signature (None if not computable)
    index               signature -> catalog class names (built lazily)
    base_replacements   base candidate text -> base replacement candidate
    spacing             spacing multiplier table (built lazily)
    """

    signatures: DefaultMap[str, str | None] | None = None
    index: dict[str, list[str]] | None = None
    base_replacements: dict[str, Candidate] = field(default_factory=dict)
    spacing: SpacingTable | None = None


_caches: dict[int, DesignSystemCaches] = {}
_lock = threading.Lock()


def caches_for(design_system: DesignSystem) -> DesignSystemCaches:
    """Get (or create) the cache struct for a design system instance."""
    key = id(design_system)
    caches = _caches.get(key)
    if caches is not None:
        return caches

    with _lock:
        caches = _caches.get(key)
        if caches is None:
            caches = DesignSystemCaches()
            _caches[key] = caches
            # Drop the entry when the design system goes away so a new
            # object reusing the id starts clean
            weakref.finalize(design_system, _caches.pop, key, None)
        return caches


def reset_caches(design_system: DesignSystem | None = None) -> None:
    """
    Drop cached state.

    Args:
        design_system: Only reset this design system (default: all)
    """
    with _lock:
        if design_system is None:
            _caches.clear()
        else:
            _caches.pop(id(design_system), None)
