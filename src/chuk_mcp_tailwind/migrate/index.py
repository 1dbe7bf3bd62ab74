"""
Signature index - signature -> catalog class names.

Built once per design system from its full class list. Functional
utilities are expanded with their modifiers, except numeric ones: those
are spacing-multiplier shaped (`/50`, `/6`) and can be rebuilt on demand
by the replacement search, while listing them would multiply the index
size by the length of the modifier scale.
"""

from __future__ import annotations

import logging

from chuk_mcp_tailwind.core.dimension import is_valid_spacing_multiplier
from chuk_mcp_tailwind.design_system.protocol import DesignSystem
from chuk_mcp_tailwind.migrate.cache import caches_for
from chuk_mcp_tailwind.migrate.signatures import signatures_for

logger = logging.getLogger(__name__)


def signature_index(design_system: DesignSystem) -> dict[str, list[str]]:
    """
    Get the signature index for a design system, building it if needed.

    Buckets keep catalog order. A bucket with more than one name means the
    signature is ambiguous.
    """
    caches = caches_for(design_system)
    if caches.index is None:
        caches.index = build_signature_index(design_system)
    return caches.index


def build_signature_index(design_system: DesignSystem) -> dict[str, list[str]]:
    """Build the signature index from scratch."""
    signatures = signatures_for(design_system)
    index: dict[str, list[str]] = {}

    for class_name, modifiers in design_system.get_class_list():
        signature = signatures[class_name]
        if not isinstance(signature, str):
            continue
        index.setdefault(signature, []).append(class_name)

        for modifier in modifiers:
            if is_valid_spacing_multiplier(modifier):
                continue

            with_modifier = f"{class_name}/{modifier}"
            signature = signatures[with_modifier]
            if not isinstance(signature, str):
                continue
            index.setdefault(signature, []).append(with_modifier)

    logger.debug(
        f"Built signature index: {sum(len(b) for b in index.values())} classes, "
        f"{len(index)} signatures"
    )
    return index


def lookup(design_system: DesignSystem, signature: str) -> list[str]:
    """Catalog class names with this signature (empty if none)."""
    return signature_index(design_system).get(signature, [])
