#!/usr/bin/env python3
"""
Example: Migrating arbitrary utilities.

This demonstrates how classes with arbitrary values are rewritten to the
named utilities of a design system, and why some are left alone.

Usage:
    python examples/migrate_classes.py
"""

from pathlib import Path

from chuk_mcp_tailwind.design_system import DesignSystemLoader
from chuk_mcp_tailwind.migrate import compute_signature, migrate_arbitrary_utilities

CLASSES = [
    "bg-[#ef4444]",
    "hover:bg-[#ef4444]/50",
    "md:m-[1rem]!",
    "[display:_flex_]",
    "text-[1.125rem]",
    "w-[64rem]",
    "rounded-[0.25rem]",
    "m-[13px]",
    "flex",
]


def main() -> None:
    """Demonstrate arbitrary utility migration."""
    print("CHUK Tailwind Migration Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_tailwind/design_system/library"
    loader = DesignSystemLoader(library_path=library_path)

    system = loader.get_design_system("default")
    if not system:
        print("Failed to load design system")
        return

    print(f"Using design system: {system.name}")
    print(f"  Catalog size: {len(system.get_class_list())} classes")
    print()

    print("Migrations:")
    for raw in CLASSES:
        migrated = migrate_arbitrary_utilities(system, None, raw)
        marker = "->" if migrated != raw else "=="
        print(f"  {raw:<24} {marker} {migrated}")
    print()

    # Signatures explain the decisions
    print("Signatures:")
    for name in ["bg-[#ef4444]", "bg-red-500", "rounded", "rounded-sm"]:
        print(f"  {name:<24} {compute_signature(system, name)}")
    print()
    print("rounded and rounded-sm share a signature, so rounded-[0.25rem] is kept.")


if __name__ == "__main__":
    main()
