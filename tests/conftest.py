"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tailwind.design_system import DesignSystemLoader, UtilityDesignSystem
from chuk_mcp_tailwind.migrate import reset_caches


def build_design_system(
    *,
    spacing: str | None = "0.25rem",
    prefix: str | None = None,
    theme: dict[str, str] | None = None,
    utilities: list[dict[str, Any]] | None = None,
) -> UtilityDesignSystem:
    """Build a small design system for tests."""
    full_theme: dict[str, str] = {}
    if spacing is not None:
        full_theme["--spacing"] = spacing
    full_theme.update(
        {
            "--color-red-500": "#ff0000",
            "--color-blue-500": "#0000ff",
            "--color-brand": "var(--brand, #000)",
        }
    )
    full_theme.update(theme or {})

    return UtilityDesignSystem.from_dict(
        {
            "name": "test",
            "prefix": prefix,
            "theme": full_theme,
            "utilities": utilities
            if utilities is not None
            else [
                {"name": "block", "kind": "static", "declarations": {"display": "block"}},
                {"name": "m", "properties": ["margin"], "spacing": True, "value_type": "length"},
                {
                    "name": "p",
                    "properties": ["padding"],
                    "spacing": True,
                    "value_type": "length",
                    "modifier": "line-height",
                },
                {"name": "w", "properties": ["width"], "spacing": True},
                {
                    "name": "bg",
                    "properties": ["background-color"],
                    "theme_keys": ["--color"],
                    "value_type": "color",
                    "modifier": "opacity",
                },
                {
                    "name": "text",
                    "properties": ["color"],
                    "theme_keys": ["--color"],
                    "value_type": "color",
                    "modifier": "opacity",
                },
            ],
        }
    )


@pytest.fixture(autouse=True)
def _fresh_migration_caches():
    """Every test starts with empty migration caches."""
    reset_caches()
    yield
    reset_caches()


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def design_system() -> UtilityDesignSystem:
    """Small design system with a 0.25rem spacing scale."""
    return build_design_system()


@pytest.fixture
def px_design_system() -> UtilityDesignSystem:
    """Small design system with a 4px spacing scale."""
    return build_design_system(spacing="4px")


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in design system library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_tailwind" / "design_system" / "library"


@pytest.fixture
def default_system(library_path: Path) -> UtilityDesignSystem:
    """The built-in default design system."""
    system = DesignSystemLoader(library_path=library_path).get_design_system("default")
    assert system is not None
    return system
