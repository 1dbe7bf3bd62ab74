"""
Design system loader - discovers and loads design system definitions.

Design systems can come from:
1. Built-in library (shipped with package)
2. Project design systems (user's project/design-systems directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_tailwind.constants import ErrorMessages
from chuk_mcp_tailwind.design_system.system import UtilityDesignSystem
from chuk_mcp_tailwind.models.design_system import DesignSystemConfig, DesignSystemMetadata

logger = logging.getLogger(__name__)


class DesignSystemLoader:
    """
    Discovers and loads design systems.

    Design systems are loaded from YAML files in the library and project
    directories. Project files override library files with the same name.

    Loaded design systems are cached: the migration engine keys its own
    caches on design system identity, so handing out the same instance
    for a name keeps those caches warm.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Path to built-in design system library
            project_path: Path to project design systems directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, UtilityDesignSystem] = {}

    def list_design_systems(self) -> list[DesignSystemMetadata]:
        """
        List all available design systems.

        Returns design systems from both library and project, with project
        definitions taking precedence.
        """
        found: dict[str, DesignSystemMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                config = self._load_config_file(path)
                if config:
                    found[config.name] = DesignSystemMetadata.from_config(config, str(path))

        return sorted(found.values(), key=lambda m: m.name)

    def get_design_system(self, name: str) -> UtilityDesignSystem | None:
        """
        Get a design system by name.

        Project design systems take precedence over library ones.

        Args:
            name: Design system name (file stem)

        Returns:
            UtilityDesignSystem if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if not path.exists():
                continue
            config = self._load_config_file(path)
            if config:
                system = UtilityDesignSystem(config)
                self._cache[name] = system
                logger.debug(f"Loaded design system '{name}' from {path}")
                return system

        return None

    def register(self, system: UtilityDesignSystem, name: str | None = None) -> str:
        """
        Register a design system programmatically.

        Useful for testing or dynamically built design systems.

        Args:
            system: Design system to register
            name: Optional name (defaults to the system's own name)

        Returns:
            The registered name
        """
        name = name or system.name
        self._cache[name] = system
        return name

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library design system to the project for customization.

        Args:
            name: Design system name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.DESIGN_SYSTEM_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def _load_config_file(self, path: Path) -> DesignSystemConfig | None:
        """Load a design system config from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_config(data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError):
            logger.warning(f"Skipping unreadable design system file: {path}")
            return None

    def _parse_config(self, data: dict[str, Any]) -> DesignSystemConfig:
        """Parse a config from YAML data."""
        if not isinstance(data, dict):
            raise TypeError("Design system file must contain a mapping")
        return DesignSystemConfig.model_validate(data)

    def clear_cache(self) -> None:
        """Clear the design system cache."""
        self._cache.clear()
