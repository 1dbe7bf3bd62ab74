"""
Design system model - the catalog layer.

A design system is a theme (CSS variables), a set of variants and a
catalog of utilities. Static utilities map a class name to fixed
declarations; functional utilities map a root plus a value to
declarations on one or more properties.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_tailwind.constants import (
    DataType,
    ErrorMessages,
    ModifierKind,
    SchemaVersion,
    UtilityKind,
)

DEFAULT_SPACING_SCALE: list[str] = [
    "0",
    "0.5",
    "1",
    "1.5",
    "2",
    "2.5",
    "3",
    "3.5",
    "4",
    "5",
    "6",
    "7",
    "8",
    "9",
    "10",
    "11",
    "12",
    "14",
    "16",
    "20",
    "24",
    "28",
    "32",
    "36",
    "40",
    "44",
    "48",
    "52",
    "56",
    "60",
    "64",
    "72",
    "80",
    "96",
]

DEFAULT_VARIANTS: dict[str, str] = {
    "hover": "&:hover",
    "focus": "&:focus",
    "active": "&:active",
    "disabled": "&:disabled",
    "first": "&:first-child",
    "last": "&:last-child",
    "sm": "@media (width >= 40rem)",
    "md": "@media (width >= 48rem)",
    "lg": "@media (width >= 64rem)",
    "xl": "@media (width >= 80rem)",
    "dark": "@media (prefers-color-scheme: dark)",
}


class UtilityDefinition(BaseModel):
    """
    A single utility in the catalog.

    Several functional definitions may share a name (root); the first
    one that accepts a value wins. `text` is both a color and a
    font-size utility, for example.
    """

    name: str = Field(..., description="Class name (static) or root (functional)")
    kind: UtilityKind = Field(UtilityKind.FUNCTIONAL, description="Utility kind")
    description: str = Field("", description="Human-readable description")

    # Static utilities
    declarations: dict[str, str] = Field(
        default_factory=dict, description="Fixed declarations for static utilities"
    )

    # Functional utilities
    properties: list[str] = Field(
        default_factory=list, description="Properties the value is written to"
    )
    theme_keys: list[str] = Field(
        default_factory=list, description="Theme namespaces searched for named values"
    )
    values: dict[str, str] = Field(
        default_factory=dict, description="Named values that are not in the theme"
    )
    spacing: bool = Field(False, description="Accept bare spacing multipliers")
    arbitrary: bool = Field(True, description="Accept arbitrary [values]")
    value_type: DataType | None = Field(
        None, description="Data type arbitrary values must match (None = any)"
    )
    modifier: ModifierKind | None = Field(None, description="What a /modifier does")
    default: str | None = Field(None, description="Value used when the root is bare")

    model_config = {"frozen": True}

    @field_validator("theme_keys")
    @classmethod
    def _theme_keys_are_variables(cls, value: list[str]) -> list[str]:
        for key in value:
            if not key.startswith("--"):
                raise ValueError(ErrorMessages.UNKNOWN_THEME_NAMESPACE.format(key=key))
        return value

    @model_validator(mode="after")
    def _check_kind(self) -> UtilityDefinition:
        if self.kind == UtilityKind.STATIC and not self.declarations:
            raise ValueError(ErrorMessages.STATIC_WITHOUT_DECLARATIONS.format(name=self.name))
        if self.kind == UtilityKind.FUNCTIONAL and not self.properties:
            raise ValueError(ErrorMessages.FUNCTIONAL_WITHOUT_PROPERTIES.format(name=self.name))
        return self


class DesignSystemConfig(BaseModel):
    """
    A complete design system definition.

    Loaded from YAML (see DesignSystemLoader) or built in code.
    """

    schema_version: SchemaVersion = Field(
        "design-system/v1", alias="schema", description="Schema version"
    )
    name: str = Field(..., description="Design system name")
    description: str = Field("", description="Human-readable description")
    prefix: str | None = Field(None, description="Class prefix, written as `prefix:`")

    theme: dict[str, str] = Field(default_factory=dict, description="Theme variables")
    spacing_scale: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SPACING_SCALE),
        description="Spacing multipliers listed in the catalog",
    )
    variants: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_VARIANTS),
        description="Variant name -> selector template (`&:hover`) or at-rule",
    )
    utilities: list[UtilityDefinition] = Field(
        default_factory=list, description="Utility catalog, in enumeration order"
    )

    model_config = {"populate_by_name": True}

    @field_validator("theme", mode="before")
    @classmethod
    def _stringify_theme(cls, value: object) -> object:
        # YAML turns `--opacity: 1` into an int
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value

    @field_validator("spacing_scale", mode="before")
    @classmethod
    def _stringify_scale(cls, value: object) -> object:
        if isinstance(value, list):
            return [str(v) for v in value]
        return value


class DesignSystemMetadata(BaseModel):
    """
    Lightweight design system metadata for listing/discovery.
    """

    name: str = Field(..., description="Design system name")
    description: str = Field("", description="Human-readable description")
    prefix: str | None = Field(None, description="Class prefix")
    utility_count: int = Field(0, description="Number of utility definitions")
    theme_size: int = Field(0, description="Number of theme variables")
    path: str | None = Field(None, description="Path to the YAML file")

    @classmethod
    def from_config(cls, config: DesignSystemConfig, path: str | None = None) -> DesignSystemMetadata:
        """Create metadata from a full config."""
        return cls(
            name=config.name,
            description=config.description,
            prefix=config.prefix,
            utility_count=len(config.utilities),
            theme_size=len(config.theme),
            path=path,
        )
