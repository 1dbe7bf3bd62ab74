"""
Constants and enums for the utility migration system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class CandidateKind(str, Enum):
    """
    The three shapes a utility candidate can take.

    static      - a fixed class name (`flex`)
    functional  - a root plus a value (`bg-red-500`, `m-[16px]`)
    arbitrary   - an arbitrary property (`[display:flex]`)
    """

    STATIC = "static"
    FUNCTIONAL = "functional"
    ARBITRARY = "arbitrary"


class UtilityKind(str, Enum):
    """How a catalog utility is defined."""

    STATIC = "static"
    FUNCTIONAL = "functional"


class DataType(str, Enum):
    """Data types an arbitrary value can be hinted or inferred as."""

    COLOR = "color"
    LENGTH = "length"
    PERCENTAGE = "percentage"
    NUMBER = "number"


class ModifierKind(str, Enum):
    """What a `/modifier` suffix does to a functional utility."""

    OPACITY = "opacity"  # color-mix() with transparent
    LINE_HEIGHT = "line-height"  # adds a line-height declaration


# Fixed-point canonicalization never needs more passes than this
MAX_CANONICALIZE_PASSES = 32

# Theme key holding the base spacing unit
SPACING_THEME_KEY = "--spacing"

# Environment variable naming the project design systems directory
DESIGN_SYSTEMS_ENV = "CHUK_TAILWIND_DESIGN_SYSTEMS"

# Opacity modifiers listed in the catalog
OPACITY_SCALE: list[str] = [str(step) for step in range(0, 101, 5)]

# Schema versions
SchemaVersion = Literal["design-system/v1"]


class ErrorMessages:
    """Standardized error messages."""

    DESIGN_SYSTEM_NOT_FOUND = "Design system '{name}' not found."
    NO_PROJECT_PATH = "No project path configured"
    DESIGN_SYSTEM_EXISTS = "Design system already exists in project: {name}"
    UNKNOWN_THEME_NAMESPACE = "Theme namespace must start with '--': {key}"
    STATIC_WITHOUT_DECLARATIONS = "Static utility '{name}' has no declarations"
    FUNCTIONAL_WITHOUT_PROPERTIES = "Functional utility '{name}' has no properties"
