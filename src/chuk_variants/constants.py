"""
Constants and enums for the variant system.

No magic strings - use enums for reserved keys and resolved markers.
"""

from enum import Enum


class ReservedKey(str, Enum):
    """Keys in a flat variant declaration that are not axes."""

    BASE = "base"  # Always-applied fragment
    RESET = "reset"  # Fragment used instead of everything else on reset
    COMPOUND = "compound"  # Ordered list of compound rules


class ResolvedMarker(Enum):
    """
    Out-of-band resolved values for an axis.

    Deliberately not a str subclass: a marker never compares equal to an
    option that happens to be named "_custom" or "_reset".
    """

    RESET = "_reset"  # resetStyles was passed
    CUSTOM = "_custom"  # default is a raw fragment, not an option name

    def __str__(self) -> str:
        return self.value


RESERVED_KEYS: frozenset[str] = frozenset(key.value for key in ReservedKey)

# Option-map key naming the option (or raw fragment) used when unselected
DEFAULT_OPTION_KEY = "_default"

# Compound rule key holding the fragment to append on match
COMPOUND_CLASSES_KEY = "classes"

# Selection key that switches resolution to reset mode
RESET_STYLES_PROP = "resetStyles"

# Declaration file schema
VARIANTS_SCHEMA = "variants/v1"


class ErrorMessages:
    """Standardized error messages."""

    NO_PROJECT_PATH = "No project path configured"
    VARIANTS_EXIST = "Variants already exist in project: {name}"
    VALIDATION_FAILED = "Variant validation failed with {count} error(s)"
