"""
chuk-variants - declarative style variants for class-based styling.

Declare axes of options once, then resolve runtime selections into a class
string plus a record of what was selected on each axis.
"""

from chuk_variants.classes import create_class, preserve_class
from chuk_variants.constants import ResolvedMarker
from chuk_variants.models import ResolutionResult, VariantSpec
from chuk_variants.variants import (
    VariantLoader,
    VariantResolver,
    VariantValidationError,
    VariantValidator,
    create_variants,
    resolve,
    resolve_strict,
    validate_variants,
)

__all__ = [
    "ResolutionResult",
    "ResolvedMarker",
    "VariantLoader",
    "VariantResolver",
    "VariantSpec",
    "VariantValidationError",
    "VariantValidator",
    "create_class",
    "create_variants",
    "preserve_class",
    "resolve",
    "resolve_strict",
    "validate_variants",
]
