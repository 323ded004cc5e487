"""
Variant system - resolve declarative variant groups into class strings.

Declarations describe axes of options; a selection picks among them at
runtime. The resolver is permissive, the validator is strict.
"""

from chuk_variants.variants.loader import VariantLoader
from chuk_variants.variants.resolver import (
    VariantResolver,
    create_variants,
    resolve,
)
from chuk_variants.variants.validator import (
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    VariantValidationError,
    VariantValidator,
    resolve_strict,
    validate_variants,
)

__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "VariantLoader",
    "VariantResolver",
    "VariantValidationError",
    "VariantValidator",
    "create_variants",
    "resolve",
    "resolve_strict",
    "validate_variants",
]
