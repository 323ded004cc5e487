"""
Pydantic models for the variant system.

This module provides:
- VariantSpec: Tagged form of a variant declaration
- BooleanAxis / OptionMapAxis / IgnoredAxis: Axis definitions
- CompoundRule: Classes applied when several axes match
- ResolutionResult: Merged classes plus resolved axis values
"""

from chuk_variants.models.variant import (
    AxisDef,
    BooleanAxis,
    CompoundRule,
    IgnoredAxis,
    OptionMapAxis,
    ResolutionResult,
    ResolvedValue,
    SelectionSet,
    VariantMetadata,
    VariantSpec,
)

__all__ = [
    "AxisDef",
    "BooleanAxis",
    "CompoundRule",
    "IgnoredAxis",
    "OptionMapAxis",
    "ResolutionResult",
    "ResolvedValue",
    "SelectionSet",
    "VariantMetadata",
    "VariantSpec",
]
