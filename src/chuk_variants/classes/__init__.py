"""
Class merging helpers used alongside variant resolution.
"""

from chuk_variants.classes.merge import (
    PreservedClasses,
    create_class,
    dedupe_classes,
    join_classes,
    preserve_class,
)

__all__ = [
    "PreservedClasses",
    "create_class",
    "dedupe_classes",
    "join_classes",
    "preserve_class",
]
