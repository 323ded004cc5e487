"""
Variant resolver - turns a selection into classes and resolved axis values.

Resolution runs in four fixed phases:
1. every declared axis gets an unresolved slot
2. a resetStyles selection short-circuits to the reset fragment
3. each axis resolves in declaration order, falling back to its default
4. compound rules append fragments based on the resolved values

Resolution is permissive: malformed declarations and unexpected selection
values contribute nothing instead of raising. See VariantValidator for the
strict counterpart.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from chuk_variants.constants import RESET_STYLES_PROP, ResolvedMarker
from chuk_variants.models.variant import (
    BooleanAxis,
    CompoundRule,
    OptionMapAxis,
    ResolutionResult,
    ResolvedValue,
    SelectionSet,
    VariantSpec,
)

logger = logging.getLogger(__name__)


class VariantResolver:
    """
    Resolves selections against a single variant spec.

    The resolver holds no per-call state, so one instance can serve any
    number of concurrent resolutions.
    """

    def __init__(self, spec: VariantSpec | Mapping[str, Any]):
        """
        Initialize the resolver with a spec.

        Args:
            spec: A VariantSpec, or a flat declaration to translate
        """
        self.spec = as_spec(spec)

    def resolve(self, selection: SelectionSet | None = None) -> ResolutionResult:
        """
        Resolve a selection.

        Args:
            selection: Axis name to selected value (bool, option name or raw
                fragment). None values count as unselected.

        Returns:
            Merged classes and the resolved value of every axis
        """
        selection = selection or {}
        resolved: dict[str, ResolvedValue] = dict.fromkeys(self.spec.axes)

        if is_reset_requested(selection):
            logger.debug("resetStyles present, skipping %d axes", len(resolved))
            return ResolutionResult(
                classes=self.spec.reset or "",
                selections=dict.fromkeys(resolved, ResolvedMarker.RESET),
            )

        class_list = self.spec.base

        for name, axis in self.spec.axes.items():
            if isinstance(axis, BooleanAxis):
                # Only a real True toggles the axis on
                if selection.get(name) is True:
                    resolved[name] = True
                    class_list += " " + axis.fragment
                else:
                    resolved[name] = False
                continue

            if not isinstance(axis, OptionMapAxis):
                continue

            value = selection.get(name)
            if value is not None:
                if isinstance(value, str):
                    resolved[name] = value
                    # Unregistered or empty options are used as raw fragments
                    class_list += " " + (axis.fragment_for(value) or value)
            elif axis.default:
                fragment = axis.fragment_for(axis.default)
                if fragment:
                    resolved[name] = axis.default
                    class_list += " " + fragment
                else:
                    resolved[name] = ResolvedMarker.CUSTOM
                    class_list += " " + axis.default

        for rule in self.spec.compound:
            if rule.classes and matches_rule(rule, resolved):
                class_list += " " + rule.classes

        return ResolutionResult(classes=class_list.strip(), selections=resolved)


def as_spec(spec: VariantSpec | Mapping[str, Any]) -> VariantSpec:
    """Return spec unchanged, or translate a flat declaration."""
    if isinstance(spec, VariantSpec):
        return spec
    return VariantSpec.from_declaration(spec)


def is_reset_requested(selection: SelectionSet) -> bool:
    """
    Check whether a selection switches to reset mode.

    Presence is what counts: the value is never examined, so False and None
    reset too. Only a missing key leaves normal resolution in place.
    """
    return RESET_STYLES_PROP in selection


def matches_rule(rule: CompoundRule, resolved: Mapping[str, ResolvedValue]) -> bool:
    """Check every condition of a rule against the resolved axis values."""
    return all(
        _strict_equals(resolved.get(axis), required) for axis, required in rule.conditions.items()
    )


def _strict_equals(actual: Any, required: Any) -> bool:
    """Equality without bool/int or marker/str coercion."""
    if isinstance(actual, (bool, ResolvedMarker)) or isinstance(required, (bool, ResolvedMarker)):
        return actual is required
    if actual is None or required is None:
        return actual is required
    return bool(actual == required)


def resolve(
    spec: VariantSpec | Mapping[str, Any],
    selection: SelectionSet | None = None,
) -> ResolutionResult:
    """
    Resolve a selection against a spec.

    Args:
        spec: A VariantSpec, or a flat declaration
        selection: Axis name to selected value

    Returns:
        ResolutionResult with merged classes and per-axis values
    """
    return VariantResolver(spec).resolve(selection)


def create_variants(
    declaration: VariantSpec | Mapping[str, Any],
    props: SelectionSet | None = None,
) -> dict[str, Any]:
    """
    Resolve and return the flat record.

    Example:
        create_variants(
            {"base": "btn", "size": {"sm": "text-sm", "lg": "text-lg", "_default": "sm"}},
            {"size": "lg"},
        )
        # {"classes": "btn text-lg", "size": "lg"}
    """
    return resolve(declaration, props).to_dict()
