"""
Variant Validator - optional strict checks for specs and selections.

Resolution itself never fails. Callers who want fail-fast behavior run this
pass first, or call resolve_strict().

Validates:
- Axis declarations have a supported shape
- Defaults name a registered option
- Compound rules reference declared axes and options
- Selections only name declared axes, with values of the right type
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from chuk_variants.constants import (
    RESET_STYLES_PROP,
    ErrorMessages,
    ResolvedMarker,
)
from chuk_variants.models.variant import (
    BooleanAxis,
    IgnoredAxis,
    OptionMapAxis,
    ResolutionResult,
    SelectionSet,
    VariantSpec,
)
from chuk_variants.variants.resolver import as_spec, resolve


class ValidationSeverity(str, Enum):
    """How seriously resolve_strict treats an issue."""

    ERROR = "error"  # resolve_strict refuses to resolve
    WARNING = "warning"  # Resolves, but probably not as intended


@dataclass(frozen=True)
class ValidationIssue:
    """One finding about a spec or selection."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is ValidationSeverity.ERROR

    def __str__(self) -> str:
        where = f" at {self.location}" if self.location else ""
        return f"[{self.severity.value.upper()}] {self.code}: {self.message}{where}"


@dataclass
class ValidationResult:
    """Issues found for a spec and optional selection, in discovery order."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        location: str | None = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, code, message, location))

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        self.add(ValidationSeverity.ERROR, code, message, location)

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        self.add(ValidationSeverity.WARNING, code, message, location)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if not issue.is_error]

    @property
    def is_valid(self) -> bool:
        """Warnings never make a result invalid."""
        return not self.errors

    @property
    def codes(self) -> list[str]:
        return [issue.code for issue in self.issues]

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(map(str, self.issues))


class VariantValidationError(ValueError):
    """Raised by resolve_strict when validation finds errors."""

    def __init__(self, result: ValidationResult):
        self.result = result
        message = ErrorMessages.VALIDATION_FAILED.format(count=len(result.errors))
        super().__init__(f"{message}\n{result}")


class VariantValidator:
    """Validates variant specs and selections."""

    def validate(
        self,
        spec: VariantSpec | Mapping[str, Any],
        selection: SelectionSet | None = None,
    ) -> ValidationResult:
        """
        Validate a spec, and a selection against it if given.

        Args:
            spec: A VariantSpec or flat declaration
            selection: Optional runtime selection

        Returns:
            ValidationResult with any issues found
        """
        spec = as_spec(spec)
        result = ValidationResult()

        self._validate_axes(spec, result)
        self._validate_compound(spec, result)
        if selection is not None:
            self._validate_selection(spec, selection, result)

        return result

    def _validate_axes(self, spec: VariantSpec, result: ValidationResult) -> None:
        """Validate axis declarations."""
        if not spec.axes:
            result.add_warning("NO_AXES", "Spec declares no variant axes", "axes")

        for name, axis in spec.axes.items():
            location = f"axes/{name}"

            if isinstance(axis, IgnoredAxis):
                result.add_error(
                    "MALFORMED_AXIS",
                    f"Axis '{name}' must be a string or an option mapping, "
                    f"got {type(axis.raw).__name__}",
                    location,
                )
                continue

            if not isinstance(axis, OptionMapAxis):
                continue

            if not axis.options:
                result.add_warning(
                    "EMPTY_OPTIONS",
                    f"Axis '{name}' declares no options",
                    location,
                )

            for option in axis.options:
                if option in (ResolvedMarker.CUSTOM.value, ResolvedMarker.RESET.value):
                    result.add_warning(
                        "RESERVED_OPTION_NAME",
                        f"Option '{option}' on axis '{name}' shadows a resolved marker",
                        f"{location}/{option}",
                    )

            if axis.default is not None and not axis.fragment_for(axis.default):
                result.add_warning(
                    "UNRESOLVED_DEFAULT",
                    f"Default '{axis.default}' of axis '{name}' is not a registered option "
                    "and will be used as a raw fragment",
                    f"{location}/_default",
                )

    def _validate_compound(self, spec: VariantSpec, result: ValidationResult) -> None:
        """Validate compound rules."""
        for index, rule in enumerate(spec.compound):
            location = f"compound/{index}"

            if not rule.conditions:
                result.add_error(
                    "EMPTY_COMPOUND_RULE",
                    f"Compound rule {index} has no conditions and would always match",
                    location,
                )

            if not rule.classes:
                result.add_warning(
                    "EMPTY_COMPOUND_CLASSES",
                    f"Compound rule {index} adds no classes",
                    location,
                )

            for axis_name, required in rule.conditions.items():
                axis = spec.axes.get(axis_name)
                if axis is None:
                    result.add_error(
                        "UNKNOWN_COMPOUND_AXIS",
                        f"Compound rule {index} references unknown axis: {axis_name}",
                        f"{location}/{axis_name}",
                    )
                elif (
                    isinstance(axis, OptionMapAxis)
                    and isinstance(required, str)
                    and required not in axis.options
                ):
                    result.add_warning(
                        "UNKNOWN_COMPOUND_OPTION",
                        f"Compound rule {index} requires '{required}', "
                        f"which is not an option of axis '{axis_name}'",
                        f"{location}/{axis_name}",
                    )

    def _validate_selection(
        self,
        spec: VariantSpec,
        selection: SelectionSet,
        result: ValidationResult,
    ) -> None:
        """Validate a runtime selection against the spec."""
        for name, value in selection.items():
            location = f"selection/{name}"

            if name == RESET_STYLES_PROP:
                if value is False or value is None:
                    result.add_warning(
                        "RESET_STYLES_FALSE" if value is False else "RESET_STYLES_NONE",
                        f"{RESET_STYLES_PROP}={value} still applies reset styles; "
                        "omit the key to resolve normally",
                        location,
                    )
                continue

            axis = spec.axes.get(name)
            if axis is None:
                result.add_error(
                    "UNKNOWN_AXIS",
                    f"Selection references unknown axis: {name}",
                    location,
                )
                continue

            if value is None:
                continue

            if isinstance(axis, BooleanAxis) and not isinstance(value, bool):
                result.add_warning(
                    "NON_BOOLEAN_SELECTION",
                    f"Boolean axis '{name}' only toggles on True, got {value!r}",
                    location,
                )
            elif isinstance(axis, OptionMapAxis) and not isinstance(value, str):
                result.add_warning(
                    "NON_STRING_SELECTION",
                    f"Option axis '{name}' ignores non-string value {value!r}",
                    location,
                )


def validate_variants(
    spec: VariantSpec | Mapping[str, Any],
    selection: SelectionSet | None = None,
) -> ValidationResult:
    """
    Convenience function to validate a spec and selection.

    Args:
        spec: A VariantSpec or flat declaration
        selection: Optional runtime selection

    Returns:
        ValidationResult with any issues found
    """
    validator = VariantValidator()
    return validator.validate(spec, selection)


def resolve_strict(
    spec: VariantSpec | Mapping[str, Any],
    selection: SelectionSet | None = None,
) -> ResolutionResult:
    """
    Validate, then resolve.

    Raises:
        VariantValidationError: If validation found any errors
    """
    spec = as_spec(spec)
    result = validate_variants(spec, selection or {})
    if not result.is_valid:
        raise VariantValidationError(result)
    return resolve(spec, selection)
