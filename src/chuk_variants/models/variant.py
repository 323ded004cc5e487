"""
Variant models - the declarative side of the variant system.

A flat declaration mixes reserved keys (base, reset, compound) with axis
keys. It is translated once into a tagged VariantSpec so resolution never
has to re-inspect value types.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from chuk_variants.constants import (
    COMPOUND_CLASSES_KEY,
    DEFAULT_OPTION_KEY,
    RESERVED_KEYS,
    ReservedKey,
    ResolvedMarker,
)

ResolvedValue = Union[str, bool, ResolvedMarker, None]


class BooleanAxis(BaseModel):
    """An axis toggled on by a boolean True selection."""

    kind: Literal["boolean"] = "boolean"
    fragment: str = Field(..., description="Fragment appended when toggled on")

    model_config = {"frozen": True}


class OptionMapAxis(BaseModel):
    """An axis with mutually exclusive named options."""

    kind: Literal["options"] = "options"
    options: dict[str, str | None] = Field(
        default_factory=dict,
        description="Option name to fragment (None or empty means no fragment)",
    )
    default: str | None = Field(
        default=None,
        description="Option name, or raw fragment, used when unselected",
    )

    model_config = {"frozen": True}

    def fragment_for(self, name: str) -> str | None:
        """Get the non-empty fragment registered for an option, if any."""
        return self.options.get(name) or None


class IgnoredAxis(BaseModel):
    """
    An axis declared with an unsupported shape.

    It keeps its slot in the result but never contributes.
    """

    kind: Literal["ignored"] = "ignored"
    raw: Any = Field(default=None, description="The declared value, as given")

    model_config = {"frozen": True}


AxisDef = Annotated[
    Union[BooleanAxis, OptionMapAxis, IgnoredAxis],
    Field(discriminator="kind"),
]


class CompoundRule(BaseModel):
    """Appends classes when every listed axis resolved to the required value."""

    conditions: dict[str, Any] = Field(
        default_factory=dict,
        description="Axis name to required resolved value",
    )
    classes: str = Field("", description="Fragment appended on match")

    model_config = {"frozen": True}

    @classmethod
    def from_declaration(cls, data: Mapping[str, Any]) -> CompoundRule:
        """Create a rule from its flat form: conditions plus a classes key."""
        conditions: dict[str, Any] = {}
        for key, value in data.items():
            if key == COMPOUND_CLASSES_KEY:
                continue
            if value == ResolvedMarker.CUSTOM.value:
                value = ResolvedMarker.CUSTOM
            conditions[key] = value

        classes = data.get(COMPOUND_CLASSES_KEY)
        return cls(
            conditions=conditions,
            classes=classes if isinstance(classes, str) else "",
        )

    def to_declaration(self) -> dict[str, Any]:
        """Render the flat form."""
        data: dict[str, Any] = {
            key: value.value if isinstance(value, ResolvedMarker) else value
            for key, value in self.conditions.items()
        }
        data[COMPOUND_CLASSES_KEY] = self.classes
        return data


class VariantSpec(BaseModel):
    """
    A complete variant declaration in tagged form.

    Specs are frozen and can be shared across any number of resolutions.
    """

    base: str = Field("", description="Fragment always included")
    reset: str | None = Field(None, description="Fragment used alone on reset")
    axes: dict[str, AxisDef] = Field(
        default_factory=dict,
        description="Axis definitions in declaration order",
    )
    compound: tuple[CompoundRule, ...] = Field(
        default=(),
        description="Compound rules in application order",
    )

    model_config = {"frozen": True}

    @property
    def axis_names(self) -> list[str]:
        """Axis names in declaration order."""
        return list(self.axes)

    @classmethod
    def from_declaration(cls, data: Mapping[str, Any]) -> VariantSpec:
        """
        Translate a flat declaration into a tagged spec.

        Args:
            data: Mapping of reserved keys and axis definitions, e.g.
                {"base": "btn", "size": {"sm": "text-sm", "_default": "sm"}}

        Returns:
            The equivalent VariantSpec
        """
        base = data.get(ReservedKey.BASE.value)
        reset = data.get(ReservedKey.RESET.value)

        axes: dict[str, AxisDef] = {}
        for name, value in data.items():
            if name in RESERVED_KEYS:
                continue
            axes[name] = _parse_axis(value)

        return cls(
            base=base if isinstance(base, str) else "",
            reset=reset if isinstance(reset, str) else None,
            axes=axes,
            compound=_parse_compound(data.get(ReservedKey.COMPOUND.value)),
        )

    def to_declaration(self) -> dict[str, Any]:
        """Render the flat declaration syntax."""
        data: dict[str, Any] = {ReservedKey.BASE.value: self.base}
        if self.reset is not None:
            data[ReservedKey.RESET.value] = self.reset

        for name, axis in self.axes.items():
            if isinstance(axis, BooleanAxis):
                data[name] = axis.fragment
            elif isinstance(axis, OptionMapAxis):
                options: dict[str, Any] = dict(axis.options)
                if axis.default is not None:
                    options[DEFAULT_OPTION_KEY] = axis.default
                data[name] = options
            else:
                data[name] = axis.raw

        if self.compound:
            data[ReservedKey.COMPOUND.value] = [rule.to_declaration() for rule in self.compound]
        return data


def _parse_axis(value: Any) -> AxisDef:
    """Decide the axis shape from its declared value."""
    if isinstance(value, str):
        return BooleanAxis(fragment=value)

    if isinstance(value, Mapping):
        options: dict[str, str | None] = {}
        default = None
        for option, fragment in value.items():
            if option == DEFAULT_OPTION_KEY:
                default = fragment if isinstance(fragment, str) else None
                continue
            options[str(option)] = fragment if isinstance(fragment, str) else None
        return OptionMapAxis(options=options, default=default)

    return IgnoredAxis(raw=value)


def _parse_compound(value: Any) -> tuple[CompoundRule, ...]:
    """Parse the compound list, dropping entries that are not mappings."""
    if not isinstance(value, Sequence) or isinstance(value, str):
        return ()
    return tuple(
        CompoundRule.from_declaration(rule) for rule in value if isinstance(rule, Mapping)
    )


@dataclass(frozen=True)
class ResolutionResult:
    """
    The outcome of resolving a selection against a spec.

    selections holds one entry per declared axis, in declaration order.
    """

    classes: str
    selections: Mapping[str, ResolvedValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "selections", MappingProxyType(dict(self.selections)))

    def __getitem__(self, key: str) -> Any:
        if key == COMPOUND_CLASSES_KEY:
            return self.classes
        return self.selections[key]

    def __contains__(self, key: object) -> bool:
        return key == COMPOUND_CLASSES_KEY or key in self.selections

    @property
    def is_reset(self) -> bool:
        """True if every axis was marked as reset."""
        return bool(self.selections) and all(
            value is ResolvedMarker.RESET for value in self.selections.values()
        )

    def to_dict(self) -> dict[str, Any]:
        """Flat record with markers rendered as their string values."""
        data: dict[str, Any] = {COMPOUND_CLASSES_KEY: self.classes}
        for name, value in self.selections.items():
            data[name] = value.value if isinstance(value, ResolvedMarker) else value
        # An axis named "classes" never shadows the merged string
        data[COMPOUND_CLASSES_KEY] = self.classes
        return data


SelectionSet = Mapping[str, Any]


class VariantMetadata(BaseModel):
    """Lightweight metadata for listing named variant declarations."""

    name: str
    description: str = ""
    axes: tuple[str, ...] = ()
    compound_rules: int = 0

    model_config = {"frozen": True}

    @classmethod
    def from_spec(cls, name: str, spec: VariantSpec, description: str = "") -> VariantMetadata:
        """Create metadata from a spec."""
        return cls(
            name=name,
            description=description,
            axes=tuple(spec.axes),
            compound_rules=len(spec.compound),
        )
