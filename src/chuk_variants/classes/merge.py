"""
Class merging - combine class values into one string.

Resolved variant classes are usually combined with caller-supplied classes
before they reach a template. Conflict resolution between utility classes is
pluggable: pass any `merge` callable (for example a Tailwind-aware merger).
The default only drops repeated tokens.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

ClassValue = Any
MergeFunction = Callable[[str], str]


@dataclass(frozen=True)
class PreservedClasses:
    """Class value that bypasses the merge function."""

    value: ClassValue


def preserve_class(classes: ClassValue) -> PreservedClasses:
    """
    Mark classes to be kept as-is by create_class.

    Conditionals still apply inside the preserved value.

    Example:
        create_class("bg-red-500", preserve_class(["animate-spin", loading and "opacity-50"]))
    """
    return PreservedClasses(classes)


def join_classes(*inputs: ClassValue) -> str:
    """
    Flatten class values into a space-separated string.

    Accepts strings, numbers, nested lists/tuples and mappings of
    class -> condition. Falsy values and booleans are dropped.
    """
    return " ".join(_flatten(inputs))


def _flatten(value: ClassValue) -> Iterable[str]:
    if isinstance(value, bool) or not value:
        return
    if isinstance(value, str):
        yield value
    elif isinstance(value, (int, float)):
        yield str(value)
    elif isinstance(value, Mapping):
        for key, condition in value.items():
            if condition and key:
                yield str(key)
    elif isinstance(value, PreservedClasses):
        yield from _flatten(value.value)
    elif isinstance(value, Iterable):
        for item in value:
            yield from _flatten(item)


def dedupe_classes(classes: str) -> str:
    """Drop repeated tokens, keeping the last occurrence of each."""
    tokens = classes.split()
    last_seen = {token: index for index, token in enumerate(tokens)}
    return " ".join(token for index, token in enumerate(tokens) if last_seen[token] == index)


def create_class(*inputs: ClassValue, merge: MergeFunction = dedupe_classes) -> str:
    """
    Merge class values, keeping preserved groups out of the merge.

    Args:
        *inputs: Class values, optionally wrapped with preserve_class()
        merge: Conflict resolver applied to the regular classes

    Returns:
        Merged classes followed by each preserved group

    Example:
        create_class("flex bg-red-500", "bg-blue-500", preserve_class("custom-animation"))
    """
    preserved: list[str] = []
    regular: list[ClassValue] = []
    for value in inputs:
        if isinstance(value, PreservedClasses):
            preserved.append(join_classes(value.value))
        else:
            regular.append(value)

    parts = [merge(join_classes(regular)), *preserved]
    return " ".join(part for part in parts if part)
