#!/usr/bin/env python3
"""
Example: Using the Variant System.

This demonstrates how declarative variant groups resolve into class strings.
Declarations can live in code or in YAML files under a variants library.

Usage:
    python examples/use_variants.py
"""

import logging
import tempfile
from pathlib import Path

from chuk_variants import (
    VariantLoader,
    VariantValidationError,
    create_class,
    create_variants,
    preserve_class,
    resolve,
    resolve_strict,
    validate_variants,
)

logging.basicConfig(level=logging.INFO)


def main() -> None:
    """Demonstrate the variant system."""
    print("CHUK Variants Demo")
    print("=" * 40)
    print()

    # Inline declaration in the flat syntax
    button = {
        "base": "px-4 py-2 font-medium rounded",
        "reset": "p-0 bg-transparent",
        "size": {"sm": "text-sm", "md": "text-base", "lg": "text-lg", "_default": "md"},
        "variant": {"primary": "bg-blue-500 text-white", "danger": "bg-red-500 text-white"},
        "compound": [{"size": "lg", "variant": "danger", "classes": "font-bold uppercase"}],
    }

    print("Inline declaration:")
    for selection in (
        {},
        {"size": "lg", "variant": "danger"},
        {"variant": "custom-gradient"},
        {"resetStyles": True},
    ):
        print(f"  {selection} -> {create_variants(button, selection)}")
    print()

    # Strict validation
    print("Validation:")
    print(f"  {validate_variants(button, {'resetStyles': False})}")
    try:
        resolve_strict(button, {"colour": "red"})
    except VariantValidationError as e:
        print(f"  resolve_strict refused: {e.result.errors[0]}")
    print()

    # Library declarations
    with tempfile.TemporaryDirectory() as tmp:
        loader = VariantLoader(project_path=Path(tmp))

        print("Library declarations:")
        for meta in loader.list_variants():
            print(f"  {meta.name}: {meta.description}")
            print(f"    Axes: {', '.join(meta.axes)} ({meta.compound_rules} compound rules)")
        print()

        card = loader.get_spec("card")
        if not card:
            print("Failed to load card")
            return

        result = resolve(card, {"elevated": True, "padding": "loose"})
        print(f"Card classes: {result.classes}")

        # Combine with caller classes, keeping a JS hook out of the merge
        print(f"Merged: {create_class(result.classes, 'mt-4', preserve_class('js-card'))}")

        copied = loader.copy_to_project("card")
        print(f"Copied card to project: {copied}")


if __name__ == "__main__":
    main()
