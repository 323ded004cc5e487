"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_variants.models import VariantSpec

LIBRARY_PATH = Path(__file__).parent.parent / "src" / "chuk_variants" / "variants" / "library"


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in declaration library."""
    return LIBRARY_PATH


@pytest.fixture
def button_declaration() -> dict:
    """A flat button declaration using every feature."""
    return {
        "base": "btn",
        "reset": "p-0 bg-transparent",
        "size": {"sm": "text-sm", "md": "text-base", "lg": "text-lg", "_default": "md"},
        "intent": {"primary": "bg-blue", "danger": "bg-red"},
        "disabled": "opacity-50",
        "compound": [
            {"size": "lg", "intent": "danger", "classes": "font-bold"},
            {"intent": "primary", "disabled": True, "classes": "bg-blue-300"},
        ],
    }


@pytest.fixture
def button_spec(button_declaration: dict) -> VariantSpec:
    """The button declaration in tagged form."""
    return VariantSpec.from_declaration(button_declaration)
