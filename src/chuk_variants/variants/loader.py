"""
Variant loader - discovers and loads named variant declarations.

Declarations can come from:
1. Built-in library (shipped with package)
2. Project variants (user's project/variants directory)

Each YAML file holds a name, a description and a flat `variants` mapping:

    schema: variants/v1
    name: button
    description: Clickable button
    variants:
      base: inline-flex items-center
      size:
        sm: text-sm
        lg: text-lg
        _default: sm
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_variants.constants import VARIANTS_SCHEMA, ErrorMessages
from chuk_variants.models.variant import VariantMetadata, VariantSpec
from chuk_variants.variants.resolver import VariantResolver

logger = logging.getLogger(__name__)


class VariantLoader:
    """
    Discovers and loads variant declarations.

    Declarations are loaded from YAML files in the library and project
    directories. Project declarations override library ones with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the variant loader.

        Args:
            library_path: Path to built-in declaration library
            project_path: Path to project declarations directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, VariantSpec] = {}

    def list_variants(self) -> list[VariantMetadata]:
        """
        List all available declarations.

        Returns declarations from both library and project, with project
        ones taking precedence.
        """
        found: dict[str, VariantMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if not directory or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                data = self._read_file(path)
                if data is None:
                    continue
                name = path.stem
                description = data.get("description")
                found[name] = VariantMetadata.from_spec(
                    name,
                    self._parse_spec(data),
                    description=description if isinstance(description, str) else "",
                )

        return sorted(found.values(), key=lambda m: m.name)

    def get_spec(self, name: str) -> VariantSpec | None:
        """
        Get a declaration by name.

        Project declarations take precedence over library ones.

        Args:
            name: Declaration name (file stem)

        Returns:
            VariantSpec if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if not directory:
                continue
            path = directory / f"{name}.yaml"
            if not path.exists():
                continue
            data = self._read_file(path)
            if data is not None:
                spec = self._parse_spec(data)
                self._cache[name] = spec
                return spec

        return None

    def get_resolver(self, name: str) -> VariantResolver | None:
        """Get a resolver for a named declaration."""
        spec = self.get_spec(name)
        return VariantResolver(spec) if spec is not None else None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library declaration to the project for customization.

        Args:
            name: Declaration name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.VARIANTS_EXIST.format(name=name))

        dest_file.write_text(library_file.read_text())
        self._cache.pop(name, None)

        logger.info("Copied variants '%s' to %s", name, dest_file)
        return dest_file

    def save_to_project(self, name: str, spec: VariantSpec, description: str = "") -> Path:
        """
        Write a spec to the project directory, replacing any existing file.

        Args:
            name: Declaration name
            spec: Spec to save
            description: Optional description

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{name}.yaml"

        document = {
            "schema": VARIANTS_SCHEMA,
            "name": name,
            "description": description,
            "variants": spec.to_declaration(),
        }
        with open(path, "w") as f:
            yaml.safe_dump(document, f, sort_keys=False)

        self._cache[name] = spec
        return path

    def _read_file(self, path: Path) -> dict[str, Any] | None:
        """Read a declaration file, or None if it cannot be used."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning("Skipping unreadable variants file: %s", path, exc_info=True)
            return None

        if not isinstance(data, dict):
            logger.warning("Skipping variants file without a mapping: %s", path)
            return None
        return data

    def _parse_spec(self, data: dict[str, Any]) -> VariantSpec:
        """Parse the flat variants mapping of a declaration file."""
        variants = data.get("variants")
        return VariantSpec.from_declaration(variants if isinstance(variants, dict) else {})

    def clear_cache(self) -> None:
        """Clear the declaration cache."""
        self._cache.clear()
