"""
Schema Validation Utilities

Validates manifest JSON data before it is turned into models.

Two passes:
- Basic structural checks with precise error paths
- Full JSON Schema validation (``manifest.schema.json``) when strict
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_manifest(data: Any, *, strict: bool = True) -> None:
    """
    Validate manifest data.

    Args:
        data: Manifest dictionary (as loaded from JSON)
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Manifest must be a JSON object")

    if "pages" not in data:
        raise ValidationError(
            "Missing required fields: ['pages']",
            errors=["Missing field: pages"],
        )

    paged = data.get("paged", False)
    if not isinstance(paged, bool):
        raise ValidationError(f"paged must be a boolean: {paged!r}", path="paged")

    pages = data["pages"]
    if not isinstance(pages, list):
        raise ValidationError("pages must be a list", path="pages")

    for i, page in enumerate(pages):
        _validate_page(page, f"pages[{i}]")

    if strict:
        schema = _load_schema("manifest")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_page(data: Any, path: str) -> None:
    """Validate a single page entry."""
    if not isinstance(data, dict):
        raise ValidationError("page must be an object", path=path)

    dimensions = data.get("dimensions")
    if not isinstance(dimensions, list) or not dimensions:
        raise ValidationError(
            "page must have a non-empty dimensions list",
            path=f"{path}.dimensions",
        )

    paged = data.get("paged", True)
    if not isinstance(paged, bool):
        raise ValidationError(f"paged must be a boolean: {paged!r}", path=f"{path}.paged")

    for zoom_level, size in enumerate(dimensions):
        _validate_size(size, f"{path}.dimensions[{zoom_level}]")


def _validate_size(data: Any, path: str) -> None:
    """Validate a width/height entry."""
    if not isinstance(data, dict) or "width" not in data or "height" not in data:
        raise ValidationError("size must have width and height", path=path)

    for key in ("width", "height"):
        value = data[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValidationError(
                f"Invalid {key}: {value!r} (must be a non-negative number)",
                path=f"{path}.{key}",
            )
