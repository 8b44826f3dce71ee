"""
Serialization Utilities

Reads manifests from JSON and writes layouts back out.

- ``deserialize_manifest`` / ``load_manifest``: JSON -> Manifest, validated
  against the manifest schema first
- ``serialize_layout`` / ``dump_layout``: DocumentLayout -> JSON
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..models.manifest import Manifest
from ..schemas.validator import validate_manifest

if TYPE_CHECKING:
    from folio_layout.layout.models import DocumentLayout

logger = logging.getLogger(__name__)


class ManifestLoadError(Exception):
    """Raised when a manifest file cannot be read or parsed."""


def deserialize_manifest(data: dict[str, Any], *, validate: bool = True) -> Manifest:
    """
    Build a Manifest from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first

    Returns:
        Manifest instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_manifest(data)
    return Manifest.from_dict(data)


def load_manifest(path: Path, *, validate: bool = True) -> Manifest:
    """
    Load a manifest JSON file.

    Args:
        path: Path to the manifest file
        validate: Whether to validate against the schema first

    Returns:
        Manifest instance

    Raises:
        ManifestLoadError: If the file cannot be read or is not JSON
        ValidationError: If validate=True and the content is invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestLoadError(f"Cannot read manifest {path}: {e}") from e

    manifest = deserialize_manifest(data, validate=validate)
    logger.debug(f"Loaded manifest {path} with {manifest.page_count} pages")
    return manifest


def serialize_layout(layout: DocumentLayout) -> dict[str, Any]:
    """
    Serialize a DocumentLayout to a dictionary.

    Returns:
        Dictionary suitable for JSON serialization
    """
    return layout.to_dict()


def dump_layout(layout: DocumentLayout, path: Path) -> None:
    """Write a DocumentLayout to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_layout(layout), f, indent=2)
    logger.info(f"Wrote layout with {layout.group_count} groups to {path}")
