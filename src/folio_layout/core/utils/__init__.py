"""Serialization helpers for manifests and layouts."""

from .serialization import (
    ManifestLoadError,
    deserialize_manifest,
    load_manifest,
    serialize_layout,
    dump_layout,
)

__all__ = [
    "ManifestLoadError",
    "deserialize_manifest",
    "load_manifest",
    "serialize_layout",
    "dump_layout",
]
