"""Manifest schema validation."""

from .validator import ValidationError, validate_manifest

__all__ = ["ValidationError", "validate_manifest"]
