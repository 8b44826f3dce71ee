"""
Folio Layout Core Package

Shared manifest models, schema validation and serialization helpers.
Models are frozen dataclasses; the layout engine builds new values and
never changes the manifest it reads.
"""

from .models import PageSize, Page, Manifest

__all__ = [
    "PageSize",
    "Page",
    "Manifest",
]
