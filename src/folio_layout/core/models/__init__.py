"""
Core Models Package

Immutable data models describing a document manifest.

All models in this package are frozen dataclasses, so the layout engine
can never mutate the manifest it is given and results can be shared
between threads without copying.
"""

from .manifest import PageSize, Page, Manifest

__all__ = [
    "PageSize",
    "Page",
    "Manifest",
]
