"""
Module: layout.dimensions

Purpose:
    Resolve a page's pixel size at a zoom level.

Key Functions:
    - get_page_dimensions(): Size of one page, optionally rounded

Key Classes:
    - InvalidZoomLevel: Raised when a page has no size at a zoom level

Rounding:
    round=True floors both dimensions once to whole pixels.
    round=False returns the manifest values untouched so that spread
    geometry can be computed at full precision.
"""

from __future__ import annotations

import math

from folio_layout.core.models import Manifest, PageSize


class InvalidZoomLevel(Exception):
    """Raised when a page has no dimensions at the requested zoom level."""

    def __init__(self, page_index: int, zoom_level: int):
        super().__init__(f"Page {page_index} has no dimensions at zoom level {zoom_level}")
        self.page_index = page_index
        self.zoom_level = zoom_level


def get_page_dimensions(
    page_index: int,
    manifest: Manifest,
    zoom_level: int,
    round: bool = True,
) -> PageSize:
    """
    Get the size of a page at a zoom level.

    Args:
        page_index: Index of the page in the manifest
        manifest: Document manifest
        zoom_level: Zoom level to read
        round: Floor both dimensions to whole pixels (default True)

    Returns:
        PageSize; integral when round is True

    Raises:
        InvalidZoomLevel: If the page has no entry for zoom_level
    """
    size = manifest.pages[page_index].size_at(zoom_level)
    if size is None:
        raise InvalidZoomLevel(page_index, zoom_level)

    if not round:
        return size

    return PageSize(width=math.floor(size.width), height=math.floor(size.height))
