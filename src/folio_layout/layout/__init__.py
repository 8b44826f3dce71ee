"""
Module: folio_layout.layout

Purpose:
    Document layout engine for a paginated viewer.
    Converts a manifest and a viewer configuration into positioned
    page groups and an overall canvas size.

Key Functions:
    - get_document_layout(): Main entry point for layout
    - get_page_dimensions(): Page size at a zoom level

Key Classes:
    - ViewerConfig: Configuration for layout
    - LayoutGroup: Abstract group of one or two pages
    - PageGroup: Group placed in the document
    - DocumentLayout: Final layout result

Dependencies:
    - folio_layout.core.models: Manifest, Page

Used By:
    - folio_layout.cli: Command line front end
    - folio_layout.core.utils.serialization: Layout export
"""

from .config import ViewerConfig, PagePadding, DocumentPadding
from .dimensions import InvalidZoomLevel, get_page_dimensions
from .models import (
    PageOffset,
    LayoutGroup,
    LayoutGroupBuilder,
    Region,
    PageGroup,
    DocumentLayout,
)
from .grouping import (
    get_singles_layout_groups,
    get_book_layout_groups,
    get_facing_page_group,
)
from .compositor import get_document_layout, get_extent_along_secondary_axis

__all__ = [
    # Config
    "ViewerConfig",
    "PagePadding",
    "DocumentPadding",
    # Models
    "PageOffset",
    "LayoutGroup",
    "LayoutGroupBuilder",
    "Region",
    "PageGroup",
    "DocumentLayout",
    # Errors
    "InvalidZoomLevel",
    # Functions
    "get_page_dimensions",
    "get_singles_layout_groups",
    "get_book_layout_groups",
    "get_facing_page_group",
    "get_extent_along_secondary_axis",
    "get_document_layout",
]
