"""
Module: layout.compositor

Purpose:
    Turn layout groups into concrete document geometry.
    Groups are stacked along the primary (scrolling) axis and centred
    on the secondary axis.

Key Functions:
    - get_document_layout(): Main entry point for layout
    - get_extent_along_secondary_axis(): Width/height used for centring

Algorithm:
    1. Group pages (singles or book mode)
    2. Find the widest group on the secondary axis, add document padding
    3. Walk the groups with a cursor on the primary axis; each region
       spans cursor -> cursor + page padding + group size
    4. Document primary extent = cursor + leading document padding

Dependencies:
    - layout.grouping: Layout groups
    - layout.models: PageGroup, Region, DocumentLayout
    - layout.config: ViewerConfig

Used By:
    - folio_layout.cli: Command line front end
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from folio_layout.core.models import Manifest

from .config import ViewerConfig
from .grouping import get_book_layout_groups, get_singles_layout_groups
from .models import DocumentLayout, LayoutGroup, PageGroup, Region

logger = logging.getLogger(__name__)


def get_document_layout(manifest: Manifest, config: ViewerConfig) -> DocumentLayout:
    """
    Compute the placement of every page group and the canvas size.

    Neither argument is modified. An empty manifest gives no groups and
    a canvas made of document padding only.

    Args:
        manifest: Document manifest
        config: Viewer configuration

    Returns:
        DocumentLayout with dimensions and page groups

    Raises:
        InvalidZoomLevel: If a laid-out page lacks config.zoom_level

    Example:
        >>> layout = get_document_layout(manifest, ViewerConfig(in_book_layout=True))
        >>> layout.group_count
        2
    """
    if config.in_book_layout:
        layouts = get_book_layout_groups(
            manifest, config.zoom_level, config.vertically_oriented
        )
    else:
        layouts = get_singles_layout_groups(manifest, config.zoom_level)

    secondary_extent = get_extent_along_secondary_axis(layouts, config)

    # Only leading page padding is applied
    page_padding = config.page_padding
    primary_position = 0
    page_groups: List[PageGroup] = []

    for index, layout in enumerate(layouts):
        if config.vertically_oriented:
            top = primary_position
            left = (secondary_extent - layout.width) / 2
        else:
            top = (secondary_extent - layout.height) / 2
            left = primary_position

        region = Region(
            top=top,
            bottom=top + page_padding.top + layout.height,
            left=left,
            right=left + page_padding.left + layout.width,
        )
        page_groups.append(
            PageGroup(index=index, layout=layout, region=region, padding=page_padding)
        )

        primary_position = region.bottom if config.vertically_oriented else region.right

    document_padding = config.document_padding
    if config.vertically_oriented:
        height = primary_position + document_padding.top
        width = secondary_extent
    else:
        height = secondary_extent
        width = primary_position + document_padding.left

    logger.info(
        f"Laid out {manifest.page_count} pages in {len(page_groups)} groups "
        f"({config.primary_axis}, zoom {config.zoom_level}): {width}x{height}"
    )

    return DocumentLayout(height=height, width=width, page_groups=tuple(page_groups))


def get_extent_along_secondary_axis(
    layouts: Sequence[LayoutGroup],
    config: ViewerConfig,
) -> float:
    """
    Get the document's extent perpendicular to scrolling.

    Args:
        layouts: All layout groups
        config: Viewer configuration

    Returns:
        Largest group width (vertical) or height (horizontal) plus the
        document padding on that axis
    """
    padding = config.document_padding

    if config.vertically_oriented:
        secondary_padding = padding.left + padding.right
        largest = max((layout.width for layout in layouts), default=0)
    else:
        secondary_padding = padding.top + padding.bottom
        largest = max((layout.height for layout in layouts), default=0)

    return secondary_padding + largest
