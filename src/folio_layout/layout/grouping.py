"""
Module: layout.grouping

Purpose:
    Split a manifest into layout groups - one page per group in
    singles mode, facing-page spreads in book mode.

Key Functions:
    - get_singles_layout_groups(): One group per page
    - get_book_layout_groups(): Facing-page spreads
    - get_facing_page_group(): Pair a left and right page

Algorithm (book mode):
    Scan pages in order carrying an optional pending left page.
    1. Skip non-paged pages of a paged manifest (a pending left page
       survives the skip and pairs with the next eligible page)
    2. Vertical orientation: page 0 stands alone in the right half
    3. No pending page: the page becomes the pending left page
    4. Pending page: pair it with this page and clear it
    5. A page still pending at the end stands alone

    Spread geometry uses unrounded page sizes.

Dependencies:
    - layout.dimensions: Page size lookup
    - layout.models: LayoutGroup, LayoutGroupBuilder

Used By:
    - layout.compositor: Document geometry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from folio_layout.core.models import Manifest, PageSize

from .dimensions import get_page_dimensions
from .models import LayoutGroup, LayoutGroupBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SizedPage:
    """A page index with its (unrounded) size."""

    index: int
    width: float
    height: float

    @classmethod
    def from_size(cls, index: int, size: PageSize) -> SizedPage:
        return cls(index=index, width=size.width, height=size.height)


@dataclass(frozen=True)
class BookScanState:
    """
    Accumulator for the book-mode scan.

    Attributes:
        groups: Groups emitted so far
        pending: Left page waiting for its right-hand partner
    """

    groups: tuple[LayoutGroup, ...] = ()
    pending: Optional[SizedPage] = None


def get_singles_layout_groups(manifest: Manifest, zoom_level: int) -> List[LayoutGroup]:
    """
    Place every page alone in its own group.

    Args:
        manifest: Document manifest
        zoom_level: Zoom level to read sizes at

    Returns:
        One group per page, in page order

    Raises:
        InvalidZoomLevel: If any page lacks the zoom level
    """
    groups = []
    for i in range(manifest.page_count):
        size = get_page_dimensions(i, manifest, zoom_level)
        groups.append(
            LayoutGroupBuilder(width=size.width, height=size.height)
            .add_page(i, top=0, left=0, width=size.width, height=size.height)
            .build()
        )
    return groups


def get_book_layout_groups(
    manifest: Manifest,
    zoom_level: int,
    vertically_oriented: bool,
) -> List[LayoutGroup]:
    """
    Pair pages into facing-page spreads.

    Args:
        manifest: Document manifest
        zoom_level: Zoom level to read sizes at
        vertically_oriented: Orientation of the viewer

    Returns:
        Groups of one or two pages, in page order

    Raises:
        InvalidZoomLevel: If any grouped page lacks the zoom level
    """
    state = BookScanState()
    for index in range(manifest.page_count):
        state = scan_book_page(state, index, manifest, zoom_level, vertically_oriented)

    groups = list(state.groups)
    if state.pending is not None:
        groups.append(get_trailing_page_group(state.pending, vertically_oriented))

    logger.debug(f"Grouped {manifest.page_count} pages into {len(groups)} book groups")
    return groups


def scan_book_page(
    state: BookScanState,
    index: int,
    manifest: Manifest,
    zoom_level: int,
    vertically_oriented: bool,
) -> BookScanState:
    """
    Advance the book-mode scan by one page.

    Returns:
        The new scan state; ``state`` is left untouched
    """
    if manifest.paged and not manifest.pages[index].paged:
        return state

    page = SizedPage.from_size(
        index, get_page_dimensions(index, manifest, zoom_level, round=False)
    )

    if vertically_oriented and index == 0:
        # First page sits alone in the right half
        group = (
            LayoutGroupBuilder(width=page.width * 2, height=page.height)
            .add_page(0, top=0, left=page.width, width=page.width, height=page.height)
            .build()
        )
        return BookScanState(groups=state.groups + (group,), pending=state.pending)

    if state.pending is None:
        return BookScanState(groups=state.groups, pending=page)

    group = get_facing_page_group(state.pending, page, vertically_oriented)
    return BookScanState(groups=state.groups + (group,), pending=None)


def get_trailing_page_group(page: SizedPage, vertically_oriented: bool) -> LayoutGroup:
    """
    Group a final left page that has no partner.

    In vertical orientation the group is twice the page width so the
    page stays left of the spine.
    """
    width = page.width * 2 if vertically_oriented else page.width
    return (
        LayoutGroupBuilder(width=width, height=page.height)
        .add_page(page.index, top=0, left=0, width=page.width, height=page.height)
        .build()
    )


def get_facing_page_group(
    left_page: SizedPage,
    right_page: SizedPage,
    vertically_oriented: bool,
) -> LayoutGroup:
    """
    Combine two pages into one spread.

    Vertical orientation centres the spine: each half is as wide as the
    wider page, the left page is pushed against the spine and the right
    page starts at it. Horizontal orientation places pages edge to edge.
    Pages of different heights are top-aligned.

    Args:
        left_page: Left-hand page
        right_page: Right-hand page
        vertically_oriented: Orientation of the viewer

    Returns:
        LayoutGroup with two page offsets

    Example:
        >>> group = get_facing_page_group(
        ...     SizedPage(1, 100, 200), SizedPage(2, 100, 200), True
        ... )
        >>> group.width, [o.left for o in group.page_offsets]
        (200, [0, 100])
    """
    height = max(left_page.height, right_page.height)

    if vertically_oriented:
        mid_width = max(left_page.width, right_page.width)
        width = mid_width * 2
        first_left_offset = mid_width - left_page.width
        second_left_offset = mid_width
    else:
        width = left_page.width + right_page.width
        first_left_offset = 0
        second_left_offset = left_page.width

    return (
        LayoutGroupBuilder(width=width, height=height)
        .add_page(
            left_page.index,
            top=0,
            left=first_left_offset,
            width=left_page.width,
            height=left_page.height,
        )
        .add_page(
            right_page.index,
            top=0,
            left=second_left_offset,
            width=right_page.width,
            height=right_page.height,
        )
        .build()
    )
