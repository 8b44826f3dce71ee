"""
Module: layout.models

Purpose:
    Data models for document layout.
    Immutable dataclasses for abstract layout groups and their final
    placement in document coordinates.

Key Classes:
    - PageOffset: Position of one page inside its group
    - LayoutGroup: Render-agnostic group of one or two pages
    - LayoutGroupBuilder: Builds a LayoutGroup from base geometry
    - Region: Absolute bounds in document coordinates
    - PageGroup: LayoutGroup placed in the document
    - DocumentLayout: Final layout output

Dependencies:
    - dataclasses (std)
    - layout.config: PagePadding
    - layout.dimensions: Page size lookup for page regions

Used By:
    - layout.grouping: Creates LayoutGroups
    - layout.compositor: Creates PageGroups and DocumentLayout
    - core.utils.serialization: Layout to JSON
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from folio_layout.core.models import Manifest

from .config import PagePadding
from .dimensions import get_page_dimensions

# Slack for float error when fractional page sizes are summed
_EDGE_TOLERANCE = 1e-6


@dataclass(frozen=True, slots=True)
class PageOffset:
    """
    Position of a page relative to its group's origin.

    Attributes:
        index: Page index in the manifest
        top: Offset from the group's top edge
        left: Offset from the group's left edge
    """

    index: int
    top: float = 0
    left: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "top": self.top, "left": self.left}


@dataclass(frozen=True)
class LayoutGroup:
    """
    One or two pages rendered together, before placement.

    Attributes:
        width: Group width in pixels
        height: Group height in pixels
        page_offsets: Pages in the group, in reading order

    Invariants:
        - every offset lies within [0, width] x [0, height]
        - pages added through LayoutGroupBuilder with a size end within
          the group as well

    Example:
        >>> group = LayoutGroup(200, 300, (PageOffset(0, top=0, left=100),))
        >>> group.page_indices
        (0,)
    """

    width: float
    height: float
    page_offsets: tuple[PageOffset, ...] = ()

    def __post_init__(self) -> None:
        """Validate offsets on construction."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Group size must be >= 0: {self.width}x{self.height}")
        for offset in self.page_offsets:
            if not (0 <= offset.top <= self.height and 0 <= offset.left <= self.width):
                raise ValueError(
                    f"Page {offset.index} offset ({offset.top}, {offset.left}) "
                    f"lies outside {self.width}x{self.height} group"
                )

    @property
    def page_indices(self) -> tuple[int, ...]:
        """Indices of the pages in this group."""
        return tuple(offset.index for offset in self.page_offsets)

    @property
    def is_spread(self) -> bool:
        """True when the group holds two facing pages."""
        return len(self.page_offsets) == 2

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "page_offsets": [offset.to_dict() for offset in self.page_offsets],
        }


class LayoutGroupBuilder:
    """
    Builds a LayoutGroup from base geometry plus appended page offsets.

    Example:
        >>> group = (
        ...     LayoutGroupBuilder(width=200, height=100)
        ...     .add_page(1, left=0)
        ...     .add_page(2, left=100)
        ...     .build()
        ... )
        >>> group.is_spread
        True
    """

    def __init__(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._offsets: list[PageOffset] = []

    def add_page(
        self,
        index: int,
        *,
        top: float = 0,
        left: float = 0,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> LayoutGroupBuilder:
        """
        Append a page offset.

        When the page size is given, the page must end inside the group.

        Raises:
            ValueError: If the page extends past the group's far edge
        """
        if width is not None and left + width > self._width + _EDGE_TOLERANCE:
            raise ValueError(
                f"Page {index} right edge {left + width} lies outside "
                f"{self._width}-wide group"
            )
        if height is not None and top + height > self._height + _EDGE_TOLERANCE:
            raise ValueError(
                f"Page {index} bottom edge {top + height} lies outside "
                f"{self._height}-high group"
            )
        self._offsets.append(PageOffset(index=index, top=top, left=left))
        return self

    def build(self) -> LayoutGroup:
        return LayoutGroup(
            width=self._width,
            height=self._height,
            page_offsets=tuple(self._offsets),
        )


@dataclass(frozen=True, slots=True)
class Region:
    """
    Absolute bounds in document coordinates.

    Adjacent regions (one.bottom == other.top) do NOT overlap.

    Attributes:
        top: Top edge
        bottom: Bottom edge
        left: Left edge
        right: Right edge
    """

    top: float
    bottom: float
    left: float
    right: float

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def width(self) -> float:
        return self.right - self.left

    def overlaps(self, other: Region) -> bool:
        """Check whether two regions share any area."""
        return not (
            self.bottom <= other.top
            or other.bottom <= self.top
            or self.right <= other.left
            or other.right <= self.left
        )

    def contains_point(self, top: float, left: float) -> bool:
        """Check whether a point lies within [top, bottom) x [left, right)."""
        return self.top <= top < self.bottom and self.left <= left < self.right

    def to_dict(self) -> dict[str, float]:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


@dataclass(frozen=True)
class PageGroup:
    """
    A LayoutGroup placed in the document.

    Attributes:
        index: Position of the group in the document
        layout: The abstract group geometry
        region: Padding-inclusive bounds in document coordinates
        padding: Page padding applied to this group
    """

    index: int
    layout: LayoutGroup
    region: Region
    padding: PagePadding

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "layout": self.layout.to_dict(),
            "region": self.region.to_dict(),
            "padding": {"top": self.padding.top, "left": self.padding.left},
        }


@dataclass(frozen=True)
class DocumentLayout:
    """
    Final layout output.

    Attributes:
        height: Overall document height
        width: Overall document width
        page_groups: Placed groups in document order

    Example:
        >>> layout = get_document_layout(three_pages, ViewerConfig(in_book_layout=True))
        >>> layout.dimensions
        {'height': 400, 'width': 200}
    """

    height: float
    width: float
    page_groups: tuple[PageGroup, ...] = field(default_factory=tuple)

    @property
    def dimensions(self) -> dict[str, float]:
        """Overall size as a ``{"height", "width"}`` mapping."""
        return {"height": self.height, "width": self.width}

    @property
    def group_count(self) -> int:
        """Number of placed groups."""
        return len(self.page_groups)

    def find_group_for_page(self, page_index: int) -> Optional[PageGroup]:
        """
        Find the group containing a page.

        Returns:
            The PageGroup, or None for pages skipped in book layout
        """
        for group in self.page_groups:
            if page_index in group.layout.page_indices:
                return group
        return None

    def get_page_region(
        self,
        page_index: int,
        manifest: Manifest,
        zoom_level: int,
    ) -> Optional[Region]:
        """
        Get the absolute bounds of a single page.

        The page's origin is its group's origin plus page padding plus
        its offset in the group; its extent is its rounded size.

        Args:
            page_index: Page to locate
            manifest: Manifest the layout was computed from
            zoom_level: Zoom level the layout was computed at

        Returns:
            Region, or None if the page is in no group

        Raises:
            InvalidZoomLevel: If the page has no size at zoom_level
        """
        group = self.find_group_for_page(page_index)
        if group is None:
            return None

        offset = next(o for o in group.layout.page_offsets if o.index == page_index)
        size = get_page_dimensions(page_index, manifest, zoom_level)

        top = group.region.top + group.padding.top + offset.top
        left = group.region.left + group.padding.left + offset.left
        return Region(top=top, bottom=top + size.height, left=left, right=left + size.width)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimensions": self.dimensions,
            "page_groups": [group.to_dict() for group in self.page_groups],
        }
