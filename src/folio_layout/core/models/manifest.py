"""
Module: manifest

Purpose:
    Provides the manifest data models - the ordered page sequence of a
    document together with each page's pixel size at every zoom level.

Key Classes:
    - PageSize: Raw (width, height) of a page at one zoom level
    - Page: A single page with its per-zoom-level sizes and paged flag
    - Manifest: Ordered pages plus the document-level paged flag

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.utils.serialization
    - layout.dimensions
    - layout.grouping
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class PageSize:
    """
    Pixel size of a page at one zoom level.

    Values are kept exactly as the manifest declares them and may be
    fractional. Rounding happens in layout.dimensions.

    Attributes:
        width: Width in pixels (>= 0)
        height: Height in pixels (>= 0)

    Example:
        >>> PageSize(width=100.5, height=200).width
        100.5
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageSize:
        return cls(width=data["width"], height=data["height"])


@dataclass(frozen=True, slots=True)
class Page:
    """
    A single page of the document.

    Attributes:
        dimensions: Sizes indexed by zoom level (0 = most zoomed out)
        paged: Whether the page takes part in facing-page spreads.
            Only consulted when the manifest itself is paged.
        label: Optional human readable label

    Example:
        >>> page = Page(dimensions=(PageSize(100, 200), PageSize(200, 400)))
        >>> page.size_at(1)
        PageSize(width=200, height=400)
        >>> page.size_at(5) is None
        True
    """

    dimensions: tuple[PageSize, ...]
    paged: bool = True
    label: Optional[str] = None

    @property
    def zoom_levels(self) -> int:
        """Number of zoom levels this page has sizes for."""
        return len(self.dimensions)

    def size_at(self, zoom_level: int) -> Optional[PageSize]:
        """
        Get the raw size at a zoom level.

        Args:
            zoom_level: Zoom level to look up

        Returns:
            PageSize, or None if the page has no entry for that level
        """
        if zoom_level < 0 or zoom_level >= len(self.dimensions):
            return None
        return self.dimensions[zoom_level]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "paged": self.paged,
            "dimensions": [size.to_dict() for size in self.dimensions],
        }
        if self.label is not None:
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Page:
        return cls(
            dimensions=tuple(PageSize.from_dict(d) for d in data["dimensions"]),
            paged=data.get("paged", True),
            label=data.get("label"),
        )


@dataclass(frozen=True, slots=True)
class Manifest:
    """
    Ordered description of a document's pages.

    Pages are identified by their 0-based position in ``pages``.

    Attributes:
        pages: Pages in document order
        paged: Whether the document uses paged semantics. When True,
            pages with ``paged=False`` (covers, inserts) are left out
            of book layout.

    Example:
        >>> manifest = Manifest(pages=(page_a, page_b), paged=True)
        >>> manifest.page_count
        2
    """

    pages: tuple[Page, ...] = ()
    paged: bool = False

    @property
    def page_count(self) -> int:
        """Number of pages in the manifest."""
        return len(self.pages)

    @property
    def zoom_levels(self) -> int:
        """Number of zoom levels available on every page (0 if empty)."""
        if not self.pages:
            return 0
        return min(page.zoom_levels for page in self.pages)

    @property
    def max_zoom_level(self) -> Optional[int]:
        """Highest zoom level every page supports, or None."""
        if self.zoom_levels == 0:
            return None
        return self.zoom_levels - 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "paged": self.paged,
            "pages": [page.to_dict() for page in self.pages],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        return cls(
            pages=tuple(Page.from_dict(p) for p in data.get("pages", [])),
            paged=data.get("paged", False),
        )
