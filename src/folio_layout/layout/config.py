"""
Module: layout.config

Purpose:
    Configuration for the document layout engine.
    Defines orientation, zoom level, book mode and padding.

Key Classes:
    - PagePadding: Leading padding applied to every page group
    - DocumentPadding: Padding around the whole document
    - ViewerConfig: Immutable viewer configuration

Dependencies:
    - dataclasses (std)

Used By:
    - layout.compositor: Document geometry
    - folio_layout.cli: Command line front end
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping


VERTICAL = "vertical"
HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class PagePadding:
    """
    Padding before each page group (immutable).

    Only the leading edges are applied; there is no trailing page padding.

    Attributes:
        top: Padding above each group in pixels
        left: Padding left of each group in pixels
    """

    top: float = 0
    left: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(self)


@dataclass(frozen=True)
class DocumentPadding:
    """
    Padding around the whole document (immutable).

    Attributes:
        top: Padding above the document in pixels
        right: Padding right of the document in pixels
        bottom: Padding below the document in pixels
        left: Padding left of the document in pixels
    """

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    def __post_init__(self) -> None:
        _check_non_negative(self)


@dataclass(frozen=True)
class ViewerConfig:
    """
    Configuration for document layout (immutable).

    Orientation picks the primary (scrolling) axis. Groups are stacked
    along the primary axis and centred on the secondary axis.

    Attributes:
        zoom_level: Zoom level to read page sizes at
        vertically_oriented: True to scroll vertically, False horizontally
        in_book_layout: True to pair pages into facing spreads
        page_padding: Leading padding applied to every group
        document_padding: Padding around the document

    Example:
        >>> config = ViewerConfig(zoom_level=2, in_book_layout=True)
        >>> config.primary_axis
        'vertical'
    """

    zoom_level: int = 0
    vertically_oriented: bool = True
    in_book_layout: bool = False
    page_padding: PagePadding = field(default_factory=PagePadding)
    document_padding: DocumentPadding = field(default_factory=DocumentPadding)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if isinstance(self.zoom_level, bool) or not isinstance(self.zoom_level, int):
            raise ValueError(f"zoom_level must be an integer: {self.zoom_level!r}")
        if self.zoom_level < 0:
            raise ValueError(f"zoom_level must be >= 0: {self.zoom_level}")
        for name in ("vertically_oriented", "in_book_layout"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean: {value!r}")
        if not isinstance(self.page_padding, PagePadding):
            raise ValueError(f"page_padding must be a PagePadding: {self.page_padding!r}")
        if not isinstance(self.document_padding, DocumentPadding):
            raise ValueError(
                f"document_padding must be a DocumentPadding: {self.document_padding!r}"
            )

    @property
    def primary_axis(self) -> str:
        """Axis groups are stacked along."""
        return VERTICAL if self.vertically_oriented else HORIZONTAL

    @property
    def secondary_axis(self) -> str:
        """Axis groups are centred along."""
        return HORIZONTAL if self.vertically_oriented else VERTICAL

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ViewerConfig:
        """
        Build a config from a plain mapping (e.g. loaded from JSON).

        Padding values may be given as nested mappings.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Config must be a mapping: {data!r}")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs = dict(data)
        if isinstance(kwargs.get("page_padding"), Mapping):
            kwargs["page_padding"] = _padding_from_dict(PagePadding, kwargs["page_padding"])
        if isinstance(kwargs.get("document_padding"), Mapping):
            kwargs["document_padding"] = _padding_from_dict(
                DocumentPadding, kwargs["document_padding"]
            )
        return cls(**kwargs)


def _padding_from_dict(padding_cls: type, data: Mapping[str, Any]) -> Any:
    known = {f.name for f in fields(padding_cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown {padding_cls.__name__} keys: {sorted(unknown)}")
    return padding_cls(**data)


def _check_non_negative(padding: Any) -> None:
    for f in fields(padding):
        value = getattr(padding, f.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{f.name} padding must be a number: {value!r}")
        if value < 0:
            raise ValueError(f"{f.name} padding must be >= 0: {value}")
