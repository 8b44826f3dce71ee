"""
Module: folio_layout.cli

Purpose:
    Command line front end: load a manifest, compute its layout and
    print it as JSON.

Usage:
    folio-layout manifest.json --zoom 2 --book
    folio-layout manifest.json --horizontal --document-padding 10 10 10 10 -o out.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from folio_layout import __version__
from folio_layout.core.schemas import ValidationError
from folio_layout.core.utils import ManifestLoadError, dump_layout, load_manifest, serialize_layout
from folio_layout.layout import (
    DocumentPadding,
    InvalidZoomLevel,
    PagePadding,
    ViewerConfig,
    get_document_layout,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folio-layout",
        description="Compute the page layout of a paginated document viewer.",
    )
    parser.add_argument("manifest", type=Path, help="Manifest JSON file")
    parser.add_argument(
        "--config",
        type=Path,
        help="Viewer config JSON file (command line flags override it)",
    )
    parser.add_argument("--zoom", type=int, default=None, help="Zoom level (default: 0)")
    parser.add_argument("--book", action="store_true", help="Pair pages into facing spreads")
    parser.add_argument("--horizontal", action="store_true", help="Scroll horizontally")
    parser.add_argument(
        "--page-padding",
        type=float,
        nargs=2,
        metavar=("TOP", "LEFT"),
        help="Leading padding for each page group",
    )
    parser.add_argument(
        "--document-padding",
        type=float,
        nargs=4,
        metavar=("TOP", "RIGHT", "BOTTOM", "LEFT"),
        help="Padding around the document",
    )
    parser.add_argument("-o", "--output", type=Path, help="Write layout JSON here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ViewerConfig:
    """
    Build a ViewerConfig from parsed arguments.

    Raises:
        ValueError: If the config file or any value is invalid
    """
    values: dict = {}
    if args.config is not None:
        try:
            with open(args.config, "r", encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Cannot read config {args.config}: {e}") from e
        if not isinstance(values, dict):
            raise ValueError(f"Config must be a JSON object: {args.config}")

    if args.zoom is not None:
        values["zoom_level"] = args.zoom
    if args.book:
        values["in_book_layout"] = True
    if args.horizontal:
        values["vertically_oriented"] = False
    if args.page_padding is not None:
        top, left = args.page_padding
        values["page_padding"] = PagePadding(top=top, left=left)
    if args.document_padding is not None:
        top, right, bottom, left = args.document_padding
        values["document_padding"] = DocumentPadding(top=top, right=right, bottom=bottom, left=left)

    return ViewerConfig.from_dict(values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        manifest = load_manifest(args.manifest)
        layout = get_document_layout(manifest, config)
    except (ManifestLoadError, ValidationError, InvalidZoomLevel, ValueError) as e:
        logger.error(str(e))
        return 1

    if args.output is not None:
        dump_layout(layout, args.output)
    else:
        json.dump(serialize_layout(layout), sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
