import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import folio_layout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from folio_layout.core.models import Manifest, Page, PageSize  # noqa: E402


# Common test fixtures
@pytest.fixture
def make_manifest():
    """Factory for manifests from (width, height) pairs at zoom level 0."""
    def _create(sizes, paged=False, page_flags=None, zoom_levels=1):
        pages = []
        for i, (width, height) in enumerate(sizes):
            dimensions = tuple(
                PageSize(width * 2 ** z, height * 2 ** z) for z in range(zoom_levels)
            )
            flag = True if page_flags is None else page_flags[i]
            pages.append(Page(dimensions=dimensions, paged=flag))
        return Manifest(pages=tuple(pages), paged=paged)
    return _create


@pytest.fixture
def manifest_data():
    """Raw manifest JSON data with a non-paged cover."""
    return {
        "paged": True,
        "pages": [
            {"label": "cover", "paged": False, "dimensions": [{"width": 100, "height": 200}]},
            {"label": "1r", "dimensions": [{"width": 100, "height": 200}]},
            {"label": "1v", "dimensions": [{"width": 100, "height": 200}]},
        ],
    }


@pytest.fixture
def manifest_file(tmp_path: Path, manifest_data):
    """Write manifest_data to a JSON file."""
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(manifest_data), encoding="utf-8")
    return path
