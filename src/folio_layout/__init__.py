"""Top-level package for Folio Layout.

Provides subpackages:
- folio_layout.core – manifest models, schema validation, serialization
- folio_layout.layout – the document layout engine
- folio_layout.cli – command line front end
"""

from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _read_source_version(pyproject: Path) -> str:
    """Read ``version`` from the [project] table of a source checkout."""
    in_project = False
    for raw in pyproject.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line.startswith("["):
            in_project = line == "[project]"
        elif in_project and line.startswith("version"):
            return line.partition("=")[2].strip().strip("\"'")
    return "0.0.0"


try:
    __version__ = _dist_version("folio-layout")
except PackageNotFoundError:
    __version__ = _read_source_version(_PYPROJECT) if _PYPROJECT.is_file() else "0.0.0"

__all__: list[str] = ["__version__"]
