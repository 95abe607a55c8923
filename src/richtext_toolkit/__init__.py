"""Top-level package for the rich-text toolkit.

Provides subpackages:
- richtext_toolkit.core – cursor, errors and immutable binary models
- richtext_toolkit.dib – embedded DIB header decoding and bitmap extraction
- richtext_toolkit.render – paragraph/run tree building from instructions
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_tree_version() -> str | None:
    """Version string from a checkout's pyproject.toml, if one is present."""
    try:
        lines = _PYPROJECT.read_text().splitlines()
    except OSError:
        return None
    for line in lines:
        key, sep, value = line.partition("=")
        if sep and key.strip() == "version":
            return value.strip().strip("\"'")
    return None


try:
    __version__ = _source_tree_version() or version("richtext-toolkit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
