"""
Minimal static-site generator: mirrors a tree of Markdown files as HTML.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("ssg")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
