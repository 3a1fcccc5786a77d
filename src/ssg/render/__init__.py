"""
Markdown rendering helpers.
"""

from .markdown import (
    ConversionError,
    DocumentSet,
    RenderedDocument,
    convert_file,
    convert_line,
    convert_lines,
)

__all__ = [
    "ConversionError",
    "DocumentSet",
    "RenderedDocument",
    "convert_file",
    "convert_line",
    "convert_lines",
]
