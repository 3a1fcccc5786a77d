"""
Shared filesystem helpers.
"""

from .filesystem import ensure_directory, remove_tree, write_text_file

__all__ = [
    "ensure_directory",
    "remove_tree",
    "write_text_file",
]
