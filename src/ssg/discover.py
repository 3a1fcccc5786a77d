"""
Locate Markdown sources beneath a root directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import DEFAULT_OUTPUT_DIR
from .results import DiscoveryResult

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def is_markdown(name: str) -> bool:
    """Return True if a file name carries the .md extension (any case)."""
    return name.lower().endswith(MARKDOWN_SUFFIX)


def find_markdown_files(root: Path | str, output_dir_name: str = DEFAULT_OUTPUT_DIR) -> DiscoveryResult:
    """
    Recursively collect Markdown files under root.

    The build directory (root/output_dir_name) is never descended into. Entries
    are visited in sorted order, files of a directory before its children.

    Args:
        root: Directory to scan.
        output_dir_name: Name of the build directory to skip.

    Returns:
        A DiscoveryResult. A missing or unreadable root yields no files and one
        error; unreadable subdirectories are recorded and skipped.
    """
    root_path = Path(root)
    errors: list[str] = []

    if not root_path.is_dir() or not os.access(root_path, os.R_OK | os.X_OK):
        message = f"Source directory not found or not readable: {root_path}"
        logger.error(message)
        return DiscoveryResult(root=root_path, files=[], errors=[message])

    def _on_error(exc: OSError) -> None:
        message = f"Skipping {exc.filename}: {exc.strerror or exc}"
        logger.warning("Error while scanning %s (%s)", root_path, message)
        errors.append(message)

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
        current = Path(dirpath)
        if current == root_path and output_dir_name in dirnames:
            dirnames.remove(output_dir_name)
        dirnames.sort()
        for name in sorted(filenames):
            candidate = current / name
            if is_markdown(name) and candidate.is_file():
                files.append(candidate)

    logger.info("Found %d Markdown file(s) under %s", len(files), root_path)
    return DiscoveryResult(root=root_path, files=files, errors=errors)
