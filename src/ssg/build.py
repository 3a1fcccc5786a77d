"""
Clean-rebuild orchestration: discover, convert and write the HTML tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from .config import BuildConfig
from .discover import find_markdown_files
from .render import ConversionError, DocumentSet, RenderedDocument
from .results import ReadResult, RemoveResult, WriteResult
from .util import ensure_directory, remove_tree, write_text_file

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"

ProgressCallback = Callable[[Path, Path], None]


class BuildError(RuntimeError):
    """Raised when a build step fails in a way that aborts the run."""

    def __init__(self, message: str, result: Optional[Union[ReadResult, RemoveResult, WriteResult]] = None) -> None:
        super().__init__(message)
        self.result = result


@dataclass
class BuildReport:
    """
    Stores what a build produced.

    Attributes:
        root: Source directory that was scanned.
        build_dir: Directory the HTML tree was written to.
        written: (source, target) pairs in write order.
        warnings: Non-fatal discovery problems.
    """
    root: Path
    build_dir: Path
    written: List[tuple[Path, Path]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Build directory", str(self.build_dir))
        yield ("Files converted", str(len(self.written)))
        yield ("Warnings", str(len(self.warnings)))


def output_path_for(source: Path | str, root: Path | str, build_dir: Path | str) -> Path:
    """
    Map a source file to its HTML path inside build_dir.

    The root prefix is removed from the source path, a leading separator is
    trimmed, and the extension is swapped for `.html`.
    """
    try:
        relative = str(Path(source).relative_to(root))
    except ValueError:
        source_str = str(source)
        root_str = str(root)
        relative = source_str[len(root_str):] if source_str.startswith(root_str) else source_str
    if relative.startswith(os.sep):
        relative = relative[len(os.sep):]
    return Path(build_dir) / Path(relative).with_suffix(HTML_SUFFIX)


def clean_build_dir(build_dir: Path | str) -> RemoveResult:
    """
    Delete build_dir and everything under it, then recreate it empty.

    A build directory that does not exist yet is not an error.
    """
    target = Path(build_dir)
    try:
        if remove_tree(target):
            logger.info("Removed previous build at %s", target)
    except OSError as exc:
        logger.error("Failed to delete directory %s: %s", target, exc)
        return RemoveResult(path=target, error=f"Failed to delete directory: {target} ({exc})")
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create directory %s: %s", target, exc)
        return RemoveResult(path=target, error=f"Failed to create directory: {target} ({exc})")
    return RemoveResult(path=target)


def write_document(document: RenderedDocument, target: Path, *, encoding: str = "utf-8") -> WriteResult:
    """Write one rendered document, creating its parent directory first."""
    try:
        ensure_directory(target.parent)
        write_text_file(target, document.html, encoding=encoding)
    except OSError as exc:
        logger.error("Failed to write %s: %s", target, exc)
        return WriteResult(source=document.source, target=target, error=f"Failed to write {target}: {exc}")
    return WriteResult(source=document.source, target=target)


def build_site(config: BuildConfig, on_converted: Optional[ProgressCallback] = None) -> BuildReport:
    """
    Run a full clean rebuild for config.root.

    Args:
        config: Validated build configuration.
        on_converted: Called with (source, target) after each file is written.

    Returns:
        A BuildReport listing every file written.

    Raises:
        BuildError: If the build directory cannot be cleared, or a source cannot
            be read, or an output file cannot be written.
    """
    root = config.root
    build_dir = config.build_dir
    report = BuildReport(root=root, build_dir=build_dir)

    discovery = find_markdown_files(root, config.output_dir_name)
    report.warnings.extend(discovery.errors)
    if not root.is_dir():
        logger.warning("Nothing to build; %s is not a directory", root)
        return report

    documents = DocumentSet(
        discovery.files,
        preserve_line_endings=config.preserve_line_endings,
        encoding=config.encoding,
    )

    removed = clean_build_dir(build_dir)
    if not removed.ok:
        raise BuildError(removed.error or f"Failed to delete directory: {build_dir}", removed)

    try:
        for document in documents:
            target = output_path_for(document.source, root, build_dir)
            written = write_document(document, target, encoding=config.encoding)
            if not written.ok:
                raise BuildError(written.error or f"Failed to write {target}", written)
            report.written.append((document.source, target))
            logger.debug("Converted %s -> %s", document.source, target)
            if on_converted is not None:
                on_converted(document.source, target)
    except ConversionError as exc:
        raise BuildError(str(exc), exc.result) from exc

    for key, value in report.summary_rows():
        logger.info("%s: %s", key, value)
    return report
