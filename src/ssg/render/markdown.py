"""
Line-oriented Markdown to HTML conversion.

Only headings are recognised; every other non-blank line becomes its own
paragraph. Code blocks, lists, emphasis and links are not converted.
"""

from __future__ import annotations

from dataclasses import dataclass
import html
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from ..results import ReadResult

logger = logging.getLogger(__name__)

HEADING_MARKER = "#"
BLANK_CHARS = " \t\n\r\0\x0b"


class ConversionError(RuntimeError):
    """Raised when a source file cannot be read during conversion."""

    def __init__(self, result: ReadResult) -> None:
        super().__init__(result.error or f"Failed to read {result.source}")
        self.result = result


@dataclass(frozen=True)
class RenderedDocument:
    source: Path
    html: str


def _strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def _escape(text: str, legacy: bool) -> str:
    escaped = html.escape(text, quote=True)
    if legacy:
        escaped = escaped.replace("&#x27;", "&#039;")
    return escaped


def convert_line(line: str, *, preserve_line_endings: bool = False) -> Optional[str]:
    """
    Convert one Markdown line to an HTML fragment.

    Returns None for blank lines (ASCII whitespace only). Lines starting with
    `#` become headings whose level is the number of leading markers (not
    capped at 6). In legacy mode apostrophes are escaped as `&#039;`.
    """
    if not line.strip(BLANK_CHARS):
        return None
    if not preserve_line_endings:
        line = _strip_line_ending(line)

    if line.startswith(HEADING_MARKER):
        text = line.lstrip(HEADING_MARKER)
        level = len(line) - len(text)
        if text.startswith(" "):
            text = text[1:]
        return f"<h{level}>{_escape(text, preserve_line_endings)}</h{level}>"
    return f"<p>{_escape(line, preserve_line_endings)}</p>"


def convert_lines(lines: Iterable[str], *, preserve_line_endings: bool = False) -> str:
    """Convert a sequence of lines and concatenate the fragments."""
    fragments = (convert_line(line, preserve_line_endings=preserve_line_endings) for line in lines)
    return "".join(fragment for fragment in fragments if fragment is not None)


def convert_file(
    path: Path | str,
    *,
    preserve_line_endings: bool = False,
    encoding: str = "utf-8",
) -> ReadResult:
    """
    Read a Markdown file and convert it to HTML.

    Read failures are reported on the returned ReadResult rather than raised.
    """
    source = Path(path)
    try:
        # newline="" keeps \r\n intact so legacy output matches the file bytes.
        with source.open("r", encoding=encoding, newline="") as handle:
            body = convert_lines(handle, preserve_line_endings=preserve_line_endings)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Read failed for %s", source, exc_info=True)
        return ReadResult(source=source, error=f"Failed to read {source}: {exc}")
    return ReadResult(source=source, html=body)


class DocumentSet:
    """
    Finite, restartable sequence of rendered documents.

    Files are converted lazily, one per step, in the order given. Each call to
    iter() starts again from the first file.
    """

    def __init__(
        self,
        files: Sequence[Path],
        *,
        preserve_line_endings: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        self.files = list(files)
        self.preserve_line_endings = preserve_line_endings
        self.encoding = encoding

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[RenderedDocument]:
        for source in self.files:
            result = convert_file(
                source,
                preserve_line_endings=self.preserve_line_endings,
                encoding=self.encoding,
            )
            if not result.ok:
                raise ConversionError(result)
            yield RenderedDocument(source=source, html=result.html or "")
