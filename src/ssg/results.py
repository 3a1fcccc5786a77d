"""
Result objects returned by the fallible build steps.

Each step (discovery, read, remove, write) reports its outcome as a value; the
orchestrator decides whether a failure is logged or fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class DiscoveryResult:
    """
    Markdown files found under a root, plus any errors hit while walking it.

    Attributes:
        root: Directory that was scanned.
        files: Discovered source files, in walk order.
        errors: Human-readable descriptions of skipped directories.
    """
    root: Path
    files: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class ReadResult:
    """Outcome of converting a single source file."""
    source: Path
    html: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RemoveResult:
    """Outcome of clearing the build directory."""
    path: Path
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class WriteResult:
    """Outcome of writing one rendered document."""
    source: Path
    target: Path
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
