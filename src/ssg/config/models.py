"""
Pydantic model for validating build configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

DEFAULT_OUTPUT_DIR = "_build"


class ConfigError(RuntimeError):
    """Raised when a build configuration cannot be validated."""


class BuildConfig(BaseModel):
    """
    Settings for a single site build.

    Attributes:
        root: Directory scanned for Markdown sources.
        output_dir_name: Name of the build directory created inside root.
        preserve_line_endings: Keep trailing newlines inside the generated tags.
        encoding: Text encoding used for reading sources and writing HTML.
    """
    root: Path = Path(".")
    output_dir_name: str = DEFAULT_OUTPUT_DIR
    preserve_line_endings: bool = False
    encoding: str = "utf-8"

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @field_validator("output_dir_name")
    @classmethod
    def _single_component(cls, value: str) -> str:
        name = value.strip()
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise ValueError(f"output_dir_name must be a single directory name, got {value!r}")
        return name

    @property
    def build_dir(self) -> Path:
        """Directory the HTML tree is written to."""
        return self.root / self.output_dir_name


def load_config(**values: Any) -> BuildConfig:
    """
    Validate keyword values into a BuildConfig.

    Raises:
        ConfigError: If any value is invalid or unknown.
    """
    try:
        return BuildConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
