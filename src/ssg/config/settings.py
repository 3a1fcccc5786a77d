"""
Environment settings loading helpers.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Process-level settings read from environment variables.

    Attributes:
        log_level: Logging level name from SSG_LOG_LEVEL.
    """
    log_level: Optional[str] = Field(default=None, alias="SSG_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }

    @property
    def resolved_log_level(self) -> str:
        """Upper-case level name, falling back to WARNING for unknown values."""
        level = (self.log_level or "warning").strip().lower()
        if level not in LOG_LEVELS:
            return "WARNING"
        return level.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {field.alias: os.getenv(field.alias) for field in Settings.model_fields.values()}
    return Settings(**values)
