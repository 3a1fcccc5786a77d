from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from ssg.config import get_settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SSG_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_site(tmp_path: Path) -> Path:
    """
    Write a small source tree (index.md and posts/post1.md) and return its root.
    """
    root = tmp_path / "examples"
    (root / "posts").mkdir(parents=True)
    (root / "index.md").write_text(
        textwrap.dedent(
            """
            # Welcome

            This is the <home> page.
            """
        ).lstrip(),
        encoding="utf-8",
    )
    (root / "posts" / "post1.md").write_text(
        "## First post\n\nHello & goodbye.\n",
        encoding="utf-8",
    )
    return root
