"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from flatsite.config import Config, LiveReloadConfig, ServerConfig, SiteConfig

WriteFile = Callable[[str, str], Path]


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """Create an empty app root with the four kind directories."""
    root = tmp_path / "site"
    for directory in ("pages", "templates", "fragments", "config"):
        (root / directory).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def write_file(app_root: Path) -> WriteFile:
    """Return a helper writing a file relative to the app root.

    Usage: write_file("pages/index.html", "<p>Home</p>")
    """

    def _write(relative: str, content: str) -> Path:
        path = app_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_config(app_root: Path) -> Config:
    """Create a test configuration pointing at the app root."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(app_root=app_root),
        live_reload=LiveReloadConfig(enabled=False),
    )
