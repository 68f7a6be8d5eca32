"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

import ogkit.config


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config location into a temporary directory."""
    path = tmp_path / ".ogkit" / "config.toml"
    monkeypatch.setattr(ogkit.config, "DEFAULT_CONFIG_PATH", path)
    return path


@pytest.fixture
def page() -> Callable[..., str]:
    """Build an HTML page from meta tag attribute pairs."""

    def _page(*metas: tuple[str, str], head: str = "", body: str = "") -> str:
        tags = "\n".join(
            f'<meta property="{name}" content="{content}">' for name, content in metas
        )
        return f"<html>\n<head>\n{tags}\n{head}\n</head>\n<body>{body}</body>\n</html>"

    return _page
