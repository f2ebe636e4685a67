"""Shared test fixtures for portfolio components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from portfolio.config import Settings
from portfolio.content.node import MappingContentNode

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def tmp_content_dir(tmp_path: Path) -> Path:
    """Create a temporary content directory."""
    content = tmp_path / "content"
    content.mkdir()
    return content


@pytest.fixture
def test_settings(tmp_content_dir: Path) -> Settings:
    """Create test settings pointing at the temporary content directory."""
    return Settings(_env_file=None, debug=True, content_dir=tmp_content_dir)


@pytest.fixture
def make_node() -> Callable[..., MappingContentNode]:
    """Build a content node from a plain dict, optionally with an identity path."""

    def _make(data: dict[str, Any] | None = None, path: str | None = None) -> MappingContentNode:
        return MappingContentNode.from_dict(data or {}, path=path)

    return _make
