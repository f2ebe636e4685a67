"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from portfolio.config import Settings


class TestSettings:
    def test_default_settings(self) -> None:
        s = Settings(_env_file=None)
        assert s.debug is False
        assert s.content_dir == Path("./content")
        assert s.json_indent == 2

    def test_custom_settings(self, tmp_path: Path) -> None:
        s = Settings(_env_file=None, debug=True, content_dir=tmp_path / "content", json_indent=0)
        assert s.debug is True
        assert s.content_dir == tmp_path / "content"
        assert s.json_indent == 0

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONTENT_DIR", "/srv/content")
        monkeypatch.setenv("DEBUG", "true")
        s = Settings(_env_file=None)
        assert s.content_dir == Path("/srv/content")
        assert s.debug is True

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, json_indent=-1)

    def test_settings_from_fixture(self, test_settings: Settings) -> None:
        assert test_settings.debug is True
        assert test_settings.content_dir.exists()
