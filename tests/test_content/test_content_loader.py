"""Tests for loading content nodes from files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from portfolio.content.loader import content_identity, load_content_node
from portfolio.exceptions import ContentAccessError, ContentFormatError

_CARD_TOML = """\
"sling:resourceType" = "portfolio/components/card"
title = "Project X"
theme = "dark"

[[tags]]
label = "new"
"""


class TestLoadContentNode:
    def test_toml(self, tmp_content_dir: Path) -> None:
        path = tmp_content_dir / "en" / "card.toml"
        path.parent.mkdir()
        path.write_text(_CARD_TOML, encoding="utf-8")

        node = load_content_node(path, content_dir=tmp_content_dir)
        assert node.get_property("title") == "Project X"
        assert node.get_identity() == "/en/card"
        assert node.get_child_collection("tags")[0].get_identity() == "/en/card/tags/item0"

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "footer.json"
        path.write_text(json.dumps({"tagline": "Hi", "githubLink": None}), encoding="utf-8")

        node = load_content_node(path)
        assert node.get_property("tagline") == "Hi"
        assert node.get_property("githubLink") is None
        assert node.get_identity() is None

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "writing.yaml"
        path.write_text(
            "sectionTitle: Blog\narticles:\n  - title: A\n  - title: B\n", encoding="utf-8"
        )

        node = load_content_node(path, root_path="/content/site/writing")
        assert node.get_property("sectionTitle") == "Blog"
        assert node.get_identity() == "/content/site/writing"
        assert len(node.get_child_collection("articles")) == 2

    def test_relative_path_resolved_against_content_dir(self, tmp_content_dir: Path) -> None:
        (tmp_content_dir / "card.toml").write_text('title = "T"\n', encoding="utf-8")
        node = load_content_node(Path("card.toml"), content_dir=tmp_content_dir)
        assert node.get_identity() == "/card"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContentAccessError, match="Failed to read"):
            load_content_node(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("title = ", encoding="utf-8")
        with pytest.raises(ContentAccessError) as exc_info:
            load_content_node(path)
        assert exc_info.value.__cause__ is not None

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "card.xml"
        path.write_text("<card/>", encoding="utf-8")
        with pytest.raises(ContentAccessError, match="Unsupported content file type"):
            load_content_node(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ContentFormatError, match="mapping"):
            load_content_node(path)

    def test_path_traversal_rejected(self, tmp_content_dir: Path) -> None:
        (tmp_content_dir.parent / "outside.toml").write_text('title = "x"\n', encoding="utf-8")
        with pytest.raises(ContentAccessError, match="Path traversal"):
            load_content_node(Path("../outside.toml"), content_dir=tmp_content_dir)


class TestContentIdentity:
    def test_strips_suffix(self, tmp_content_dir: Path) -> None:
        path = tmp_content_dir / "a" / "b.json"
        assert content_identity(path, tmp_content_dir) == "/a/b"
