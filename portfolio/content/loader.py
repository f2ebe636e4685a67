"""Read-only loader for exported content files (TOML, JSON, YAML)."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import yaml

from portfolio.content.node import MappingContentNode
from portfolio.exceptions import ContentAccessError, ContentFormatError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: frozenset[str] = frozenset({".toml", ".json", ".yaml", ".yml"})


def _decode(text: str, suffix: str) -> Any:
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def _resolve(file_path: Path, content_dir: Path | None) -> Path:
    """Resolve *file_path*, keeping it inside *content_dir* when one is given."""
    if content_dir is None:
        return file_path
    root = content_dir.resolve()
    full_path = (root / file_path).resolve()
    if not full_path.is_relative_to(root):
        raise ContentAccessError(f"Path traversal detected: {file_path}")
    return full_path


def content_identity(file_path: Path, content_dir: Path) -> str:
    """Derive a repository-style identity path from a file under *content_dir*.

    ``content/en/home/card.toml`` under ``content`` becomes ``/en/home/card``.
    """
    rel = file_path.resolve().relative_to(content_dir.resolve()).with_suffix("")
    return "/" + rel.as_posix()


def load_content_node(
    file_path: Path,
    content_dir: Path | None = None,
    root_path: str | None = None,
) -> MappingContentNode:
    """Load one content file into a read-only node tree.

    Read and decode failures are reported as ``ContentAccessError``; a document
    that decodes to something other than a mapping is a ``ContentFormatError``.
    """
    full_path = _resolve(file_path, content_dir)
    suffix = full_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ContentAccessError(f"Unsupported content file type: {full_path.name}")

    try:
        text = full_path.read_text(encoding="utf-8")
        data = _decode(text, suffix)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ContentAccessError(f"Failed to read content file {full_path}: {exc}") from exc

    if not isinstance(data, Mapping):
        msg = f"Content file {full_path.name} must contain a mapping at the top level"
        raise ContentFormatError(msg)

    path = root_path
    if path is None and content_dir is not None:
        path = content_identity(full_path, content_dir)

    node = MappingContentNode.from_dict(data, path=path)
    logger.info("Loaded content node %s from %s", path or "<anonymous>", full_path)
    return node
