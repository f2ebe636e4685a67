"""Binding of named child collections into ordered record tuples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from portfolio.binding.records import RecordSpec, assemble_record

if TYPE_CHECKING:
    from portfolio.content.node import ContentNode
    from portfolio.models.base import ViewModel


@dataclass(frozen=True)
class CollectionSpec:
    """Model field ``name`` bound from child collection ``collection``."""

    name: str
    collection: str
    record: RecordSpec


def bind_collection(
    node: ContentNode,
    collection: str,
    record_spec: RecordSpec,
) -> tuple[ViewModel, ...]:
    """One record per child, in source order; ``()`` for an unmapped collection."""
    children = node.get_child_collection(collection)
    return tuple(assemble_record(child, record_spec) for child in children)
