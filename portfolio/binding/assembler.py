"""Two-phase view model assembly: bind raw state, then derive."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from portfolio.binding.collection import CollectionSpec, bind_collection
from portfolio.binding.derive import DerivedSpec, derive_all, order_derivations
from portfolio.binding.lists import ListSpec
from portfolio.binding.records import bind_raw
from portfolio.binding.scalar import FieldSpec

if TYPE_CHECKING:
    from portfolio.content.node import ContentNode
    from portfolio.models.base import ViewModel

logger = logging.getLogger(__name__)

# Build context made available to derivations alongside the bound fields.
RESOURCE_PATH = "resource_path"
CONSTRUCTED_AT_MS = "constructed_at_ms"


@dataclass(frozen=True)
class ModelSpec:
    """Complete field table for one component view model."""

    model: type[ViewModel]
    fields: tuple[FieldSpec, ...] = ()
    lists: tuple[ListSpec, ...] = ()
    collections: tuple[CollectionSpec, ...] = ()
    derived: tuple[DerivedSpec, ...] = ()
    ordered: tuple[DerivedSpec, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ordered", order_derivations(self.derived, self.raw_keys()))

    def raw_keys(self) -> list[str]:
        keys = [spec.name for spec in self.fields]
        keys += [spec.name for spec in self.lists]
        keys += [spec.name for spec in self.collections]
        return [*keys, RESOURCE_PATH, CONSTRUCTED_AT_MS]


def bind_model_raw(node: ContentNode, spec: ModelSpec) -> dict[str, object]:
    """Phase 1: scalars, lists, child collections and build context."""
    raw = bind_raw(node, spec.fields, spec.lists)
    for coll in spec.collections:
        raw[coll.name] = bind_collection(node, coll.collection, coll.record)
    raw[RESOURCE_PATH] = node.get_identity()
    raw[CONSTRUCTED_AT_MS] = time.time_ns() // 1_000_000
    return raw


def build_model(node: ContentNode, spec: ModelSpec) -> ViewModel:
    """Build a fresh immutable view model from *node*.

    Accessor failures propagate unchanged; missing data never raises.
    """
    raw = bind_model_raw(node, spec)
    derived = derive_all(raw, spec.ordered)
    model = spec.model.model_validate({**raw, **derived})
    logger.debug("Built %s for %s", spec.model.__name__, raw[RESOURCE_PATH] or "<anonymous>")
    return model
