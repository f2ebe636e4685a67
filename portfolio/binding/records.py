"""Assembly of one nested record from one child content node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from portfolio.binding.derive import DerivedSpec, derive_all, order_derivations
from portfolio.binding.lists import ListSpec, bind_list
from portfolio.binding.scalar import FieldSpec, bind_field

if TYPE_CHECKING:
    from collections.abc import Iterable

    from portfolio.content.node import ContentNode
    from portfolio.models.base import ViewModel


def bind_raw(
    node: ContentNode,
    fields: Iterable[FieldSpec],
    lists: Iterable[ListSpec],
) -> dict[str, Any]:
    """Bind every scalar and list field of *node* into a fresh state dict."""
    state: dict[str, Any] = {spec.name: bind_field(node, spec) for spec in fields}
    for spec in lists:
        state[spec.name] = bind_list(node, spec)
    return state


@dataclass(frozen=True)
class RecordSpec:
    """Field table for one record kind.

    Record-scoped derivations are validated and ordered once, here.
    """

    model: type[ViewModel]
    fields: tuple[FieldSpec, ...] = ()
    lists: tuple[ListSpec, ...] = ()
    derived: tuple[DerivedSpec, ...] = ()
    ordered: tuple[DerivedSpec, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        raw_keys = [spec.name for spec in self.fields] + [spec.name for spec in self.lists]
        object.__setattr__(self, "ordered", order_derivations(self.derived, raw_keys))


def assemble_record(node: ContentNode, spec: RecordSpec) -> ViewModel:
    raw = bind_raw(node, spec.fields, spec.lists)
    derived = derive_all(raw, spec.ordered)
    return spec.model.model_validate({**raw, **derived})
