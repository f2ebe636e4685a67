"""Tests for record and collection binding."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio.binding.collection import bind_collection
from portfolio.binding.derive import DerivedSpec
from portfolio.binding.lists import ListSpec
from portfolio.binding.records import RecordSpec, assemble_record
from portfolio.binding.scalar import FieldSpec
from portfolio.models.base import ViewModel

if TYPE_CHECKING:
    from collections.abc import Callable

    from portfolio.content.node import MappingContentNode


class Tag(ViewModel):
    label: str
    aliases: tuple[str, ...]
    display: str


TAG_SPEC = RecordSpec(
    model=Tag,
    fields=(FieldSpec("label", default="untitled"),),
    lists=(ListSpec("aliases"),),
    derived=(
        DerivedSpec(
            "display",
            ("label", "aliases"),
            lambda label, aliases: f"{label} ({len(aliases)})",
        ),
    ),
)


class TestAssembleRecord:
    def test_binds_fields_lists_and_derivations(
        self, make_node: Callable[..., MappingContentNode]
    ) -> None:
        record = assemble_record(make_node({"label": "py", "aliases": "python, cpython"}), TAG_SPEC)
        assert isinstance(record, Tag)
        assert record.label == "py"
        assert record.aliases == ("python", "cpython")
        assert record.display == "py (2)"

    def test_defaults_for_empty_child(self, make_node: Callable[..., MappingContentNode]) -> None:
        record = assemble_record(make_node(), TAG_SPEC)
        assert record.label == "untitled"
        assert record.aliases == ()
        assert record.display == "untitled (0)"

    def test_spec_orders_derivations_once(self) -> None:
        assert TAG_SPEC.ordered == TAG_SPEC.derived


class TestBindCollection:
    def test_one_record_per_child_in_order(
        self, make_node: Callable[..., MappingContentNode]
    ) -> None:
        node = make_node({"tags": [{"label": "c"}, {"label": "a"}, {"label": "b"}]})
        records = bind_collection(node, "tags", TAG_SPEC)
        assert [r.label for r in records] == ["c", "a", "b"]

    def test_missing_collection_is_empty_tuple(
        self, make_node: Callable[..., MappingContentNode]
    ) -> None:
        assert bind_collection(make_node({"title": "x"}), "tags", TAG_SPEC) == ()

    def test_container_style_children(self, make_node: Callable[..., MappingContentNode]) -> None:
        node = make_node(
            {
                "tags": {
                    "jcr:primaryType": "nt:unstructured",
                    "item0": {"label": "first"},
                    "item1": {"label": "second"},
                }
            }
        )
        assert [r.label for r in bind_collection(node, "tags", TAG_SPEC)] == ["first", "second"]
