"""Read-only content node accessor."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from portfolio.exceptions import ContentFormatError

Scalar = str | bool | int | float

_SCALAR_TYPES = (str, bool, int, float)


@runtime_checkable
class ContentNode(Protocol):
    """Read-only view of one node in the content tree."""

    def get_property(self, name: str) -> Scalar | None: ...

    def get_child_collection(self, name: str) -> Sequence[ContentNode]: ...

    def get_identity(self) -> str | None: ...


@dataclass(frozen=True)
class MappingContentNode:
    """Immutable content node backed by plain mappings."""

    properties: Mapping[str, Scalar] = field(default_factory=dict)
    collections: Mapping[str, tuple[MappingContentNode, ...]] = field(default_factory=dict)
    path: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(
            self,
            "collections",
            MappingProxyType({name: tuple(nodes) for name, nodes in self.collections.items()}),
        )

    def get_property(self, name: str) -> Scalar | None:
        return self.properties.get(name)

    def get_child_collection(self, name: str) -> tuple[MappingContentNode, ...]:
        return self.collections.get(name, ())

    def get_identity(self) -> str | None:
        return self.path

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str | None = None) -> MappingContentNode:
        """Build a node tree from decoded TOML/JSON/YAML content.

        - Scalar values become properties.
        - A list of mappings becomes a child collection, one child per entry.
        - A mapping is a container node (Sling export style): its mapping-valued
          entries are the collection's children in insertion order and its
          scalar entries (``jcr:primaryType`` and friends) are ignored.
        - ``None`` values are treated as absent properties.
        """
        properties: dict[str, Scalar] = {}
        collections: dict[str, tuple[MappingContentNode, ...]] = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, _SCALAR_TYPES):
                properties[key] = value
            elif isinstance(value, Mapping):
                collections[key] = tuple(
                    cls.from_dict(child, _child_path(path, key, child_key))
                    for child_key, child in value.items()
                    if isinstance(child, Mapping)
                )
            elif isinstance(value, list) and all(isinstance(item, Mapping) for item in value):
                collections[key] = tuple(
                    cls.from_dict(child, _child_path(path, key, f"item{index}"))
                    for index, child in enumerate(value)
                )
            else:
                msg = f"Unsupported value for {key!r}: {type(value).__name__}"
                raise ContentFormatError(msg)
        return cls(properties=properties, collections=collections, path=path)


def _child_path(parent: str | None, collection: str, child: str) -> str | None:
    if parent is None:
        return None
    return f"{parent.rstrip('/')}/{collection}/{child}"
