"""Scalar field binding with typed defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio.content.node import ContentNode, Scalar


class FieldKind(StrEnum):
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldSpec:
    """One scalar model field: state key, source property, kind and default.

    ``prop`` defaults to ``name`` so that most declarations only spell out the
    property name once.
    """

    name: str
    prop: str = ""
    kind: FieldKind = FieldKind.STRING
    default: str | bool | None = None

    def __post_init__(self) -> None:
        if not self.prop:
            object.__setattr__(self, "prop", self.name)


def is_blank(value: object) -> bool:
    """True for ``None`` and for strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _to_bool(value: Scalar) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def bind_scalar(
    node: ContentNode,
    prop: str,
    kind: FieldKind,
    default: str | bool | None,
) -> str | bool | None:
    """Read one typed property from *node*, substituting *default* when missing.

    Strings fall back on absent or blank values; a blank string never
    overrides a non-empty default. Booleans fall back only when the property
    is absent.
    """
    value = node.get_property(prop)
    if kind is FieldKind.BOOLEAN:
        return default if value is None else _to_bool(value)
    if is_blank(value):
        return default
    return value if isinstance(value, str) else str(value)


def bind_field(node: ContentNode, spec: FieldSpec) -> str | bool | None:
    return bind_scalar(node, spec.prop, spec.kind, spec.default)
