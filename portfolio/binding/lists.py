"""Delimiter-separated list properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio.content.node import ContentNode

DEFAULT_DELIMITER = ","


@dataclass(frozen=True)
class ListSpec:
    """A scalar property holding a delimited list, bound as a tuple of tokens."""

    name: str
    prop: str = ""
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if not self.prop:
            object.__setattr__(self, "prop", self.name)


def parse_delimited(raw: str | None, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, ...]:
    """Split *raw* on *delimiter* into trimmed, non-empty tokens.

    Order and duplicates are preserved: ``"Java, , Go ,Go"`` gives
    ``("Java", "Go", "Go")``. ``None`` and ``""`` give an empty tuple.
    """
    if not raw:
        return ()
    tokens = (token.strip() for token in raw.split(delimiter))
    return tuple(token for token in tokens if token)


def bind_list(node: ContentNode, spec: ListSpec) -> tuple[str, ...]:
    value = node.get_property(spec.prop)
    if value is None:
        return ()
    return parse_delimited(value if isinstance(value, str) else str(value), spec.delimiter)
