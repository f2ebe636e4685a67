"""Derived fields: validation of the derivation DAG and single-pass evaluation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from portfolio.binding.scalar import is_blank
from portfolio.exceptions import DerivationError

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(frozen=True)
class DerivedSpec:
    """A field computed from already-bound state.

    ``compute`` is called with exactly the declared ``inputs`` as keyword
    arguments and must be free of side effects.
    """

    name: str
    inputs: tuple[str, ...]
    compute: Callable[..., Any]


def order_derivations(
    derived: Sequence[DerivedSpec],
    available: Iterable[str],
) -> tuple[DerivedSpec, ...]:
    """Validate *derived* against the *available* raw keys and order it.

    Dependencies are emitted before their dependents; otherwise declaration
    order is kept, so the result is deterministic. Uses iterative DFS with
    white/gray/black coloring: reaching a GRAY node means a cycle.

    Raises:
        DerivationError: on duplicate or shadowing names, unknown inputs, or cycles.
    """
    raw_keys = set(available)
    by_name: dict[str, DerivedSpec] = {}
    for spec in derived:
        if spec.name in by_name:
            raise DerivationError(f"Derived field {spec.name!r} is declared more than once")
        if spec.name in raw_keys:
            raise DerivationError(f"Derived field {spec.name!r} shadows a bound field")
        by_name[spec.name] = spec

    for spec in derived:
        for name in spec.inputs:
            if name not in raw_keys and name not in by_name:
                raise DerivationError(f"Derived field {spec.name!r} reads unknown field {name!r}")

    color: dict[str, int] = {name: WHITE for name in by_name}
    ordered: list[DerivedSpec] = []

    for start in derived:
        if color[start.name] != WHITE:
            continue
        # Stack entries: (name, input_index). input_index tracks iteration
        # progress through the node's inputs.
        stack: list[tuple[str, int]] = [(start.name, 0)]
        color[start.name] = GRAY
        while stack:
            name, idx = stack[-1]
            deps = [dep for dep in by_name[name].inputs if dep in by_name]
            if idx < len(deps):
                stack[-1] = (name, idx + 1)
                dep = deps[idx]
                if color[dep] == GRAY:
                    raise DerivationError(f"Cyclic derivation between {name!r} and {dep!r}")
                if color[dep] == WHITE:
                    color[dep] = GRAY
                    stack.append((dep, 0))
            else:
                color[name] = BLACK
                ordered.append(by_name[name])
                stack.pop()

    return tuple(ordered)


def derive_all(raw_state: Mapping[str, Any], ordered: Sequence[DerivedSpec]) -> dict[str, Any]:
    """Evaluate each derivation once, in order, and return the derived fields."""
    state = dict(raw_state)
    derived: dict[str, Any] = {}
    for spec in ordered:
        value = spec.compute(**{name: state[name] for name in spec.inputs})
        state[spec.name] = value
        derived[spec.name] = value
    return derived


# -- Shared derivation rules --


def is_present(value: object) -> bool:
    """Presence predicate behind every ``has_*`` field."""
    if value is None:
        return False
    if isinstance(value, str):
        return not is_blank(value)
    if isinstance(value, Sequence):
        return len(value) > 0
    return True


def presence(name: str, source: str) -> DerivedSpec:
    """Declare ``name`` as the presence predicate of field ``source``."""
    return DerivedSpec(name, (source,), lambda **values: is_present(values[source]))


def fallback(value: str | None, default: str | None) -> str | None:
    return default if is_blank(value) else value


def prefixed(prefix: str, value: str) -> str:
    return prefix + value


def prefixed_if_present(prefix: str, value: str | None) -> str:
    """``prefix + value`` for a non-blank *value*, otherwise ``""``."""
    return "" if is_blank(value) else prefix + str(value)


def stable_hash(text: str) -> int:
    """32-bit polynomial string hash (``h = 31 * h + c`` over UTF-16 code units).

    Unlike ``hash()`` it does not depend on ``PYTHONHASHSEED``, and it matches
    the identifiers already published by the original component markup.
    """
    data = text.encode("utf-16-be")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def component_identifier(prefix: str, identity: str | None, constructed_at_ms: int) -> str:
    """``<prefix>-<abs hash of identity>``, or a time-based id without identity.

    The time-based form is not reproducible and only exists so that nodes
    without an identity still get an id.
    """
    if identity is None:
        return f"{prefix}-{constructed_at_ms}"
    return f"{prefix}-{abs(stable_hash(identity))}"
