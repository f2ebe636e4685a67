"""Component registry: resource type to model spec."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio.exceptions import UnknownComponentError
from portfolio.models import (
    CARD_SPEC,
    FOOTER_SPEC,
    LOGO_HEADER_SPEC,
    NAVIGATION_HEADER_SPEC,
    NOW_SECTION_SPEC,
    PORTFOLIO_HEADER_SPEC,
    WRITING_SECTION_SPEC,
)

if TYPE_CHECKING:
    from portfolio.binding.assembler import ModelSpec
    from portfolio.content.node import ContentNode

RESOURCE_TYPE_PROPERTY = "sling:resourceType"
COMPONENT_ROOT = "portfolio/components/"

COMPONENT_SPECS: dict[str, ModelSpec] = {
    COMPONENT_ROOT + "card": CARD_SPEC,
    COMPONENT_ROOT + "footer": FOOTER_SPEC,
    COMPONENT_ROOT + "now-section": NOW_SECTION_SPEC,
    COMPONENT_ROOT + "writing-section": WRITING_SECTION_SPEC,
    COMPONENT_ROOT + "portfolio-header": PORTFOLIO_HEADER_SPEC,
    COMPONENT_ROOT + "header2": LOGO_HEADER_SPEC,
    COMPONENT_ROOT + "header": NAVIGATION_HEADER_SPEC,
}


def get_component_spec(resource_type: str) -> ModelSpec:
    """Look up a spec by full resource type or by short name (``card``)."""
    key = resource_type.strip().strip("/")
    if not key.startswith(COMPONENT_ROOT):
        key = COMPONENT_ROOT + key
    spec = COMPONENT_SPECS.get(key)
    if spec is None:
        available = sorted(name.removeprefix(COMPONENT_ROOT) for name in COMPONENT_SPECS)
        msg = f"Unknown component type: {resource_type!r}. Available: {available}"
        raise UnknownComponentError(msg)
    return spec


def resolve_component_type(node: ContentNode, explicit: str | None = None) -> str:
    """Explicit type first, then the node's own resource type property."""
    if explicit:
        return explicit
    declared = node.get_property(RESOURCE_TYPE_PROPERTY)
    if isinstance(declared, str) and declared.strip():
        return declared
    raise UnknownComponentError(
        f"Node {node.get_identity() or '<anonymous>'} has no {RESOURCE_TYPE_PROPERTY} property"
    )
