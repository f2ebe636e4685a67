"""Render service: resolve a content node to its component and build the view model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portfolio.binding.assembler import build_model
from portfolio.services.registry import get_component_spec, resolve_component_type

if TYPE_CHECKING:
    from portfolio.content.node import ContentNode
    from portfolio.models.base import ViewModel

logger = logging.getLogger(__name__)


def render_component(node: ContentNode, component_type: str | None = None) -> ViewModel:
    """Build a fresh view model for *node*.

    Nothing is cached: every call binds and derives from scratch.
    """
    resource_type = resolve_component_type(node, component_type)
    spec = get_component_spec(resource_type)
    logger.debug("Rendering %s as %s", node.get_identity() or "<anonymous>", resource_type)
    return build_model(node, spec)
