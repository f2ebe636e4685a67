"""Card component: a portfolio card with optional image, link, tag and icon."""

from __future__ import annotations

from portfolio.binding.assembler import CONSTRUCTED_AT_MS, RESOURCE_PATH, ModelSpec
from portfolio.binding.derive import (
    DerivedSpec,
    component_identifier,
    fallback,
    prefixed,
    prefixed_if_present,
    presence,
)
from portfolio.binding.scalar import FieldSpec
from portfolio.models.base import ViewModel

THEME_PREFIX = "cmp-card--"
ANIMATION_PREFIX = "cmp-card--animate-"
ID_PREFIX = "card"


class Card(ViewModel):
    """Card view model.

    ``theme`` and ``animation_style`` are CSS modifier classes, not the raw
    dialog values (themes: default, dark, gradient, glass; animations: fade,
    slide, zoom).
    """

    title: str
    description: str
    image: str
    image_alt: str
    link: str
    link_target: str
    button_text: str
    theme: str
    icon: str
    tag_text: str
    animation_style: str
    component_id: str
    has_image: bool
    has_link: bool
    has_tag: bool
    has_icon: bool


CARD_SPEC = ModelSpec(
    model=Card,
    fields=(
        FieldSpec("title", default="Card Title"),
        FieldSpec("description", default=""),
        FieldSpec("image", default=""),
        FieldSpec("image_alt_text", "imageAlt", default=""),
        FieldSpec("link", default=""),
        FieldSpec("link_target", "linkTarget", default="_self"),
        FieldSpec("button_text", "buttonText", default="Learn More"),
        FieldSpec("theme_name", "theme", default="default"),
        FieldSpec("icon", default=""),
        FieldSpec("tag_text", "tagText", default=""),
        FieldSpec("animation_name", "animationStyle", default=""),
    ),
    derived=(
        DerivedSpec(
            "image_alt",
            ("image_alt_text", "title"),
            lambda image_alt_text, title: fallback(image_alt_text, title),
        ),
        DerivedSpec(
            "theme",
            ("theme_name",),
            lambda theme_name: prefixed(THEME_PREFIX, theme_name),
        ),
        DerivedSpec(
            "animation_style",
            ("animation_name",),
            lambda animation_name: prefixed_if_present(ANIMATION_PREFIX, animation_name),
        ),
        DerivedSpec(
            "component_id",
            (RESOURCE_PATH, CONSTRUCTED_AT_MS),
            lambda resource_path, constructed_at_ms: component_identifier(
                ID_PREFIX, resource_path, constructed_at_ms
            ),
        ),
        presence("has_image", "image"),
        presence("has_link", "link"),
        presence("has_tag", "tag_text"),
        presence("has_icon", "icon"),
    ),
)
