"""Footer component: social links and copyright information."""

from __future__ import annotations

from portfolio.binding.assembler import ModelSpec
from portfolio.binding.derive import DerivedSpec, presence
from portfolio.binding.scalar import FieldSpec
from portfolio.models.base import ViewModel

DEFAULT_COPYRIGHT = "© 2024 All rights reserved."

_SOCIAL_FLAGS = ("has_github", "has_linkedin", "has_email", "has_medium", "has_twitter")


class Footer(ViewModel):
    github_link: str | None
    linkedin_link: str | None
    email_address: str | None
    medium_link: str | None
    twitter_link: str | None
    copyright_text: str
    tagline: str | None
    email_link: str | None
    has_github: bool
    has_linkedin: bool
    has_email: bool
    has_medium: bool
    has_twitter: bool
    has_tagline: bool
    has_social_links: bool


def _email_link(email_address: str | None) -> str | None:
    return None if email_address is None else f"mailto:{email_address}"


FOOTER_SPEC = ModelSpec(
    model=Footer,
    fields=(
        FieldSpec("github_link", "githubLink"),
        FieldSpec("linkedin_link", "linkedinLink"),
        FieldSpec("email_address", "emailAddress"),
        FieldSpec("medium_link", "mediumLink"),
        FieldSpec("twitter_link", "twitterLink"),
        FieldSpec("copyright_text", "copyrightText", default=DEFAULT_COPYRIGHT),
        FieldSpec("tagline"),
    ),
    derived=(
        presence("has_github", "github_link"),
        presence("has_linkedin", "linkedin_link"),
        presence("has_email", "email_address"),
        presence("has_medium", "medium_link"),
        presence("has_twitter", "twitter_link"),
        presence("has_tagline", "tagline"),
        DerivedSpec("has_social_links", _SOCIAL_FLAGS, lambda **flags: any(flags.values())),
        DerivedSpec("email_link", ("email_address",), _email_link),
    ),
)
