"""Header components.

- ``PortfolioHeader``: single-page header with logo, subtitle and section
  anchor links.
- ``LogoHeader``: logo-only header; navigation is rendered by a separate
  navigation component.
- ``NavigationHeader``: header with fixed page links and an "about us"
  sub-navigation list.
"""

from __future__ import annotations

from portfolio.binding.assembler import ModelSpec
from portfolio.binding.collection import CollectionSpec
from portfolio.binding.derive import presence
from portfolio.binding.records import RecordSpec
from portfolio.binding.scalar import FieldSpec
from portfolio.models.base import ViewModel


class PortfolioHeader(ViewModel):
    logo_image: str | None
    subtitle: str
    now_section_id: str
    writing_section_id: str
    contact_section_id: str
    has_logo: bool
    has_subtitle: bool


class LogoHeader(ViewModel):
    logo_image: str | None
    logo_link: str
    logo_alt_text: str
    logo_text: str


class SubNavigationItem(ViewModel):
    about_us_nav_title: str | None
    about_us_sub_nav_url: str | None


class NavigationHeader(ViewModel):
    logo_image: str | None
    home_page_title: str | None
    home_page_url: str | None
    about_us_title: str | None
    about_us_url: str | None
    signup_title: str | None
    signup_url: str | None
    login_title: str | None
    login_url: str | None
    about_us_navigation: tuple[SubNavigationItem, ...]
    has_about_us_navigation: bool


PORTFOLIO_HEADER_SPEC = ModelSpec(
    model=PortfolioHeader,
    fields=(
        FieldSpec("logo_image", "logoImage"),
        FieldSpec("subtitle", default="Full-Stack AEM Developer"),
        FieldSpec("now_section_id", "nowSectionId", default="#now"),
        FieldSpec("writing_section_id", "writingSectionId", default="#writing"),
        FieldSpec("contact_section_id", "contactSectionId", default="#contact"),
    ),
    derived=(
        presence("has_logo", "logo_image"),
        presence("has_subtitle", "subtitle"),
    ),
)

LOGO_HEADER_SPEC = ModelSpec(
    model=LogoHeader,
    fields=(
        FieldSpec("logo_image", "logoImage"),
        FieldSpec("logo_link", "logoLink", default="/"),
        FieldSpec("logo_alt_text", "logoAltText", default="Logo"),
        FieldSpec("logo_text", "logoText", default="LOGO"),
    ),
)

SUB_NAVIGATION_SPEC = RecordSpec(
    model=SubNavigationItem,
    fields=(
        FieldSpec("about_us_nav_title", "aboutUsNavTitle"),
        FieldSpec("about_us_sub_nav_url", "aboutUsSubNavUrl"),
    ),
)

NAVIGATION_HEADER_SPEC = ModelSpec(
    model=NavigationHeader,
    fields=(
        FieldSpec("logo_image", "logoImage"),
        FieldSpec("home_page_title", "homePageTitle"),
        FieldSpec("home_page_url", "homePageUrl"),
        FieldSpec("about_us_title", "aboutUsTitle"),
        FieldSpec("about_us_url", "aboutUsUrl"),
        FieldSpec("signup_title", "signupTitle"),
        FieldSpec("signup_url", "signupUrl"),
        FieldSpec("login_title", "loginTitle"),
        FieldSpec("login_url", "loginUrl"),
    ),
    collections=(
        CollectionSpec("about_us_navigation", "aboutUsNavigation", SUB_NAVIGATION_SPEC),
    ),
    derived=(presence("has_about_us_navigation", "about_us_navigation"),),
)
