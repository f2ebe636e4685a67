"""Component view models and their field tables."""

from portfolio.models.base import ViewModel
from portfolio.models.card import CARD_SPEC, Card
from portfolio.models.footer import FOOTER_SPEC, Footer
from portfolio.models.header import (
    LOGO_HEADER_SPEC,
    NAVIGATION_HEADER_SPEC,
    PORTFOLIO_HEADER_SPEC,
    LogoHeader,
    NavigationHeader,
    PortfolioHeader,
    SubNavigationItem,
)
from portfolio.models.now_section import (
    NOW_SECTION_SPEC,
    Experience,
    NowSection,
    Project,
    SkillCategory,
)
from portfolio.models.writing_section import WRITING_SECTION_SPEC, Article, WritingSection

__all__ = [
    "CARD_SPEC",
    "FOOTER_SPEC",
    "LOGO_HEADER_SPEC",
    "NAVIGATION_HEADER_SPEC",
    "NOW_SECTION_SPEC",
    "PORTFOLIO_HEADER_SPEC",
    "WRITING_SECTION_SPEC",
    "Article",
    "Card",
    "Experience",
    "Footer",
    "LogoHeader",
    "NavigationHeader",
    "NowSection",
    "PortfolioHeader",
    "Project",
    "SkillCategory",
    "SubNavigationItem",
    "ViewModel",
    "WritingSection",
]
