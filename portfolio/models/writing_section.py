"""Writing section: a list of blog/article links (e.g. Medium articles)."""

from __future__ import annotations

from portfolio.binding.assembler import ModelSpec
from portfolio.binding.collection import CollectionSpec
from portfolio.binding.derive import DerivedSpec, presence
from portfolio.binding.records import RecordSpec
from portfolio.binding.scalar import FieldSpec
from portfolio.models.base import ViewModel

# Switch to compact (grid) mode above this many articles.
COMPACT_MODE_THRESHOLD = 4

GRID_LAYOUT_CLASS = "writing-section__articles--grid"
LIST_LAYOUT_CLASS = "writing-section__articles--list"


class Article(ViewModel):
    title: str | None
    description: str | None
    link: str | None
    publish_date: str | None
    platform: str
    has_link: bool
    has_description: bool


class WritingSection(ViewModel):
    section_title: str
    section_description: str | None
    articles: tuple[Article, ...]
    article_count: int
    is_compact_mode: bool
    layout_class: str
    has_articles: bool
    has_section_description: bool


ARTICLE_SPEC = RecordSpec(
    model=Article,
    fields=(
        FieldSpec("title"),
        FieldSpec("description"),
        FieldSpec("link"),
        FieldSpec("publish_date", "publishDate"),
        FieldSpec("platform", default="Medium"),
    ),
    derived=(
        presence("has_link", "link"),
        presence("has_description", "description"),
    ),
)

WRITING_SECTION_SPEC = ModelSpec(
    model=WritingSection,
    fields=(
        FieldSpec("section_title", "sectionTitle", default="Writing"),
        FieldSpec("section_description", "sectionDescription"),
    ),
    collections=(CollectionSpec("articles", "articles", ARTICLE_SPEC),),
    derived=(
        DerivedSpec("article_count", ("articles",), lambda articles: len(articles)),
        DerivedSpec(
            "is_compact_mode",
            ("article_count",),
            lambda article_count: article_count > COMPACT_MODE_THRESHOLD,
        ),
        DerivedSpec(
            "layout_class",
            ("is_compact_mode",),
            lambda is_compact_mode: GRID_LAYOUT_CLASS if is_compact_mode else LIST_LAYOUT_CLASS,
        ),
        presence("has_articles", "articles"),
        presence("has_section_description", "section_description"),
    ),
)
