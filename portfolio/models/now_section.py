"""Now section: experience timeline, projects, skills and CV link."""

from __future__ import annotations

from portfolio.binding.assembler import ModelSpec
from portfolio.binding.collection import CollectionSpec
from portfolio.binding.derive import DerivedSpec, is_present, presence
from portfolio.binding.lists import ListSpec
from portfolio.binding.records import RecordSpec
from portfolio.binding.scalar import FieldKind, FieldSpec
from portfolio.models.base import ViewModel

PRESENT = "Present"
TIMELINE_SEPARATOR = " - "


class Experience(ViewModel):
    company: str | None
    role: str | None
    start_date: str | None
    end_date: str | None
    current: bool
    description: str | None
    technologies: tuple[str, ...]
    timeline: str
    has_technologies: bool


class Project(ViewModel):
    title: str | None
    description: str | None
    link: str | None
    tech_stack: str | None
    has_link: bool


class SkillCategory(ViewModel):
    category_name: str | None
    skills: tuple[str, ...]
    has_skills: bool


class NowSection(ViewModel):
    section_title: str
    experience_title: str
    projects_title: str
    profile_summary: str | None
    cv_link: str | None
    cv_link_text: str
    experiences: tuple[Experience, ...]
    projects: tuple[Project, ...]
    skill_categories: tuple[SkillCategory, ...]
    has_profile_summary: bool
    has_experiences: bool
    has_projects: bool
    has_skill_categories: bool
    has_cv_link: bool


def _end_date(stored_end_date: str | None, current: bool) -> str | None:
    """A current position always ends "Present", whatever date is stored."""
    return PRESENT if current else stored_end_date


def _timeline(start_date: str | None, end_date: str | None) -> str:
    if not is_present(start_date):
        return ""
    return f"{start_date}{TIMELINE_SEPARATOR}{end_date}"


EXPERIENCE_SPEC = RecordSpec(
    model=Experience,
    fields=(
        FieldSpec("company"),
        FieldSpec("role"),
        FieldSpec("start_date", "startDate"),
        FieldSpec("stored_end_date", "endDate"),
        FieldSpec("current", kind=FieldKind.BOOLEAN, default=False),
        FieldSpec("description"),
    ),
    lists=(ListSpec("technologies"),),
    derived=(
        DerivedSpec("end_date", ("stored_end_date", "current"), _end_date),
        DerivedSpec("timeline", ("start_date", "end_date"), _timeline),
        presence("has_technologies", "technologies"),
    ),
)

PROJECT_SPEC = RecordSpec(
    model=Project,
    fields=(
        FieldSpec("title"),
        FieldSpec("description"),
        FieldSpec("link"),
        FieldSpec("tech_stack", "techStack"),
    ),
    derived=(presence("has_link", "link"),),
)

SKILL_CATEGORY_SPEC = RecordSpec(
    model=SkillCategory,
    fields=(FieldSpec("category_name", "categoryName"),),
    lists=(ListSpec("skills"),),
    derived=(presence("has_skills", "skills"),),
)

NOW_SECTION_SPEC = ModelSpec(
    model=NowSection,
    fields=(
        FieldSpec("section_title", "sectionTitle", default="Now"),
        FieldSpec("experience_title", "experienceTitle", default="Experience"),
        FieldSpec("projects_title", "projectsTitle", default="Projects"),
        FieldSpec("profile_summary", "profileSummary"),
        FieldSpec("cv_link", "cvLink"),
        FieldSpec("cv_link_text", "cvLinkText", default="Download CV"),
    ),
    collections=(
        CollectionSpec("experiences", "experiences", EXPERIENCE_SPEC),
        CollectionSpec("projects", "projects", PROJECT_SPEC),
        CollectionSpec("skill_categories", "skillCategories", SKILL_CATEGORY_SPEC),
    ),
    derived=(
        presence("has_profile_summary", "profile_summary"),
        presence("has_experiences", "experiences"),
        presence("has_projects", "projects"),
        presence("has_skill_categories", "skill_categories"),
        presence("has_cv_link", "cv_link"),
    ),
)
