"""
Resume Document Structure

Defines the structured representation of a resume as produced by the editor.
This structure is the interface between the (external) editing layer and the
keyword engine: the editor owns and mutates it, the engine only reads it.

Sections form a tagged union: one dataclass per SectionType, each carrying
its own typed payload. The editor's JSON tree (camelCase keys) is converted
with Resume.from_dict() and back with Resume.to_dict().
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from atsift.contexts.document.exceptions import InvalidResumeStructureError


class SectionType(str, Enum):
    """Closed set of resume section types."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"
    EDUCATION = "education"
    CERTIFICATIONS = "certifications"
    CUSTOM = "custom"


@dataclass(frozen=True)
class PersonalInfo:
    """Contact details and headline shown at the top of the resume."""

    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""


@dataclass(frozen=True)
class WorkExperience:
    """
    A single job entry.

    Attributes:
        job_title: Position held
        company: Employer name
        description: Free-text role description
        achievements: Ordered achievement bullets
    """

    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    achievements: List[str] = field(default_factory=list)
    id: str = ""


@dataclass(frozen=True)
class Project:
    """A project entry with its technology stack."""

    name: str = ""
    description: str = ""
    tech_stack: List[str] = field(default_factory=list)
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    url: str = ""
    github_url: str = ""
    id: str = ""


@dataclass(frozen=True)
class Skill:
    """A skill with its display name, category and proficiency level."""

    name: str = ""
    category: str = "other"
    level: str = "intermediate"
    id: str = ""


@dataclass(frozen=True)
class Education:
    """An education entry."""

    degree: str = ""
    institution: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    coursework: List[str] = field(default_factory=list)
    id: str = ""


@dataclass(frozen=True)
class Certification:
    """A certification entry."""

    name: str = ""
    issuer: str = ""
    issue_date: str = ""
    expiry_date: str = ""
    credential_id: str = ""
    url: str = ""
    id: str = ""


@dataclass(frozen=True)
class CustomContent:
    """Free-text body of a custom section."""

    title: str = ""
    content: str = ""
    id: str = ""


# ============================================================================
# Section variants
# ============================================================================


@dataclass(frozen=True)
class ResumeSection:
    """
    Fields shared by every section variant.

    Attributes:
        title: Section heading as displayed
        enabled: Disabled sections are ignored by all analysis
        order: Display order recorded by the editor (list order is authoritative)
        id: Editor identifier
    """

    title: str = ""
    enabled: bool = True
    order: int = 0
    id: str = ""

    section_type = None  # type: Optional[SectionType]


@dataclass(frozen=True)
class SummarySection(ResumeSection):
    summary: str = ""

    section_type = SectionType.SUMMARY


@dataclass(frozen=True)
class ExperienceSection(ResumeSection):
    experiences: List[WorkExperience] = field(default_factory=list)

    section_type = SectionType.EXPERIENCE


@dataclass(frozen=True)
class ProjectsSection(ResumeSection):
    projects: List[Project] = field(default_factory=list)

    section_type = SectionType.PROJECTS


@dataclass(frozen=True)
class SkillsSection(ResumeSection):
    skills: List[Skill] = field(default_factory=list)

    section_type = SectionType.SKILLS


@dataclass(frozen=True)
class EducationSection(ResumeSection):
    education: List[Education] = field(default_factory=list)

    section_type = SectionType.EDUCATION


@dataclass(frozen=True)
class CertificationsSection(ResumeSection):
    certifications: List[Certification] = field(default_factory=list)

    section_type = SectionType.CERTIFICATIONS


@dataclass(frozen=True)
class CustomSection(ResumeSection):
    custom: CustomContent = field(default_factory=CustomContent)

    section_type = SectionType.CUSTOM


Section = Union[
    SummarySection,
    ExperienceSection,
    ProjectsSection,
    SkillsSection,
    EducationSection,
    CertificationsSection,
    CustomSection,
]


# ============================================================================
# JSON tree conversion helpers
# ============================================================================


def _text(data: Dict[str, Any], key: str) -> str:
    """Read an optional text field, treating None and missing as empty."""
    value = data.get(key)
    return "" if value is None else str(value)


def _text_list(data: Dict[str, Any], key: str) -> List[str]:
    """Read an optional list of strings, dropping None entries."""
    values = data.get(key) or []
    return [str(value) for value in values if value is not None]


def _records(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Read an optional list of objects, skipping anything that isn't a mapping."""
    return [record for record in (data.get(key) or []) if isinstance(record, dict)]


def _parse_experience(data: Dict[str, Any]) -> WorkExperience:
    return WorkExperience(
        job_title=_text(data, "jobTitle"),
        company=_text(data, "company"),
        location=_text(data, "location"),
        start_date=_text(data, "startDate"),
        end_date=_text(data, "endDate"),
        current=bool(data.get("current", False)),
        description=_text(data, "description"),
        achievements=_text_list(data, "achievements"),
        id=_text(data, "id"),
    )


def _parse_project(data: Dict[str, Any]) -> Project:
    return Project(
        name=_text(data, "name"),
        description=_text(data, "description"),
        tech_stack=_text_list(data, "techStack"),
        start_date=_text(data, "startDate"),
        end_date=_text(data, "endDate"),
        current=bool(data.get("current", False)),
        url=_text(data, "url"),
        github_url=_text(data, "githubUrl"),
        id=_text(data, "id"),
    )


def _parse_skill(data: Dict[str, Any]) -> Skill:
    return Skill(
        name=_text(data, "name"),
        category=_text(data, "category") or "other",
        level=_text(data, "level") or "intermediate",
        id=_text(data, "id"),
    )


def _parse_education(data: Dict[str, Any]) -> Education:
    return Education(
        degree=_text(data, "degree"),
        institution=_text(data, "institution"),
        location=_text(data, "location"),
        start_date=_text(data, "startDate"),
        end_date=_text(data, "endDate"),
        gpa=_text(data, "gpa"),
        coursework=_text_list(data, "coursework"),
        id=_text(data, "id"),
    )


def _parse_certification(data: Dict[str, Any]) -> Certification:
    return Certification(
        name=_text(data, "name"),
        issuer=_text(data, "issuer"),
        issue_date=_text(data, "issueDate"),
        expiry_date=_text(data, "expiryDate"),
        credential_id=_text(data, "credentialId"),
        url=_text(data, "url"),
        id=_text(data, "id"),
    )


def _parse_custom(data: Dict[str, Any]) -> CustomContent:
    custom = data.get("custom") or {}
    if isinstance(custom, str):
        return CustomContent(content=custom)
    if not isinstance(custom, dict):
        raise InvalidResumeStructureError("Custom section content must be an object or text")
    return CustomContent(
        title=_text(custom, "title"),
        content=_text(custom, "content"),
        id=_text(custom, "id"),
    )


# Builds the variant-specific keyword arguments from a section's content dict
_CONTENT_PARSERS: Dict[SectionType, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    SectionType.SUMMARY: lambda c: {"summary": _text(c, "summary")},
    SectionType.EXPERIENCE: lambda c: {
        "experiences": [_parse_experience(r) for r in _records(c, "experiences")]
    },
    SectionType.PROJECTS: lambda c: {"projects": [_parse_project(r) for r in _records(c, "projects")]},
    SectionType.SKILLS: lambda c: {"skills": [_parse_skill(r) for r in _records(c, "skills")]},
    SectionType.EDUCATION: lambda c: {
        "education": [_parse_education(r) for r in _records(c, "education")]
    },
    SectionType.CERTIFICATIONS: lambda c: {
        "certifications": [_parse_certification(r) for r in _records(c, "certifications")]
    },
    SectionType.CUSTOM: lambda c: {"custom": _parse_custom(c)},
}

SECTION_CLASSES: Dict[SectionType, type] = {
    SectionType.SUMMARY: SummarySection,
    SectionType.EXPERIENCE: ExperienceSection,
    SectionType.PROJECTS: ProjectsSection,
    SectionType.SKILLS: SkillsSection,
    SectionType.EDUCATION: EducationSection,
    SectionType.CERTIFICATIONS: CertificationsSection,
    SectionType.CUSTOM: CustomSection,
}


def parse_section(data: Dict[str, Any]) -> Section:
    """
    Convert one editor section object into its typed variant.

    Args:
        data: Section dict with "type", "title", "enabled", "order", "content"

    Returns:
        Section variant matching data["type"]

    Raises:
        InvalidResumeStructureError: If the section is not a mapping or its type is unknown
    """
    if not isinstance(data, dict):
        raise InvalidResumeStructureError(
            f"Section must be an object, got: {type(data).__name__}"
        )

    raw_type = data.get("type")
    try:
        section_type = SectionType(raw_type)
    except ValueError:
        valid = ", ".join(t.value for t in SectionType)
        raise InvalidResumeStructureError(
            f"Unknown section type: {raw_type!r} (expected one of: {valid})"
        ) from None

    content = data.get("content") or {}
    if not isinstance(content, dict):
        raise InvalidResumeStructureError(
            f"Content of {section_type.value} section must be an object"
        )

    try:
        order = int(data.get("order") or 0)
    except (TypeError, ValueError):
        raise InvalidResumeStructureError(
            f"Order of {section_type.value} section must be an integer, got: {data.get('order')!r}"
        ) from None

    return SECTION_CLASSES[section_type](
        title=_text(data, "title"),
        enabled=bool(data.get("enabled", True)),
        order=order,
        id=_text(data, "id"),
        **_CONTENT_PARSERS[section_type](content),
    )


def _section_content_dict(section: Section) -> Dict[str, Any]:
    """Convert a section variant's payload back to the editor's content dict."""
    if isinstance(section, SummarySection):
        return {"summary": section.summary}
    if isinstance(section, ExperienceSection):
        return {
            "experiences": [
                {
                    "id": exp.id,
                    "jobTitle": exp.job_title,
                    "company": exp.company,
                    "location": exp.location,
                    "startDate": exp.start_date,
                    "endDate": exp.end_date,
                    "current": exp.current,
                    "description": exp.description,
                    "achievements": list(exp.achievements),
                }
                for exp in section.experiences
            ]
        }
    if isinstance(section, ProjectsSection):
        return {
            "projects": [
                {
                    "id": proj.id,
                    "name": proj.name,
                    "description": proj.description,
                    "techStack": list(proj.tech_stack),
                    "startDate": proj.start_date,
                    "endDate": proj.end_date,
                    "current": proj.current,
                    "url": proj.url,
                    "githubUrl": proj.github_url,
                }
                for proj in section.projects
            ]
        }
    if isinstance(section, SkillsSection):
        return {
            "skills": [
                {"id": s.id, "name": s.name, "category": s.category, "level": s.level}
                for s in section.skills
            ]
        }
    if isinstance(section, EducationSection):
        return {
            "education": [
                {
                    "id": edu.id,
                    "degree": edu.degree,
                    "institution": edu.institution,
                    "location": edu.location,
                    "startDate": edu.start_date,
                    "endDate": edu.end_date,
                    "gpa": edu.gpa,
                    "coursework": list(edu.coursework),
                }
                for edu in section.education
            ]
        }
    if isinstance(section, CertificationsSection):
        return {
            "certifications": [
                {
                    "id": cert.id,
                    "name": cert.name,
                    "issuer": cert.issuer,
                    "issueDate": cert.issue_date,
                    "expiryDate": cert.expiry_date,
                    "credentialId": cert.credential_id,
                    "url": cert.url,
                }
                for cert in section.certifications
            ]
        }
    return {
        "custom": {
            "id": section.custom.id,
            "title": section.custom.title,
            "content": section.custom.content,
        }
    }


# ============================================================================
# Resume document
# ============================================================================


@dataclass(frozen=True)
class Resume:
    """
    Complete resume document.

    Attributes:
        personal_info: Name, headline and contact details
        sections: Sections in display order
        id: Editor identifier
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    sections: List[Section] = field(default_factory=list)
    id: str = ""

    @property
    def enabled_sections(self) -> List[Section]:
        """Sections that contribute to analysis, in document order."""
        return [section for section in self.sections if section.enabled]

    def get_sections(self, section_type: SectionType) -> List[Section]:
        """Get all sections of a given type, in document order."""
        return [s for s in self.sections if s.section_type == section_type]

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resume":
        """
        Build a Resume from the editor's JSON tree.

        Missing optional fields degrade to empty values. Layout, template
        and timestamp fields are ignored.

        Args:
            data: Resume dict (camelCase keys, e.g. "personalInfo", "sections")

        Returns:
            Resume instance

        Raises:
            InvalidResumeStructureError: If the tree or personalInfo is not a mapping,
                sections is not a list, or a section is malformed
        """
        if not isinstance(data, dict):
            raise InvalidResumeStructureError(
                f"Resume must be an object, got: {type(data).__name__}"
            )

        info = data.get("personalInfo") or {}
        if not isinstance(info, dict):
            raise InvalidResumeStructureError("Resume 'personalInfo' must be an object")
        personal_info = PersonalInfo(
            full_name=_text(info, "fullName"),
            title=_text(info, "title"),
            email=_text(info, "email"),
            phone=_text(info, "phone"),
            location=_text(info, "location"),
            linkedin=_text(info, "linkedin"),
            github=_text(info, "github"),
            portfolio=_text(info, "portfolio"),
        )

        raw_sections = data.get("sections") or []
        if not isinstance(raw_sections, list):
            raise InvalidResumeStructureError("Resume 'sections' must be a list")

        return cls(
            personal_info=personal_info,
            sections=[parse_section(section) for section in raw_sections],
            id=_text(data, "id"),
        )

    @classmethod
    def from_file(cls, path: Path) -> "Resume":
        """
        Load a Resume from a JSON or YAML file.

        Text is taken literally: "${...}" in a description is not treated as
        an interpolation.

        Args:
            path: Path to exported resume file

        Returns:
            Resume instance

        Raises:
            InvalidResumeStructureError: If the file is not valid JSON/YAML or
                does not describe a resume
        """
        try:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
        except (yaml.YAMLError, OmegaConfBaseException) as e:
            raise InvalidResumeStructureError(f"Cannot parse resume file {path}: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the editor's camelCase JSON tree."""
        info = self.personal_info
        return {
            "id": self.id,
            "personalInfo": {
                "fullName": info.full_name,
                "title": info.title,
                "email": info.email,
                "phone": info.phone,
                "location": info.location,
                "linkedin": info.linkedin,
                "github": info.github,
                "portfolio": info.portfolio,
            },
            "sections": [
                {
                    "id": section.id,
                    "type": section.section_type.value,
                    "title": section.title,
                    "enabled": section.enabled,
                    "order": section.order,
                    "content": _section_content_dict(section),
                }
                for section in self.sections
            ],
        }
