"""
Resume text extraction.

Flattens the enabled content of a Resume into a single plain-text corpus,
the unit of analysis for every keyword operation.

Corpus layout (fields joined by single spaces, empty fields skipped):
    full name, headline,
    then for each enabled section in document order:
        section title, followed by the type-specific text fields
"""

from typing import Callable, Dict, Iterator, List

from atsift.contexts.document.logger import log_extraction_result
from atsift.contexts.document.resume_data_structure import (
    CertificationsSection,
    CustomSection,
    EducationSection,
    ExperienceSection,
    ProjectsSection,
    Resume,
    Section,
    SectionType,
    SkillsSection,
    SummarySection,
)


def _summary_fields(section: SummarySection) -> Iterator[str]:
    yield section.summary


def _experience_fields(section: ExperienceSection) -> Iterator[str]:
    for exp in section.experiences:
        yield exp.job_title
        yield exp.company
        yield exp.description
        yield from exp.achievements


def _project_fields(section: ProjectsSection) -> Iterator[str]:
    for proj in section.projects:
        yield proj.name
        yield proj.description
        yield from proj.tech_stack


def _skill_fields(section: SkillsSection) -> Iterator[str]:
    for skill in section.skills:
        yield skill.name


def _education_fields(section: EducationSection) -> Iterator[str]:
    for edu in section.education:
        yield edu.degree
        yield edu.institution
        yield from edu.coursework


def _certification_fields(section: CertificationsSection) -> Iterator[str]:
    for cert in section.certifications:
        yield cert.name
        yield cert.issuer


def _custom_fields(section: CustomSection) -> Iterator[str]:
    yield section.custom.content


SECTION_FIELD_EXTRACTORS: Dict[SectionType, Callable[[Section], Iterator[str]]] = {
    SectionType.SUMMARY: _summary_fields,
    SectionType.EXPERIENCE: _experience_fields,
    SectionType.PROJECTS: _project_fields,
    SectionType.SKILLS: _skill_fields,
    SectionType.EDUCATION: _education_fields,
    SectionType.CERTIFICATIONS: _certification_fields,
    SectionType.CUSTOM: _custom_fields,
}

# Every SectionType needs an extractor
_missing = set(SectionType) - set(SECTION_FIELD_EXTRACTORS)
if _missing:
    raise RuntimeError(f"No text extractor for section types: {sorted(t.value for t in _missing)}")


def section_text_parts(section: Section) -> List[str]:
    """
    Collect the non-empty text fields of one section, title first.

    Args:
        section: Any section variant (enabled flag is not checked here)

    Returns:
        List of text fields in extraction order
    """
    parts = [section.title]
    parts.extend(SECTION_FIELD_EXTRACTORS[section.section_type](section))
    return [part for part in parts if part]


def extract_resume_text(resume: Resume) -> str:
    """
    Flatten a resume's enabled content into one corpus string.

    Deterministic for a fixed document; disabled sections contribute nothing.

    Args:
        resume: Resume document

    Returns:
        Corpus with fields separated by single spaces (empty string if no text)
    """
    parts = [resume.personal_info.full_name, resume.personal_info.title]
    enabled = resume.enabled_sections
    for section in enabled:
        parts.extend(section_text_parts(section))

    corpus = " ".join(part for part in parts if part)
    log_extraction_result(len(resume.sections), len(enabled), len(corpus))
    return corpus
