"""
Document Context

Responsibilities:
- Represents the editor's resume document as typed section variants
- Converts between the editor's JSON tree and the typed model
- Flattens enabled content into the plain-text corpus used for analysis

Owns: Resume structure representation, corpus extraction
Never: Mutates the document or scores keywords
"""

from atsift.contexts.document.exceptions import InvalidResumeStructureError
from atsift.contexts.document.extractor import extract_resume_text
from atsift.contexts.document.resume_data_structure import (
    Certification,
    CertificationsSection,
    CustomContent,
    CustomSection,
    Education,
    EducationSection,
    ExperienceSection,
    PersonalInfo,
    Project,
    ProjectsSection,
    Resume,
    SectionType,
    Skill,
    SkillsSection,
    SummarySection,
    WorkExperience,
)

__all__ = [
    # Extraction
    "extract_resume_text",
    # Document model
    "Resume",
    "PersonalInfo",
    "SectionType",
    "SummarySection",
    "ExperienceSection",
    "ProjectsSection",
    "SkillsSection",
    "EducationSection",
    "CertificationsSection",
    "CustomSection",
    "WorkExperience",
    "Project",
    "Skill",
    "Education",
    "Certification",
    "CustomContent",
    # Errors
    "InvalidResumeStructureError",
]
