"""
Unit tests for resume text extraction.

Tests extract_resume_text and section_text_parts from
atsift.contexts.document.extractor.
"""

import json
from pathlib import Path

import pytest

from atsift.contexts.document import Resume, SectionType, extract_resume_text
from atsift.contexts.document.extractor import SECTION_FIELD_EXTRACTORS, section_text_parts
from atsift.contexts.document.resume_data_structure import parse_section

FIXTURES_PATH = Path(__file__).resolve().parents[1] / "fixtures"

EXPECTED_CORPUS = (
    "Jordan Avery Full Stack Developer "
    "Summary Full stack engineer building React and Node.js applications on AWS. "
    "Experience Software Engineer Acme Corp Built REST API services with Python and PostgreSQL. "
    "Migrated deployments to Docker and Kubernetes "
    "Introduced CI/CD pipelines with GitHub Actions "
    "Projects Trailhead Hiking planner with offline maps TypeScript GraphQL Redis "
    "Skills JavaScript Django "
    "Education B.S. Computer Science State University Algorithms Databases "
    "Certifications AWS Certified Developer Amazon"
)


@pytest.fixture
def sample_resume():
    data = json.loads((FIXTURES_PATH / "sample_resume.json").read_text(encoding="utf-8"))
    return Resume.from_dict(data)


@pytest.mark.unit
class TestExtractResumeText:
    """Tests for extract_resume_text."""

    def test_fixture_corpus(self, sample_resume):
        assert extract_resume_text(sample_resume) == EXPECTED_CORPUS

    def test_disabled_section_excluded(self, sample_resume):
        corpus = extract_resume_text(sample_resume)
        assert "Kotlin" not in corpus
        assert "Volunteering" not in corpus

    def test_contact_details_excluded(self, sample_resume):
        corpus = extract_resume_text(sample_resume)
        assert "jordan@example.com" not in corpus
        assert "Portland" not in corpus

    def test_deterministic(self, sample_resume):
        assert extract_resume_text(sample_resume) == extract_resume_text(sample_resume)

    def test_empty_resume(self):
        assert extract_resume_text(Resume()) == ""

    def test_no_double_spaces_for_empty_fields(self):
        resume = Resume.from_dict(
            {
                "personalInfo": {"fullName": "Ana", "title": ""},
                "sections": [
                    {
                        "type": "experience",
                        "title": "",
                        "content": {
                            "experiences": [{"jobTitle": "Engineer", "company": "", "description": "Go"}]
                        },
                    }
                ],
            }
        )
        assert extract_resume_text(resume) == "Ana Engineer Go"

    def test_section_order_is_document_order(self):
        resume = Resume.from_dict(
            {
                "sections": [
                    {"type": "skills", "title": "Skills", "content": {"skills": [{"name": "Rust"}]}},
                    {"type": "summary", "title": "About", "content": {"summary": "Systems person"}},
                ]
            }
        )
        assert extract_resume_text(resume) == "Skills Rust About Systems person"


@pytest.mark.unit
class TestSectionTextParts:
    """Tests for per-section field extraction."""

    def test_every_section_type_has_extractor(self):
        assert set(SECTION_FIELD_EXTRACTORS) == set(SectionType)

    def test_experience_fields(self):
        section = parse_section(
            {
                "type": "experience",
                "title": "Work",
                "content": {
                    "experiences": [
                        {
                            "jobTitle": "Dev",
                            "company": "Initech",
                            "location": "Austin",
                            "description": "APIs",
                            "achievements": ["Cut latency", "Shipped v2"],
                        }
                    ]
                },
            }
        )
        assert section_text_parts(section) == [
            "Work",
            "Dev",
            "Initech",
            "APIs",
            "Cut latency",
            "Shipped v2",
        ]

    def test_project_fields_include_tech_stack(self):
        section = parse_section(
            {
                "type": "projects",
                "title": "Projects",
                "content": {
                    "projects": [
                        {"name": "Atlas", "description": "Maps", "techStack": ["Vue", "Vite"]}
                    ]
                },
            }
        )
        assert section_text_parts(section) == ["Projects", "Atlas", "Maps", "Vue", "Vite"]

    def test_skill_level_and_category_excluded(self):
        section = parse_section(
            {
                "type": "skills",
                "title": "Skills",
                "content": {"skills": [{"name": "SQL", "category": "databases", "level": "expert"}]},
            }
        )
        assert section_text_parts(section) == ["Skills", "SQL"]

    def test_education_fields(self):
        section = parse_section(
            {
                "type": "education",
                "title": "Education",
                "content": {
                    "education": [
                        {
                            "degree": "M.S. Statistics",
                            "institution": "Tech",
                            "gpa": "3.9",
                            "coursework": ["Bayesian Methods"],
                        }
                    ]
                },
            }
        )
        assert section_text_parts(section) == [
            "Education",
            "M.S. Statistics",
            "Tech",
            "Bayesian Methods",
        ]

    def test_certification_fields(self):
        section = parse_section(
            {
                "type": "certifications",
                "title": "Certs",
                "content": {
                    "certifications": [
                        {"name": "CKA", "issuer": "CNCF", "credentialId": "XYZ-123"}
                    ]
                },
            }
        )
        assert section_text_parts(section) == ["Certs", "CKA", "CNCF"]

    def test_custom_fields(self):
        section = parse_section(
            {
                "type": "custom",
                "title": "Talks",
                "content": {"custom": {"title": "ignored", "content": "PyData keynote"}},
            }
        )
        assert section_text_parts(section) == ["Talks", "PyData keynote"]
