"""
ATSIFT - Applicant Tracking System keyword Insight For Tuning

A deterministic keyword intelligence engine for resumes. Turns a structured
resume document and an optional job description into keyword frequency,
density, role coverage, and job-match signals.

Architecture:
- Document Context: Resume document model and text extraction
- Targeting Context: Role dictionaries, density, role matching, suggestions
- Intake Context: Job description comparison
"""

from loguru import logger

__version__ = "0.1.0"

# Library stays silent until a caller runs atsift.utils.logger.setup_logger()
logger.disable("atsift")
