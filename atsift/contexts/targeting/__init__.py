"""
Targeting Context

Responsibilities:
- Holds the curated role dictionary (static, data-driven)
- Classifies keyword density (low / good / high)
- Scores resume coverage of each role's vocabulary
- Produces templated keyword integration suggestions
- Aggregates the resume keyword analysis snapshot

Owns: Role dictionary, density policy, role scoring, suggestions
Never: Parses job descriptions (see Intake context)
"""

from atsift.contexts.targeting.analyzer import (
    KeywordAnalysis,
    KeywordCount,
    analyze_corpus,
    analyze_resume_keywords,
)
from atsift.contexts.targeting.density import (
    DensityStatus,
    DensityThresholds,
    KeywordDensity,
    analyze_keyword_density,
    role_keyword_density,
)
from atsift.contexts.targeting.exceptions import InvalidRoleError, KeywordDataError
from atsift.contexts.targeting.role_dictionary import (
    RoleDictionary,
    get_default_dictionary,
    get_suggested_keywords,
)
from atsift.contexts.targeting.role_matcher import (
    RoleMatch,
    match_experience_levels,
    match_roles,
)
from atsift.contexts.targeting.suggestions import SuggestionEngine, get_integration_suggestions

__all__ = [
    # Aggregate analysis
    "analyze_resume_keywords",
    "analyze_corpus",
    "KeywordAnalysis",
    "KeywordCount",
    # Density
    "analyze_keyword_density",
    "role_keyword_density",
    "KeywordDensity",
    "DensityStatus",
    "DensityThresholds",
    # Role dictionary and matching
    "RoleDictionary",
    "get_default_dictionary",
    "get_suggested_keywords",
    "match_roles",
    "match_experience_levels",
    "RoleMatch",
    # Suggestions
    "SuggestionEngine",
    "get_integration_suggestions",
    # Errors
    "InvalidRoleError",
    "KeywordDataError",
]
