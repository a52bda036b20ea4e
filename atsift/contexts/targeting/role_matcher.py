"""
Role Matching

Scores a resume corpus against each role's curated vocabulary. A role's
score is the share of its keywords that occur as a case-insensitive
substring of the corpus:

    score = round_half_up(matched / len(role_keywords) * 100)

Substring containment (rather than token lookup) lets multi-word curated
entries such as "Spring Boot" count even though the tokenizer never emits them.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from atsift.contexts.targeting.logger import log_role_ranking
from atsift.contexts.targeting.role_dictionary import RoleDictionary, resolve_dictionary
from atsift.utils.scoring import percentage


@dataclass(frozen=True)
class RoleMatch:
    """
    Coverage of one role's vocabulary.

    Attributes:
        role: Role (or experience level) name
        score: Integer percentage of the role's keywords found, 0-100
        matched_keywords: Role keywords found in the corpus, in dictionary order
        total_keywords: Size of the flattened role keyword list
    """

    role: str
    score: int
    matched_keywords: Tuple[str, ...] = ()
    total_keywords: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "score": self.score}


def score_keywords(corpus: str, name: str, keywords: Sequence[str]) -> RoleMatch:
    """
    Score one keyword list against a corpus.

    An empty keyword list scores 0.

    Args:
        corpus: Resume corpus
        name: Name reported in the result
        keywords: Flattened keyword list (duplicates count separately)

    Returns:
        RoleMatch
    """
    lowered = corpus.lower()
    matched = [keyword for keyword in keywords if keyword.lower() in lowered]
    return RoleMatch(
        role=name,
        score=percentage(len(matched), len(keywords)),
        matched_keywords=tuple(matched),
        total_keywords=len(keywords),
    )


def rank_matches(matches: Iterable[RoleMatch]) -> List[RoleMatch]:
    """Sort by descending score, ties broken alphabetically by name."""
    return sorted(matches, key=lambda m: (-m.score, m.role))


def match_roles(
    corpus: str,
    dictionary: Optional[RoleDictionary] = None,
    roles: Optional[Iterable[str]] = None,
) -> List[RoleMatch]:
    """
    Rank roles by how much of their vocabulary the corpus covers.

    Args:
        corpus: Resume corpus (from extract_resume_text)
        dictionary: Role dictionary (defaults to the packaged one)
        roles: Restrict scoring to these role names (default: every role)

    Returns:
        RoleMatch list sorted by descending score, then role name

    Raises:
        InvalidRoleError: If any requested role is not in the dictionary
    """
    dictionary = resolve_dictionary(dictionary)
    selected = dictionary.role_names if roles is None else list(roles)

    # Resolve every role first so an unknown name fails before any scoring
    keyword_lists = {role: dictionary.keywords_for_role(role) for role in selected}

    ranked = rank_matches(
        score_keywords(corpus, role, keywords) for role, keywords in keyword_lists.items()
    )
    log_role_ranking(ranked)
    return ranked


def match_experience_levels(
    corpus: str, dictionary: Optional[RoleDictionary] = None
) -> List[RoleMatch]:
    """
    Rank seniority levels (junior, mid, senior, management) by vocabulary coverage.

    Uses the same substring scoring and ordering as match_roles().

    Returns:
        RoleMatch list (role holds the level name); empty if the dictionary
        defines no experience levels
    """
    levels: Mapping[str, Sequence[str]] = resolve_dictionary(dictionary).experience_levels
    return rank_matches(score_keywords(corpus, level, keywords) for level, keywords in levels.items())
