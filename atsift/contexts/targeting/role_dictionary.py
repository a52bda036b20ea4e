"""
Role Dictionary

Static catalog of curated keyword lists grouped by professional role and
category. The data lives in atsift/data/keywords.yaml so the vocabulary can
be updated without touching any matching logic; an alternative file can be
selected with the ATSIFT_KEYWORDS_PATH environment variable.
"""

import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from atsift.contexts.targeting.exceptions import InvalidRoleError, KeywordDataError
from atsift.contexts.targeting.logger import _log_debug

load_dotenv()
DEFAULT_KEYWORDS_PATH = Path(__file__).resolve().parents[2] / "data" / "keywords.yaml"
KEYWORDS_PATH = Path(os.getenv("ATSIFT_KEYWORDS_PATH", str(DEFAULT_KEYWORDS_PATH)))

CategoryMap = Mapping[str, Tuple[str, ...]]


def _freeze_categories(categories: Mapping[str, Sequence[str]]) -> CategoryMap:
    """Copy a category -> keywords mapping into an immutable view."""
    return MappingProxyType(
        {str(name): tuple(str(kw) for kw in (keywords or [])) for name, keywords in categories.items()}
    )


class RoleDictionary:
    """
    Read-only mapping of role name -> category -> canonical keywords.

    Role order follows the data file. Keywords keep their display case;
    all matching against them is case-insensitive.

    Attributes:
        role_names: Role names in data-file order
        experience_levels: Seniority level -> keywords
        suggestion_templates: Jinja2 templates for integration suggestions
        data_path: Source file, if loaded from disk
    """

    def __init__(
        self,
        roles: Mapping[str, Mapping[str, Sequence[str]]],
        experience_levels: Optional[Mapping[str, Sequence[str]]] = None,
        suggestion_templates: Optional[Sequence[str]] = None,
        data_path: Optional[Path] = None,
    ):
        """
        Initialize dictionary from plain mappings.

        Args:
            roles: Role name -> category name -> keywords
            experience_levels: Level name -> keywords
            suggestion_templates: Templates rendered by the suggestion engine
            data_path: Where the data came from (for error messages)
        """
        self._roles = MappingProxyType(
            {str(role): _freeze_categories(categories or {}) for role, categories in roles.items()}
        )
        self.experience_levels = _freeze_categories(experience_levels or {})
        self.suggestion_templates = tuple(suggestion_templates or ())
        self.data_path = data_path
        self._all_keywords = frozenset(
            keyword.lower()
            for categories in self._roles.values()
            for keywords in categories.values()
            for keyword in keywords
        )

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], data_path: Optional[Path] = None) -> "RoleDictionary":
        """
        Build a dictionary from the keyword data structure.

        Args:
            data: Dict with "roles" and optional "experience_levels" and
                  "suggestion_templates" keys
            data_path: Source file for error messages

        Raises:
            KeywordDataError: If "roles" is missing or not a mapping of mappings
        """
        roles = data.get("roles")
        if not isinstance(roles, Mapping):
            raise KeywordDataError("Keyword data must define a 'roles' mapping", data_path)
        for role, categories in roles.items():
            if categories is not None and not isinstance(categories, Mapping):
                raise KeywordDataError(
                    f"Role {role!r} must map category names to keyword lists", data_path
                )

        templates = data.get("suggestion_templates") or []
        if not isinstance(templates, list):
            raise KeywordDataError("'suggestion_templates' must be a list", data_path)

        return cls(
            roles=roles,
            experience_levels=data.get("experience_levels") or {},
            suggestion_templates=templates,
            data_path=data_path,
        )

    @classmethod
    def from_file(cls, path: Path) -> "RoleDictionary":
        """
        Load a dictionary from a YAML (or JSON) keyword data file.

        A data file must carry its own "suggestion_templates" list.

        Raises:
            KeywordDataError: If "roles" or "suggestion_templates" is missing or malformed
        """
        _log_debug(f"Loading keyword data from {path}")
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        if not isinstance(data, dict):
            raise KeywordDataError("Keyword data must be a mapping", path)
        dictionary = cls.from_dict(data, data_path=path)
        if "suggestion_templates" not in data:
            raise KeywordDataError("Keyword data must define 'suggestion_templates'", path)
        return dictionary

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    @property
    def role_names(self) -> Tuple[str, ...]:
        return tuple(self._roles)

    def has_role(self, role: str) -> bool:
        return role in self._roles

    def categories(self, role: str) -> CategoryMap:
        """
        Get the category -> keywords mapping for a role.

        Raises:
            InvalidRoleError: If role is not in the dictionary
        """
        try:
            return self._roles[role]
        except KeyError:
            raise InvalidRoleError(role, self.role_names) from None

    def keywords_for_role(self, role: str) -> List[str]:
        """
        Flatten all category lists of a role, in category order.

        Duplicates across categories are kept.

        Raises:
            InvalidRoleError: If role is not in the dictionary
        """
        return [keyword for keywords in self.categories(role).values() for keyword in keywords]

    def all_keywords(self) -> frozenset:
        """Lowercased union of every keyword across all roles and categories."""
        return self._all_keywords

    def is_curated(self, keyword: str) -> bool:
        """Check whether a (case-insensitive) keyword appears anywhere in the dictionary."""
        return keyword.lower() in self._all_keywords

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data copy of the dictionary (inverse of from_dict)."""
        return {
            "roles": {
                role: {name: list(keywords) for name, keywords in categories.items()}
                for role, categories in self._roles.items()
            },
            "experience_levels": {
                level: list(keywords) for level, keywords in self.experience_levels.items()
            },
            "suggestion_templates": list(self.suggestion_templates),
        }

    def __contains__(self, role: str) -> bool:
        return self.has_role(role)

    def __len__(self) -> int:
        return len(self._roles)


@lru_cache(maxsize=None)
def _load_dictionary(path: str) -> RoleDictionary:
    return RoleDictionary.from_file(Path(path))


def get_default_dictionary() -> RoleDictionary:
    """
    Get the dictionary loaded from KEYWORDS_PATH.

    The file is read once per path; RoleDictionary is immutable, so the
    loaded instance is shared.
    """
    return _load_dictionary(str(KEYWORDS_PATH))


def resolve_dictionary(dictionary: Optional[RoleDictionary] = None) -> RoleDictionary:
    """Return dictionary, or the default one when None is given."""
    return get_default_dictionary() if dictionary is None else dictionary


def get_suggested_keywords(role: str, dictionary: Optional[RoleDictionary] = None) -> List[str]:
    """
    Get the flattened keyword list for a role.

    Args:
        role: Role name (e.g., "frontend")
        dictionary: Dictionary to use (defaults to get_default_dictionary())

    Returns:
        Keywords in category order, duplicates kept

    Raises:
        InvalidRoleError: If role is not in the dictionary
    """
    return resolve_dictionary(dictionary).keywords_for_role(role)
