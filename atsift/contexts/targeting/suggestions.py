"""
Keyword Integration Suggestions

Renders the fixed set of "where to put this keyword" templates for a single
keyword. Templates come from the keyword data file and are rendered with
Jinja2; the keyword is the only variable.
"""

from functools import lru_cache
from typing import List, Optional, Sequence

from jinja2 import Environment, StrictUndefined, Template

from atsift.contexts.targeting.role_dictionary import RoleDictionary, resolve_dictionary

# Plain-text output: no HTML escaping of quotes or ampersands in keywords
_ENV = Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=False)


def compile_templates(sources: Sequence[str]) -> List[Template]:
    """Compile suggestion template strings."""
    return [_ENV.from_string(source) for source in sources]


class SuggestionEngine:
    """
    Renders integration suggestions for a keyword.

    Templates are compiled once per engine. Rendering is pure: output depends
    only on the keyword.
    """

    def __init__(self, templates: Optional[Sequence[str]] = None, dictionary: Optional[RoleDictionary] = None):
        """
        Args:
            templates: Template strings using {{ keyword }}; defaults to the
                       dictionary's suggestion_templates
            dictionary: Source of default templates (defaults to the packaged one)
        """
        if templates is None:
            templates = resolve_dictionary(dictionary).suggestion_templates
        self.sources = tuple(templates)
        self._templates = compile_templates(self.sources)

    def suggest(self, keyword: str) -> List[str]:
        """
        Render every template for keyword.

        Args:
            keyword: Keyword to integrate (inserted verbatim)

        Returns:
            One suggestion per template, in template order
        """
        keyword = "" if keyword is None else str(keyword)
        return [template.render(keyword=keyword) for template in self._templates]


@lru_cache(maxsize=1)
def get_default_engine() -> SuggestionEngine:
    """Engine built from the packaged templates (immutable, built once)."""
    return SuggestionEngine()


def get_integration_suggestions(keyword: str, engine: Optional[SuggestionEngine] = None) -> List[str]:
    """
    Get the templated integration suggestions for a keyword.

    Example:
        >>> get_integration_suggestions("Docker")[0]
        'Add "Docker" to your skills section if you have experience with it'
    """
    return (engine or get_default_engine()).suggest(keyword)
