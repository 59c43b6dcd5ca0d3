"""cssdelta model layer -- public type re-exports."""

from cssdelta.model.ruleset import RuleSet, content_hash
from cssdelta.model.selectors import composite_key, context_key_for, get_all_selectors
from cssdelta.model.stylesheet import Stylesheet

__all__ = [
    # ruleset
    "RuleSet",
    "content_hash",
    # stylesheet
    "Stylesheet",
    # selectors
    "get_all_selectors",
    "composite_key",
    "context_key_for",
]
