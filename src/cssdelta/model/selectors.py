"""Selector splitting and the composite keys used to index rule sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cssdelta.errors import InvalidArgumentError

if TYPE_CHECKING:
    from cssdelta.parser.ast import CssNode

__all__ = ["get_all_selectors", "composite_key", "context_key_for"]

KEY_SEPARATOR = "|"


def get_all_selectors(selector_text: str | None) -> list[str]:
    """Split a selector list like ``".foo, span.bar"`` into its selectors.

    Pieces are trimmed and returned in source order; duplicates are kept.
    """
    if not selector_text:
        raise InvalidArgumentError("selector")
    return [piece.strip() for piece in selector_text.split(",")]


def composite_key(selector: str, context_key: str = "") -> str:
    """Return the stylesheet key for *selector* inside *context_key*."""
    if context_key:
        return f"{context_key}{KEY_SEPARATOR}{selector}"
    return selector


def context_key_for(node: CssNode) -> str:
    """Derive the context key of a rule node from its parent at-rule.

    ``@media (max-width: 600px)`` gives ``"media (max-width: 600px)"``;
    rules whose parent is not an at-rule live in the top-level context ``""``.
    """
    parent = node.parent
    if parent is None or parent.type != "atrule":
        return ""
    return f"{parent.name} {parent.params}".strip()
