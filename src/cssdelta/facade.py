"""Top-level entry points: compact, difference and merge CSS sources."""

from __future__ import annotations

import logging
from functools import reduce

from cssdelta.compactor import Compactor
from cssdelta.errors import UsageError
from cssdelta.model.selectors import get_all_selectors
from cssdelta.model.stylesheet import Stylesheet
from cssdelta.parser import CssParser

__all__ = ["compact", "from_source", "difference", "merge", "get_all_selectors"]

logger = logging.getLogger(__name__)


def compact(source: str, parser: CssParser | None = None) -> Stylesheet:
    """Compact a CSS string into a Stylesheet."""
    return Compactor(parser).compact(source)


def from_source(source: str, parser: CssParser | None = None) -> Stylesheet:
    """Alias of :func:`compact`."""
    return compact(source, parser=parser)


def _compact_all(sources: tuple[str, ...], parser: CssParser | None) -> list[Stylesheet]:
    if not sources:
        raise UsageError("Must supply at least one source")
    compactor = Compactor(parser)
    return [compactor.compact(source) for source in sources]


def difference(*sources: str, parser: CssParser | None = None) -> Stylesheet:
    """Return what the later sources add or change relative to the first.

    The sources after the first are merged left to right (later ones win on
    conflicting properties) and the result is diffed against the first.
    With a single source there is nothing to compare against, so a copy of
    its full content comes back.
    """
    base, *others = _compact_all(sources, parser)
    if not others:
        return Stylesheet().difference(base)
    others_merged = reduce(Stylesheet.merge, others)
    logger.debug("Diffing base against %d merged source(s)", len(others))
    return base.difference(others_merged)


def merge(*sources: str, parser: CssParser | None = None) -> Stylesheet:
    """Return the union of all sources; later sources win on conflicts."""
    first, *rest = _compact_all(sources, parser)
    return reduce(Stylesheet.merge, rest, first)
