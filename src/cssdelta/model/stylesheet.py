"""Stylesheet: rule sets keyed by (context, selector) plus the diff/merge algebra."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import TYPE_CHECKING

from cssdelta.errors import InvalidArgumentError
from cssdelta.model.ruleset import RuleSet
from cssdelta.model.selectors import composite_key, context_key_for, get_all_selectors

if TYPE_CHECKING:
    from cssdelta.parser.ast import CssNode

__all__ = ["Stylesheet"]

logger = logging.getLogger(__name__)

# "html" as a whole leading token: matches "html", "html:hover", "html > body"
# but not "html-card".
_HTML_PREFIX_RE = re.compile(r"^html(?![\w-])")

Declarations = Iterable[tuple[str, str]]


def _namespace_selector(selector: str, ns: str) -> str:
    if _HTML_PREFIX_RE.match(selector):
        return f"html{ns}{selector[4:]}"
    return f"{ns} {selector}"


def _indent(text: str) -> str:
    return "\n".join(f"\t{line}" for line in text.split("\n"))


class Stylesheet:
    """An ordered collection of :class:`RuleSet` objects.

    There is at most one rule set per (context key, selector) pair.  Keys keep
    insertion order, which fixes the order of rendered output.

    :meth:`difference` and :meth:`merge` always return a new stylesheet.
    :meth:`namespace` is the exception: it rewrites this stylesheet in place
    and returns it.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RuleSet] = {}

    # --- building -------------------------------------------------------------

    def add_rule_set(
        self, selector: str, context_key: str, declarations: Declarations
    ) -> RuleSet:
        """Apply *declarations* to the rule set for (*context_key*, *selector*).

        The rule set is created on first use.  Later values for a property
        overwrite earlier ones.
        """
        if not selector:
            raise InvalidArgumentError("selector")
        pairs = list(declarations)
        for prop, value in pairs:
            if not prop:
                raise InvalidArgumentError("property")
            if not value:
                raise InvalidArgumentError("value")

        key = composite_key(selector, context_key)
        rule_set = self._entries.get(key)
        if rule_set is None:
            rule_set = RuleSet(selector, context_key)
            self._entries[key] = rule_set
            logger.debug("Created rule set %r", key)
        for prop, value in pairs:
            rule_set.add_rule(prop, value)
        return rule_set

    def add_node(self, node: CssNode) -> None:
        """Add a parsed ``rule`` node, one rule set per selector in its list.

        Only ``decl`` children are used; comments and nested rules are skipped.
        """
        selectors = get_all_selectors(node.selector)
        if not all(selectors):
            raise InvalidArgumentError("selector")
        declarations = [
            (child.prop, child.value) for child in node.nodes if child.type == "decl"
        ]
        context_key = context_key_for(node)
        for selector in selectors:
            self.add_rule_set(selector, context_key, declarations)

    # --- algebra --------------------------------------------------------------

    def difference(self, other: Stylesheet | None) -> Stylesheet:
        """Return what *other* adds or changes relative to this stylesheet.

        Keys only *other* has are copied whole.  Shared keys keep just the
        properties that are new or whose value differs, and are dropped when
        nothing differs.  Keys only this stylesheet has never appear.
        """
        if other is None:
            raise InvalidArgumentError("other")
        result = Stylesheet()
        for key, other_set in other._entries.items():
            base_set = self._entries.get(key)
            if base_set is None:
                result.add_rule_set(other_set.selector, other_set.context_key, other_set.items())
                continue
            changed = [
                (prop, value)
                for prop, value in other_set.items()
                if base_set.get_rule(prop) != value
            ]
            if changed:
                result.add_rule_set(base_set.selector, base_set.context_key, changed)
        logger.debug(
            "Difference of %d against %d rule sets: %d changed",
            len(self),
            len(other),
            len(result),
        )
        return result

    def merge(self, other: Stylesheet | None) -> Stylesheet:
        """Return the union of both stylesheets; *other* wins on conflicts."""
        if other is None:
            raise InvalidArgumentError("other")
        result = Stylesheet()
        for rule_set in chain(self, other):
            result.add_rule_set(rule_set.selector, rule_set.context_key, rule_set.items())
        logger.debug("Merged %d and %d rule sets into %d", len(self), len(other), len(result))
        return result

    def namespace(self, ns: str) -> Stylesheet:
        """Scope every selector under *ns*, in place.

        A bare name is treated as a class (``"app"`` -> ``".app"``).  Selectors
        led by ``html`` get the namespace attached to it (``html.app``); all
        others are prefixed as descendants (``.app body``).  Returns ``self``.
        """
        if not ns:
            raise InvalidArgumentError("ns")
        if not ns.startswith((".", "#")):
            ns = "." + ns

        entries: dict[str, RuleSet] = {}
        for rule_set in self._entries.values():
            rule_set.selector = _namespace_selector(rule_set.selector, ns)
            entries[composite_key(rule_set.selector, rule_set.context_key)] = rule_set
        self._entries = entries
        logger.debug("Namespaced %d rule sets under %r", len(entries), ns)
        return self

    # --- access ---------------------------------------------------------------

    def get(self, selector: str, context_key: str = "") -> RuleSet | None:
        return self._entries.get(composite_key(selector, context_key))

    def keys(self) -> list[str]:
        return list(self._entries)

    def is_empty(self) -> bool:
        """True when rendering would produce an empty string."""
        return not any(len(rule_set) for rule_set in self._entries.values())

    def __getitem__(self, key: str) -> RuleSet:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[RuleSet]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    # --- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        contexts: dict[str, list[RuleSet]] = {}
        for rule_set in self._entries.values():
            contexts.setdefault(rule_set.context_key, []).append(rule_set)

        rendered = [self._render_context(key, members) for key, members in contexts.items()]
        return "\n\n".join(block for block in rendered if block)

    @staticmethod
    def _render_context(context_key: str, members: list[RuleSet]) -> str:
        # Rule sets with identical declarations collapse into one block.
        by_hash: dict[str, list[RuleSet]] = {}
        for rule_set in members:
            by_hash.setdefault(rule_set.content_hash, []).append(rule_set)

        blocks = []
        for group in by_hash.values():
            first = group[0]
            if not len(first):
                continue
            selectors = ", ".join(rule_set.selector for rule_set in group)
            blocks.append(f"{selectors} {{\n{first.body()}\n}}")
        if not blocks:
            return ""

        content = "\n\n".join(blocks)
        if not context_key:
            return content
        return f"@{context_key} {{\n{_indent(content)}\n}}"

    def __repr__(self) -> str:
        return f"Stylesheet(rule_sets={len(self._entries)})"
