"""RuleSet: the declarations of a single selector within one context."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from cssdelta.errors import InvalidArgumentError

__all__ = ["RuleSet", "content_hash"]


def content_hash(declarations: Mapping[str, str]) -> str:
    """Return the grouping key for a declaration mapping.

    Properties are sorted and joined as ``prop:value|``.  Two rule sets render
    as one block exactly when their hashes match; the value is not meant to be
    stored or compared across runs.
    """
    return "".join(f"{prop}:{declarations[prop]}|" for prop in sorted(declarations))


class RuleSet:
    """The property -> value declarations for one selector.

    *selector* is a single selector (never a comma list) and *context_key*
    names the enclosing at-rule, or is ``""`` at the top level.  Both are
    fixed once created, except that :meth:`Stylesheet.namespace` rewrites the
    selector of the rule sets it owns.
    """

    def __init__(self, selector: str, context_key: str = "") -> None:
        self.selector = selector
        self.context_key = context_key
        self._rules: dict[str, str] = {}
        self._hash = ""

    @property
    def declarations(self) -> Mapping[str, str]:
        """Read-only view of the declarations in insertion order."""
        return MappingProxyType(self._rules)

    @property
    def content_hash(self) -> str:
        return self._hash

    def add_rule(self, prop: str, value: str) -> None:
        """Set *prop* to *value*, overwriting any earlier value."""
        if not prop:
            raise InvalidArgumentError("property")
        if not value:
            raise InvalidArgumentError("value")
        changed = self._rules.get(prop) != value
        self._rules[prop] = value
        if changed:
            self._hash = content_hash(self._rules)

    def get_rule(self, prop: str) -> str | None:
        """Return the value for *prop*, or ``None`` when it is not set."""
        return self._rules.get(prop)

    def get_hash(self) -> str:
        return self._hash

    def items(self) -> list[tuple[str, str]]:
        return list(self._rules.items())

    def body(self) -> str:
        """Render the declarations as tab-indented ``prop: value;`` lines."""
        return "\n".join(f"\t{prop}: {value};" for prop, value in self._rules.items())

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __str__(self) -> str:
        if not self._rules:
            return ""
        return f"{self.selector} {{\n{self.body()}\n}}"

    def __repr__(self) -> str:
        return (
            f"RuleSet(selector={self.selector!r}, context_key={self.context_key!r}, "
            f"declarations={len(self._rules)})"
        )
