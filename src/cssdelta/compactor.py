"""Compactor: flattens a parsed CSS tree into a Stylesheet."""

from __future__ import annotations

import logging

from cssdelta.model.stylesheet import Stylesheet
from cssdelta.parser import CssNode, CssParser, LarkCssParser

logger = logging.getLogger(__name__)


class Compactor:
    """Builds one :class:`Stylesheet` per CSS source.

    Rules nested in at-rules are pulled out into a single flat list; each
    rule node keeps its ``parent`` link, which is where its context key comes
    from.
    """

    def __init__(self, parser: CssParser | None = None) -> None:
        self.parser = parser or LarkCssParser()

    def flatten(self, root: CssNode) -> list[CssNode]:
        """Return every ``rule`` node under *root* in source order."""
        rules: list[CssNode] = []
        stack = list(reversed(root.nodes))
        while stack:
            node = stack.pop()
            if node.type == "rule":
                rules.append(node)
            elif node.type == "atrule":
                stack.extend(reversed(node.nodes))
        return rules

    def compact(self, source: str) -> Stylesheet:
        """Parse *source* and compact it into a new Stylesheet."""
        root = self.parser.parse(source)
        rules = self.flatten(root)
        stylesheet = Stylesheet()
        for node in rules:
            stylesheet.add_node(node)
        logger.debug(
            "Compacted %d rule nodes into %d rule sets", len(rules), len(stylesheet)
        )
        return stylesheet
