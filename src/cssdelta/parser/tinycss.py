"""CSS front-end backed by tinycss2."""

from __future__ import annotations

import tinycss2

from cssdelta.parser.ast import CssNode
from cssdelta.parser.errors import ParseError


def _serialize(tokens: list) -> str:
    return tinycss2.serialize([t for t in tokens if t.type != "comment"]).strip()


def _raise_parse_error(node) -> None:
    raise ParseError(
        f"{node.kind}: {node.message}", line=node.source_line, column=node.source_column
    )


class TinyCssParser:
    """Adapts tinycss2's component values to the CssNode tree.

    Every block body goes through ``parse_blocks_contents``, which yields
    declarations and nested rules alike, so any at-rule may hold rules
    without being listed anywhere.
    """

    name = "tinycss2"

    def parse(self, source: str) -> CssNode:
        root = CssNode(type="root")
        items = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
        for item in items:
            self._add_item(root, item)
        return root

    def _add_item(self, parent: CssNode, item) -> None:
        if item.type == "error":
            _raise_parse_error(item)
        elif item.type == "declaration":
            value = _serialize(item.value)
            if item.important:
                value += " !important"
            parent.append(
                CssNode(
                    type="decl",
                    prop=item.name,
                    value=value,
                    line=item.source_line,
                    column=item.source_column,
                )
            )
        elif item.type == "qualified-rule":
            node = CssNode(
                type="rule",
                selector=_serialize(item.prelude),
                line=item.source_line,
                column=item.source_column,
            )
            parent.append(node)
            self._add_block(node, item.content)
        elif item.type == "at-rule":
            node = CssNode(
                type="atrule",
                name=item.at_keyword,
                params=_serialize(item.prelude),
                line=item.source_line,
                column=item.source_column,
            )
            parent.append(node)
            if item.content is not None:
                self._add_block(node, item.content)

    def _add_block(self, parent: CssNode, content: list) -> None:
        items = tinycss2.parse_blocks_contents(
            content, skip_comments=True, skip_whitespace=True
        )
        for item in items:
            self._add_item(parent, item)
