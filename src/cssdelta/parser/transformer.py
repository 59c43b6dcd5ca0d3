"""Lark Transformer that converts a CSS parse tree into CssNode objects."""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from cssdelta.parser.ast import CssNode, adopt
from cssdelta.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "css.lark"

# Comments inside a slice of source; quoted strings are matched first so
# their contents are left alone.
_COMMENT_OR_STRING_RE = re.compile(
    r"""("(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')|/\*[\s\S]*?\*/"""
)


def _clean(raw: str) -> str:
    """Drop comments and surrounding whitespace from a slice of source text."""
    return _COMMENT_OR_STRING_RE.sub(lambda m: m.group(1) or "", raw).strip()


class _Prelude(NamedTuple):
    text: str
    line: int
    column: int


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a tree of :class:`CssNode`.

    Needs the parsed *source*: selector, at-rule params and declaration text
    are cut from it rather than rebuilt from tokens, so their inner spacing
    and punctuation survive unchanged.
    """

    def __init__(self, source: str) -> None:
        super().__init__()
        self._source = source

    @v_args(meta=True)
    def prelude(self, meta, children: list[object]) -> _Prelude:
        text = _clean(self._source[meta.start_pos : meta.end_pos])
        return _Prelude(text, meta.line, meta.column)

    def declaration(self, items: list[_Prelude]) -> CssNode:
        prelude = items[0]
        prop, sep, value = prelude.text.partition(":")
        if not sep or not prop.strip():
            raise ParseError(
                f"Expected 'property: value', got {prelude.text!r}",
                line=prelude.line,
                column=prelude.column,
            )
        return CssNode(
            type="decl",
            prop=prop.strip(),
            value=value.strip(),
            line=prelude.line,
            column=prelude.column,
        )

    last_declaration = declaration

    def block(self, items: list[CssNode]) -> list[CssNode]:
        return list(items)

    def rule(self, items: list[object]) -> CssNode:
        prelude, children = items
        assert isinstance(prelude, _Prelude)
        node = CssNode(
            type="rule", selector=prelude.text, line=prelude.line, column=prelude.column
        )
        return adopt(node, children)  # type: ignore[arg-type]

    def at_rule(self, items: list[object]) -> CssNode:
        keyword = items[0]
        assert isinstance(keyword, Token)
        params = ""
        children: list[CssNode] = []
        for item in items[1:]:
            if isinstance(item, _Prelude):
                params = item.text
            elif isinstance(item, list):
                children = item
        node = CssNode(
            type="atrule",
            name=str(keyword)[1:],
            params=params,
            line=keyword.line,
            column=keyword.column,
        )
        return adopt(node, children)

    def start(self, items: list[CssNode]) -> CssNode:
        return adopt(CssNode(type="root"), list(items))


class LarkCssParser:
    """The default CSS front-end, built on a LALR lark grammar."""

    name = "lark"

    def __init__(self) -> None:
        self._lark = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            start="start",
            propagate_positions=True,
        )

    def parse(self, source: str) -> CssNode:
        try:
            tree = self._lark.parse(source)
        except UnexpectedInput as e:
            raise ParseError(str(e), line=e.line, column=e.column) from e
        try:
            return CssTransformer(source).transform(tree)
        except VisitError as e:
            # Errors raised inside transformer callbacks arrive wrapped.
            if isinstance(e.orig_exc, ParseError):
                raise e.orig_exc from e
            raise


def parse_css(source: str) -> CssNode:
    """Parse a CSS source string into a ``root`` CssNode."""
    return LarkCssParser().parse(source)
