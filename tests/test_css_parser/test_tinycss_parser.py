"""Tests for the tinycss2 CSS front-end."""

import pytest

from cssdelta.errors import InvalidArgumentError
from cssdelta.parser import CssNode, LarkCssParser, ParseError, TinyCssParser, get_parser


def _decls(node: CssNode) -> list[tuple[str, str]]:
    return [(n.prop, n.value) for n in node.nodes if n.type == "decl"]


class TestTinyCssParser:
    def test_single_rule(self):
        root = TinyCssParser().parse("a { color: purple; text-align: center; }")
        (rule,) = root.nodes
        assert rule.selector == "a"
        assert rule.parent is root
        assert _decls(rule) == [("color", "purple"), ("text-align", "center")]

    def test_selector_comments_dropped(self):
        root = TinyCssParser().parse("p.foo /* x */, p.bar { margin: 0 }")
        assert root.nodes[0].selector.replace(" ", "") == "p.foo,p.bar"

    def test_media_rules_nested(self):
        root = TinyCssParser().parse("@media (max-width: 600px) { a { color: blue } }")
        media = root.nodes[0]
        assert (media.type, media.name, media.params) == ("atrule", "media", "(max-width: 600px)")
        assert media.nodes[0].selector == "a"
        assert media.nodes[0].parent is media

    def test_keyframes_hold_rules(self):
        root = TinyCssParser().parse("@keyframes spin { from { top: 0 } to { top: 10px } }")
        assert [n.selector for n in root.nodes[0].nodes] == ["from", "to"]

    def test_any_at_rule_may_hold_rules(self):
        root = TinyCssParser().parse("@starting-style { .x { opacity: 0 } }")
        starting = root.nodes[0]
        assert (starting.name, starting.params) == ("starting-style", "")
        (rule,) = starting.nodes
        assert rule.selector == ".x"
        assert _decls(rule) == [("opacity", "0")]

    def test_unknown_at_rule_holds_rules(self):
        root = TinyCssParser().parse("@view-transition-group main { .card { color: red } }")
        assert [n.selector for n in root.nodes[0].nodes] == [".card"]

    def test_rules_and_declarations_mixed_in_at_rule(self):
        root = TinyCssParser().parse("@page :first { margin: 1in; @top-left { content: \"x\" } }")
        page = root.nodes[0]
        assert _decls(page) == [("margin", "1in")]
        assert page.nodes[1].name == "top-left"

    def test_font_face_holds_declarations(self):
        root = TinyCssParser().parse("@font-face { font-family: 'Icons'; }")
        assert _decls(root.nodes[0]) == [("font-family", "'Icons'")]

    def test_statement_at_rule(self):
        root = TinyCssParser().parse('@import "theme.css";')
        assert root.nodes[0].nodes == []

    def test_important_appended(self):
        root = TinyCssParser().parse("a { color: red !important }")
        assert _decls(root.nodes[0]) == [("color", "red !important")]

    def test_invalid_declaration(self):
        with pytest.raises(ParseError):
            TinyCssParser().parse("a { color red; }")


class TestGetParser:
    def test_default_is_lark(self):
        assert isinstance(get_parser(), LarkCssParser)

    def test_by_name(self):
        assert isinstance(get_parser("tinycss2"), TinyCssParser)

    def test_unknown_name(self):
        with pytest.raises(InvalidArgumentError, match="Unknown parser"):
            get_parser("postcss")
