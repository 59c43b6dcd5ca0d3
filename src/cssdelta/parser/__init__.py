from cssdelta.errors import InvalidArgumentError
from cssdelta.parser.ast import CssNode, CssParser
from cssdelta.parser.errors import ParseError
from cssdelta.parser.tinycss import TinyCssParser
from cssdelta.parser.transformer import LarkCssParser, parse_css

PARSERS = {
    LarkCssParser.name: LarkCssParser,
    TinyCssParser.name: TinyCssParser,
}


def get_parser(name: str = "lark") -> CssParser:
    """Return a new CSS front-end registered under *name*."""
    try:
        factory = PARSERS[name]
    except KeyError:
        known = ", ".join(sorted(PARSERS))
        raise InvalidArgumentError(
            "parser", f"Unknown parser {name!r} (expected one of: {known})"
        ) from None
    return factory()


__all__ = [
    "CssNode",
    "CssParser",
    "LarkCssParser",
    "TinyCssParser",
    "ParseError",
    "PARSERS",
    "get_parser",
    "parse_css",
]
