"""cssdelta -- compact, diff and merge CSS at the selector/declaration level."""

__version__ = "0.1.0"

from cssdelta.compactor import Compactor  # noqa: E402
from cssdelta.config import CssDeltaConfig  # noqa: E402
from cssdelta.errors import CssDeltaError, InvalidArgumentError, UsageError  # noqa: E402
from cssdelta.facade import (  # noqa: E402
    compact,
    difference,
    from_source,
    get_all_selectors,
    merge,
)
from cssdelta.model import RuleSet, Stylesheet  # noqa: E402
from cssdelta.parser import ParseError, get_parser  # noqa: E402

__all__ = [
    "__version__",
    "compact",
    "from_source",
    "difference",
    "merge",
    "get_all_selectors",
    "Compactor",
    "Stylesheet",
    "RuleSet",
    "CssDeltaConfig",
    "get_parser",
    "CssDeltaError",
    "InvalidArgumentError",
    "UsageError",
    "ParseError",
]
