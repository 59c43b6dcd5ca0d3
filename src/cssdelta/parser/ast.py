"""The node tree every CSS front-end produces, and the front-end protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(eq=False)
class CssNode:
    """One node of a parsed stylesheet.

    ``type`` is ``"root"``, ``"rule"``, ``"atrule"`` or ``"decl"``.  Rule nodes
    carry the raw (possibly comma separated) ``selector``; at-rules carry
    ``name`` (without the ``@``) and ``params``; declarations carry ``prop``
    and ``value``.  ``parent`` links back to the containing node.
    """

    type: str
    selector: str = ""
    name: str = ""
    params: str = ""
    prop: str = ""
    value: str = ""
    nodes: list[CssNode] = field(default_factory=list)
    parent: CssNode | None = field(default=None, repr=False)
    line: int | None = None
    column: int | None = None

    def append(self, child: CssNode) -> None:
        child.parent = self
        self.nodes.append(child)


def adopt(parent: CssNode, children: list[CssNode]) -> CssNode:
    """Attach *children* to *parent* and return the parent."""
    for child in children:
        parent.append(child)
    return parent


class CssParser(Protocol):
    """A CSS front-end: turns source text into a ``root`` :class:`CssNode`."""

    def parse(self, source: str) -> CssNode: ...
