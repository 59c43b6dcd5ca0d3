"""CLI command: cssdelta selectors -- split a selector list."""

from __future__ import annotations

import click

from cssdelta.cli.common import fail
from cssdelta.errors import CssDeltaError
from cssdelta.model.selectors import get_all_selectors


@click.command()
@click.argument("selector_text")
def selectors(selector_text: str) -> None:
    """Print each selector of SELECTOR_TEXT on its own line."""
    try:
        pieces = get_all_selectors(selector_text)
    except CssDeltaError as exc:
        fail(exc)
    for piece in pieces:
        click.echo(piece)
