"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssdelta.config import CssDeltaConfig
from cssdelta.errors import CssDeltaError
from cssdelta.model.stylesheet import Stylesheet

output_option = click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the stylesheet here instead of stdout.",
)


# Exit status for input errors; 1 is left to `diff --exit-code`.
ERROR_EXIT_CODE = 2


def read_sources(config: CssDeltaConfig, paths: tuple[str, ...]) -> list[str]:
    """Read each file as text; unreadable or undecodable files raise CssDeltaError."""
    sources = []
    for path in paths:
        try:
            sources.append(Path(path).read_text(encoding=config.encoding))
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise CssDeltaError(f"Cannot read {path}: {exc}") from exc
    return sources


def fail(exc: CssDeltaError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(ERROR_EXIT_CODE)


def emit(stylesheet: Stylesheet, output: str | None, encoding: str) -> None:
    """Write the rendered stylesheet to *output*, or stdout when unset."""
    text = str(stylesheet)
    if output is None:
        if text:
            click.echo(text)
        return
    Path(output).write_text(text + "\n" if text else "", encoding=encoding)
