"""CLI command: cssdelta diff -- show what changed relative to a base file."""

from __future__ import annotations

import sys

import click

from cssdelta import facade
from cssdelta.cli.common import emit, fail, output_option, read_sources
from cssdelta.config import CssDeltaConfig
from cssdelta.errors import CssDeltaError
from cssdelta.parser import get_parser


@click.command()
@click.argument("base", type=click.Path(exists=True, dir_okay=False))
@click.argument("others", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@output_option
@click.option(
    "--exit-code",
    is_flag=True,
    help="Exit with status 1 when the difference is not empty (errors exit 2).",
)
@click.pass_obj
def diff(
    config: CssDeltaConfig,
    base: str,
    others: tuple[str, ...],
    output: str | None,
    exit_code: bool,
) -> None:
    """Print the rules OTHERS add or change relative to BASE.

    OTHERS are merged in order before comparing, so later files win on
    conflicting properties.  Rules only BASE has are not reported.
    """
    try:
        sources = read_sources(config, (base, *others))
        result = facade.difference(*sources, parser=get_parser(config.parser))
    except CssDeltaError as exc:
        fail(exc)
    emit(result, output, config.encoding)
    if exit_code and not result.is_empty():
        sys.exit(1)
