"""CLI commands that print a single stylesheet: compact, merge, namespace."""

from __future__ import annotations

import click

from cssdelta import facade
from cssdelta.cli.common import emit, fail, output_option, read_sources
from cssdelta.config import CssDeltaConfig
from cssdelta.errors import CssDeltaError
from cssdelta.parser import get_parser

_css_file = click.Path(exists=True, dir_okay=False)


@click.command()
@click.argument("cssfile", type=_css_file)
@output_option
@click.pass_obj
def compact(config: CssDeltaConfig, cssfile: str, output: str | None) -> None:
    """Compact a CSS file: one block per distinct set of declarations."""
    try:
        (source,) = read_sources(config, (cssfile,))
        sheet = facade.compact(source, parser=get_parser(config.parser))
    except CssDeltaError as exc:
        fail(exc)
    emit(sheet, output, config.encoding)


@click.command()
@click.argument("cssfiles", nargs=-1, required=True, type=_css_file)
@output_option
@click.pass_obj
def merge(config: CssDeltaConfig, cssfiles: tuple[str, ...], output: str | None) -> None:
    """Merge CSS files; later files win on conflicting properties."""
    try:
        sources = read_sources(config, cssfiles)
        sheet = facade.merge(*sources, parser=get_parser(config.parser))
    except CssDeltaError as exc:
        fail(exc)
    emit(sheet, output, config.encoding)


@click.command()
@click.argument("ns")
@click.argument("cssfile", type=_css_file)
@output_option
@click.pass_obj
def namespace(config: CssDeltaConfig, ns: str, cssfile: str, output: str | None) -> None:
    """Scope every selector of CSSFILE under the class or id NS."""
    try:
        (source,) = read_sources(config, (cssfile,))
        sheet = facade.compact(source, parser=get_parser(config.parser)).namespace(ns)
    except CssDeltaError as exc:
        fail(exc)
    emit(sheet, output, config.encoding)
