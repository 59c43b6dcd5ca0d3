"""cssdelta CLI entry point: Click group with subcommands."""

import logging

import click

from cssdelta import __version__
from cssdelta.config import CssDeltaConfig
from cssdelta.parser import PARSERS


@click.group()
@click.version_option(version=__version__, prog_name="cssdelta")
@click.option(
    "--parser",
    "parser_name",
    type=click.Choice(sorted(PARSERS)),
    default=CssDeltaConfig.parser,
    show_default=True,
    help="CSS front-end used to read sources.",
)
@click.option("--encoding", default=CssDeltaConfig.encoding, show_default=True)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, parser_name: str, encoding: str, verbose: bool) -> None:
    """cssdelta - compact, diff and merge CSS stylesheets."""
    config = CssDeltaConfig(
        parser=parser_name,
        encoding=encoding,
        log_level="DEBUG" if verbose else CssDeltaConfig.log_level,
    )
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from cssdelta.cli.diff import diff  # noqa: E402
from cssdelta.cli.sheets import compact, merge, namespace  # noqa: E402
from cssdelta.cli.selectors import selectors  # noqa: E402

cli.add_command(compact)
cli.add_command(diff)
cli.add_command(merge)
cli.add_command(namespace)
cli.add_command(selectors)
