"""CLI entry point for ionic1."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from ionic1.commands.emulate.cmd import emulate
from ionic1.helpers.console import Logger, verbose_from_env

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="ionic1")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output (also IONIC1_VERBOSE=1)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Build tooling for Ionic 1 / Cordova hybrid apps."""
    ctx.ensure_object(dict)
    ctx.obj["log"] = Logger(verbose=verbose or verbose_from_env())


cli.add_command(emulate)


if __name__ == "__main__":
    cli()
