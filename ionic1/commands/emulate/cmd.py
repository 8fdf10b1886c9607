"""CLI command for emulating a Cordova project."""

from __future__ import annotations

import asyncio
import os

import click

from ionic1.commands.emulate.args import EMULATE_OPTIONS, parse_argv
from ionic1.commands.emulate.command import EmulateCommand
from ionic1.helpers.console import Logger


def _options_epilog() -> str:
    lines = ["\b", "Options:"]
    for spec in EMULATE_OPTIONS.values():
        lines.append(f"  {spec.flags:<36} {spec.title}")
    return "\n".join(lines)


def build_emulate_command(log: Logger) -> EmulateCommand:
    """Wire EmulateCommand to the real cordova, npm and filesystem collaborators."""
    from ionic1.cordova.config_xml import ConfigXml
    from ionic1.cordova.executor import CordovaExecutor
    from ionic1.cordova.platforms import CordovaPlatforms
    from ionic1.helpers.host import HostEnvironment
    from ionic1.npm.scripts import NpmScripts
    from ionic1.serve.livereload import LiveReload

    cordova_bin = os.environ.get("IONIC1_CORDOVA_BIN", "cordova")
    npm_bin = os.environ.get("IONIC1_NPM_BIN", "npm")
    config_xml = ConfigXml()

    return EmulateCommand(
        platforms=CordovaPlatforms(log, cordova_bin=cordova_bin),
        scripts=NpmScripts(log, npm_bin=npm_bin),
        livereload=LiveReload(log, config_xml=config_xml),
        executor=CordovaExecutor(log, cordova_bin=cordova_bin, config_xml=config_xml),
        config_xml=config_xml,
        host=HostEnvironment(),
        log=log,
    )


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    epilog=_options_epilog(),
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def emulate(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Emulate an Ionic project on a simulator or emulator.

    Takes an optional PLATFORM (ios, android, ...) followed by options.
    The platform defaults to ios, which needs a Mac. Options cordova
    understands (--target, --release, ...) are passed through unchanged.
    """
    obj = ctx.obj or {}
    log = obj.get("log") or Logger()

    raw_args = ["emulate", *tokens]
    argv = parse_argv(raw_args)

    command = build_emulate_command(log)
    outcome = asyncio.run(command.run(obj, argv, raw_args))
    if not outcome.completed:
        ctx.exit(1)
