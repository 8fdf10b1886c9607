"""The emulate pipeline: prepare a Cordova project and launch it in an emulator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ionic1.commands.emulate.args import EMULATE_OPTIONS, ParsedArgs, normalize_raw_args
from ionic1.commands.emulate.collaborators import (
    CommandExecutor,
    ConfigXmlEditor,
    Host,
    LiveReloadSetup,
    Log,
    PlatformInstaller,
    ScriptRunner,
)
from ionic1.errors import Rejection
from ionic1.serve.livereload import load_serve_settings, serve_script_args

DEFAULT_PLATFORM = "ios"
IOS_REQUIRES_MAC = "✗ You cannot run iOS unless you are on Mac OSX."


@dataclass
class RunOutcome:
    """What happened to one emulate run. Returned, never raised."""

    completed: bool
    reason: Any = None


class EmulateCommand:
    """Install what the project is missing, then run ``cordova emulate``.

    Steps run strictly one after another:

    1. resolve the platform (default ``ios``, which needs a Mac host)
    2. add the cordova platform if ``platforms/<name>`` is missing
    3. add the default plugins if ``plugins/`` is missing
    4. run the project's ``ionic:build`` script if it has one
    5. with ``--livereload``, run ``ionic:serve`` if present and compute the
       live reload options; otherwise restore config.xml's start page
    6. hand ``["emulate", platform, ...]`` to cordova

    Any exception from steps 2-6 ends the run: errors are logged once,
    a Rejection (cordova's exit status) ends it quietly.
    """

    title = "emulate"
    summary = "Emulate an Ionic project on a simulator or emulator"
    options = EMULATE_OPTIONS

    def __init__(
        self,
        *,
        platforms: PlatformInstaller,
        scripts: ScriptRunner,
        livereload: LiveReloadSetup,
        executor: CommandExecutor,
        config_xml: ConfigXmlEditor,
        host: Host,
        log: Log,
    ) -> None:
        self.platforms = platforms
        self.scripts = scripts
        self.livereload = livereload
        self.executor = executor
        self.config_xml = config_xml
        self.host = host
        self.log = log

    async def run(self, context: Any, argv: ParsedArgs, raw_args: list[str]) -> RunOutcome:
        app_directory = self.host.cwd()
        platform = argv.platform or DEFAULT_PLATFORM

        if platform == "ios" and not self.host.is_mac():
            self.log.error(IOS_REQUIRES_MAC)
            return RunOutcome(completed=False, reason=IOS_REQUIRES_MAC)

        raw = normalize_raw_args(raw_args, platform, argv.platform)

        try:
            await self._emulate(argv, raw, platform, app_directory)
        except Rejection as e:
            return RunOutcome(completed=False, reason=e.reason)
        except Exception as e:
            self.log.error(e)
            return RunOutcome(completed=False, reason=e)
        return RunOutcome(completed=True)

    async def _emulate(
        self, argv: ParsedArgs, raw: list[str], platform: str, app_directory: Path
    ) -> None:
        if not self.platforms.is_platform_installed(platform, app_directory):
            await self.platforms.install_platform(platform)

        if not self.platforms.are_plugins_installed(app_directory):
            await self.platforms.install_plugins()

        if await self.scripts.has_ionic_script("build"):
            await self.scripts.run_ionic_script("build", raw[2:])

        is_livereload = argv.livereload
        serve_options: Any = True
        if is_livereload:
            if await self.scripts.has_ionic_script("serve"):
                settings = load_serve_settings(argv.options)
                await self.scripts.run_ionic_script("serve", serve_script_args(settings))
            serve_options = await self.livereload.setup_live_reload(argv, app_directory)
        else:
            # a previous live reload session may have left the dev server url behind
            self.config_xml.set_config_xml(
                app_directory, reset_content=True, error_when_not_found=False
            )

        option_list = [self.title, platform, *argv.passthrough]
        await self.executor.exec_cordova_command(option_list, is_livereload, serve_options)
