"""Interfaces the emulate command depends on."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from ionic1.commands.emulate.args import ParsedArgs


class PlatformInstaller(Protocol):
    def is_platform_installed(self, platform: str, app_directory: Path) -> bool: ...

    async def install_platform(self, platform: str) -> None: ...

    def are_plugins_installed(self, app_directory: Path) -> bool: ...

    async def install_plugins(self) -> None: ...


class ScriptRunner(Protocol):
    async def has_ionic_script(self, task: str) -> bool: ...

    async def run_ionic_script(self, task: str, argv: Sequence[object]) -> None: ...


class LiveReloadSetup(Protocol):
    async def setup_live_reload(self, parsed_args: ParsedArgs, app_directory: Path) -> Any: ...


class CommandExecutor(Protocol):
    async def exec_cordova_command(
        self, option_list: list[str], is_livereload: bool, serve_options: Any
    ) -> None: ...


class ConfigXmlEditor(Protocol):
    def set_config_xml(
        self,
        app_directory: Path,
        *,
        dev_server: str | None = None,
        reset_content: bool = False,
        error_when_not_found: bool = True,
    ) -> bool: ...


class Host(Protocol):
    def is_mac(self) -> bool: ...

    def cwd(self) -> Path: ...


class Log(Protocol):
    def info(self, message: object) -> None: ...

    def error(self, message: object) -> None: ...

    def debug(self, message: object) -> None: ...
