"""Checks and installs for Cordova platforms and plugins."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ionic1.errors import CordovaError
from ionic1.helpers.console import Logger
from ionic1.helpers.subprocess import run_cmd, stream_cmd

DEFAULT_PLUGINS: tuple[str, ...] = (
    "cordova-plugin-device",
    "cordova-plugin-console",
    "cordova-plugin-whitelist",
    "cordova-plugin-splashscreen",
    "cordova-plugin-statusbar",
    "ionic-plugin-keyboard",
)


def check_cordova(cordova_bin: str = "cordova") -> str:
    """Verify that the cordova CLI is installed and runs.

    Returns the reported version. Raises CordovaError with installation
    instructions if not found.
    """
    if shutil.which(cordova_bin) is None:
        raise CordovaError(
            f"{cordova_bin} not found. Install the Cordova CLI:\n"
            "  npm install -g cordova"
        )
    try:
        result = run_cmd([cordova_bin, "--version"], "cordova --version", timeout=60)
    except RuntimeError as e:
        raise CordovaError(str(e))
    return result.stdout.strip()


class CordovaPlatforms:
    """Platform and plugin management for the project in the current directory."""

    def __init__(
        self,
        log: Logger,
        *,
        cordova_bin: str = "cordova",
        plugins: tuple[str, ...] = DEFAULT_PLUGINS,
    ) -> None:
        self.log = log
        self.cordova_bin = cordova_bin
        self.plugins = plugins

    def is_platform_installed(self, platform: str, app_directory: Path) -> bool:
        return (Path(app_directory) / "platforms" / platform).is_dir()

    def are_plugins_installed(self, app_directory: Path) -> bool:
        return (Path(app_directory) / "plugins").is_dir()

    async def install_platform(self, platform: str) -> None:
        self.log.warn(
            f"• You're trying to build for {platform} but don't have the platform installed yet."
        )
        self.log.info(f"∆ Installing {platform} for you.")
        await self._cordova(["platform", "add", platform], f"Adding platform {platform}")
        self.log.success(f"√ Installed platform {platform}")

    async def install_plugins(self) -> None:
        # cordova rewrites config.xml and package.json per plugin, so one at a time
        for plugin in self.plugins:
            self.log.warn(f"Installing {plugin}")
            await self._cordova(["plugin", "add", "--save", plugin], f"Adding plugin {plugin}")

    async def _cordova(self, args: list[str], description: str) -> None:
        await asyncio.to_thread(check_cordova, self.cordova_bin)
        cmd = [self.cordova_bin, *args]
        self.log.debug(f"$ {' '.join(cmd)}")
        returncode = await asyncio.to_thread(
            stream_cmd, cmd, on_stdout=self.log.info, on_stderr=self.log.error
        )
        if returncode != 0:
            raise CordovaError(f"{description} failed (exit {returncode})")
