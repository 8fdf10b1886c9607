"""Running the cordova CLI with a prepared argument vector."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ionic1.cordova.config_xml import ConfigXml
from ionic1.cordova.platforms import check_cordova
from ionic1.errors import Rejection
from ionic1.helpers.console import Logger
from ionic1.helpers.subprocess import stream_cmd


class CordovaExecutor:
    """Runs ``cordova <argv>`` and cleans up after live reload sessions."""

    def __init__(
        self,
        log: Logger,
        *,
        cordova_bin: str = "cordova",
        config_xml: ConfigXml | None = None,
        app_directory: Path | None = None,
        restore_delay: float = 5.0,
    ) -> None:
        self.log = log
        self.cordova_bin = cordova_bin
        self.config_xml = config_xml or ConfigXml()
        self.app_directory = app_directory
        self.restore_delay = restore_delay

    async def exec_cordova_command(
        self, option_list: list[str], is_livereload: bool, serve_options: Any
    ) -> None:
        """Run cordova and wait for it to exit.

        Raises:
            CordovaError: If the cordova CLI is not installed.
            Rejection: With the exit status when cordova exits non-zero; its
                own stderr has already been printed.
        """
        returncode: int | None = None
        try:
            await asyncio.to_thread(check_cordova, self.cordova_bin)

            cmd = [self.cordova_bin, *option_list]
            self.log.debug(f"Executing cordova cli: {' '.join(option_list)}")
            returncode = await asyncio.to_thread(
                stream_cmd, cmd, on_stdout=self.log.info, on_stderr=self.log.error
            )
        finally:
            if is_livereload:
                await self._finish_livereload(serve_options, launched=returncode is not None)

        if returncode != 0:
            raise Rejection(returncode)

    async def _finish_livereload(self, serve_options: Any, *, launched: bool) -> None:
        """Write the original start page back into config.xml.

        Runs on every exit path of a live reload session; only a launched
        app gets the grace period before the reset.
        """
        try:
            if launched:
                dev_server = getattr(serve_options, "dev_server", None)
                if dev_server:
                    self.log.success(f"App is loading from {dev_server}")
                # the app needs a moment to pick up the dev server before the
                # original start page is written back
                await asyncio.sleep(self.restore_delay)
        finally:
            app_directory = self.app_directory or Path.cwd()
            self.config_xml.set_config_xml(
                app_directory, reset_content=True, error_when_not_found=False
            )
