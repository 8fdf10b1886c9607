"""Detection and execution of ``ionic:<task>`` scripts from package.json."""

from __future__ import annotations

import asyncio
import json
import shutil
from collections.abc import Sequence
from pathlib import Path

from ionic1.errors import ScriptError
from ionic1.helpers.console import Logger
from ionic1.helpers.subprocess import stream_cmd

SCRIPT_PREFIX = "ionic:"


def read_package_scripts(app_directory: Path) -> dict[str, str]:
    """Return the "scripts" table of package.json, or {} if there is none."""
    pkg_json = Path(app_directory) / "package.json"
    try:
        pkg = json.loads(pkg_json.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    scripts = pkg.get("scripts") if isinstance(pkg, dict) else None
    return scripts if isinstance(scripts, dict) else {}


class NpmScripts:
    """Runs project-defined ionic:build / ionic:serve hooks through npm."""

    def __init__(
        self,
        log: Logger,
        *,
        app_directory: Path | None = None,
        npm_bin: str = "npm",
    ) -> None:
        self.log = log
        self.app_directory = app_directory
        self.npm_bin = npm_bin

    def _directory(self) -> Path:
        return self.app_directory or Path.cwd()

    async def has_ionic_script(self, task: str) -> bool:
        scripts = await asyncio.to_thread(read_package_scripts, self._directory())
        return bool(scripts.get(SCRIPT_PREFIX + task))

    async def run_ionic_script(self, task: str, argv: Sequence[object]) -> None:
        script = SCRIPT_PREFIX + task
        # npm.cmd on Windows
        npm = shutil.which(self.npm_bin) or self.npm_bin
        cmd = [npm, "run", script]
        if argv:
            cmd += ["--", *(str(a) for a in argv)]

        self.log.debug(f"$ {' '.join(cmd)}")
        returncode = await asyncio.to_thread(
            stream_cmd,
            cmd,
            cwd=self._directory(),
            on_stdout=self.log.info,
            on_stderr=self.log.error,
        )
        if returncode != 0:
            raise ScriptError(f"npm run {script} failed (exit {returncode})")
