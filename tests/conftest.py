"""Shared test fixtures for ionic1 tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from ionic1.commands.emulate.command import EmulateCommand


@pytest.fixture
def app_directory() -> Path:
    return Path("/ionic/app/path")


@pytest.fixture
def host(app_directory: Path) -> MagicMock:
    host = MagicMock()
    host.cwd.return_value = app_directory
    host.is_mac.return_value = True
    return host


@pytest.fixture
def platforms() -> MagicMock:
    platforms = MagicMock()
    platforms.is_platform_installed.return_value = True
    platforms.are_plugins_installed.return_value = True
    platforms.install_platform = AsyncMock(return_value=None)
    platforms.install_plugins = AsyncMock(return_value=None)
    return platforms


@pytest.fixture
def scripts() -> MagicMock:
    scripts = MagicMock()
    scripts.has_ionic_script = AsyncMock(return_value=False)
    scripts.run_ionic_script = AsyncMock(return_value=None)
    return scripts


@pytest.fixture
def livereload() -> MagicMock:
    livereload = MagicMock()
    livereload.setup_live_reload = AsyncMock(return_value={"blah": "blah"})
    return livereload


@pytest.fixture
def executor() -> MagicMock:
    executor = MagicMock()
    executor.exec_cordova_command = AsyncMock(return_value=None)
    return executor


@pytest.fixture
def config_xml() -> MagicMock:
    config_xml = MagicMock()
    config_xml.set_config_xml.return_value = False
    return config_xml


@pytest.fixture
def log() -> MagicMock:
    return MagicMock()


@pytest.fixture
def command(
    platforms: MagicMock,
    scripts: MagicMock,
    livereload: MagicMock,
    executor: MagicMock,
    config_xml: MagicMock,
    host: MagicMock,
    log: MagicMock,
) -> EmulateCommand:
    return EmulateCommand(
        platforms=platforms,
        scripts=scripts,
        livereload=livereload,
        executor=executor,
        config_xml=config_xml,
        host=host,
        log=log,
    )
