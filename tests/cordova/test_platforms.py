"""Tests for cordova platform and plugin management."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ionic1.cordova.platforms import DEFAULT_PLUGINS, CordovaPlatforms, check_cordova
from ionic1.errors import CordovaError


class TestCheckCordova:
    def test_cordova_not_found(self) -> None:
        with patch("shutil.which", return_value=None):
            with pytest.raises(CordovaError, match="cordova not found"):
                check_cordova()

    def test_cordova_found(self) -> None:
        with patch("shutil.which", return_value="/usr/local/bin/cordova"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = subprocess.CompletedProcess(
                    args=[], returncode=0, stdout="12.0.0\n", stderr=""
                )
                assert check_cordova() == "12.0.0"

    def test_cordova_found_but_fails(self) -> None:
        with patch("shutil.which", return_value="/usr/local/bin/cordova"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = subprocess.CompletedProcess(
                    args=[], returncode=1, stdout="", stderr="node: not found"
                )
                with pytest.raises(CordovaError, match="node: not found"):
                    check_cordova()


class TestChecks:
    def test_platform_installed(self, tmp_path: Path) -> None:
        (tmp_path / "platforms" / "android").mkdir(parents=True)
        platforms = CordovaPlatforms(MagicMock())
        assert platforms.is_platform_installed("android", tmp_path)
        assert not platforms.is_platform_installed("ios", tmp_path)

    def test_plugins_installed(self, tmp_path: Path) -> None:
        platforms = CordovaPlatforms(MagicMock())
        assert not platforms.are_plugins_installed(tmp_path)
        (tmp_path / "plugins").mkdir()
        assert platforms.are_plugins_installed(tmp_path)


class TestInstall:
    @pytest.mark.asyncio
    async def test_install_platform(self) -> None:
        log = MagicMock()
        platforms = CordovaPlatforms(log, cordova_bin="cordova")
        with patch("ionic1.cordova.platforms.check_cordova"):
            with patch("ionic1.cordova.platforms.stream_cmd", return_value=0) as mock_stream:
                await platforms.install_platform("android")

        assert mock_stream.call_args.args[0] == ["cordova", "platform", "add", "android"]
        log.success.assert_called_once_with("√ Installed platform android")

    @pytest.mark.asyncio
    async def test_install_platform_failure(self) -> None:
        platforms = CordovaPlatforms(MagicMock())
        with patch("ionic1.cordova.platforms.check_cordova"):
            with patch("ionic1.cordova.platforms.stream_cmd", return_value=1):
                with pytest.raises(CordovaError, match=r"Adding platform ios failed \(exit 1\)"):
                    await platforms.install_platform("ios")

    @pytest.mark.asyncio
    async def test_install_plugins_one_at_a_time(self) -> None:
        platforms = CordovaPlatforms(MagicMock())
        with patch("ionic1.cordova.platforms.check_cordova"):
            with patch("ionic1.cordova.platforms.stream_cmd", return_value=0) as mock_stream:
                await platforms.install_plugins()

        cmds = [c.args[0] for c in mock_stream.call_args_list]
        assert cmds == [["cordova", "plugin", "add", "--save", p] for p in DEFAULT_PLUGINS]

    @pytest.mark.asyncio
    async def test_install_plugins_stops_at_first_failure(self) -> None:
        platforms = CordovaPlatforms(MagicMock())
        with patch("ionic1.cordova.platforms.check_cordova"):
            with patch("ionic1.cordova.platforms.stream_cmd", side_effect=[0, 1, 0]) as mock_stream:
                with pytest.raises(CordovaError, match=DEFAULT_PLUGINS[1]):
                    await platforms.install_plugins()
        assert mock_stream.call_count == 2

    @pytest.mark.asyncio
    async def test_missing_cordova(self) -> None:
        platforms = CordovaPlatforms(MagicMock())
        with patch("shutil.which", return_value=None):
            with patch("ionic1.cordova.platforms.stream_cmd") as mock_stream:
                with pytest.raises(CordovaError, match="npm install -g cordova"):
                    await platforms.install_platform("android")
        mock_stream.assert_not_called()
