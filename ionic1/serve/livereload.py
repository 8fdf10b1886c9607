"""Live reload settings for apps running in an emulator."""

from __future__ import annotations

import asyncio
import socket
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from ionic1.cordova.config_xml import ConfigXml
from ionic1.errors import LiveReloadError
from ionic1.helpers.console import Logger

if TYPE_CHECKING:
    from ionic1.commands.emulate.args import ParsedArgs

DEFAULT_HTTP_PORT = 8100
DEFAULT_LIVE_RELOAD_PORT = 35729
DEFAULT_SERVE_ADDRESS = "0.0.0.0"


class ServeSettings(BaseModel):
    address: str | None = None
    port: int = Field(default=DEFAULT_HTTP_PORT, ge=1, le=65535)
    livereload_port: int = Field(default=DEFAULT_LIVE_RELOAD_PORT, ge=1, le=65535)
    console_logs: bool = False
    server_logs: bool = False


class LiveReloadOptions(BaseModel):
    app_directory: str
    address: str
    port: int
    livereload_port: int
    console_logs: bool = False
    server_logs: bool = False
    run_livereload: bool = True
    launch_browser: bool = False
    is_platform_serve: bool = True

    @property
    def dev_server(self) -> str:
        return f"http://{self.address}:{self.port}"


def load_serve_settings(options: Mapping[str, Any]) -> ServeSettings:
    """Build serve settings from parsed CLI options, ignoring unset values."""
    values = {
        "address": options.get("address"),
        "port": options.get("port"),
        "livereload_port": options.get("livereload_port"),
        "console_logs": options.get("consolelogs"),
        "server_logs": options.get("serverlogs"),
    }
    try:
        return ServeSettings(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as e:
        raise LiveReloadError(f"Invalid live reload settings: {e}")


def serve_script_args(settings: ServeSettings) -> list[str | int]:
    """Arguments handed to the project's ionic:serve script."""
    return [
        "--runLivereload",
        "--isPlatformServe",
        "--livereload",
        "--port",
        settings.port,
        "--livereload-port",
        settings.livereload_port,
        "--address",
        settings.address or DEFAULT_SERVE_ADDRESS,
        "--iscordovaserve",
        "--nobrowser",
    ]


def get_host_lan_ip() -> str | None:
    """Detect the LAN IP address of this machine that an emulator can reach.

    Opens a UDP socket toward a public address to discover which local
    interface is routed; nothing is sent. Returns None when offline.
    """
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            s.connect(("8.8.8.8", 80))
            ip = s.getsockname()[0]
        finally:
            s.close()
    except OSError:
        return None
    if ip and not ip.startswith("127."):
        return ip
    return None


class LiveReload:
    """Computes live reload options and points config.xml at the dev server."""

    def __init__(
        self,
        log: Logger,
        *,
        config_xml: ConfigXml | None = None,
        resolve_address: Callable[[], str | None] = get_host_lan_ip,
    ) -> None:
        self.log = log
        self.config_xml = config_xml or ConfigXml()
        self.resolve_address = resolve_address

    async def setup_live_reload(
        self, parsed_args: ParsedArgs, app_directory: Path
    ) -> LiveReloadOptions:
        self.log.success("Setup Live Reload")
        settings = load_serve_settings(parsed_args.options)

        address = settings.address
        if not address:
            address = await asyncio.to_thread(self.resolve_address) or "localhost"

        options = LiveReloadOptions(
            app_directory=str(app_directory),
            address=address,
            port=settings.port,
            livereload_port=settings.livereload_port,
            console_logs=settings.console_logs,
            server_logs=settings.server_logs,
        )
        self.config_xml.set_config_xml(app_directory, dev_server=options.dev_server)
        self.log.debug(f"Live reload dev server: {options.dev_server}")
        return options
