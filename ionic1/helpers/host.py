"""Host machine queries, kept behind an object so commands can be tested anywhere."""

from __future__ import annotations

import sys
from pathlib import Path


class HostEnvironment:
    def platform(self) -> str:
        """OS name as reported by sys.platform ("darwin", "linux", "win32")."""
        return sys.platform

    def cwd(self) -> Path:
        return Path.cwd()

    def is_mac(self) -> bool:
        return self.platform() == "darwin"
