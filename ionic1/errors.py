"""Error types shared across ionic1 commands."""

from __future__ import annotations


class Ionic1Error(Exception):
    """Base class for failures that should be reported to the user."""


class CordovaError(Ionic1Error):
    """Raised when the cordova CLI is missing or a cordova step fails."""


class ScriptError(Ionic1Error):
    """Raised when an ionic:<task> npm script fails."""


class ConfigXmlError(Ionic1Error):
    """Raised when config.xml cannot be found or parsed."""


class LiveReloadError(Ionic1Error):
    """Raised when live reload settings are invalid."""


class Rejection(Exception):
    """A failure carrying a plain value (e.g. an exit status) instead of an error.

    The process that produced it has already reported what went wrong, so
    commands end quietly when they see one.
    """

    def __init__(self, reason: object) -> None:
        super().__init__(reason)
        self.reason = reason
