"""Option table and argument parsing for the emulate command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import click


@dataclass(frozen=True)
class OptionSpec:
    """One documented emulate option.

    ``flags`` is the documented spelling, e.g. ``"--consolelogs|-c"``.
    Passthrough options are not consumed here; cordova receives them as-is.
    """

    flags: str
    title: str
    boolean: bool = False
    passthrough: bool = False
    type: Any = str

    def decls(self) -> list[str]:
        return self.flags.split("|")

    def valued_decls(self) -> list[str]:
        """Spellings documented as ``--name=VALUE``, without the value part."""
        return [d.split("=", 1)[0] for d in self.decls() if "=" in d]

    def to_click(self) -> click.Option:
        if self.boolean:
            return click.Option(self.decls(), is_flag=True, default=False, help=self.title)
        return click.Option(self.decls(), type=self.type, default=None, help=self.title)


EMULATE_OPTIONS: dict[str, OptionSpec] = {
    spec.flags: spec
    for spec in (
        OptionSpec("--livereload|-l", "Live Reload app dev files from the device (beta)", boolean=True),
        OptionSpec("--address", "Use specific address (livereload req.)"),
        OptionSpec("--port|-p", "Dev server HTTP port (8100 default, livereload req.)", type=int),
        OptionSpec(
            "--livereload-port|-r",
            "Live Reload port (35729 default, livereload req.)",
            type=int,
        ),
        OptionSpec("--consolelogs|-c", "Print app console logs to the terminal (livereload req.)", boolean=True),
        OptionSpec("--serverlogs|-s", "Print dev server logs to the terminal (livereload req.)", boolean=True),
        OptionSpec("--debug|--release", "Build in debug or release mode", boolean=True, passthrough=True),
        OptionSpec("--device|--emulator|--target=FOO", "Pick the emulator image to launch", passthrough=True),
    )
}


def _build_parser() -> click.Command:
    params: list[click.Parameter] = [
        spec.to_click() for spec in EMULATE_OPTIONS.values() if not spec.passthrough
    ]
    return click.Command(
        "emulate",
        params=params,
        add_help_option=False,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    )


_PARSER = _build_parser()

_PASSTHROUGH_VALUED = frozenset(
    name for spec in EMULATE_OPTIONS.values() if spec.passthrough for name in spec.valued_decls()
)


def _bind_passthrough_values(tokens: list[str]) -> list[str]:
    """Fold ``--target Nexus_5`` into ``--target=Nexus_5``.

    Keeps the value of a cordova option from being taken for the platform.
    """
    bound: list[str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _PASSTHROUGH_VALUED and i + 1 < len(tokens) and not tokens[i + 1].startswith("-"):
            bound.append(f"{token}={tokens[i + 1]}")
            i += 2
            continue
        bound.append(token)
        i += 1
    return bound


@dataclass
class ParsedArgs:
    """Parsed emulate arguments.

    ``options`` holds every declared option by name; ``passthrough`` keeps
    the remaining tokens, in order and without the platform, for cordova.
    """

    command: str
    positional: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    passthrough: list[str] = field(default_factory=list)

    @property
    def platform(self) -> str | None:
        return self.positional[0] if self.positional else None

    @property
    def livereload(self) -> bool:
        return bool(self.options.get("livereload"))


def parse_argv(raw_args: list[str]) -> ParsedArgs:
    """Parse ``["emulate", ...tokens]`` into a ParsedArgs.

    Unknown options are kept for cordova rather than rejected. Valued
    cordova options such as ``--target`` keep their value, in ``--name=value``
    form, so it is never read as the platform.

    Raises:
        click.UsageError: If a declared option has an invalid value.
    """
    command = raw_args[0] if raw_args else "emulate"
    ctx = _PARSER.make_context(command, _bind_passthrough_values(list(raw_args[1:])))
    extra = list(ctx.args)

    positional = [a for a in extra if not a.startswith("-")]
    passthrough = list(extra)
    if positional:
        passthrough.remove(positional[0])

    return ParsedArgs(
        command=command,
        positional=positional,
        options=dict(ctx.params),
        passthrough=passthrough,
    )


def normalize_raw_args(raw_args: list[str], platform: str, explicit: str | None) -> list[str]:
    """Return raw args with the platform at index 1.

    ``explicit`` is the platform token the user typed, if any; it is moved
    rather than duplicated.
    """
    command, *rest = raw_args or ["emulate"]
    rest = _bind_passthrough_values(rest)
    if explicit is not None and explicit in rest:
        rest.remove(explicit)
    return [command, platform, *rest]
