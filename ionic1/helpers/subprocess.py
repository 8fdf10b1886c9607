"""Shell command runners with uniform error handling."""

from __future__ import annotations

import os
import subprocess
import threading
from collections.abc import Callable
from pathlib import Path


def run_cmd(
    cmd: list[str], description: str, *, timeout: int = 120
) -> subprocess.CompletedProcess[str]:
    """Run a subprocess command, raising RuntimeError on failure.

    Args:
        cmd: Command and arguments.
        description: Human-readable label for error messages.
        timeout: Maximum seconds to wait (default 120).

    Returns:
        The CompletedProcess on success.

    Raises:
        RuntimeError: If the process exits with a non-zero code.
    """
    result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    if result.returncode != 0:
        raise RuntimeError(
            f"{description} (exit {result.returncode}): {result.stderr.strip()}"
        )
    return result


def stream_cmd(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
    on_stdout: Callable[[str], None] | None = None,
    on_stderr: Callable[[str], None] | None = None,
) -> int:
    """Run a long-lived command, forwarding each output line as it arrives.

    stdout and stderr are read on separate threads so neither pipe can fill
    up and stall the child. Undecodable bytes are replaced. Both pipes are
    drained to EOF even if a callback raises; the first such error is
    re-raised once the child has exited.

    Returns the exit code; never raises on a non-zero exit, callers decide
    what failure means.
    """
    run_env = os.environ.copy()
    if env:
        run_env.update(env)

    proc = subprocess.Popen(
        cmd,
        cwd=str(cwd) if cwd else None,
        env=run_env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        encoding="utf-8",
        errors="replace",
        bufsize=1,
    )
    failures: list[Exception] = []

    def _pump(stream, callback: Callable[[str], None] | None) -> None:
        with stream:
            for line in stream:
                if callback is None or failures:
                    continue
                try:
                    callback(line.rstrip("\n"))
                except Exception as e:
                    failures.append(e)

    readers = [
        threading.Thread(target=_pump, args=(proc.stdout, on_stdout), daemon=True),
        threading.Thread(target=_pump, args=(proc.stderr, on_stderr), daemon=True),
    ]
    for t in readers:
        t.start()
    returncode = proc.wait()
    for t in readers:
        t.join()
    if failures:
        raise failures[0]
    return returncode
