"""Helpers for locating and executing the FFmpeg encoder."""

import logging
import os
import shlex
import shutil
import subprocess
import threading
from collections.abc import Callable, Sequence
from pathlib import Path

from audio_to_video.errors import EncoderNotFoundError, SpawnError, WaitError

from .helpers import emit_status

_FFMPEG = "ffmpeg"

logger = logging.getLogger(__name__)


def find_encoder(name: str | Path = _FFMPEG) -> str:
    """Return the full path of the executable ``name`` found on ``PATH``.

    Raises:
        EncoderNotFoundError: If no executable file named ``name`` is found.

    """
    resolved = shutil.which(str(name))
    if resolved is None:
        raise EncoderNotFoundError(str(name))
    logger.debug("Using encoder %s", resolved)
    return resolved


def _spawn(cmd: list[str], *, creationflags: int) -> subprocess.Popen[str]:
    """Start ``cmd`` with stdout captured and stderr merged into it."""
    try:
        return subprocess.Popen(  # noqa: S603
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            bufsize=1,
            creationflags=creationflags,
        )
    except OSError as e:
        raise SpawnError(f"Failed to start {cmd[0]}: {e}") from e


def _timeout_message(cmd: list[str], timeout: float) -> str:
    return f"{cmd[0]} did not finish within {timeout:g}s"


def _collect_output(p: subprocess.Popen[str], cmd: list[str], *, timeout: float | None) -> str:
    """Wait for ``p`` and return its captured output."""
    try:
        output, _ = p.communicate(timeout=timeout)
    except subprocess.TimeoutExpired as e:
        p.kill()
        p.communicate()
        raise WaitError(_timeout_message(cmd, e.timeout)) from e
    except OSError as e:
        raise WaitError(f"Failed to wait on {cmd[0]}: {e}") from e
    return output or ""


def _stream_output(
    p: subprocess.Popen[str],
    cmd: list[str],
    *,
    log: Callable[[str], None],
    timeout: float | None,
) -> str:
    """Relay output lines to ``log`` as they arrive and return all output."""
    if p.stdout is None:  # pragma: no cover - defensive
        raise RuntimeError("Failed to capture subprocess stdout")
    expired = threading.Event()

    def _expire() -> None:
        expired.set()
        p.kill()

    timer = threading.Timer(timeout, _expire) if timeout else None
    if timer is not None:
        timer.start()
    output_chunks: list[str] = []
    try:
        buf = ""
        for line in iter(p.stdout.readline, ""):
            output_chunks.append(line)
            parts = line.split("\r")
            buf += parts[0]
            for part in parts[1:]:
                log(buf + "\r")
                buf = part
            if buf.endswith("\n"):
                log(buf[:-1])
                buf = ""
        if buf:
            log(buf)
        try:
            p.wait()
        except OSError as e:
            raise WaitError(f"Failed to wait on {cmd[0]}: {e}") from e
    finally:
        if timer is not None:
            timer.cancel()
    # The timer may fire after a clean exit; only a killed child timed out.
    if expired.is_set() and timeout is not None and p.returncode is not None and p.returncode < 0:
        raise WaitError(_timeout_message(cmd, timeout))
    return "".join(output_chunks)


def run(
    exe: str | Path,
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
    list_cmd: bool = False,
    timeout: float | None = None,
) -> str:
    """Run an executable and return its combined stdout/stderr.

    When ``verbose`` is ``True``, stream output lines to the provided
    ``status_callback`` (or the logger) as the process runs. Otherwise capture
    output and return it after completion. ``timeout`` bounds the wait; the
    child is killed when it expires.

    Raises:
        SpawnError: If the process cannot be started.
        WaitError: If the process cannot be waited on or the timeout expires.
        subprocess.CalledProcessError: If the process exits with a non-zero status.

    """
    cmd = [str(exe), *[str(a) for a in args]]

    def log(message: str) -> None:
        emit_status(message, status_callback=status_callback)

    if list_cmd:
        log(f"Running: {join_command(exe, args)}")

    creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    proc = _spawn(cmd, creationflags=creationflags)
    with proc:
        if verbose:
            output = _stream_output(proc, cmd, log=log, timeout=timeout)
        else:
            output = _collect_output(proc, cmd, timeout=timeout)
    if proc.returncode:
        raise subprocess.CalledProcessError(proc.returncode, cmd, output)
    return output


def quote_arg(arg: str) -> str:
    """Quote argument if needed."""
    if os.name == "nt":
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command for display."""
    return " ".join(quote_arg(str(part)) for part in (exe, *args))


def format_ffmpeg_cmd(args: Sequence[str | Path], exe: str | Path = _FFMPEG) -> str:
    """Format an ``ffmpeg`` command for display."""
    return join_command(exe, args)


__all__ = [
    "find_encoder",
    "format_ffmpeg_cmd",
    "join_command",
    "quote_arg",
    "run",
]
