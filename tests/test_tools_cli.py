"""Tests for encoder lookup and subprocess helpers."""

import io
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from audio_to_video.errors import EncoderNotFoundError, SpawnError, WaitError
from audio_to_video.tools import cli
from audio_to_video.tools.cli import find_encoder, format_ffmpeg_cmd, join_command, run


def test_find_encoder_uses_which(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return the executable path resolved from ``PATH``."""
    monkeypatch.setattr(cli.shutil, "which", lambda name: f"/usr/local/bin/{name}")
    assert find_encoder("ffmpeg") == "/usr/local/bin/ffmpeg"


def test_find_encoder_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise when the encoder is not on ``PATH``."""
    monkeypatch.setattr(cli.shutil, "which", lambda _name: None)
    with pytest.raises(EncoderNotFoundError, match="ffmpeg not found in PATH"):
        find_encoder("ffmpeg")


def test_find_encoder_ignores_path_substrings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A directory merely named like the encoder does not count."""
    fake_dir = tmp_path / "ffmpeg-7.0" / "bin"
    fake_dir.mkdir(parents=True)
    monkeypatch.setenv("PATH", str(fake_dir))
    with pytest.raises(EncoderNotFoundError):
        find_encoder("ffmpeg")


def test_run_captures_output() -> None:
    """Return combined stdout and stderr."""
    out = run(sys.executable, ["-c", "import sys; print('out'); print('err', file=sys.stderr)"])
    assert "out" in out
    assert "err" in out


def test_run_streams_output_when_verbose() -> None:
    """Relay lines to the status callback as they are produced."""
    lines: list[str] = []
    out = run(
        sys.executable,
        ["-c", "print('first'); print('second')"],
        verbose=True,
        status_callback=lines.append,
    )
    assert lines == ["first", "second"]
    assert out == "first\nsecond\n"


def test_run_lists_command() -> None:
    """Emit a banner before running when requested."""
    lines: list[str] = []
    run(sys.executable, ["-c", "pass"], list_cmd=True, status_callback=lines.append)
    assert lines[0].startswith("Running: ")
    assert "pass" in lines[0]


def test_run_nonzero_exit() -> None:
    """Raise ``CalledProcessError`` carrying the exit code and output."""
    with pytest.raises(subprocess.CalledProcessError) as info:
        run(sys.executable, ["-c", "import sys; print('boom'); sys.exit(3)"])
    assert info.value.returncode == 3
    assert "boom" in info.value.output


def test_run_spawn_error(tmp_path: Path) -> None:
    """Raise ``SpawnError`` when the executable cannot be started."""
    with pytest.raises(SpawnError):
        run(tmp_path / "missing-encoder", ["-version"])


@pytest.mark.parametrize("verbose", [False, True])
def test_run_timeout(verbose: bool) -> None:
    """Kill the child and raise ``WaitError`` when the timeout expires."""
    with pytest.raises(WaitError, match="did not finish"):
        run(
            sys.executable,
            ["-c", "import time; time.sleep(30)"],
            verbose=verbose,
            status_callback=lambda _m: None,
            timeout=0.5,
        )


def test_join_command_quotes() -> None:
    """Quote arguments containing spaces for display."""
    text = join_command("ffmpeg", ["-i", "my cover.png"])
    assert text.startswith("ffmpeg -i ")
    assert "my cover.png" in text
    assert text != "ffmpeg -i my cover.png"


def test_format_ffmpeg_cmd_custom_exe() -> None:
    """Display the configured encoder name."""
    assert format_ffmpeg_cmd(["-y", "out.mp4"], "avconv") == "avconv -y out.mp4"


class _UnwaitableProcess:
    """Process whose termination cannot be observed."""

    returncode = None

    def __init__(self) -> None:
        self.stdout = io.StringIO("")

    def __enter__(self) -> "_UnwaitableProcess":
        return self

    def __exit__(self, *_exc: object) -> None:
        return None

    def communicate(self, timeout: float | None = None) -> tuple[str, None]:
        raise ChildProcessError("no child processes")

    def wait(self) -> int:
        raise ChildProcessError("no child processes")

    def kill(self) -> None:
        return None


@pytest.mark.parametrize("verbose", [False, True])
def test_run_wait_error(monkeypatch: pytest.MonkeyPatch, verbose: bool) -> None:
    """Raise ``WaitError`` when the child cannot be waited on."""
    monkeypatch.setattr(cli, "_spawn", lambda _cmd, *, creationflags: _UnwaitableProcess())
    with pytest.raises(WaitError, match="Failed to wait on ffmpeg"):
        run("ffmpeg", ["-version"], verbose=verbose, status_callback=lambda _m: None)


class _LateTimer:
    """Timer that only fires when cancelled, after the child has exited."""

    def __init__(self, _interval: float, function: Callable[[], None]) -> None:
        self._function = function

    def start(self) -> None:
        return None

    def cancel(self) -> None:
        self._function()


def test_run_timer_firing_after_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    """A timer expiring after a clean exit does not turn success into a timeout."""
    monkeypatch.setattr(cli.threading, "Timer", _LateTimer)
    lines: list[str] = []
    out = run(
        sys.executable,
        ["-c", "print('done')"],
        verbose=True,
        status_callback=lines.append,
        timeout=30,
    )
    assert out == "done\n"
    assert lines == ["done"]
