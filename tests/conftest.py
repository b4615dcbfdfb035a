"""Shared pytest fixtures.

Keeps tests independent of the host's FFmpeg install and of logging
handlers attached by earlier CLI runs.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import TYPE_CHECKING

import pytest

from audio_to_video.models.options import ENCODER_ENV_VAR
from audio_to_video.tools.helpers import PACKAGE_LOGGER

if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Iterator
    from pathlib import Path

FAKE_FFMPEG = "/opt/fake/bin/ffmpeg"  #: Path reported for FFmpeg by ``fake_encoder``.


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any encoder override from the developer's shell."""
    monkeypatch.delenv(ENCODER_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches so they do not outlive captured streams."""
    yield
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_encoder(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pretend FFmpeg is installed without touching ``PATH``."""
    monkeypatch.setattr(
        "audio_to_video.tools.cli.shutil.which",
        lambda name: FAKE_FFMPEG if name == "ffmpeg" else None,
    )
    return FAKE_FFMPEG


@pytest.fixture
def media_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory holding one audio file and one image file."""
    (tmp_path / "track.flac").touch()
    (tmp_path / "cover.png").touch()
    (tmp_path / "notes.txt").touch()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def real_media_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory with a short real tone and a small real image.

    Generated with ffmpeg; tests using it must skip when ffmpeg is missing.
    """
    ffmpeg = shutil.which("ffmpeg")
    assert ffmpeg, "ffmpeg must be available in PATH for this test"
    subprocess.run(  # noqa: S603
        [
            ffmpeg,
            "-v",
            "error",
            "-f",
            "lavfi",
            "-i",
            "sine=frequency=440:duration=1",
            "-y",
            str(tmp_path / "tone.flac"),
        ],
        check=True,
    )
    subprocess.run(  # noqa: S603
        [
            ffmpeg,
            "-v",
            "error",
            "-f",
            "lavfi",
            "-i",
            "color=c=blue:s=64x64",
            "-frames:v",
            "1",
            "-y",
            str(tmp_path / "cover.png"),
        ],
        check=True,
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path
