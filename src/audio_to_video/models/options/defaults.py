"""Default constants for option models."""

from __future__ import annotations

import os

ENCODER_ENV_VAR = "AUDIO_TO_VIDEO_FFMPEG"
DEFAULT_ENCODER = "ffmpeg"


def default_encoder() -> str:
    """Return the encoder executable, honoring ``AUDIO_TO_VIDEO_FFMPEG``."""
    return os.getenv(ENCODER_ENV_VAR) or DEFAULT_ENCODER


__all__ = [
    "DEFAULT_ENCODER",
    "ENCODER_ENV_VAR",
    "default_encoder",
]
