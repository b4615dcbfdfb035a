"""Backend utilities for building and executing FFmpeg commands."""

from .builder import build_command
from .executor import audio_to_video, run_conversion

__all__ = [
    "audio_to_video",
    "build_command",
    "run_conversion",
]
