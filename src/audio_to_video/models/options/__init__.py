"""Options package exports."""

from __future__ import annotations

from audio_to_video.models.verbosity import Verbosity

from .defaults import DEFAULT_ENCODER, ENCODER_ENV_VAR, default_encoder
from .options import Options
from .runtime import RuntimeOptions

__all__ = [
    "DEFAULT_ENCODER",
    "ENCODER_ENV_VAR",
    "Options",
    "RuntimeOptions",
    "Verbosity",
    "default_encoder",
]
