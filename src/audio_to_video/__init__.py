"""Turn an audio track and a still image into a video with FFmpeg."""

from .backend import audio_to_video, build_command, run_conversion
from .models import ConversionPlan, Options

__all__ = ["ConversionPlan", "Options", "audio_to_video", "build_command", "run_conversion"]
