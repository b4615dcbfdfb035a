"""FFmpeg and input discovery helper utilities."""

from .cli import find_encoder, format_ffmpeg_cmd, join_command, run
from .helpers import configure_logging, emit_status, parse_timespan_to_seconds
from .resolve import SEPARATOR, classify, extension_of, resolve_inputs, split_passthrough

__all__ = [
    "SEPARATOR",
    "classify",
    "configure_logging",
    "emit_status",
    "extension_of",
    "find_encoder",
    "format_ffmpeg_cmd",
    "join_command",
    "parse_timespan_to_seconds",
    "resolve_inputs",
    "run",
    "split_passthrough",
]
