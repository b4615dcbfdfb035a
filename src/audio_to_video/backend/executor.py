"""Build and execute the FFmpeg still-image video command."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from audio_to_video.errors import AudioToVideoError
from audio_to_video.models import ConversionPlan, Options
from audio_to_video.models.verbosity import Verbosity
from audio_to_video.tools import format_ffmpeg_cmd, run
from audio_to_video.tools.helpers import emit_status, format_action_label, maybe_log_command

from .builder import build_command

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
else:
    from collections import abc

    Callable = abc.Callable

CONVERSION_FAILED = "Conversion failed"

logger = logging.getLogger(__name__)


@dataclass
class FFmpegResult:
    """Result of an FFmpeg execution."""

    success: bool
    error: str = ""
    output: str | None = None
    returncode: int | None = None


def execute_ffmpeg(
    plan: ConversionPlan,
    args: tuple[str, ...],
    output: str,
    *,
    status_callback: Callable[[str], None] | None = None,
) -> FFmpegResult:
    """Execute an FFmpeg command and return result."""
    runtime = plan.opts.runtime
    maybe_log_command(
        verbosity=runtime.verbosity,
        dry_run=False,
        status_callback=status_callback,
        banner=f"{format_action_label(dry_run=False)}: {format_ffmpeg_cmd(args, plan.opts.encoder)}",
    )
    try:
        run(
            plan.encoder,
            args,
            verbose=runtime.verbosity >= Verbosity.OUTPUT,
            status_callback=status_callback,
            timeout=runtime.timeout_sec,
        )
    except subprocess.CalledProcessError as e:
        detail = (e.output or "").strip().splitlines()
        message = f"{CONVERSION_FAILED}: {plan.opts.encoder} exited with status {e.returncode}"
        if detail:
            message = f"{message}\n{detail[-1]}"
        return FFmpegResult(success=False, error=message, returncode=e.returncode)
    except AudioToVideoError as e:
        return FFmpegResult(success=False, error=f"{CONVERSION_FAILED}: {e!s}")
    return FFmpegResult(success=True, output=output, returncode=0)


def run_conversion(
    files: Sequence[str] = (),
    ffmpeg_args: Sequence[str] = (),
    opts: Options | None = None,
    status_callback: Callable[[str], None] | None = None,
    *,
    directory: Path | None = None,
) -> tuple[tuple[str, ...], FFmpegResult]:
    """Resolve inputs, build the command and run it unless this is a dry run."""
    opts = Options() if opts is None else opts
    try:
        plan = ConversionPlan.from_options(opts, files, ffmpeg_args, directory=directory)
    except AudioToVideoError as e:
        logger.debug("Planning failed", exc_info=True)
        return (), FFmpegResult(success=False, error=f"{CONVERSION_FAILED}: {e!s}")
    args, output = build_command(plan)
    if opts.runtime.dry_run:
        banner = f"{format_action_label(dry_run=True)}: {format_ffmpeg_cmd(args, opts.encoder)}"
        maybe_log_command(
            verbosity=opts.runtime.verbosity,
            dry_run=True,
            status_callback=status_callback,
            banner=banner,
        )
        return args, FFmpegResult(success=True, output=output)
    result = execute_ffmpeg(plan, args, output, status_callback=status_callback)
    if result.success and result.output:
        emit_status(str(Path(result.output).absolute()), status_callback=status_callback)
    return args, result


def audio_to_video(
    files: Sequence[str] = (),
    opts: Options | None = None,
    ffmpeg_args: Sequence[str] = (),
    status_callback: Callable[[str], None] | None = None,
) -> int:
    """Create a video from a still image and an audio track."""
    status_func = print if status_callback is None else status_callback
    _, result = run_conversion(files, ffmpeg_args, opts, status_callback=status_func)
    if not result.success:
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(result.error)
        return result.returncode or 1
    return 0


__all__ = ["FFmpegResult", "audio_to_video", "execute_ffmpeg", "run_conversion"]
