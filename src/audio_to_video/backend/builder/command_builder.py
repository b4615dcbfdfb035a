"""Build FFmpeg command arguments from a conversion plan."""

from audio_to_video.models.plan import ConversionPlan

from . import audio, video
from .command_args import INPUT_FLAG, LOOP_INPUT, OVERWRITE_OUTPUT, SHORTEST


def _input_args(plan: ConversionPlan) -> tuple[str, ...]:
    """Return the looped image input followed by the audio input."""
    return LOOP_INPUT + INPUT_FLAG + (str(plan.image_path),) + INPUT_FLAG + (str(plan.audio_path),)


def build_command(plan: ConversionPlan) -> tuple[tuple[str, ...], str]:
    """Return FFmpeg arguments and expected output path.

    User supplied arguments follow the fixed flags so they can override them,
    and the output path is always last.
    """
    args = (
        _input_args(plan)
        + SHORTEST
        + video.TUNE_STILLIMAGE
        + OVERWRITE_OUTPUT
        + video.encode()
        + audio.encode()
        + plan.ffmpeg_args
        + (str(plan.output_path),)
    )
    return args, str(plan.output_path)


__all__ = ["build_command"]
