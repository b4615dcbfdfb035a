"""Conversion planning models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from audio_to_video.tools import find_encoder, resolve_inputs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .options import Options

OUTPUT_EXTENSION = ".mp4"  #: Extension of the generated video.


@dataclass(frozen=True, slots=True)
class ConversionPlan:
    """Execution plan resolved from user options and arguments."""

    opts: Options
    encoder: str
    audio_path: Path
    image_path: Path
    ffmpeg_args: tuple[str, ...]
    output_path: Path

    @classmethod
    def from_options(
        cls,
        opts: Options,
        files: Sequence[str] = (),
        ffmpeg_args: Sequence[str] = (),
        *,
        directory: Path | None = None,
    ) -> ConversionPlan:
        """Create a plan, checking for the encoder before touching the file system."""
        encoder = find_encoder(opts.encoder)
        audio, image = resolve_inputs(files, directory).require()
        return cls(
            opts=opts,
            encoder=encoder,
            audio_path=audio,
            image_path=image,
            ffmpeg_args=tuple(ffmpeg_args),
            output_path=Path(derive_output_name(audio)),
        )


def derive_output_name(audio: str | Path) -> str:
    """Return the output file name for ``audio``.

    Only the part of the file name before its first ``.`` is kept, so
    ``"my.song.v2.wav"`` becomes ``"my.mp4"``.
    """
    stem = Path(audio).name.split(".")[0]
    return f"{stem}{OUTPUT_EXTENSION}"


__all__ = ["OUTPUT_EXTENSION", "ConversionPlan", "derive_output_name"]
