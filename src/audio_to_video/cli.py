"""Command-line interface entry point."""

import sys
from collections.abc import Sequence

from cyclopts import App

from .backend import audio_to_video
from .models import Options
from .tools import configure_logging, split_passthrough


def build_app(ffmpeg_args: Sequence[str] = ()) -> App:
    """Return the CLI app forwarding ``ffmpeg_args`` to the encoder."""
    app = App(name="audio-to-video")

    @app.default
    def convert(*files: str, opts: Options | None = None) -> int:
        """Make a video showing a still image for the length of an audio track.

        Files are recognized by extension. Any that are omitted are searched
        for in the current directory. Arguments after ``--`` go to FFmpeg.

        Args:
            files: Audio and image files, in any order.
            opts: Conversion options.

        """
        opts = Options() if opts is None else opts
        configure_logging(opts.runtime.verbosity)
        return audio_to_video(files, opts, ffmpeg_args)

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the audio-to-video CLI."""
    argv = sys.argv[1:] if argv is None else argv
    files, ffmpeg_args = split_passthrough(argv)
    return build_app(ffmpeg_args)(list(files))


if __name__ == "__main__":
    raise SystemExit(main())
