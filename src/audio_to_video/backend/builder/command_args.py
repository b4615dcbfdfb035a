"""Common FFmpeg command arguments."""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Introduce an input file path.
LOOP_INPUT: tuple[str, ...] = ("-loop", "1")  #: Repeat the next image input indefinitely.
SHORTEST: tuple[str, ...] = ("-shortest",)  #: Stop encoding when the shortest stream ends.
OVERWRITE_OUTPUT: tuple[str, ...] = ("-y",)  #: Overwrite existing files.
