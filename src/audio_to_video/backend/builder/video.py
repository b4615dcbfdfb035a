"""Video stream argument helpers."""

from .stream_args import encode_with

TUNE_STILLIMAGE: tuple[str, ...] = ("-tune", "stillimage")  #: Tune x264 for a static picture.
TRANSCODE_X264: tuple[str, ...] = encode_with("v", "libx264")  #: Encode video to H.264.


def encode() -> tuple[str, ...]:
    """Return args to encode the looped image as H.264."""
    return TRANSCODE_X264
