"""Audio stream argument helpers."""

from .stream_args import encode_with

TRANSCODE_FLAC: tuple[str, ...] = encode_with("a", "flac")  #: Encode audio losslessly to FLAC.


def encode() -> tuple[str, ...]:
    """Return args to encode the audio track."""
    return TRANSCODE_FLAC
