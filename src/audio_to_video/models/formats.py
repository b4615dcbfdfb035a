"""Recognized media extensions and file roles."""

from enum import Enum


class MediaRole(str, Enum):
    """Role a file plays in the conversion."""

    AUDIO = "audio"
    IMAGE = "image"


AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    {
        "3gp",
        "aa",
        "aac",
        "aax",
        "act",
        "aiff",
        "alac",
        "amr",
        "ape",
        "au",
        "awb",
        "dct",
        "dss",
        "dvf",
        "flac",
        "gsm",
        "iklax",
        "ivs",
        "m4a",
        "m4b",
        "m4p",
        "mmf",
        "mp3",
        "mpc",
        "msv",
        "nmf",
        "ogg",
        "oga",
        "mogg",
        "opus",
        "ra",
        "rm",
        "raw",
        "rf64",
        "sln",
        "tta",
        "voc",
        "vox",
        "wav",
        "webm",
        "wma",
        "wv",
        "xwma",
    }
)  #: Audio container and codec extensions.

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {
        "bmp",
        "gif",
        "jpeg",
        "jpg",
        "png",
        "apng",
        "svg",
        "tiff",
        "tif",
        "webp",
        "ico",
        "heif",
        "heic",
        "avif",
        "raw",
        "arw",
        "cr2",
        "nef",
        "orf",
        "rw2",
        "pef",
        "x3f",
        "srw",
        "dng",
        "jxr",
        "wdp",
        "hdp",
        "jp2",
        "j2k",
        "jpf",
        "jpx",
        "mj2",
    }
)  #: Still image extensions. ``raw`` also appears in the audio set and resolves as audio.


def role_for_extension(ext: str | None) -> MediaRole | None:
    """Return the role for ``ext`` or ``None`` when it is not recognized.

    The lookup is case-sensitive and checks audio before image.
    """
    if ext is None:
        return None
    if ext in AUDIO_EXTENSIONS:
        return MediaRole.AUDIO
    if ext in IMAGE_EXTENSIONS:
        return MediaRole.IMAGE
    return None


__all__ = ["AUDIO_EXTENSIONS", "IMAGE_EXTENSIONS", "MediaRole", "role_for_extension"]
