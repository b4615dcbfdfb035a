"""Error types raised while resolving inputs and running the encoder."""

from __future__ import annotations


class AudioToVideoError(Exception):
    """Base class for fatal audio-to-video errors."""


class EncoderNotFoundError(AudioToVideoError):
    """The encoder executable is not on the search path."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} not found in PATH")
        self.name = name


class MissingAudioFileError(AudioToVideoError):
    """No audio file was given or found."""

    def __init__(self) -> None:
        super().__init__("No audio file found")


class MissingImageFileError(AudioToVideoError):
    """No image file was given or found."""

    def __init__(self) -> None:
        super().__init__("No image file found")


class DirectoryReadError(AudioToVideoError):
    """The search directory could not be listed."""


class DirectoryEntryError(AudioToVideoError):
    """A directory entry could not be inspected."""


class FileNameError(AudioToVideoError):
    """A file name is not valid text."""


class SpawnError(AudioToVideoError):
    """The encoder process could not be started."""


class WaitError(AudioToVideoError):
    """The encoder process could not be waited on."""


__all__ = [
    "AudioToVideoError",
    "DirectoryEntryError",
    "DirectoryReadError",
    "EncoderNotFoundError",
    "FileNameError",
    "MissingAudioFileError",
    "MissingImageFileError",
    "SpawnError",
    "WaitError",
]
