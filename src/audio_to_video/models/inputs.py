"""Resolved input file models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from audio_to_video.errors import MissingAudioFileError, MissingImageFileError

from .formats import MediaRole

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class ResolvedInputs:
    """Audio and image paths chosen for a conversion."""

    audio: Path | None = None
    image: Path | None = None

    def get(self, role: MediaRole) -> Path | None:
        """Return the path bound to ``role``."""
        return self.audio if role is MediaRole.AUDIO else self.image

    def with_role(self, role: MediaRole, path: Path) -> ResolvedInputs:
        """Return a copy with ``role`` bound to ``path``."""
        return replace(self, **{role.value: path})

    @property
    def missing(self) -> tuple[MediaRole, ...]:
        """Roles that are still unresolved, audio first."""
        return tuple(role for role in MediaRole if self.get(role) is None)

    @property
    def complete(self) -> bool:
        """Whether both roles are resolved."""
        return not self.missing

    def require(self) -> tuple[Path, Path]:
        """Return ``(audio, image)``.

        Raises:
            MissingAudioFileError: If no audio path is bound.
            MissingImageFileError: If no image path is bound.

        """
        if self.audio is None:
            raise MissingAudioFileError
        if self.image is None:
            raise MissingImageFileError
        return self.audio, self.image


__all__ = ["ResolvedInputs"]
