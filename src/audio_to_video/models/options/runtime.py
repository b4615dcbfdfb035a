"""Runtime option models."""

from __future__ import annotations

from functools import cached_property

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from audio_to_video.models.verbosity import Verbosity
from audio_to_video.tools.helpers import parse_timespan_to_seconds

from .groups import RUNTIME_GROUP


@Parameter(group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """Runtime behavior options."""

    verbosity: Verbosity = Field(
        default=Verbosity.QUIET,
        description=("Increase logging verbosity. Commands: show FFmpeg commands; Output: also show FFmpeg output."),
    )
    dry_run: bool = Field(default=False, description="Print the FFmpeg command without executing it.")
    timeout: str | None = Field(
        default=None,
        description="Stop waiting for FFmpeg after this long. Examples: '90s', '1h30m', '00:05:00'.",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        """Accept numeric values or case-insensitive enum names.

        Allows CLI usage like ``--runtime.verbosity commands`` in addition to
        ``--runtime.verbosity 1``.
        """
        if isinstance(v, Verbosity):
            return v
        if isinstance(v, int):
            return Verbosity(v)
        if isinstance(v, str):
            token = v.strip()
            try:
                return Verbosity[token.upper()]
            except KeyError:
                try:
                    return Verbosity(int(token))
                except (ValueError, KeyError):
                    pass
        raise ValueError("verbosity must be one of quiet, commands, output, or 0/1/2")

    @field_validator("timeout")
    @classmethod
    def _validate_timeout(cls, v: str | None) -> str | None:
        """Ensure the timeout parses to a positive duration."""
        if v is None:
            return v
        seconds = parse_timespan_to_seconds(v)
        if seconds is None or seconds <= 0:
            raise ValueError(f"Timeout must be greater than 0: {v}")
        return v

    @cached_property
    def timeout_sec(self) -> float | None:
        """Timeout in seconds, or ``None`` to wait indefinitely."""
        return parse_timespan_to_seconds(self.timeout)


__all__ = ["RuntimeOptions"]
