"""Top-level option model for the conversion command."""

from __future__ import annotations

from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import DEFAULT_ENCODER, ENCODER_ENV_VAR, default_encoder
from .groups import ENCODER_GROUP
from .runtime import RuntimeOptions


@Parameter(name="*")
class Options(BaseModel):
    """Options for the audio-to-video conversion."""

    encoder: Annotated[
        str,
        Parameter(group=ENCODER_GROUP),
    ] = Field(
        default_factory=default_encoder,
        description=(f"FFmpeg executable name or path. [default: ${ENCODER_ENV_VAR} or {DEFAULT_ENCODER}]"),
    )
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    model_config = ConfigDict(extra="forbid")

    @field_validator("encoder")
    @classmethod
    def validate_encoder(cls, v: str) -> str:
        """Reject blank encoder names."""
        v = v.strip()
        if not v:
            raise ValueError("encoder must not be empty")
        return v


__all__ = ["Options"]
