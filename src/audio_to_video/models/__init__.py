"""Expose models and type definitions."""

from .formats import AUDIO_EXTENSIONS, IMAGE_EXTENSIONS, MediaRole
from .inputs import ResolvedInputs
from .options import Options
from .plan import ConversionPlan
from .verbosity import Verbosity

__all__ = [
    "AUDIO_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "ConversionPlan",
    "MediaRole",
    "Options",
    "ResolvedInputs",
    "Verbosity",
]
