"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

ENCODER_GROUP = Group.create_ordered("Encoder")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "ENCODER_GROUP",
    "RUNTIME_GROUP",
]
