"""Utility functions for timespan parsing, status emission and logging."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from pytimeparse2 import parse as parse_duration

from audio_to_video.models.verbosity import Verbosity

PACKAGE_LOGGER = "audio_to_video"
_STDERR_HANDLER = "audio_to_video.stderr"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def parse_timespan_to_seconds(s: str | None) -> float | None:
    """Convert a time string to seconds.

    Args:
        s: Timespan such as ``"90s"``, ``"1h30m"`` or ``"00:01:30"``. ``None``
            or an empty string returns ``None``.

    Returns:
        The parsed duration in seconds.

    Raises:
        ValueError: If ``s`` cannot be parsed.

    """
    if not s:
        return None
    parsed = parse_duration(s)
    if parsed is None:
        raise ValueError(f"Unable to parse timespan: {s}")
    return float(parsed)


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    The caller controls where status lines go:

    * ``print`` - used by the CLI for direct terminal updates.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for tests that capture status
      output.
    """
    if status_callback is None:
        logger.info(message)
        return
    # Encoder progress lines end in "\r" and are redrawn in place.
    if status_callback is print:
        print(  # noqa: T201
            message,
            end="" if "\r" in message and "\n" not in message else "\n",
            flush=True,
        )
        return
    status_callback(message)


def format_action_label(*, dry_run: bool) -> str:
    """Return a short action label for command banners."""
    return "Command" if dry_run else "Running"


def maybe_log_command(
    *,
    verbosity: Verbosity,
    dry_run: bool,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Log a command banner when appropriate for verbosity/dry-run.

    Logs when verbosity is at least ``Verbosity.COMMANDS`` or in dry-run mode.
    """
    if verbosity >= Verbosity.COMMANDS or dry_run:
        emit_status(banner, status_callback=status_callback)


def configure_logging(verbosity: Verbosity) -> logging.Logger:
    """Attach a stderr handler to the package logger at ``verbosity``'s level."""
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(verbosity.log_level)
    if not any(h.get_name() == _STDERR_HANDLER for h in pkg_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_STDERR_HANDLER)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        pkg_logger.addHandler(handler)
    return pkg_logger


__all__ = [
    "configure_logging",
    "emit_status",
    "format_action_label",
    "maybe_log_command",
    "parse_timespan_to_seconds",
]
