"""Resolve the audio and image inputs from arguments or a directory listing."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from audio_to_video.errors import DirectoryEntryError, DirectoryReadError, FileNameError
from audio_to_video.models.formats import MediaRole, role_for_extension
from audio_to_video.models.inputs import ResolvedInputs

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

SEPARATOR = "--"  #: Everything after this token is forwarded to the encoder.

logger = logging.getLogger(__name__)


def split_passthrough(args: Sequence[str]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split ``args`` at the first ``--`` into candidate files and passthrough args."""
    args = tuple(args)
    try:
        idx = args.index(SEPARATOR)
    except ValueError:
        return args, ()
    return args[:idx], args[idx + 1 :]


def extension_of(name: str) -> str | None:
    """Return the text after the final ``.`` in ``name`` or ``None`` without one."""
    if "." not in name:
        return None
    return name.rsplit(".", 1)[1]


def classify(name: str) -> MediaRole | None:
    """Return the role of ``name`` by its extension, or ``None`` if irrelevant."""
    return role_for_extension(extension_of(name))


def _bind(found: ResolvedInputs, role: MediaRole, path: Path, *, origin: str) -> ResolvedInputs:
    """Bind ``path`` to ``role`` unless the role is taken; first match wins."""
    current = found.get(role)
    if current is not None:
        logger.warning("Ignoring %s %s file %s, already using %s", origin, role.value, path, current)
        return found
    logger.debug("%s file found: %s", role.value.capitalize(), path)
    return found.with_role(role, path)


def _from_arguments(args: Iterable[str]) -> ResolvedInputs:
    found = ResolvedInputs()
    for arg in args:
        if arg == SEPARATOR:
            break
        role = classify(arg)
        if role is None:
            logger.debug("Ignoring argument without a known extension: %s", arg)
            continue
        found = _bind(found, role, Path(arg), origin="argument")
    return found


def _checked_name(name: str) -> str:
    """Return ``name`` or raise if it holds undecodable bytes."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise FileNameError(f"Couldn't convert file name to text: {name!r}") from e
    return name


def _iter_entries(it: Iterator[os.DirEntry[str]], directory: Path) -> Iterator[os.DirEntry[str]]:
    while True:
        try:
            entry = next(it)
        except StopIteration:
            return
        except OSError as e:
            raise DirectoryEntryError(f"Couldn't get entry in {directory}: {e}") from e
        yield entry


def list_candidates(directory: Path) -> list[str]:
    """Return the sorted names of regular files directly inside ``directory``.

    Raises:
        DirectoryReadError: If ``directory`` cannot be listed.
        DirectoryEntryError: If an entry cannot be read or inspected.
        FileNameError: If an entry name is not valid text.

    """
    try:
        it = os.scandir(directory)
    except OSError as e:
        raise DirectoryReadError(f"Couldn't read directory {directory}: {e}") from e
    names: list[str] = []
    with it:
        for entry in _iter_entries(it, directory):
            name = _checked_name(entry.name)
            try:
                is_file = entry.is_file()
            except OSError as e:
                raise DirectoryEntryError(f"Couldn't inspect {name}: {e}") from e
            if is_file:
                names.append(name)
    return sorted(names)


def _from_directory(found: ResolvedInputs, directory: Path | None) -> ResolvedInputs:
    """Fill unresolved roles from the files in ``directory``."""
    wanted = set(found.missing)
    if directory is None:
        try:
            search_dir = Path.cwd()
        except OSError as e:
            raise DirectoryReadError(f"Couldn't get current directory: {e}") from e
    else:
        search_dir = directory
    logger.debug("Searching %s for %s", search_dir, ", ".join(role.value for role in found.missing))
    for name in list_candidates(search_dir):
        role = classify(name)
        if role not in wanted:
            continue
        path = Path(name) if directory is None else directory / name
        found = _bind(found, role, path, origin="discovered")
    return found


def resolve_inputs(args: Sequence[str], directory: Path | None = None) -> ResolvedInputs:
    """Resolve the audio and image files for a conversion.

    Arguments are scanned first, up to ``--``. Roles they leave unresolved are
    filled from ``directory`` (default: the current working directory), whose
    files are considered in name order. Discovered paths are relative when
    searching the working directory.

    Raises:
        MissingAudioFileError: If no audio file is found.
        MissingImageFileError: If no image file is found.
        DirectoryReadError: If the directory cannot be listed.
        DirectoryEntryError: If a directory entry cannot be inspected.
        FileNameError: If a directory entry name is not valid text.

    """
    found = _from_arguments(args)
    if not found.complete:
        found = _from_directory(found, directory)
    found.require()
    return found


__all__ = [
    "SEPARATOR",
    "classify",
    "extension_of",
    "list_candidates",
    "resolve_inputs",
    "split_passthrough",
]
