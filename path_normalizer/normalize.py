"""Canonicalise path strings for the running (or injected) platform."""

from __future__ import annotations

import typing as t

from . import _patterns as patterns
from .convert import convert_to_windows_path
from .platform import PlatformContext, path_module, resolve_context

_UNC_LEAD: t.Final[str] = "\\\\"


def _normalise_unix_path(path: str) -> str:
    """Collapse repeated ``/`` and drop trailing ones, keeping a bare root."""
    collapsed = patterns.SLASH_RUN.sub("/", path)
    return patterns.TRAILING_SLASHES.sub("", collapsed) or "/"


def _collapse_backslashes(path: str) -> str:
    """Collapse backslash runs, keeping exactly two for a UNC prefix."""
    if match := patterns.UNC_PREFIX.match(path):
        rest = patterns.BACKSLASH_RUN.sub(r"\\", path[match.end() :])
        return _UNC_LEAD + rest
    return patterns.BACKSLASH_RUN.sub(r"\\", path)


def _capitalise_drive(path: str) -> str:
    if patterns.LOWER_DRIVE.match(path):
        return path[0].upper() + path[1:]
    return path


def normalize_path(path: str, *, context: PlatformContext | None = None) -> str:
    """
    Return the canonical form of *path*.

    Pure Unix paths only have their slashes tidied. Everything else is folded
    into Windows form: WSL and MSYS drive paths become drive-letter paths,
    backslash runs are collapsed (UNC prefixes keep their two), ``.`` and
    ``..`` segments are resolved lexically with the platform's path rules and
    drive letters are upper-cased.

    Parameters
    ----------
    path : str
        Raw path, optionally wrapped in quotes or whitespace.
    context : PlatformContext | None, optional
        Platform details. Defaults to the running interpreter.

    Returns
    -------
    str
        The normalized path. Malformed input is passed through rather than
        rejected.
    """
    path = patterns.strip_wrapping(path)

    if patterns.is_unix_path(path):
        return _normalise_unix_path(path)

    path = _collapse_backslashes(convert_to_windows_path(path))

    normalized = path_module(context).normpath(path)
    if path.startswith(_UNC_LEAD) and not normalized.startswith(_UNC_LEAD):
        normalized = "\\" + normalized

    # Flipping ``x/\y`` creates a new backslash run.
    normalized = _collapse_backslashes(normalized.replace("/", "\\"))
    if patterns.WINDOWS_DRIVE.match(normalized):
        return _capitalise_drive(normalized)
    return normalized


def expand_home(path: str, *, context: PlatformContext | None = None) -> str:
    """Replace a leading ``~`` or ``~/`` with the user's home directory."""
    if path != "~" and not path.startswith("~/"):
        return path

    ctx = resolve_context(context)
    module = path_module(ctx)
    home = ctx.home_directory()
    # ``join`` discards *home* when the remainder is itself rooted.
    remainder = path[2:].lstrip(module.sep + (module.altsep or ""))
    if not remainder:
        return module.normpath(home)
    return module.normpath(module.join(home, remainder))


__all__ = ["expand_home", "normalize_path"]
