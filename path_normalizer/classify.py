"""Classify path strings by the convention they are written in."""

from __future__ import annotations

import enum

from . import _patterns as patterns


class PathKind(enum.Enum):
    """Mutually exclusive shapes a path string can take."""

    WSL_MOUNT = "wsl-mount"
    UNIX_DRIVE = "unix-drive"
    UNIX = "unix"
    FILE_URI = "file-uri"
    WINDOWS_DRIVE = "windows-drive"
    UNC = "unc"
    PERCENT_ENCODED = "percent-encoded"
    RELATIVE = "relative"


def classify_path(path: str) -> PathKind:
    """
    Return the :class:`PathKind` of *path*.

    Surrounding whitespace and quotes are ignored, as in ``normalize_path``.
    Checks run in a fixed order and the first match wins: ``/``-rooted forms,
    then ``file:`` URIs, then drive and UNC paths, then percent-encoding.
    """
    path = patterns.strip_wrapping(path)

    if patterns.WSL_MOUNT_ANY_CASE.match(path):
        return PathKind.WSL_MOUNT
    if patterns.UNIX_DRIVE.match(path):
        return PathKind.UNIX_DRIVE
    if path.startswith("/"):
        return PathKind.UNIX
    if path.startswith(patterns.FILE_SCHEME):
        return PathKind.FILE_URI
    if patterns.WINDOWS_DRIVE.match(path):
        return PathKind.WINDOWS_DRIVE
    if patterns.UNC_PREFIX.match(path):
        return PathKind.UNC
    if patterns.URI_SCHEME.match(path):
        return PathKind.RELATIVE
    if patterns.PERCENT_ESCAPE.search(path):
        return PathKind.PERCENT_ENCODED
    return PathKind.RELATIVE


__all__ = ["PathKind", "classify_path"]
