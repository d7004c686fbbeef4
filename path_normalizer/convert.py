"""Fold WSL and Unix-style drive paths into Windows drive-letter form."""

from __future__ import annotations

from . import _patterns as patterns


def _to_drive_path(letter: str, body: str) -> str:
    return letter.upper() + ":" + body.replace("/", "\\")


def convert_to_windows_path(path: str) -> str:
    """
    Convert WSL (``/mnt/c/...``) or MSYS (``/c/...``) paths to Windows form.

    Existing drive paths only have their separators flipped; the drive letter
    keeps its case. Anything else is returned unchanged.

    Examples
    --------
    >>> convert_to_windows_path("/mnt/c/Users/x")
    'C:\\\\Users\\\\x'
    >>> convert_to_windows_path("c:/foo")
    'c:\\\\foo'
    """
    if match := patterns.WSL_MOUNT.match(path):
        return _to_drive_path(match.group(1), path[match.end() - 1 :])

    if match := patterns.UNIX_DRIVE.match(path):
        return _to_drive_path(match.group(1), path[match.end() - 1 :])

    if patterns.WINDOWS_DRIVE.match(path):
        return path.replace("/", "\\")

    return path


__all__ = ["convert_to_windows_path"]
