"""Compiled prefix patterns shared by the path classifiers and transforms."""

from __future__ import annotations

import re
import typing as t

# ``/mnt/c/...`` as produced by WSL. Group 1 is the drive letter.
WSL_MOUNT: t.Final[re.Pattern[str]] = re.compile(r"^/mnt/([A-Za-z])/")

# The Unix short-circuit in ``normalize_path`` treats ``/MNT/c/`` as a mount too.
WSL_MOUNT_ANY_CASE: t.Final[re.Pattern[str]] = re.compile(
    r"^/mnt/[a-z]/", re.IGNORECASE
)

# ``/c/...`` as produced by Git Bash and MSYS2. Group 1 is the drive letter.
UNIX_DRIVE: t.Final[re.Pattern[str]] = re.compile(r"^/([A-Za-z])/")

WINDOWS_DRIVE: t.Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")
LOWER_DRIVE: t.Final[re.Pattern[str]] = re.compile(r"^[a-z]:")

UNC_PREFIX: t.Final[re.Pattern[str]] = re.compile(r"^\\{2,}")
BACKSLASH_RUN: t.Final[re.Pattern[str]] = re.compile(r"\\{2,}")
SLASH_RUN: t.Final[re.Pattern[str]] = re.compile(r"/+")
TRAILING_SLASHES: t.Final[re.Pattern[str]] = re.compile(r"/+$")

FILE_SCHEME: t.Final[str] = "file:"
FILE_SCHEME_AUTHORITY: t.Final[re.Pattern[str]] = re.compile(
    r"^file://", re.IGNORECASE
)

# A URI scheme such as ``https:``. Drive letters are matched before this is used.
URI_SCHEME: t.Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

PERCENT_ESCAPE: t.Final[re.Pattern[str]] = re.compile(r"%[0-9A-Fa-f]{2}")
# A ``%`` that does not start a two-digit hex escape.
MALFORMED_ESCAPE: t.Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")

QUOTE_CHARS: t.Final[str] = "\"'"


def strip_wrapping(path: str) -> str:
    """Trim whitespace and one pair of surrounding quote characters."""
    stripped = path.strip()
    if (
        len(stripped) >= 2
        and stripped[0] in QUOTE_CHARS
        and stripped[-1] in QUOTE_CHARS
    ):
        return stripped[1:-1]
    return stripped


def is_unix_path(path: str) -> bool:
    """Return ``True`` for ``/``-rooted paths that do not encode a drive."""
    return (
        path.startswith("/")
        and WSL_MOUNT_ANY_CASE.match(path) is None
        and UNIX_DRIVE.match(path) is None
    )
