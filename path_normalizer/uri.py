"""Unwrap ``file:`` URIs and percent-encoded paths into plain path strings.

Clients frequently hand over paths as ``file:///C:/Users/x`` URIs, or as bare
percent-encoded strings without a scheme. Nothing here raises for string
input: each decoder returns ``None`` when it cannot make sense of its input
and the public helpers fall through to the next, less ambitious, strategy.
"""

from __future__ import annotations

import logging
import posixpath
import typing as t
from urllib.parse import unquote, urlsplit

from . import _patterns as patterns
from .platform import PlatformContext, is_windows

logger = logging.getLogger(__name__)

_LOCAL_HOSTS: t.Final[frozenset[str]] = frozenset({"", "localhost"})
_DIRECTORY_SUFFIXES: t.Final[tuple[str, ...]] = ("/", "/.", "/..")


def percent_decode(text: str) -> str | None:
    """
    Strictly decode ``%XX`` escapes in *text*.

    Returns
    -------
    str | None
        The decoded text, or ``None`` when *text* holds a ``%`` that does not
        start a hex escape or the escapes do not form valid UTF-8.
    """
    if patterns.MALFORMED_ESCAPE.search(text):
        return None
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        return None


def _remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` in a URI path, keeping a directory's trailing ``/``."""
    if not path.startswith("/"):
        return path
    resolved = posixpath.normpath(path)
    if path.endswith(_DIRECTORY_SUFFIXES) and not resolved.endswith("/"):
        resolved += "/"
    return resolved


def _windows_path_from_uri(host: str, path: str) -> str:
    """Apply Windows conventions to a decoded URI path."""
    if path.startswith("/") and patterns.WINDOWS_DRIVE.match(path[1:3]):
        path = path[1:]
    elif host.lower() not in _LOCAL_HOSTS:
        path = f"//{host}{path}"
    return path.replace("/", "\\")


def _parse_file_uri(uri: str, context: PlatformContext | None) -> str | None:
    """Return the path component of *uri*, or ``None`` if it cannot be parsed."""
    try:
        parts = urlsplit(uri)
    except ValueError:
        return None

    path = percent_decode(_remove_dot_segments(parts.path))
    if path is None:
        return None
    if is_windows(context):
        return _windows_path_from_uri(parts.netloc, path)
    return path


def _strip_scheme_and_decode(uri: str) -> str | None:
    """Drop a leading ``file://`` and percent-decode whatever remains."""
    return percent_decode(patterns.FILE_SCHEME_AUTHORITY.sub("", uri, count=1))


def file_uri_to_path(uri: str, *, context: PlatformContext | None = None) -> str:
    """
    Convert a ``file:`` URI to a filesystem path.

    On Windows a leading ``/`` before a drive letter is removed, a remote host
    becomes a UNC prefix and separators are flipped to backslashes. Values that
    are empty, not strings or not ``file:`` URIs are returned unchanged.

    Parameters
    ----------
    uri : str
        Candidate URI such as ``file:///home/user/notes.txt``.
    context : PlatformContext | None, optional
        Platform details. Defaults to the running interpreter.

    Returns
    -------
    str
        The decoded path. When the URI cannot be parsed the result is a
        best-effort decode of the text after ``file://``, or *uri* itself.
    """
    if not uri or not isinstance(uri, str):
        return uri
    if not uri.startswith(patterns.FILE_SCHEME):
        return uri

    if (path := _parse_file_uri(uri, context)) is not None:
        return path

    logger.debug("Could not parse file URI %r; falling back to scheme stripping", uri)
    if (decoded := _strip_scheme_and_decode(uri)) is not None:
        return decoded

    logger.debug("Could not decode %r; returning it unchanged", uri)
    return uri


def decode_possible_file_uri(
    path: str, *, context: PlatformContext | None = None
) -> str:
    """Return *path* with any ``file:`` scheme or percent-encoding removed."""
    if not isinstance(path, str):
        return path
    if path.startswith(patterns.FILE_SCHEME):
        return file_uri_to_path(path, context=context)
    if not patterns.PERCENT_ESCAPE.search(path):
        return path

    if (decoded := percent_decode(path)) is not None:
        return decoded

    logger.debug("Ignoring invalid percent-encoding in %r", path)
    return path


__all__ = ["decode_possible_file_uri", "file_uri_to_path", "percent_decode"]
