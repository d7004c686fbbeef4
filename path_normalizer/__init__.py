"""Normalise WSL, MSYS, UNC, Windows and ``file:`` URI paths to one canonical form.

All helpers are pure string transforms: they never touch the filesystem and
never raise for string input. Platform-dependent behaviour is read through a
:class:`~path_normalizer.platform.PlatformContext`, which callers may inject.
"""

from __future__ import annotations

from .classify import PathKind, classify_path
from .convert import convert_to_windows_path
from .normalize import expand_home, normalize_path
from .platform import (
    PLATFORM_OVERRIDE_ENV,
    PlatformContext,
    StaticPlatform,
    SystemPlatform,
)
from .uri import decode_possible_file_uri, file_uri_to_path

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "PathKind",
    "PlatformContext",
    "StaticPlatform",
    "SystemPlatform",
    "classify_path",
    "convert_to_windows_path",
    "decode_possible_file_uri",
    "expand_home",
    "file_uri_to_path",
    "normalize_path",
]
