"""Platform context shared across path-normalizer modules.

Every operation that depends on the host (the home directory, or whether
paths should come out in Windows form) reads it through a
:class:`PlatformContext`. Callers may inject their own context; otherwise the
process-wide :class:`SystemPlatform` is used.
"""

from __future__ import annotations

import dataclasses as dc
import ntpath
import os
import posixpath
import sys
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from types import ModuleType

# Test suites set this override to emulate alternative platforms (for
# example Windows) without needing to run on a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PATH_NORMALIZER_PLATFORM_OVERRIDE"

# Prefix of ``sys.platform`` values that select Windows path semantics.
_WINDOWS_PREFIX: t.Final[str] = "win"


class PlatformContext(t.Protocol):
    """Capability exposing the host details path normalization depends on."""

    def home_directory(self) -> str:
        """Return the current user's home directory."""
        ...

    def current_platform(self) -> str:
        """Return a ``sys.platform`` style identifier such as ``"win32"``."""
        ...


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


class SystemPlatform:
    """Read platform details from the running interpreter."""

    def home_directory(self) -> str:
        """Return the home directory reported by the operating system."""
        return os.path.expanduser("~")

    def current_platform(self) -> str:
        """Return the effective platform name, honouring test overrides."""
        if override := os.getenv(PLATFORM_OVERRIDE_ENV):
            return _normalise(override)
        return _normalise(sys.platform)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return "SystemPlatform()"


@dc.dataclass(frozen=True, slots=True)
class StaticPlatform:
    """
    Fixed platform details, useful for tests and embedding hosts.

    Attributes
    ----------
    platform : str
        ``sys.platform`` style identifier, e.g. ``"linux"`` or ``"win32"``.
    home : str
        Home directory returned by :meth:`home_directory`.
    """

    platform: str
    home: str = ""

    def home_directory(self) -> str:
        """Return the configured home directory."""
        return self.home

    def current_platform(self) -> str:
        """Return the configured platform name."""
        return _normalise(self.platform)


_SYSTEM_PLATFORM: t.Final[SystemPlatform] = SystemPlatform()


def resolve_context(context: PlatformContext | None = None) -> PlatformContext:
    """Return *context*, or the shared :class:`SystemPlatform` when unset."""
    return _SYSTEM_PLATFORM if context is None else context


def is_windows(context: PlatformContext | None = None) -> bool:
    """Return ``True`` when *context* (default: current) is a Windows host."""
    return resolve_context(context).current_platform().startswith(_WINDOWS_PREFIX)


def path_module(context: PlatformContext | None = None) -> ModuleType:
    """Return the lexical path module (``ntpath``/``posixpath``) for *context*."""
    return ntpath if is_windows(context) else posixpath


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "PlatformContext",
    "StaticPlatform",
    "SystemPlatform",
    "is_windows",
    "path_module",
    "resolve_context",
]
