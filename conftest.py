"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from path_normalizer.platform import PLATFORM_OVERRIDE_ENV


@pytest.fixture(autouse=True)
def clear_platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure no platform override leaks in from the calling shell."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
    yield
