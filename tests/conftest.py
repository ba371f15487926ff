"""Shared test fixtures."""

from __future__ import annotations

import pytest

from setup_bdy.models import PlatformInfo
from setup_bdy.platform import resolve_platform


@pytest.fixture
def linux_x64() -> PlatformInfo:
    return resolve_platform("Linux", "x86_64")


@pytest.fixture
def darwin_arm64() -> PlatformInfo:
    return resolve_platform("Darwin", "arm64")


@pytest.fixture
def windows_x64() -> PlatformInfo:
    return resolve_platform("Windows", "AMD64")


@pytest.fixture(autouse=True)
def _no_pipeline_files(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from writing into a real runner's GITHUB_ENV/GITHUB_OUTPUT."""
    monkeypatch.delenv("GITHUB_ENV", raising=False)
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    monkeypatch.delenv("BDY_BASE_URL", raising=False)
