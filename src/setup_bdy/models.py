"""Domain models for setup-bdy. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

UNKNOWN = "unknown"

# ─── Enumerations ─────────────────────────────────────────────


class Platform(StrEnum):
    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"


class Architecture(StrEnum):
    X64 = "x64"
    ARM64 = "arm64"


class Channel(StrEnum):
    DEV = "dev"
    BETA = "beta"
    STAGE = "stage"
    MASTER = "master"
    PROD = "prod"


class InstallationMethod(StrEnum):
    DOWNLOAD = "download"
    APT = "apt"
    NPM = "npm"


# ─── Records ──────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Host platform plus the artifact naming derived from it."""

    platform: Platform
    architecture: Architecture
    download_prefix: str
    file_extension: str

    @property
    def is_windows(self) -> bool:
        return self.platform is Platform.WINDOWS


@dataclass(frozen=True, slots=True)
class Inputs:
    env: Channel = Channel.PROD
    version: str | None = None
    installation_method: InstallationMethod = InstallationMethod.DOWNLOAD
    skip_if_installed: bool = False


@dataclass(frozen=True, slots=True)
class Installation:
    """What the probes found on the host. Never raises, degrades to UNKNOWN."""

    installed: bool
    version: str = UNKNOWN
    path: str = UNKNOWN


@dataclass(frozen=True, slots=True)
class Outputs:
    bdy_version: str
    bdy_path: str
