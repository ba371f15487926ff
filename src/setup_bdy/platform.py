"""Map the host OS/CPU to a supported bdy build."""

from __future__ import annotations

import platform as _host

from setup_bdy.errors import (
    UnsupportedArchitectureError,
    UnsupportedCombinationError,
    UnsupportedMethodForPlatformError,
    UnsupportedPlatformError,
)
from setup_bdy.models import Architecture, InstallationMethod, Platform, PlatformInfo

# Keys are lower-cased. Node-style names (win32, x64) are accepted next to
# what platform.system()/platform.machine() report.
_PLATFORM_MAP: dict[str, Platform] = {
    "linux": Platform.LINUX,
    "darwin": Platform.DARWIN,
    "windows": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
}

_ARCH_MAP: dict[str, Architecture] = {
    "x64": Architecture.X64,
    "x86_64": Architecture.X64,
    "amd64": Architecture.X64,
    "arm64": Architecture.ARM64,
    "aarch64": Architecture.ARM64,
}

_UNSUPPORTED_COMBINATIONS: frozenset[tuple[Platform, Architecture]] = frozenset(
    {
        (Platform.DARWIN, Architecture.X64),
        (Platform.WINDOWS, Architecture.ARM64),
    }
)


def resolve_platform(system: str, machine: str) -> PlatformInfo:
    """Resolve raw OS and architecture names into a PlatformInfo.

    Raises:
        UnsupportedPlatformError: ``system`` is not a known OS.
        UnsupportedArchitectureError: ``machine`` is not x64 or arm64.
        UnsupportedCombinationError: no bdy build exists for the pair.
    """
    plat = _PLATFORM_MAP.get(system.strip().lower())
    if plat is None:
        raise UnsupportedPlatformError(
            f"Unsupported platform: {system}. Only linux, darwin and windows are supported."
        )

    arch = _ARCH_MAP.get(machine.strip().lower())
    if arch is None:
        raise UnsupportedArchitectureError(
            f"Unsupported architecture: {machine}. Only x64 and arm64 are supported."
        )

    if (plat, arch) in _UNSUPPORTED_COMBINATIONS:
        raise UnsupportedCombinationError(
            f"Unsupported platform and architecture combination: {plat.value}-{arch.value}."
        )

    platform_name = "win" if plat is Platform.WINDOWS else plat.value
    return PlatformInfo(
        platform=plat,
        architecture=arch,
        download_prefix=f"{platform_name}-{arch.value}",
        file_extension=".zip" if plat is Platform.WINDOWS else ".tar.gz",
    )


def detect_platform() -> PlatformInfo:
    """Resolve the PlatformInfo of the machine we are running on."""
    return resolve_platform(_host.system(), _host.machine())


def validate_installation_method(
    method: InstallationMethod, platform_info: PlatformInfo
) -> None:
    """Reject methods the platform cannot use (apt outside linux)."""
    if method is InstallationMethod.APT and platform_info.platform is not Platform.LINUX:
        raise UnsupportedMethodForPlatformError(
            f"Installation method '{method.value}' is only supported on linux, "
            f"not on {platform_info.platform.value}."
        )
