"""Pick the installer for an installation method."""

from __future__ import annotations

from setup_bdy.errors import InvalidConfigurationError
from setup_bdy.installer.apt import AptInstaller
from setup_bdy.installer.base import BdyInstaller
from setup_bdy.installer.download import DownloadInstaller
from setup_bdy.installer.npm import NpmInstaller
from setup_bdy.models import InstallationMethod, PlatformInfo
from setup_bdy.platform import validate_installation_method
from setup_bdy.version import DEFAULT_BASE_URL


def resolve_installer(
    method: InstallationMethod | str,
    platform_info: PlatformInfo,
    base_url: str = DEFAULT_BASE_URL,
) -> BdyInstaller:
    """Build the installer for ``method``.

    Raises UnsupportedMethodForPlatformError for apt outside linux.
    """
    try:
        im = InstallationMethod(method)
    except ValueError:
        raise InvalidConfigurationError(f"Unsupported installation method: {method}") from None

    validate_installation_method(im, platform_info)

    match im:
        case InstallationMethod.DOWNLOAD:
            return DownloadInstaller(platform_info, base_url=base_url)
        case InstallationMethod.APT:
            return AptInstaller(platform_info, base_url=base_url)
        case InstallationMethod.NPM:
            return NpmInstaller(platform_info)
