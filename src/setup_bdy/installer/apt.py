"""Install bdy from Buddy's APT repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from setup_bdy.installer.subprocess import check_command
from setup_bdy.models import Architecture, Channel, PlatformInfo
from setup_bdy.version import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

KEYRING = "/usr/share/keyrings/buddy.gpg"
KEYSERVER = "hkp://keyserver.ubuntu.com:80"
KEY_FINGERPRINT = "eb39332e766364ca6220e8dc631c5a16310cc0ad"
SOURCES_LIST = "/etc/apt/sources.list.d/buddy.list"

_DEB_ARCH: dict[Architecture, str] = {
    Architecture.X64: "amd64",
    Architecture.ARM64: "arm64",
}


def source_entry(
    channel: Channel | str, architecture: Architecture, base_url: str = DEFAULT_BASE_URL
) -> str:
    return (
        f"deb [arch={_DEB_ARCH[architecture]} signed-by={KEYRING}] "
        f"{base_url.rstrip('/')}/apt-repo {channel} main"
    )


@dataclass(frozen=True, slots=True)
class AptInstaller:
    """Registers the channel's APT repository and installs the bdy package.

    The package version is whatever the channel's repository serves.
    """

    platform_info: PlatformInfo
    base_url: str = DEFAULT_BASE_URL

    async def install(self, channel: Channel, version: str) -> None:
        logger.info("Installing BDY CLI via APT...")
        entry = source_entry(channel, self.platform_info.architecture, self.base_url)

        await check_command(["sudo", "apt-get", "update"])
        await check_command(["sudo", "apt-get", "install", "-y", "software-properties-common"])
        await check_command(
            [
                "sudo",
                "gpg",
                "--homedir",
                "/tmp",
                "--no-default-keyring",
                "--keyring",
                KEYRING,
                "--keyserver",
                KEYSERVER,
                "--recv-keys",
                KEY_FINGERPRINT,
            ]
        )
        await check_command(["bash", "-c", f'echo "{entry}" | sudo tee {SOURCES_LIST} > /dev/null'])
        await check_command(["sudo", "apt-get", "update"])
        await check_command(["sudo", "apt-get", "install", "-y", "bdy"])

        logger.info("BDY CLI installed successfully via APT")
