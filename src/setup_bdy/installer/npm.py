"""Install bdy globally from the npm registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from setup_bdy.installer.privileges import elevated
from setup_bdy.installer.subprocess import check_command
from setup_bdy.models import Channel, PlatformInfo

logger = logging.getLogger(__name__)

PACKAGE_NAME = "bdy"


def package_spec(channel: Channel | str) -> str:
    """Channels other than prod are published as npm dist-tags."""
    if channel == Channel.PROD:
        return PACKAGE_NAME
    return f"{PACKAGE_NAME}@{channel}"


@dataclass(frozen=True, slots=True)
class NpmInstaller:
    platform_info: PlatformInfo

    async def install(self, channel: Channel, version: str) -> None:
        logger.info("Installing BDY CLI via NPM...")
        await check_command(
            elevated(["npm", "i", "-g", package_spec(channel)], self.platform_info)
        )
        logger.info("BDY CLI installed successfully via NPM")
