"""Install bdy from the release archive (curl + tar)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from setup_bdy.errors import CommandError, DownloadError
from setup_bdy.installer.privileges import elevated
from setup_bdy.installer.subprocess import check_command
from setup_bdy.models import Channel, Platform, PlatformInfo
from setup_bdy.version import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

INSTALL_DIR = "/usr/local/bin"


def artifact_url(
    channel: Channel | str,
    version: str,
    platform_info: PlatformInfo,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    return (
        f"{base_url.rstrip('/')}/{channel}/{version}/"
        f"{platform_info.download_prefix}{platform_info.file_extension}"
    )


@dataclass(frozen=True, slots=True)
class DownloadInstaller:
    """Downloads the archive for this platform and unpacks the binary."""

    platform_info: PlatformInfo
    base_url: str = DEFAULT_BASE_URL
    workdir: Path = Path()

    @property
    def archive(self) -> Path:
        return self.workdir / f"bdy{self.platform_info.file_extension}"

    async def install(self, channel: Channel, version: str) -> None:
        info = self.platform_info
        url = artifact_url(channel, version, info, self.base_url)
        logger.info(
            "Installing BDY CLI %s via download method for %s...", version, info.download_prefix
        )

        if info.platform is Platform.DARWIN:
            await check_command(elevated(["mkdir", "-p", "-m", "775", INSTALL_DIR], info))

        try:
            await check_command(["curl", "-fL", url, "-o", str(self.archive)])
        except CommandError as exc:
            raise DownloadError(
                f"Failed to download BDY CLI {version} from {channel} channel. "
                f"The version may not exist or the URL is incorrect: {url}"
            ) from exc

        try:
            if info.is_windows:
                await check_command(["tar", "-xf", str(self.archive), "-C", str(self.workdir)])
            else:
                await check_command(
                    elevated(["tar", "-zxf", str(self.archive), "-C", f"{INSTALL_DIR}/"], info)
                )
        finally:
            self.archive.unlink(missing_ok=True)

        logger.info("BDY CLI installed successfully via download method")
