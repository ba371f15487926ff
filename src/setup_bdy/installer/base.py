"""Installer protocol -- one implementation per installation method."""

from __future__ import annotations

from typing import Protocol

from setup_bdy.models import Channel


class BdyInstaller(Protocol):
    """Protocol for method-specific install logic."""

    async def install(self, channel: Channel, version: str) -> None:
        """Install bdy. Raises InstallError on the first failing step."""
        ...
