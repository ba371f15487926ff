"""Privilege escalation for install commands."""

from __future__ import annotations

from setup_bdy.models import PlatformInfo


def elevated(cmd: list[str], platform_info: PlatformInfo) -> list[str]:
    """Prefix ``cmd`` with sudo, except on windows where runners are already admin."""
    if platform_info.is_windows:
        return list(cmd)
    return ["sudo", *cmd]
