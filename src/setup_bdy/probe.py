"""Best-effort queries against the host: is bdy installed, which version, where.

None of these raise. Failures degrade to False / UNKNOWN so a probe never
hides the real error of a later step.
"""

from __future__ import annotations

import logging
import re

from setup_bdy.installer.subprocess import run_command
from setup_bdy.models import UNKNOWN, Installation, PlatformInfo

logger = logging.getLogger(__name__)

BINARY_NAME = "bdy"

# "1.16.2", "1.11.0-dev"
_VERSION_LINE = re.compile(r"^\d+\.\d+\.\d+(-[\w.]+)?")


def _lookup_command(platform_info: PlatformInfo | None) -> list[str]:
    if platform_info is not None and platform_info.is_windows:
        return ["where", BINARY_NAME]
    return ["which", BINARY_NAME]


async def _run_quiet(cmd: list[str]) -> str | None:
    """Stdout of ``cmd``, or None if it could not run or exited non-zero."""
    try:
        returncode, stdout, _stderr = await run_command(cmd)
    except OSError as exc:
        logger.debug("Probe %s could not run: %s", cmd, exc)
        return None
    if returncode != 0:
        return None
    return stdout


def parse_version_output(output: str) -> str:
    """Extract the version from ``bdy version`` output.

    The CLI may print update notices around the version, e.g.::

        BDY CLI version:
        A new version of bdy is available! (1.15.6)

        1.12.8

    Lines are scanned from the last one up; the first that looks like a
    version wins. Without a match the trimmed output is returned as is.
    """
    text = output.strip()
    for line in reversed(text.splitlines()):
        line = line.strip()
        if line and _VERSION_LINE.match(line):
            return line
    return text


async def is_installed(platform_info: PlatformInfo | None = None) -> bool:
    return await _run_quiet(_lookup_command(platform_info)) is not None


async def current_version() -> str:
    output = await _run_quiet([BINARY_NAME, "version"])
    if output is None:
        return UNKNOWN
    return parse_version_output(output)


async def current_path(platform_info: PlatformInfo | None = None) -> str:
    output = await _run_quiet(_lookup_command(platform_info))
    if output is None:
        return UNKNOWN
    lines = output.strip().splitlines()
    # `where` lists every match on PATH; the first one is what runs.
    return lines[0].strip() if lines else ""


async def probe_installation(platform_info: PlatformInfo | None = None) -> Installation:
    """Run all probes. Version and path are only queried when bdy is found."""
    if not await is_installed(platform_info):
        return Installation(installed=False)
    return Installation(
        installed=True,
        version=await current_version(),
        path=await current_path(platform_info),
    )
