"""Async subprocess execution for the install and probe commands."""

from __future__ import annotations

import asyncio
import logging
import shutil

from setup_bdy.errors import CommandError

logger = logging.getLogger(__name__)

_OUTPUT_LIMIT = 2000


async def run_command(cmd: list[str]) -> tuple[int, str, str]:
    """Run a subprocess to completion, return (returncode, stdout, stderr).

    Uses asyncio.create_subprocess_exec -- never shell=True.
    The executable is looked up on PATH first so windows ``.cmd`` shims
    (npm, an npm-installed bdy) can be started.
    Raises OSError if the executable cannot be found or started.
    """
    executable = shutil.which(cmd[0])
    if executable is None:
        raise FileNotFoundError(f"Executable not found on PATH: {cmd[0]}")

    proc = await asyncio.create_subprocess_exec(
        executable,
        *cmd[1:],
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout_bytes, stderr_bytes = await proc.communicate()

    return (
        proc.returncode or 0,
        stdout_bytes.decode(errors="replace"),
        stderr_bytes.decode(errors="replace"),
    )


async def check_command(cmd: list[str]) -> str:
    """Run ``cmd`` and return its stdout, raising CommandError on failure."""
    logger.info("$ %s", " ".join(cmd))
    try:
        returncode, stdout, stderr = await run_command(cmd)
    except OSError as exc:
        raise CommandError(cmd, 127, str(exc)) from exc

    if returncode != 0:
        raise CommandError(cmd, returncode, (stderr or stdout).strip()[:_OUTPUT_LIMIT])
    return stdout
