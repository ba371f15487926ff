"""Install bdy if needed and report where it ended up."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from setup_bdy.inputs import get_inputs
from setup_bdy.installer.resolver import resolve_installer
from setup_bdy.models import Outputs
from setup_bdy.platform import detect_platform
from setup_bdy.probe import current_path, current_version, probe_installation
from setup_bdy.version import DEFAULT_BASE_URL, fetch_latest_version

logger = logging.getLogger(__name__)


async def setup(
    http: httpx.AsyncClient,
    source: Mapping[str, str] | None = None,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> Outputs:
    """Run the whole setup in one pass.

    Inputs, platform and method are validated before anything touches the
    host. An existing install is kept when ``skip_if_installed`` is set and
    overwritten otherwise.

    Returns:
        The bdy version and path found after installation.

    Raises:
        SetupBdyError: on the first failing step; nothing is reported then.
    """
    inputs = get_inputs(source)
    platform_info = detect_platform()
    installer = resolve_installer(inputs.installation_method, platform_info, base_url)

    existing = await probe_installation(platform_info)
    if existing.installed:
        if inputs.skip_if_installed:
            logger.info(
                "BDY CLI is already installed (%s). Skipping installation.", existing.version
            )
            return Outputs(bdy_version=existing.version, bdy_path=existing.path)
        logger.warning("BDY CLI is already installed (%s). Reinstalling...", existing.version)

    version = inputs.version or await fetch_latest_version(inputs.env, http, base_url)
    logger.info("Using BDY CLI version: %s from %s channel", version, inputs.env)

    await installer.install(inputs.env, version)

    return Outputs(
        bdy_version=await current_version(),
        bdy_path=await current_path(platform_info),
    )
