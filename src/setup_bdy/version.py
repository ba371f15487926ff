"""Look up the latest bdy release of a channel."""

from __future__ import annotations

import logging

import httpx

from setup_bdy.errors import VersionFetchError
from setup_bdy.models import Channel

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://es.buddy.works/bdy"


def latest_version_url(channel: Channel | str, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{channel}/latest"


async def fetch_latest_version(
    channel: Channel | str,
    http: httpx.AsyncClient,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Fetch the latest version string published for ``channel``.

    The body is plain text and is returned stripped but otherwise
    unvalidated.

    Raises:
        VersionFetchError: on a non-2xx response or any transport failure.
    """
    url = latest_version_url(channel, base_url)
    logger.debug("Fetching latest version from %s", url)

    try:
        response = await http.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise VersionFetchError(
            f"Failed to fetch latest version from {url}: {exc}", url=url
        ) from exc

    if not response.is_success:
        raise VersionFetchError(
            f"Failed to fetch latest version from {url}: "
            f"{response.status_code} {response.reason_phrase}",
            url=url,
            status_code=response.status_code,
        )

    return response.text.strip()
