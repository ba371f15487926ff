"""Command-line entry point: run setup and report to the pipeline."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

import httpx

from setup_bdy.errors import InvalidConfigurationError, normalize_error
from setup_bdy.inputs import input_key
from setup_bdy.models import Outputs
from setup_bdy.orchestrator import setup
from setup_bdy.outputs import report_outputs, set_failed
from setup_bdy.version import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Install the BDY CLI in a CI step and report its version and path."
    )
    parser.add_argument(
        "--env",
        default=None,
        help="Release channel. Defaults to INPUT_ENV or prod.",
    )
    parser.add_argument(
        "--bdy-version",
        default=None,
        help="Exact version to install. Defaults to INPUT_VERSION or the channel's latest.",
    )
    parser.add_argument(
        "--installation-method",
        default=None,
        help="download, apt or npm. Defaults to INPUT_INSTALLATION_METHOD or download.",
    )
    parser.add_argument(
        "--skip-if-installed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep an existing bdy; --no-skip-if-installed reinstalls it.",
    )
    return parser.parse_args(argv)


def _flag(value: bool | None) -> str | None:
    if value is None:
        return None
    return "true" if value else "false"


def _input_source(args: argparse.Namespace) -> dict[str, str]:
    """Environment inputs with command-line overrides applied."""
    source = dict(os.environ)
    overrides = {
        "env": args.env,
        "version": args.bdy_version,
        "installation_method": args.installation_method,
        "skip_if_installed": _flag(args.skip_if_installed),
    }
    for name, value in overrides.items():
        if value is not None:
            source[input_key(name)] = value
    return source


def _log_level() -> int:
    name = os.environ.get("SETUP_BDY_LOG_LEVEL", "") or "INFO"
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise InvalidConfigurationError(
            f"Invalid SETUP_BDY_LOG_LEVEL: {name}. Must be one of: DEBUG, INFO, WARNING, ERROR"
        )
    return level


async def _run(source: dict[str, str]) -> Outputs:
    base_url = os.environ.get("BDY_BASE_URL", "") or DEFAULT_BASE_URL
    async with httpx.AsyncClient(follow_redirects=True) as http:
        return await setup(http, source, base_url=base_url)


def run_cli(argv: list[str] | None = None) -> int:
    """Run setup; 0 on success, 1 with an error annotation on any failure."""
    try:
        args = _parse_args(argv)
        logging.basicConfig(
            level=_log_level(),
            format="%(message)s",
            stream=sys.stdout,
        )
        outputs = asyncio.run(_run(_input_source(args)))
    except Exception as exc:
        logger.debug("Setup failed", exc_info=True)
        set_failed(normalize_error(exc))
        return 1

    report_outputs(outputs)
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
