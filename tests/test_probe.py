"""Tests for probe.py -- fail-soft detection of an existing bdy."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from setup_bdy.models import UNKNOWN
from setup_bdy.probe import (
    current_path,
    current_version,
    is_installed,
    parse_version_output,
    probe_installation,
)

# ═══════════════════════════════════════════════════════════════
# parse_version_output
# ═══════════════════════════════════════════════════════════════


class TestParseVersionOutput:
    def test_plain_version(self):
        assert parse_version_output("1.16.2\n") == "1.16.2"

    def test_dev_suffix_kept(self):
        assert parse_version_output("1.11.0-dev") == "1.11.0-dev"

    def test_update_banner_before_version(self):
        raw = "BDY CLI version:\nA new version of bdy is available! (1.15.6)\n\n1.12.8"
        assert parse_version_output(raw) == "1.12.8"

    def test_last_matching_line_wins(self):
        assert parse_version_output("1.0.0\nnoise\n2.0.0\ntrailing notice") == "2.0.0"

    def test_no_match_returns_trimmed_output(self):
        assert parse_version_output("  something odd\nhappened \n") == "something odd\nhappened"


# ═══════════════════════════════════════════════════════════════
# Probes
# ═══════════════════════════════════════════════════════════════


@patch("setup_bdy.probe.run_command", new_callable=AsyncMock)
class TestProbes:
    async def test_is_installed_true(self, mock_run):
        mock_run.return_value = (0, "/usr/local/bin/bdy\n", "")
        assert await is_installed() is True
        assert mock_run.call_args[0][0] == ["which", "bdy"]

    async def test_is_installed_nonzero(self, mock_run):
        mock_run.return_value = (1, "", "")
        assert await is_installed() is False

    async def test_is_installed_spawn_failure(self, mock_run):
        mock_run.side_effect = FileNotFoundError("which")
        assert await is_installed() is False

    async def test_windows_uses_where(self, mock_run, windows_x64):
        mock_run.return_value = (0, "C:\\tools\\bdy.exe\r\nC:\\other\\bdy.exe\r\n", "")
        assert await current_path(windows_x64) == "C:\\tools\\bdy.exe"
        assert mock_run.call_args[0][0] == ["where", "bdy"]

    async def test_current_version_parses_output(self, mock_run):
        mock_run.return_value = (0, "A new version of bdy is available! (1.15.6)\n1.12.8\n", "")
        assert await current_version() == "1.12.8"
        assert mock_run.call_args[0][0] == ["bdy", "version"]

    async def test_current_version_unknown_on_failure(self, mock_run):
        mock_run.side_effect = OSError("no bdy")
        assert await current_version() == UNKNOWN

    async def test_current_version_unknown_on_nonzero(self, mock_run):
        mock_run.return_value = (2, "", "boom")
        assert await current_version() == UNKNOWN

    async def test_current_path_trimmed(self, mock_run):
        mock_run.return_value = (0, "  /usr/local/bin/bdy \n", "")
        assert await current_path() == "/usr/local/bin/bdy"

    async def test_current_path_unknown_on_failure(self, mock_run):
        mock_run.return_value = (1, "", "")
        assert await current_path() == UNKNOWN


class TestProbeInstallation:
    async def test_not_installed_skips_other_probes(self):
        with (
            patch("setup_bdy.probe.is_installed", new_callable=AsyncMock, return_value=False),
            patch("setup_bdy.probe.current_version", new_callable=AsyncMock) as mock_version,
        ):
            result = await probe_installation()

        assert result.installed is False
        assert result.version == UNKNOWN
        assert result.path == UNKNOWN
        mock_version.assert_not_awaited()

    @pytest.mark.parametrize("version", ["1.16.2", UNKNOWN])
    async def test_installed(self, version, linux_x64):
        with (
            patch("setup_bdy.probe.is_installed", new_callable=AsyncMock, return_value=True),
            patch("setup_bdy.probe.current_version", new_callable=AsyncMock, return_value=version),
            patch(
                "setup_bdy.probe.current_path",
                new_callable=AsyncMock,
                return_value="/usr/local/bin/bdy",
            ),
        ):
            result = await probe_installation(linux_x64)

        assert result.installed is True
        assert result.version == version
        assert result.path == "/usr/local/bin/bdy"
