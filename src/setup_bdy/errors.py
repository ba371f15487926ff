"""Exception hierarchy for setup-bdy.

All exceptions inherit from SetupBdyError (single catch point).
Messages end up in the pipeline log -- clear, actionable, no stack traces.
"""

from __future__ import annotations

_UNKNOWN_ERROR = "An unknown error occurred"


class SetupBdyError(Exception):
    """Base exception for all setup-bdy errors."""


class InvalidConfigurationError(SetupBdyError):
    """An input value is outside its allowed set."""


class PlatformError(SetupBdyError):
    """The host environment is not one bdy ships binaries for."""


class UnsupportedPlatformError(PlatformError):
    """Unknown operating system."""


class UnsupportedArchitectureError(PlatformError):
    """Unknown CPU architecture."""


class UnsupportedCombinationError(PlatformError):
    """Known OS and architecture that have no build together."""


class UnsupportedMethodForPlatformError(SetupBdyError):
    """Installation method cannot be used on this platform."""


class VersionFetchError(SetupBdyError):
    """Error fetching the latest version for a channel."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class InstallError(SetupBdyError):
    """Installation failed."""


class DownloadError(InstallError):
    """The release archive could not be downloaded."""


class CommandError(InstallError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, output: str = "") -> None:
        message = f"Command '{' '.join(cmd)}' failed with exit code {returncode}"
        if output:
            message = f"{message}: {output}"
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.output = output


def normalize_error(error: object) -> str:
    """Turn anything raised during a run into a plain message."""
    if isinstance(error, BaseException):
        return str(error) or _UNKNOWN_ERROR
    if isinstance(error, str):
        return error
    return _UNKNOWN_ERROR
