"""Report results to the pipeline (GitHub Actions workflow commands and files)."""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path

from setup_bdy.models import Outputs


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def _issue_command(command: str, message: str, **properties: str) -> None:
    props = ",".join(f"{key}={_escape_property(val)}" for key, val in properties.items())
    head = f"::{command} {props}" if props else f"::{command}"
    sys.stdout.write(f"{head}::{_escape_data(message)}{os.linesep}")
    sys.stdout.flush()


def _append_file_command(env_var: str, name: str, value: str) -> bool:
    """Append ``name<<delimiter`` block to the file named by ``env_var``.

    Returns False when the runner did not provide the file.
    """
    file_path = os.environ.get(env_var, "")
    if not file_path:
        return False

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(
            f"Unexpected input: name/value should not contain the delimiter {delimiter}"
        )

    with Path(file_path).open("a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}")
    return True


def export_variable(name: str, value: str) -> None:
    """Make ``name`` visible to this process and to later pipeline steps."""
    os.environ[name] = value
    if not _append_file_command("GITHUB_ENV", name, value):
        _issue_command("set-env", value, name=name)


def set_output(name: str, value: str) -> None:
    if not _append_file_command("GITHUB_OUTPUT", name, value):
        sys.stdout.write(os.linesep)
        _issue_command("set-output", value, name=name)


def set_failed(message: str) -> None:
    """Surface ``message`` as the step's error annotation."""
    _issue_command("error", message)


def report_outputs(outputs: Outputs) -> None:
    export_variable("BDY_VERSION", outputs.bdy_version)
    export_variable("BDY_PATH", outputs.bdy_path)
    set_output("bdy_version", outputs.bdy_version)
    set_output("bdy_path", outputs.bdy_path)
