"""Read and validate the action inputs.

The pipeline passes each input as an ``INPUT_<NAME>`` environment variable.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import StrEnum
from typing import TypeVar

from setup_bdy.errors import InvalidConfigurationError
from setup_bdy.models import Channel, InstallationMethod, Inputs

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")

E = TypeVar("E", bound=StrEnum)


def input_key(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, source: Mapping[str, str] | None = None) -> str:
    """Return the trimmed value of an input, or "" when it is not set."""
    env = os.environ if source is None else source
    return env.get(input_key(name), "").strip()


def get_boolean_input(name: str, source: Mapping[str, str] | None = None) -> bool:
    """Parse a YAML 1.2 core-schema boolean input. Unset means False."""
    value = get_input(name, source)
    if not value or value in _FALSE_VALUES:
        return False
    if value in _TRUE_VALUES:
        return True
    raise InvalidConfigurationError(
        f"Invalid {name}: {value}. Must be one of: "
        f"{', '.join(_TRUE_VALUES + _FALSE_VALUES)}"
    )


def _parse_choice(name: str, value: str, enum_cls: type[E]) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidConfigurationError(
            f"Invalid {name}: {value}. Must be one of: {allowed}"
        ) from None


def get_inputs(source: Mapping[str, str] | None = None) -> Inputs:
    """Retrieve and validate all inputs of the action."""
    env = get_input("env", source) or Channel.PROD.value
    version = get_input("version", source) or None
    method = get_input("installation_method", source) or InstallationMethod.DOWNLOAD.value

    return Inputs(
        env=_parse_choice("env", env, Channel),
        version=version,
        installation_method=_parse_choice("installation_method", method, InstallationMethod),
        skip_if_installed=get_boolean_input("skip_if_installed", source),
    )
