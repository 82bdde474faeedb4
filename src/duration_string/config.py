from __future__ import annotations

import os
from typing import Mapping, Optional, Union

from duration_string.durations import DurationString


ENV_DEFAULT_DURATION = "DURATION_STRING_DEFAULT"


def _env(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    source = os.environ if environ is None else environ
    val = source.get(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def parse_duration_setting(value: str, *, name: str) -> DurationString:
    try:
        return DurationString.from_string(value)
    except ValueError as e:
        raise ValueError(f"{name} invalid: {e}") from e


def env_duration(name: str, *, environ: Optional[Mapping[str, str]] = None) -> Optional[DurationString]:
    """
    Reads a duration from environment variable `name`.
    Returns None when the variable is unset or blank.
    """
    raw = _env(name, environ)
    if raw is None:
        return None
    return parse_duration_setting(raw, name=name)


def resolve_duration(
    *,
    cli_value: Optional[str],
    env_name: str,
    default: Union[str, DurationString],
    environ: Optional[Mapping[str, str]] = None,
) -> DurationString:
    """
    Resolution order (first hit wins):
    - `cli_value`
    - environment variable `env_name`
    - `default`
    """
    if cli_value is not None:
        return parse_duration_setting(cli_value, name=env_name)

    from_env = env_duration(env_name, environ=environ)
    if from_env is not None:
        return from_env

    if isinstance(default, DurationString):
        return default
    return parse_duration_setting(default, name=env_name)
