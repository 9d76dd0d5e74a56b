"""
Configuration — Turn raw poll options into a validated PollConfig.

Options arrive either as a mapping (library callers) or as inline YAML text
(the CLI's --options flag, environment variables in deploy scripts). Both
are validated once here and converted into a frozen PollConfig.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from .protocol import (
    ConfigError,
    DEFAULT_DELAY_SEC,
    DEFAULT_TIMEOUT_SEC,
    PollConfig,
)

DEFAULT_OPTIONS: dict[str, Any] = {
    "delay_sec": DEFAULT_DELAY_SEC,
    "timeout_sec": DEFAULT_TIMEOUT_SEC,
    "verbose": False,
}

OptionsSource = Union[None, str, Mapping[str, Any], PollConfig]


def parse_options(text: Optional[str]) -> dict[str, Any]:
    """
    Parse an inline YAML (or JSON) mapping of poll options.

    Args:
        text: e.g. "{timeout_sec: 5, delay_sec: 0.5}". Empty means no options.

    Returns:
        The parsed mapping, not yet validated.
    """
    import yaml

    if text is None or not text.strip():
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse options: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid options: expected a mapping, got {type(data).__name__}"
        )
    return data


def load_options(source: OptionsSource = None) -> PollConfig:
    """Build a PollConfig from None, YAML text, a mapping, or a PollConfig."""
    if isinstance(source, PollConfig):
        return source
    if isinstance(source, str):
        return PollConfig.from_options(parse_options(source))
    return PollConfig.from_options(source)


def merge_options(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of `base` with the non-None values of `override` applied."""
    merged = dict(base)
    for key, value in override.items():
        if value is not None:
            merged[key] = value
    return merged
