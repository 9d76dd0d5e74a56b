"""
waitutil Protocol — Poll configuration, outcomes and error types.

This module defines the data structures shared by the poller, the probes
and the public helpers.

Assumptions and edge cases:
- PollConfig is frozen; it is built once per wait call and never mutated.
- from_options() never mutates the mapping it is given. Unknown keys are
  rejected before any polling begins.
- A key present with a value of None falls back to its default, so callers
  can forward optional settings without filtering them first.
- Outcome.of() is only used at the public boundary, where callers may
  still hand back a bare bool or a (flag, detail) pair.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, asdict
from numbers import Real
from typing import Any, Optional


DEFAULT_DELAY_SEC = 1
DEFAULT_TIMEOUT_SEC = 60

KNOWN_OPTIONS = frozenset({"delay_sec", "timeout_sec", "verbose"})


# ── Errors ───────────────────────────────────────────────────────────

class WaitError(Exception):
    """Base class for errors raised by waitutil."""


class ConfigError(WaitError, ValueError):
    """Raised when poll options are invalid."""

    def __init__(self, message: str, invalid_keys: tuple[str, ...] = ()):
        super().__init__(message)
        self.invalid_keys = invalid_keys


class WaitTimeoutError(WaitError, TimeoutError):
    """Raised when the deadline passes and the condition still fails."""

    def __init__(
        self,
        description: str,
        timeout_sec: float,
        elapsed_sec: float,
        detail: Optional[str] = None,
    ):
        self.description = description
        self.timeout_sec = timeout_sec
        self.elapsed_sec = elapsed_sec
        self.detail = detail
        message = f"Timed out waiting for {description} ({timeout_sec} seconds elapsed)"
        if detail is not None:
            message += f": {detail}"
        super().__init__(message)


# ── Outcome ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Outcome:
    """
    Result of a single poll attempt.

    Attributes:
        success:  Whether the condition has been met.
        detail:   Optional message surfaced in the timeout error.
    """
    success: bool
    detail: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def of(cls, value: Any) -> Outcome:
        """Normalize a condition's return value into an Outcome."""
        if isinstance(value, Outcome):
            return value
        if isinstance(value, (tuple, list)):
            if not value:
                return cls(False)
            detail = value[1] if len(value) > 1 else None
            return cls(bool(value[0]), None if detail is None else str(detail))
        return cls(bool(value))


# ── Configuration ────────────────────────────────────────────────────

@dataclass(frozen=True)
class PollConfig:
    """
    Settings for a single wait call.

    Attributes:
        delay_sec:    Seconds to sleep between failed attempts.
        timeout_sec:  Seconds after which a failed attempt raises.
        verbose:      Log start and success messages at INFO.
    """
    delay_sec: float = DEFAULT_DELAY_SEC
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    verbose: bool = False

    def __post_init__(self) -> None:
        for name in ("delay_sec", "timeout_sec"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigError(
                    f"Invalid type for {name}: expected number, got {type(value).__name__}"
                )
            if math.isnan(value) or value < 0:
                raise ConfigError(f"Invalid value for {name}: must be non-negative, got {value}")
            if name == "delay_sec" and math.isinf(value):
                raise ConfigError(f"Invalid value for delay_sec: must be finite, got {value}")
        if not isinstance(self.verbose, bool):
            raise ConfigError(
                f"Invalid type for verbose: expected bool, got {type(self.verbose).__name__}"
            )

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> PollConfig:
        """Validate a raw options mapping and build a PollConfig from it."""
        if options is None:
            return cls()
        if not isinstance(options, Mapping):
            raise ConfigError(
                f"Invalid options: expected a mapping, got {type(options).__name__}"
            )

        unknown = tuple(sorted(str(key) for key in options if key not in KNOWN_OPTIONS))
        if unknown:
            rejected = {key: value for key, value in options.items() if key not in KNOWN_OPTIONS}
            raise ConfigError(f"Invalid options: {rejected}", invalid_keys=unknown)

        values = {key: value for key, value in options.items() if value is not None}
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)
