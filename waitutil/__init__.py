# waitutil — Wait for asynchronous external state.
# Polls a condition at a fixed interval until it holds or a timeout elapses.

__version__ = "0.1.0"

from .protocol import (
    ConfigError,
    Outcome,
    PollConfig,
    WaitError,
    WaitTimeoutError,
)
from .poller import ConditionPoller
from .service import ServiceWaiter
from typing import Any, Callable, Optional

__all__ = [
    "ConfigError",
    "Outcome",
    "PollConfig",
    "WaitError",
    "WaitTimeoutError",
    "ConditionPoller",
    "ServiceWaiter",
    "wait_for_condition",
    "wait_for_service",
]


def wait_for_condition(
    description: str,
    options: Any,
    condition: Callable[[int], Any],
    poller: Optional[ConditionPoller] = None,
) -> bool:
    """
    Wait until `condition` is met.

    The condition is called with a zero-based iteration number and may
    return a bool, a (met, detail) pair, or an Outcome. The detail of the
    last failed attempt is appended to the timeout message.

    With verbose set, start and success are logged at INFO through the
    "waitutil.poller" logger; configure logging (e.g. logging.basicConfig)
    to see them.

    Args:
        description:  What is being waited for (used in messages only).
        options:      None, a PollConfig, a mapping with delay_sec,
                      timeout_sec and verbose, or the same as YAML text.
        condition:    Callable evaluated once per attempt.
        poller:       Poller to use (default: a fresh ConditionPoller).

    Returns:
        True once the condition is met.

    Raises:
        ConfigError:       options contain unknown keys or bad values.
        WaitTimeoutError:  the condition was still unmet at the deadline.
    """
    from .config import load_options

    config = load_options(options)
    poller = poller or ConditionPoller()
    return poller.wait(description, config, lambda i: Outcome.of(condition(i)))


def wait_for_service(
    description: str,
    host: str,
    port: int,
    options: Any = None,
    poller: Optional[ConditionPoller] = None,
) -> bool:
    """
    Wait until a TCP service accepts connections on host:port.

    Connection refused and host unreachable count as "not yet"; any other
    socket error propagates.
    """
    from .config import load_options

    config = load_options(options)
    return ServiceWaiter(poller=poller).wait(description, host, port, config)
