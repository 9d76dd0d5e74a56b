"""
Poller — Re-evaluate a condition at a fixed delay until it holds or times out.

The poller evaluates the condition, and on failure checks the deadline
before sleeping. So the condition always runs at least once, even with a
zero timeout.

Assumptions and edge cases:
- Elapsed time is measured from entry into wait() with a monotonic clock.
- The full delay is always slept; the last sleep may run past the deadline,
  in which case the timeout is raised after the next failed attempt.
- Exceptions raised by the condition propagate unchanged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Optional

from .protocol import Outcome, PollConfig, WaitTimeoutError

Condition = Callable[[int], Outcome]


class ConditionPoller:
    """
    Fixed-interval wait loop.

    Args:
        logger:  Logger for start/success messages (default: this module's).
                 Verbose messages are emitted at INFO and only show up when
                 the application has configured a handler for it, e.g.
                 logging.basicConfig(level=logging.INFO).
        clock:   Monotonic time source, in seconds.
        sleep:   Function used to wait between attempts.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.clock = clock
        self.sleep = sleep

    def wait(self, description: str, config: PollConfig, condition: Condition) -> bool:
        """
        Block until `condition` succeeds.

        Returns:
            True once the condition reports success.

        Raises:
            WaitTimeoutError: the deadline passed and the last attempt failed.
        """
        if config.verbose:
            self.logger.info(
                "Waiting for %s for up to %s seconds", description, config.timeout_sec
            )

        start = self.clock()
        iteration = 0
        while True:
            outcome = condition(iteration)
            if outcome.success:
                break

            elapsed = self.clock() - start
            if elapsed >= config.timeout_sec:
                raise WaitTimeoutError(description, config.timeout_sec, elapsed, outcome.detail)

            self.sleep(config.delay_sec)
            iteration += 1

        if config.verbose:
            self.logger.info(
                "Success waiting for %s (%.3f seconds)", description, self.clock() - start
            )
        return True
