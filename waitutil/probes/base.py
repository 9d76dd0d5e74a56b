"""
Base Probe — Abstract interface for reusable poll conditions.

A probe is a condition object: the poller calls it once per attempt with
the zero-based iteration number and gets an Outcome back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..protocol import Outcome


class BaseProbe(ABC):
    """
    Abstract base class for probes.

    A probe is responsible for:
    1. Checking some external state exactly once per call
    2. Reporting "not yet" as a failed Outcome
    3. Letting unexpected errors propagate so the wait aborts
    """

    @abstractmethod
    def check(self, iteration: int) -> Outcome:
        """
        Perform one attempt.

        Args:
            iteration: Zero-based attempt counter supplied by the poller.

        Returns:
            Outcome with success flag and optional detail.
        """
        ...

    def describe(self) -> str:
        """Human-readable label for the probed target."""
        return self.__class__.__name__

    def __call__(self, iteration: int) -> Outcome:
        return self.check(iteration)
