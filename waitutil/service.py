"""
Service Waiter — Wait for a TCP service to start accepting connections.
"""

from __future__ import annotations

from typing import Optional

from .poller import ConditionPoller
from .probes.tcp import TcpProbe
from .protocol import PollConfig


class ServiceWaiter:
    """
    Poll a host/port with a TcpProbe until it accepts connections.

    Usage:
        waiter = ServiceWaiter()
        waiter.wait("postgres", "127.0.0.1", 5432, PollConfig(timeout_sec=30))
    """

    def __init__(
        self,
        poller: Optional[ConditionPoller] = None,
        connect_timeout: Optional[float] = None,
    ):
        self.poller = poller or ConditionPoller()
        self.connect_timeout = connect_timeout

    def wait(self, description: str, host: str, port: int, config: PollConfig) -> bool:
        probe = TcpProbe(host, port, connect_timeout=self.connect_timeout)
        return self.poller.wait(
            f"{description} port {port} to become available on {host}",
            config,
            probe,
        )
