"""
TCP Probe — Check whether something is listening on host:port.

Each attempt opens a TCP connection and closes it straight away.

Assumptions and edge cases:
- Only "nothing is listening yet" errors are retryable: connection refused
  and host unreachable. DNS failures, permission errors and connect
  timeouts propagate and abort the wait.
- The socket is released on every exit path through the context manager,
  including when close() itself fails.
- connect_timeout=None keeps the OS default blocking connect.
"""

from __future__ import annotations

import errno
import socket
from typing import Optional

from ..protocol import Outcome
from .base import BaseProbe

UNREACHABLE_ERRNOS = frozenset(
    code for code in (errno.EHOSTUNREACH, getattr(errno, "WSAEHOSTUNREACH", None))
    if code is not None
)


class TcpProbe(BaseProbe):
    """
    Probe that succeeds once a TCP connection to (host, port) can be opened.

    Args:
        host:             Hostname or IP address.
        port:             TCP port.
        connect_timeout:  Per-attempt connect timeout in seconds, or None.
    """

    def __init__(self, host: str, port: int, connect_timeout: Optional[float] = None):
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout

    def check(self, iteration: int) -> Outcome:
        try:
            with socket.create_connection((self.host, self.port), timeout=self.connect_timeout):
                pass
        except ConnectionRefusedError as e:
            return Outcome(False, e.strerror or str(e))
        except OSError as e:
            if e.errno in UNREACHABLE_ERRNOS:
                return Outcome(False, e.strerror or str(e))
            raise
        return Outcome(True)

    def describe(self) -> str:
        return f"{self.host}:{self.port}"
