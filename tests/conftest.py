import socket

import pytest

from waitutil.poller import ConditionPoller


class FakeClock:
    """Monotonic clock that only advances when the poller sleeps."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def poller(fake_clock):
    """A ConditionPoller whose sleeps are recorded instead of performed."""
    return ConditionPoller(clock=fake_clock, sleep=fake_clock.sleep)


@pytest.fixture
def listening_port():
    """Port of a TCP socket listening on 127.0.0.1 for the test's duration."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(8)
    try:
        yield server.getsockname()[1]
    finally:
        server.close()


@pytest.fixture
def closed_port():
    """A port on 127.0.0.1 that nothing is listening on."""
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port
