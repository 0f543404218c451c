import pytest

import memorize.memorize as memorize_mod


class FakeClock:
    """Controllable stand-in for time.time (seconds)."""

    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def time(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


class Doubler:
    """Async x*2 that records every call."""

    def __init__(self) -> None:
        self.calls = []

    async def __call__(self, num: int) -> int:
        self.calls.append(num)
        return num * 2


@pytest.fixture
def clock(monkeypatch):
    c = FakeClock()
    monkeypatch.setattr(memorize_mod.time, "time", c.time)
    return c


@pytest.fixture
def doubler():
    return Doubler()
