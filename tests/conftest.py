from typing import List, Union

import pytest

from check_memory_usage.config import get_settings
from check_memory_usage.models.memory import MemorySample

GIB = 1024 ** 3


class FakeClock:
    """Clock that only advances when sleep() is called."""

    def __init__(self) -> None:
        self.current = 0.0
        self.sleeps: List[float] = []

    def now(self) -> float:
        return self.current

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.current += seconds


class FakeSampler:
    """
    Returns one MemorySample per call from a list of used percentages.
    Exception instances in the list are raised instead. The clock reading of
    every call is recorded in `calls`.
    """

    def __init__(self, clock: FakeClock, readings: List[Union[float, Exception]]) -> None:
        self.clock = clock
        self.readings = list(readings)
        self.calls: List[float] = []

    def __call__(self) -> MemorySample:
        self.calls.append(self.clock.now())
        reading = self.readings.pop(0)
        if isinstance(reading, Exception):
            raise reading
        return make_sample(reading)


def make_sample(used_percent: float) -> MemorySample:
    total = 16 * GIB
    used = int(total * used_percent / 100)
    return MemorySample(
        total=total,
        available=total - used,
        used=used,
        free=(total - used) // 2,
        used_percent=used_percent,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sampler_factory(clock):
    def factory(*readings):
        return FakeSampler(clock, list(readings))

    return factory


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("CRITICAL", "WARNING", "SAMPLE_INTERVAL"):
        monkeypatch.delenv(f"CHECK_MEMORY_USAGE_{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
