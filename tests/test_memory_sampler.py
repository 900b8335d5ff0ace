from types import SimpleNamespace

import pytest

from check_memory_usage.errors import AcquisitionError
from check_memory_usage.models.memory import MemorySample
from check_memory_usage.services import memory_sampler


def test_take_sample_maps_psutil_fields(monkeypatch):
    fake_vm = SimpleNamespace(
        total=8_000,
        available=3_000,
        used=5_000,
        free=1_000,
        percent=62.5,
    )
    monkeypatch.setattr(memory_sampler.psutil, "virtual_memory", lambda: fake_vm)

    sample = memory_sampler.take_sample()

    assert isinstance(sample, MemorySample)
    assert sample.total == 8_000
    assert sample.available == 3_000
    assert sample.used == 5_000
    assert sample.free == 1_000
    assert sample.used_percent == 62.5
    assert sample.perf_data() == (
        "mem_total=8000, mem_available=3000, mem_used=5000, mem_free=1000"
    )


def test_take_sample_wraps_os_errors(monkeypatch):
    """
    Wenn psutil die Speicherstatistik nicht lesen kann, soll take_sample
    einen AcquisitionError mit aussagekräftiger Meldung werfen.
    """

    def fake_virtual_memory():
        raise OSError("/proc/meminfo not readable")

    monkeypatch.setattr(memory_sampler.psutil, "virtual_memory", fake_virtual_memory)

    with pytest.raises(AcquisitionError) as excinfo:
        memory_sampler.take_sample()

    assert "failed to get virtual memory statistics" in str(excinfo.value)
    assert "/proc/meminfo not readable" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_take_sample_on_real_host():
    sample = memory_sampler.take_sample()

    assert sample.total > 0
    assert 0.0 <= sample.used_percent <= 100.0
