import logging

import psutil

from check_memory_usage.errors import AcquisitionError
from check_memory_usage.models.memory import MemorySample

logger = logging.getLogger(__name__)


def take_sample() -> MemorySample:
    """
    Read the current virtual memory statistics and return them as a
    MemorySample domain object.

    This function encapsulates the direct psutil call so that the check logic
    can be exercised with a fake sampler. Any failure to read the statistics
    is raised as AcquisitionError.
    """
    try:
        vm = psutil.virtual_memory()
    except (OSError, RuntimeError) as exc:
        raise AcquisitionError(
            f"failed to get virtual memory statistics: {exc}"
        ) from exc

    sample = MemorySample(
        total=vm.total,
        available=vm.available,
        used=vm.used,
        free=vm.free,
        used_percent=vm.percent,
    )
    logger.debug("memory sample: %.2f%% used (%s)", sample.used_percent, sample.perf_data())
    return sample
