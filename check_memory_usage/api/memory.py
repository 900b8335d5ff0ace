from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from check_memory_usage.config import CheckConfig, get_settings
from check_memory_usage.errors import AcquisitionError, ConfigurationError
from check_memory_usage.models.memory import CheckResult, MemorySample
from check_memory_usage.services import memory_check, memory_sampler

router = APIRouter()


@router.get("/usage", response_model=MemorySample, summary="Memory usage")
async def memory_usage() -> MemorySample:
    """
    Return a single snapshot of the current memory statistics.

    If psutil cannot read the statistics, a HTTP 503 Service Unavailable is
    returned.
    """
    try:
        return memory_sampler.take_sample()
    except AcquisitionError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@router.get("/check", response_model=CheckResult, summary="Memory usage check")
def memory_check_endpoint(
    critical: Optional[float] = Query(None, description="Critical threshold in percent"),
    warning: Optional[float] = Query(None, description="Warning threshold in percent"),
    sample_interval: Optional[int] = Query(
        None,
        description="Seconds between the two samples",
    ),
) -> CheckResult:
    """
    Run the two-sample memory check and return its severity and message.

    Thresholds not given as query parameters come from the environment
    (CHECK_MEMORY_USAGE_*). The request blocks for the whole sample interval.
    Invalid thresholds map to 422, unreadable memory statistics to 503.
    """
    try:
        defaults = get_settings()
        config = CheckConfig(
            name=defaults.name,
            critical=defaults.critical if critical is None else critical,
            warning=defaults.warning if warning is None else warning,
            interval=defaults.interval if sample_interval is None else sample_interval,
        )
        return memory_check.check_memory(config)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except AcquisitionError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
