import logging
import time
from typing import Callable, Optional, Protocol

from check_memory_usage.config import CheckConfig
from check_memory_usage.errors import ConfigurationError
from check_memory_usage.models.memory import CheckResult, MemorySample, Severity
from check_memory_usage.services.memory_sampler import take_sample

logger = logging.getLogger(__name__)

Sampler = Callable[[], MemorySample]


class Clock(Protocol):
    def now(self) -> float: ...

    def sleep(self, seconds: float) -> None: ...


class SystemClock:
    """Real wall time: monotonic readings and a blocking sleep."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


def check_args(config: CheckConfig) -> None:
    """
    Validate thresholds and interval. The first violation raises
    ConfigurationError; nothing is sampled when this fails.
    """
    # written as "not >" so NaN fails as well
    if not config.critical > 0:
        raise ConfigurationError("--critical is required")
    if not config.warning > 0:
        raise ConfigurationError("--warning is required")
    if not config.warning <= config.critical:
        raise ConfigurationError("--warning cannot be greater than --critical")
    if not config.interval > 0:
        raise ConfigurationError("--sample-interval is required")


def classify(start_percent: float, end_percent: float, config: CheckConfig) -> Severity:
    """
    Both samples have to exceed a threshold; a single spike stays OK.
    """
    if start_percent > config.critical and end_percent > config.critical:
        return Severity.CRITICAL
    if start_percent > config.warning and end_percent > config.warning:
        return Severity.WARNING
    return Severity.OK


def run_check(
    config: CheckConfig,
    sampler: Optional[Sampler] = None,
    clock: Optional[Clock] = None,
) -> CheckResult:
    """
    Take two samples `config.interval` seconds apart and classify them.

    AcquisitionError from either sample propagates to the caller; there is
    no partial result.
    """
    sampler = sampler or take_sample
    clock = clock or SystemClock()

    start = sampler()
    started = clock.now()
    logger.debug("sleeping %ds between samples", config.interval)
    clock.sleep(config.interval)
    end = sampler()
    logger.debug("samples taken %.3fs apart", clock.now() - started)

    severity = classify(start.used_percent, end.used_percent, config)
    logger.debug(
        "classified %.2f%% -> %.2f%% as %s (warning=%s, critical=%s)",
        start.used_percent,
        end.used_percent,
        severity.name,
        config.warning,
        config.critical,
    )

    return CheckResult(
        severity=severity,
        message=(
            f"{severity.label}: {start.used_percent:.2f}% memory usage in the "
            f"beginning and {end.used_percent:.2f}% afterwards"
        ),
        perf_data=start.perf_data(),
        start=start,
        end=end,
    )


def check_memory(
    config: CheckConfig,
    sampler: Optional[Sampler] = None,
    clock: Optional[Clock] = None,
) -> CheckResult:
    """Validate the configuration, then run the check."""
    check_args(config)
    return run_check(config, sampler=sampler, clock=clock)
