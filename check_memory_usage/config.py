import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from check_memory_usage.errors import ConfigurationError

PLUGIN_NAME = "check-memory-usage"
ENV_PREFIX = "CHECK_MEMORY_USAGE_"

DEFAULT_CRITICAL = 90.0
DEFAULT_WARNING = 75.0
DEFAULT_INTERVAL = 20


class CheckConfig(BaseModel):
    """
    Immutable configuration of one check run.

    Thresholds are not range-checked here; services.memory_check.check_args
    validates them before any sampling so violations end up as a WARNING
    result rather than a crash.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        default=PLUGIN_NAME,
        description="Plugin name printed at the start of the status line",
    )
    critical: float = Field(
        default=DEFAULT_CRITICAL,
        description="Critical threshold for overall memory usage in percent",
    )
    warning: float = Field(
        default=DEFAULT_WARNING,
        description="Warning threshold for overall memory usage in percent",
    )
    interval: int = Field(
        default=DEFAULT_INTERVAL,
        description="Length of sample interval in seconds",
    )

    @classmethod
    def from_env(
        cls,
        critical: Optional[float] = None,
        warning: Optional[float] = None,
        interval: Optional[int] = None,
    ) -> "CheckConfig":
        """
        Build a config from CHECK_MEMORY_USAGE_CRITICAL, _WARNING and
        _SAMPLE_INTERVAL. Explicit arguments win; the environment variable of
        an explicitly given value is not read at all.
        """
        if critical is None:
            critical = _env_number("CRITICAL", float, DEFAULT_CRITICAL)
        if warning is None:
            warning = _env_number("WARNING", float, DEFAULT_WARNING)
        if interval is None:
            interval = _env_number("SAMPLE_INTERVAL", int, DEFAULT_INTERVAL)
        return cls(critical=critical, warning=warning, interval=interval)


def _env_number(key: str, cast, default):
    variable = ENV_PREFIX + key
    raw = os.getenv(variable, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{variable} must be a number, got {raw!r}"
        ) from exc


@lru_cache(maxsize=1)
def get_settings() -> CheckConfig:
    return CheckConfig.from_env()
