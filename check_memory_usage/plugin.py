import logging
import sys
from typing import Optional, TextIO

from check_memory_usage.config import CheckConfig
from check_memory_usage.errors import AcquisitionError, CheckError, ConfigurationError
from check_memory_usage.models.memory import Severity
from check_memory_usage.services.memory_check import (
    Clock,
    Sampler,
    check_args,
    run_check,
)

logger = logging.getLogger(__name__)


class CheckPlugin:
    """
    Execution harness around the memory check.

    Validates the configuration, runs the check, writes exactly one status
    line and turns the severity into a process exit code. Sampler, clock and
    output stream are injected so the harness can be driven without real
    memory readings or real sleeps.
    """

    def __init__(
        self,
        config: CheckConfig,
        sampler: Optional[Sampler] = None,
        clock: Optional[Clock] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.sampler = sampler
        self.clock = clock
        self.out = out

    def report_result(self, severity: Severity, message: str) -> int:
        stream = self.out or sys.stdout
        stream.write(f"{self.config.name} {message}\n")
        stream.flush()
        return int(severity)

    def report_error(self, exc: Exception) -> int:
        if isinstance(exc, ConfigurationError):
            stage = "validating input"
        else:
            stage = "executing check"
        severity = exc.severity if isinstance(exc, CheckError) else Severity.UNKNOWN
        return self.report_result(severity, f"{severity.label}: error {stage}: {exc}")

    def execute(self) -> int:
        try:
            check_args(self.config)
        except ConfigurationError as exc:
            logger.warning("invalid configuration: %s", exc)
            return self.report_error(exc)

        try:
            result = run_check(self.config, sampler=self.sampler, clock=self.clock)
        except AcquisitionError as exc:
            logger.error("memory check failed: %s", exc)
            return self.report_error(exc)
        except Exception as exc:
            logger.exception("unexpected error while running %s", self.config.name)
            return self.report_error(exc)

        return self.report_result(result.severity, result.status_text())
