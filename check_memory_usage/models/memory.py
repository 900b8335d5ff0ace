from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field


class Severity(IntEnum):
    """Check outcome. The integer value doubles as the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def label(self) -> str:
        # "OK" stays upper-case in the status line, the rest are capitalised
        if self is Severity.OK:
            return "OK"
        return self.name.capitalize()


class MemorySample(BaseModel):
    """Point-in-time reading of system memory statistics."""

    total: int = Field(..., ge=0, description="Total physical memory in bytes")
    available: int = Field(
        ...,
        ge=0,
        description="Memory that can be given to processes without swapping, in bytes",
    )
    used: int = Field(..., ge=0, description="Used memory in bytes")
    free: int = Field(..., ge=0, description="Unused memory in bytes")
    used_percent: float = Field(
        ...,
        ge=0,
        le=100,
        description="RAM usage in percent",
    )

    def perf_data(self) -> str:
        return (
            f"mem_total={self.total}, mem_available={self.available}, "
            f"mem_used={self.used}, mem_free={self.free}"
        )


class CheckResult(BaseModel):
    """Result of one check run: severity, status message and perf data."""

    severity: Severity = Field(..., description="Derived check severity")
    message: str = Field(..., description="Human-readable status message")
    perf_data: str = Field(
        "",
        description="Performance metrics taken from the first sample",
    )
    start: Optional[MemorySample] = Field(
        None,
        description="Sample taken before the interval, if sampling happened.",
    )
    end: Optional[MemorySample] = Field(
        None,
        description="Sample taken after the interval, if sampling happened.",
    )

    def status_text(self) -> str:
        if self.perf_data:
            return f"{self.message} | {self.perf_data}"
        return self.message
