from check_memory_usage.models.memory import Severity


class CheckError(RuntimeError):
    """Base class for failures that end a check run with a fixed severity."""

    severity: Severity = Severity.UNKNOWN


class ConfigurationError(CheckError):
    """Invalid or missing threshold/interval. Reported as a warning."""

    severity = Severity.WARNING


class AcquisitionError(CheckError):
    """The OS could not report memory statistics. Reported as critical."""

    severity = Severity.CRITICAL
