"""Error taxonomy for the connection monitor.

Per-attempt network failures are not errors here: the prober classifies them
into ProbeResult values. Only conditions that stop the monitor get a class.
"""


class MonitorError(Exception):
    """Base class for fatal monitor errors."""
    exit_code = 1


class StartupValidationError(MonitorError):
    """Bad port or interval; raised before the first attempt."""
    exit_code = 2


class LogWriteError(MonitorError):
    """The configured log file could not be appended to."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot write to log file {path}: {cause}")
        self.path = path
