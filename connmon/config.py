import logging
from dataclasses import dataclass
from typing import Optional

from connmon.errors import StartupValidationError

# fixed connect deadline per attempt, not user-settable
CONNECT_TIMEOUT_MS = 3000

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class Settings:
    server: str
    port: int
    interval_seconds: int = 5
    log_file: Optional[str] = None  # None -> console only

    def validate(self) -> "Settings":
        if not self.server or not self.server.strip():
            raise StartupValidationError("--server must not be empty")
        if not MIN_PORT <= self.port <= MAX_PORT:
            raise StartupValidationError(
                f"--port must be between {MIN_PORT} and {MAX_PORT}, got {self.port}"
            )
        if self.interval_seconds <= 0:
            raise StartupValidationError(
                f"--interval-seconds must be a positive integer, got {self.interval_seconds}"
            )
        return self

    @property
    def target(self) -> str:
        return f"{self.server}:{self.port}"


def setup_logging(verbose: bool = False):
    # diagnostics only; result lines are printed, not logged
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
    )
