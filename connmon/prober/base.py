# connmon/prober/base.py
from abc import ABC, abstractmethod

from connmon.schemas import ProbeResult


def error_detail(exc: BaseException) -> str:
    """Single-line description of a connect error, whitespace collapsed."""
    text = str(exc) or type(exc).__name__
    return " ".join(text.split())


class Prober(ABC):
    @abstractmethod
    def probe_once(self, host: str, port: int) -> ProbeResult:
        """Make exactly one bounded connection attempt and classify it."""
        raise NotImplementedError

    def close(self):
        pass
