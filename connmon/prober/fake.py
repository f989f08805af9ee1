# connmon/prober/fake.py
from collections import deque
from datetime import datetime
from itertools import cycle

from connmon.config import CONNECT_TIMEOUT_MS
from connmon.prober.base import Prober
from connmon.schemas import ProbeResult


class FakeProber(Prober):
    """
    script: list of dicts like {"outcome": "success", "elapsed_ms": 4, "error": None}
    returned one per call. With repeat=True the script loops forever; otherwise
    a timeout result is returned once it runs out.
    """
    def __init__(self, script=None, repeat: bool = False):
        script = list(script or [])
        self.repeat = repeat and bool(script)
        self.script = cycle(script) if self.repeat else deque(script)
        self.calls = []

    def _next(self):
        if self.repeat:
            return next(self.script)
        if len(self.script) > 0:
            return self.script.popleft()
        return None

    def probe_once(self, host: str, port: int) -> ProbeResult:
        self.calls.append((host, port))
        step = self._next()
        if step is None:
            return ProbeResult("timeout", datetime.now(), CONNECT_TIMEOUT_MS)
        return ProbeResult(
            outcome=step["outcome"],
            started_at=step.get("started_at") or datetime.now(),
            elapsed_ms=step.get("elapsed_ms", 0),
            error=step.get("error"),
        )
