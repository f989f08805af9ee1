from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

Outcome = Literal["success", "failed", "timeout"]


@dataclass(frozen=True)
class ProbeResult:
    outcome: Outcome
    started_at: datetime        # wall clock at attempt start
    elapsed_ms: int             # monotonic, whole milliseconds
    error: Optional[str] = None  # only for failures raised by the connect itself

    @property
    def ok(self) -> bool:
        return self.outcome == "success"
