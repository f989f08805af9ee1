# connmon/prober/tcp.py
import asyncio
import logging
import time
from datetime import datetime

from connmon.config import CONNECT_TIMEOUT_MS
from connmon.prober.base import Prober, error_detail
from connmon.schemas import ProbeResult

log = logging.getLogger(__name__)


class TcpProber(Prober):
    """
    Opens one TCP connection per call and closes it straight away.
    Name resolution and the handshake share a single hard deadline, so a
    call never takes much longer than timeout_ms.
    """

    def __init__(self, timeout_ms: int = CONNECT_TIMEOUT_MS):
        self.timeout_ms = timeout_ms
        self._loop = None

    def probe_once(self, host: str, port: int) -> ProbeResult:
        # one loop for the prober's lifetime: asyncio.run() would join the
        # resolver thread on exit and a stuck getaddrinfo would outlive the deadline
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        started_at = datetime.now()
        start = time.monotonic()
        return self._loop.run_until_complete(self._attempt(host, port, started_at, start))

    def close(self):
        if self._loop is None or self._loop.is_closed():
            return
        # an interrupted attempt leaves its task pending; cancel it before closing.
        # the default executor is left alone, a stuck getaddrinfo would block its shutdown
        pending = asyncio.all_tasks(self._loop)
        for task in pending:
            task.cancel()
        if pending:
            self._loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        self._loop.close()

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.monotonic() - start) * 1000)

    async def _attempt(self, host: str, port: int, started_at: datetime, start: float) -> ProbeResult:
        writer = None
        try:
            try:
                _, writer = await asyncio.wait_for(
                    asyncio.open_connection(host, port),
                    timeout=self.timeout_ms / 1000.0,
                )
            except asyncio.TimeoutError:
                # asyncio.TimeoutError is the builtin OSError subclass on 3.11+, keep this first
                elapsed = self._elapsed_ms(start)
                log.debug("connect to %s:%s hit the %d ms deadline", host, port, self.timeout_ms)
                return ProbeResult("timeout", started_at, elapsed)
            except Exception as e:
                elapsed = self._elapsed_ms(start)
                log.debug("connect to %s:%s raised %r", host, port, e)
                return ProbeResult("failed", started_at, elapsed, error=error_detail(e))

            elapsed = self._elapsed_ms(start)
            if writer.get_extra_info("peername") is None:
                # transport came back without a peer
                return ProbeResult("failed", started_at, elapsed)
            return ProbeResult("success", started_at, elapsed)
        finally:
            if writer is not None:
                writer.close()
                try:
                    await writer.wait_closed()
                except OSError as e:
                    log.debug("error while closing connection to %s:%s: %s", host, port, e)
