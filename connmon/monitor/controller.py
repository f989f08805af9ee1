# connmon/monitor/controller.py

import logging
import time
from typing import Optional

from connmon.monitor.format import format_banner, format_result
from connmon.monitor.sinks import ConsoleSink, FileSink

log = logging.getLogger(__name__)


class MonitorLoop:
    def __init__(self, prober, settings, console=None, sleep=None):
        self.prober = prober
        self.s = settings
        self.sleep = sleep or time.sleep
        # console is always first so a failing log file never hides a line
        self.sinks = [console or ConsoleSink()]
        if settings.log_file:
            self.sinks.append(FileSink(settings.log_file))

    def print_banner(self):
        console = self.sinks[0]
        for line in format_banner(self.s):
            console.write(line)

    def tick(self) -> str:
        """One probe, one line, written to every sink. Returns the line."""
        result = self.prober.probe_once(self.s.server, self.s.port)
        line = format_result(result, self.s.server, self.s.port)
        log.debug("probe outcome=%s elapsed_ms=%d", result.outcome, result.elapsed_ms)

        for sink in self.sinks:
            sink.write(line)
        return line

    def run(self, max_iterations: Optional[int] = None):
        """
        Probe forever (or max_iterations times), sleeping interval_seconds
        between attempts. Only Ctrl-C or a LogWriteError ends it.
        """
        self.print_banner()
        done = 0
        while max_iterations is None or done < max_iterations:
            self.tick()
            done += 1
            if max_iterations is not None and done >= max_iterations:
                break
            self.sleep(self.s.interval_seconds)
        return done
