# connmon/monitor/sinks.py
import sys

from connmon.errors import LogWriteError


class ConsoleSink:
    def __init__(self, stream=None):
        self.stream = stream

    def write(self, line: str):
        # resolve stdout per call so pytest's capsys sees the output
        print(line, file=self.stream or sys.stdout, flush=True)


class FileSink:
    """Append-only log file. Opened and closed on every write."""

    def __init__(self, path: str):
        self.path = path

    def write(self, line: str):
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as e:
            raise LogWriteError(self.path, e) from e
