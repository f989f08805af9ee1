# connmon/monitor/format.py
from connmon.config import CONNECT_TIMEOUT_MS, Settings
from connmon.schemas import ProbeResult

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_banner(settings: Settings) -> list[str]:
    lines = [
        "--- Starting continuous connection monitor ---",
        f"Target: {settings.target}",
        f"Interval: {settings.interval_seconds} seconds",
    ]
    if settings.log_file:
        lines.append(f"Logging output to: {settings.log_file}")
    lines += [
        "Press Ctrl+C to stop the script.",
        "--------------------------------------------",
    ]
    return lines


def format_result(result: ProbeResult, server: str, port: int) -> str:
    """Render one probe result as the line written to every sink."""
    ts = result.started_at.strftime(TIMESTAMP_FORMAT)
    target = f"{server}:{port}"
    ms = result.elapsed_ms

    if result.outcome == "success":
        return f"{ts} [SUCCESS] Connected to {target} in {ms} ms"
    if result.outcome == "timeout":
        return (f"{ts} [TIMEOUT] Connection to {target} timed out after "
                f"{CONNECT_TIMEOUT_MS} ms. Time taken: {ms} ms")
    if result.outcome == "failed":
        if result.error is None:
            return f"{ts} [FAILED] Connection to {target} failed immediately. Time taken: {ms} ms"
        return f"{ts} [FAILED] Connection to {target} failed. Time taken: {ms} ms. Error: {result.error}"
    raise ValueError(f"unknown outcome {result.outcome!r}")
