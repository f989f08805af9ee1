# connmon/cli.py
# Usage examples:
#   connmon --server example.com --port 443
#   connmon --server 10.0.0.5 --port 22 --interval-seconds 10 --log-file conn.log
#   connmon --server example.com --port 443 --fake

import argparse
import logging
import sys

from connmon.config import Settings, setup_logging
from connmon.errors import LogWriteError, StartupValidationError
from connmon.monitor.controller import MonitorLoop

log = logging.getLogger(__name__)

FAKE_SCRIPT = [
    {"outcome": "success", "elapsed_ms": 12},
    {"outcome": "success", "elapsed_ms": 9},
    {"outcome": "failed", "elapsed_ms": 1, "error": "[Errno 111] Connection refused"},
    {"outcome": "timeout", "elapsed_ms": 3001},
]


def build_prober(args):
    if args.fake:
        from connmon.prober.fake import FakeProber
        return FakeProber(script=FAKE_SCRIPT, repeat=True)
    from connmon.prober.tcp import TcpProber
    return TcpProber()


def build_argparser():
    ap = argparse.ArgumentParser(description="Continuously test TCP connectivity to a host and port")
    ap.add_argument("--server", required=True, help="Target hostname or IP address")
    ap.add_argument("--port", type=int, required=True, help="Target TCP port (1-65535)")
    ap.add_argument("--interval-seconds", type=int, default=5, help="Seconds between attempts")
    ap.add_argument("--log-file", default=None, help="Append every result line to this file")
    ap.add_argument("--verbose", action="store_true", help="Print debug diagnostics to stderr")
    ap.add_argument("--fake", action="store_true", help="Use scripted results instead of real connections")
    return ap


def main(argv=None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings(
            server=args.server,
            port=args.port,
            interval_seconds=args.interval_seconds,
            log_file=args.log_file,
        ).validate()
    except StartupValidationError as e:
        ap.error(str(e))

    prober = build_prober(args)
    loop = MonitorLoop(prober, settings)
    try:
        loop.run()
    except LogWriteError as e:
        log.error("%s; stopping monitor", e)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nMonitor stopped.")
        return 130
    finally:
        prober.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
