# tools/monitor.py
# Usage: python3 -m tools.monitor --server example.com --port 443 [--log-file conn.log]
import sys

from connmon.cli import main

if __name__ == "__main__":
    sys.exit(main())
