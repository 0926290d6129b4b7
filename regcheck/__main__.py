"""CLI entry point for regcheck.

Enables invocation via `python -m regcheck`.
"""

import sys

from regcheck.cli.app import app

if __name__ == "__main__":
    exit_code = app()
    sys.exit(exit_code if exit_code is not None else 0)
