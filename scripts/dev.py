#!/usr/bin/env python3
"""Development tasks for skillssh-mcp.

Usage:
    python scripts/dev.py test      # pytest with coverage of skillssh_mcp
    python scripts/dev.py check     # ruff format --check, ruff check, mypy
    python scripts/dev.py format    # ruff format + ruff check --fix

Tools come from the ``dev`` extra: ``pip install -e ".[test,dev]"``.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PACKAGE = "skillssh_mcp"
LINTED = [PACKAGE, "tests", "examples", "scripts"]


def _tool(*args: str) -> int:
    """Run ``python -m <args>`` from the project root, echoing the command."""
    cmd = [sys.executable, "-m", *args]
    print(f"$ {' '.join(args)}", flush=True)
    return subprocess.run(cmd, cwd=ROOT, check=False).returncode


def test() -> int:
    """Run the test suite with a coverage report."""
    return _tool("pytest", f"--cov={PACKAGE}", "--cov-report=term-missing")


def check() -> int:
    """Verify formatting, lint and types without touching files."""
    codes = [
        _tool("ruff", "format", "--check", *LINTED),
        _tool("ruff", "check", *LINTED),
        _tool("mypy", PACKAGE),
    ]
    return max(codes)


def fmt() -> int:
    """Rewrite files in place."""
    return _tool("ruff", "format", *LINTED) or _tool("ruff", "check", "--fix", *LINTED)


TASKS: dict[str, Callable[[], int]] = {"test": test, "check": check, "format": fmt}


def main(argv: list[str]) -> int:
    if len(argv) != 1 or argv[0] not in TASKS:
        print(__doc__)
        return 0 if argv[:1] in ([], ["-h"], ["--help"]) else 2
    return TASKS[argv[0]]()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
