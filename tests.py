"""
Convenience script to run the full test suite.

Usage (from project root):

    python tests.py

Behaviour:
- Installs the package with the ``dev`` extra (pytest) if pytest or the
  engine's runtime dependencies are missing.
- Runs ``python -m pytest`` in the project root, forwarding extra arguments.
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent


def ensure_test_dependencies() -> None:
    try:
        import loguru  # noqa: F401
        import numpy  # noqa: F401
        import pytest  # noqa: F401
        import rang  # noqa: F401
        return
    except ImportError:
        pass

    print("Installing rang-engine with test dependencies (.[dev]) ...")
    subprocess.check_call(
        [sys.executable, "-m", "pip", "install", "-e", ".[dev]"],
        cwd=str(ROOT),
    )


def main() -> None:
    ensure_test_dependencies()
    print("Running test suite with pytest ...")
    subprocess.check_call(
        [sys.executable, "-m", "pytest", *sys.argv[1:]],
        cwd=str(ROOT),
    )


if __name__ == "__main__":
    main()
