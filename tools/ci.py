#!/usr/bin/env python3
# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, a CLI smoke test, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=loxscan", "--cov-report=term-missing"]),
    ("Smoke test", ["uv", "run", "loxscan", "run", "examples/hello.lox", "--no-color"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every CI step, even after a failure, and print a summary table."""
    results = [_run_step(name, cmd) for name, cmd in STEPS]

    _banner("Summary")
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        color = chalk.green if passed else chalk.red
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()

    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).parent.parent


def _banner(title: str) -> None:
    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue(f"  {title}"))
    print(chalk.blue(sep))


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    """Run one step from the repository root and time it."""
    _banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
