#!/usr/bin/env python3
# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the pumlgen CI checks locally.

Steps can be narrowed with ``--only`` (e.g. ``--only lint tests``), and
``--fail-fast`` stops after the first failing step.
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=pumlgen", "--cov-report=term-missing"]),
    "smoke": ("CLI smoke test", ["uv", "run", "puml-gen", "--help"]),
    "build": ("Build", ["uv", "build"]),
}


def main() -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run pumlgen CI checks.")
    parser.add_argument("--only", nargs="+", choices=list(STEPS), default=None, help="Steps to run")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failure")
    args = parser.parse_args()

    selected = args.only if args.only else list(STEPS)
    results: list[tuple[str, bool, float]] = []
    for key in selected:
        name, cmd = STEPS[key]
        passed, elapsed = _run_step(name, cmd)
        results.append((name, passed, elapsed))
        if not passed and args.fail_fast:
            break

    _print_banner("Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[bool, float]:
    _print_banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).parent.parent)
    return proc.returncode == 0, time.monotonic() - start


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
