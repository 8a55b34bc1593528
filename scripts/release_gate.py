#!/usr/bin/env python3
"""Pre-release checks for parents_tool.

Steps, in order, stopping at the first failure:
  compile   byte-compile the package
  tests     pytest
  lint      ruff check + mypy (skip with --skip-lint)
  smoke     `python -m parents_tool parents <this file>` (only with --smoke)
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _step(label: str, cmd: list[str]) -> subprocess.CompletedProcess[str]:
    print(f"--> {label}: {' '.join(cmd)}", flush=True)
    return subprocess.run(cmd, cwd=str(ROOT), check=True, text=True, capture_output=(label == "smoke"))


def _smoke() -> None:
    target = str(Path(__file__).resolve())
    res = _step("smoke", [sys.executable, "-m", "parents_tool", "parents", target])
    got = res.stdout.splitlines()
    if not got or got[-1] != target:
        raise RuntimeError(f"parents printed {res.stdout!r}, expected it to end with {target}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compile, test, lint and optionally smoke-run parents_tool.")
    ap.add_argument("--skip-lint", action="store_true", help="Do not run ruff and mypy.")
    ap.add_argument("--smoke", action="store_true", help="Also run the CLI once against this script's path.")
    args = ap.parse_args(argv)

    py = sys.executable
    _step("compile", [py, "-B", "-m", "compileall", "-q", "parents_tool"])
    _step("tests", [py, "-m", "pytest", "-q"])
    if not args.skip_lint:
        _step("lint", [py, "-m", "ruff", "check", "."])
        # mypy targets come from [tool.mypy] in pyproject.toml.
        _step("lint", [py, "-m", "mypy"])
    if args.smoke:
        _smoke()

    print("all checks passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
