#!/usr/bin/env python3
"""
Run CI steps locally using the ACTIVE virtual environment.

Order:
  1) uv sync --all-extras --dev [--frozen if uv.lock exists]  (ACTIVE venv)
  2) black --check on the package, tests and scripts
  3) mypy on the package and scripts
  4) pytest tests/ with coverage of human_names

Commands run from the repo root (the directory holding pyproject.toml).
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

BLACK_VERSION = "24.8.0"
COVERAGE_FLOOR = "80"


def uv_exe() -> List[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def run(cmd: List[str], *, env: Optional[Dict[str, str]] = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def script_paths() -> List[str]:
    return [str(p.relative_to(REPO)) for p in sorted((REPO / "scripts").glob("*.py"))]


def run_black(paths: List[str]) -> None:
    uvx_path = shutil.which("uvx")
    if uvx_path:
        run([uvx_path, "--from", f"black=={BLACK_VERSION}", "black", *paths, "--check", "--line-length", "120"])
    else:
        run(uv_exe() + ["run", "--active", "black", *paths, "--check", "--line-length", "120"])


def main() -> None:
    # 1) Sync deps into ACTIVE venv
    sync_args = ["sync", "--active", "--all-extras", "--dev"]
    if (REPO / "uv.lock").exists():
        sync_args.append("--frozen")
    run(uv_exe() + sync_args)

    # 2) Formatting
    run_black(["human_names", "tests"] + script_paths())

    # 3) Type checking
    run(uv_exe() + ["run", "--active", "mypy", "human_names", *script_paths(), "--ignore-missing-imports"])

    # 4) Tests with coverage
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv_exe()
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            "--cov=human_names",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_FLOOR}",
        ],
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
