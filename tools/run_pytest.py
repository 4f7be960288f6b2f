"""Run the viteref test suite with the project's virtualenv interpreter when present."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
console = Console(stderr=True)


def _interpreter(root: Path) -> str:
    bin_dir, executable = ("Scripts", "python.exe") if os.name == "nt" else ("bin", "python")
    candidate = root / ".venv" / bin_dir / executable
    return str(candidate) if candidate.exists() else sys.executable


def main(argv: list[str] | None = None) -> int:
    extra = list(argv or [])
    python = _interpreter(ROOT)
    targets = [] if any(not arg.startswith("-") for arg in extra) else [str(ROOT / "tests")]
    console.print(f"[bold blue]pytest[/]: {python}")
    return subprocess.call([python, "-m", "pytest", "-q", *targets, *extra], cwd=ROOT)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
