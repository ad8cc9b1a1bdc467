#!/usr/bin/env python3
"""Run the linkheader unit tests with a one-line rich summary."""

import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()

TEST_PATH = "tests/unit"


def pytest_command(args: list[str]) -> list[str]:
    # Prefer the pytest installed next to the running interpreter
    bin_dir = Path(sys.executable).parent
    pytest_cmd = str(bin_dir / "pytest") if (bin_dir / "pytest").exists() else "pytest"
    return [pytest_cmd, TEST_PATH, "--timeout=60", *args]


def main() -> None:
    cmd = pytest_command(sys.argv[1:])
    console.print(f"[bold blue]Running linkheader unit tests ({TEST_PATH})...[/bold blue]")

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        console.print(f"[bold red]Could not start pytest: {e}[/bold red]")
        sys.exit(1)

    if result.returncode != 0:
        console.print("[bold red]Unit tests FAILED[/bold red]")
        sys.exit(result.returncode)
    console.print("[bold green]Unit tests PASSED[/bold green]")


if __name__ == "__main__":
    main()
