#!/usr/bin/env python3
"""Run ruff, mypy and lizard over the linkheader package."""

import subprocess
import sys

from rich.console import Console

console = Console()

CHECKS = [
    (["ruff", "check", "linkheader", "tests"], "ruff lint"),
    (["ruff", "format", "--check", "linkheader", "tests"], "ruff format"),
    (["mypy", "linkheader"], "mypy"),
    (["lizard", "linkheader", "-C", "10", "-w"], "lizard complexity"),
]


def run_check(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")
    try:
        result = subprocess.run(command, check=False, capture_output=True, text=True)
    except FileNotFoundError:
        console.print(f"[bold red]FAILED: {command[0]} is not installed[/bold red]")
        return False

    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> None:
    results = [run_check(command, description) for command, description in CHECKS]
    if not all(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
