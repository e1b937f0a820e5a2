"""Rich rendering of scaffold output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text

from pandagen.core.contracts.result import ScaffoldResult


def make_console(*, stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False, soft_wrap=True)


def print_creating(console: Console, root: Path) -> None:
    console.print()
    console.print(Text.assemble("Creating a new project in directory: ", (str(root), "cyan"), "..."))


def print_success(console: Console, result: ScaffoldResult) -> None:
    console.print()
    console.print(Text("Done. Now run the following commands:", style="bright_red"))
    console.print()
    if result.cd_path is not None:
        console.print(Text.assemble("  ", ("cd", "green"), f" {result.cd_path}"))
        console.print()
    for step in result.next_steps:
        console.print(Text(f"  {step.command}", style="green"))
        console.print(f"    {step.description}")
        console.print()
    console.print(Text("  Happy Panda Coding 🐼⚡️", style="cyan"))
    console.print()


def print_cancelled(console: Console, message: str) -> None:
    console.print(Text.assemble(("✖", "red"), f" {message}"))


__all__ = ["make_console", "print_cancelled", "print_creating", "print_success"]
