"""Post-generation layout verification.

Compares the files a plan is expected to produce with what actually exists
under the project root, and renders the comparison as a Rich table.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from rich.table import Table

from fhevm_scaffold.utils import console

from .plan import ProjectPlan


@dataclass
class LayoutCheck:
    """Presence of one expected file or directory."""

    path: str
    kind: str
    present: bool


def verify_project(
    root: str | Path,
    plan: ProjectPlan,
    exists: Callable[[Path], bool] | None = None,
) -> list[LayoutCheck]:
    """Check every planned directory and file under *root*.

    Args:
        root: Project root that was generated.
        plan: The plan it was generated from.
        exists: Presence check; defaults to ``Path.exists`` so the check runs
            against disk. Pass ``MemoryFileSystem.exists`` for dry runs.
    """
    root = Path(root)
    is_present = exists or (lambda p: p.exists())
    checks = [
        LayoutCheck(path=rel, kind="directory", present=is_present(root / rel))
        for rel in plan.directories()
    ]
    checks.extend(
        LayoutCheck(path=rel, kind="file", present=is_present(root / rel))
        for rel in plan.expected_files()
    )
    return checks


def print_verification(checks: list[LayoutCheck], title: str = "Layout Verification") -> bool:
    """Render *checks* as a table. Returns ``True`` when nothing is missing."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Path", no_wrap=True)
    table.add_column("Kind", style="dim")
    table.add_column("Status")

    for check in checks:
        status = "[green]ok[/green]" if check.present else "[red]missing[/red]"
        table.add_row(check.path, check.kind, status)

    console.print(table)
    missing = sum(1 for check in checks if not check.present)
    if missing:
        console.print(f"[bold red]{missing} of {len(checks)} entries missing[/bold red]")
    else:
        console.print(f"[bold green]All {len(checks)} entries present[/bold green]")
    console.print()
    return missing == 0
