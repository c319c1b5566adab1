from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from candidate_registry.domain.models import Candidate
from candidate_registry.errors import CandidateRegistryError


def _nz(value: Optional[str]) -> str:
    """Return "-" for missing or blank text."""
    return "-" if value is None or not value.strip() else value


def build_table(candidates: Sequence[Candidate], title: str = "Candidates") -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=f"{len(candidates)} candidate(s)",
    )

    table.add_column("ID", justify="right", style="magenta", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Industry", style="green")
    table.add_column("Age", justify="right", style="yellow")
    table.add_column("Years of Experience", justify="right", style="yellow")
    table.add_column("Registered", style="dim")

    for c in candidates:
        table.add_row(
            str(c.id),
            _nz(c.name),
            _nz(c.industry),
            str(c.age),
            str(c.years_of_experience),
            "-" if c.registered_at is None else c.registered_at_text(),
        )
    return table


def print_candidates(
    candidates: Sequence[Candidate],
    title: str = "Candidates",
    console: Optional[Console] = None,
) -> None:
    """
    Render candidates as a rich table.
    """
    console = console or Console()

    if not candidates:
        console.print("[yellow]No candidates to display.[/yellow]")
        return

    console.print(build_table(candidates, title=title))


def print_error(error: CandidateRegistryError, console: Optional[Console] = None) -> None:
    console = console or Console(stderr=True)
    console.print(f"[bold red]{error.code}[/bold red]: {error.message}")


__all__ = ["build_table", "print_candidates", "print_error"]
