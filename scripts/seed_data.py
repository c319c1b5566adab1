"""
Sample-data seeding script for the candidate registry.

Adds a fixed set of demo candidates to the data file, but only when the file
holds no candidates yet, so running it twice does not duplicate data.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import typer

from candidate_registry.config import get_settings
from candidate_registry.domain.models import Candidate
from candidate_registry.repository.file_repository import FileCandidateRepository
from candidate_registry.service import CandidateService
from candidate_registry.utils.logging import configure_logging

app = typer.Typer(help="Seed the candidate data file with sample candidates.")

_SAMPLES = [
    ("Alice Johnson", 28, "Software", 5),
    ("Bob Martin", 35, "Finance", 10),
    ("Carla Gomez", 31, "Marketing", 7),
    ("David Alrefai", 26, "Software", 3),
    ("Elena Petrova", 29, "Healthcare", 6),
    ("Fahad Al-Salem", 33, "Sales", 8),
    ("Grace Kim", 24, "Design", 2),
    ("Hassan Ali", 41, "Education", 15),
    ("Isabella Rossi", 30, "Software", 6),
    ("Jamal Hassan", 27, "Retail", 4),
    ("Karin Svensson", 38, "Operations", 12),
    ("Lars Nilsson", 22, "Support", 1),
]


def sample_candidates() -> List[Candidate]:
    """Fresh, unsaved sample candidates (id 0, so the store assigns ids)."""
    return [
        Candidate(name=name, age=age, industry=industry, years_of_experience=years)
        for name, age, industry, years in _SAMPLES
    ]


def seed(service: CandidateService) -> int:
    return service.seed_if_empty(sample_candidates())


@app.command()
def main(
    data_file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Data file to seed (default from settings / CANDIDATES_FILE).",
    ),
) -> None:
    """
    Seed sample candidates if the data file is empty.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    target = data_file or settings.data_file

    added = seed(CandidateService(FileCandidateRepository(target)))
    if added:
        typer.echo(f"Seeded {added} candidates into {target}")
    else:
        typer.echo(f"{target} already holds candidates; nothing seeded.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
