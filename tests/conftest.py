"""
Pytest configuration for the candidate registry.

Provides fixtures for:
- Temporary data files
- Empty and seeded repositories
- Settings overrides for CLI tests
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Generator

import pytest

from candidate_registry.config import Settings, get_settings
from candidate_registry.domain.models import Candidate
from candidate_registry.repository.file_repository import FileCandidateRepository
from candidate_registry.utils.logging import configure_logging


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """
    Location of a data file that does not exist yet.
    """
    return tmp_path / "data" / "candidates.tsv"


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    """
    Factory for valid, unsaved candidates; keyword arguments override fields.
    """

    def _make(**overrides) -> Candidate:
        fields = {
            "name": "Alice Johnson",
            "age": 28,
            "industry": "Software",
            "years_of_experience": 5,
        }
        fields.update(overrides)
        return Candidate(**fields)

    return _make


@pytest.fixture
def repository(data_file: Path) -> FileCandidateRepository:
    return FileCandidateRepository(data_file)


@pytest.fixture
def seeded_repository(
    repository: FileCandidateRepository, make_candidate: Callable[..., Candidate]
) -> FileCandidateRepository:
    """
    Repository holding four candidates with distinct registration times.
    """
    rows = [
        ("Carla Gomez", 31, "Marketing", 7, datetime(2024, 3, 1, 9, 0, 0)),
        ("alice Johnson", 28, "Software", 5, datetime(2024, 1, 15, 8, 30, 0)),
        ("Bob Martin", 35, "Finance", 10, datetime(2024, 2, 10, 12, 0, 0)),
        ("David Alrefai", 26, "Software", 3, datetime(2023, 12, 24, 18, 45, 0)),
    ]
    for name, age, industry, years, registered in rows:
        repository.add(
            make_candidate(
                name=name,
                age=age,
                industry=industry,
                years_of_experience=years,
                registered_at=registered,
            )
        )
    return repository


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, data_file: Path) -> Generator[Path, None, None]:
    """
    Point the CLI settings at a temporary data file.
    """
    monkeypatch.setenv("CANDIDATES_FILE", str(data_file))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield data_file
    get_settings.cache_clear()
    # The CLI bound the root handler to CliRunner's stream; rebind it.
    configure_logging(level="WARNING")


@pytest.fixture
def test_settings(data_file: Path) -> Settings:
    return Settings(data_file=data_file, log_level="DEBUG")
