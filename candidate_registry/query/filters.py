"""
Reusable predicates and sort keys for `Candidate`.

Predicates are plain ``Callable[[Candidate], bool]``; sort keys are plain
``Callable[[Candidate], Any]`` meant for `sorted(..., key=...)`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional, Tuple

from candidate_registry.domain.models import Candidate

Predicate = Callable[[Candidate], bool]
SortKey = Callable[[Candidate], Any]


def safe_lower(value: Optional[str]) -> str:
    return "" if value is None else value.lower()


def match_all(candidate: Candidate) -> bool:
    return True


def match_none(candidate: Candidate) -> bool:
    return False


def by_industry_contains(query: Optional[str]) -> Predicate:
    """
    Case-insensitive "industry contains" filter. A blank query matches all.
    """
    needle = safe_lower(query).strip()
    if not needle:
        return match_all
    return lambda c: c.industry is not None and needle in c.industry.lower()


def by_min_years(minimum: int) -> Predicate:
    """Candidates with ``years_of_experience >= minimum``."""
    return lambda c: c.years_of_experience >= minimum


def by_name_key(candidate: Candidate) -> str:
    """Sort key: lower-cased name, ``None`` treated as empty."""
    return safe_lower(candidate.name)


def by_registration_key(candidate: Candidate) -> Tuple[bool, datetime]:
    """Sort key: registration time ascending, missing timestamps last."""
    if candidate.registered_at is None:
        return (True, datetime.min)
    return (False, candidate.registered_at)


__all__ = [
    "Predicate",
    "SortKey",
    "safe_lower",
    "match_all",
    "match_none",
    "by_industry_contains",
    "by_min_years",
    "by_name_key",
    "by_registration_key",
]
