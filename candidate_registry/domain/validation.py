"""
Validation rules shared by the repository and the service layer.
"""

from __future__ import annotations

from typing import List, Optional

from candidate_registry.domain.models import Candidate
from candidate_registry.errors import ValidationError

MIN_AGE = 16
MIN_INDUSTRY_LENGTH = 2


def _safe(value: Optional[str]) -> str:
    return "" if value is None else value.strip()


def _storable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def candidate_errors(candidate: Candidate) -> List[str]:
    """
    Return every rule violation for ``candidate``. Empty list means valid.
    """
    errors: List[str] = []
    name = _safe(candidate.name)
    industry = _safe(candidate.industry)

    if not name:
        errors.append("Name is required")
    elif not _storable(name):
        errors.append("Name contains characters that cannot be stored")
    if len(industry) < MIN_INDUSTRY_LENGTH:
        errors.append(f"Industry must be at least {MIN_INDUSTRY_LENGTH} characters")
    elif industry.isascii() and industry.isdigit():
        errors.append("Industry must be text, not a number")
    elif not _storable(industry):
        errors.append("Industry contains characters that cannot be stored")
    if candidate.age < MIN_AGE:
        errors.append(f"Minimum age is {MIN_AGE}")
    if candidate.years_of_experience < 0 or candidate.years_of_experience > candidate.age:
        errors.append("Invalid years of experience")
    return errors


def validate_candidate(candidate: Candidate) -> None:
    """
    Raise `ValidationError` for the first violated rule.
    """
    errors = candidate_errors(candidate)
    if errors:
        raise ValidationError(errors[0], details={"field_errors": "; ".join(errors)})


def require_positive_id(candidate_id: int, operation: str) -> None:
    if candidate_id <= 0:
        raise ValidationError(f"{operation}(): id must be > 0", details={"id": str(candidate_id)})


__all__ = [
    "MIN_AGE",
    "MIN_INDUSTRY_LENGTH",
    "candidate_errors",
    "validate_candidate",
    "require_positive_id",
]
