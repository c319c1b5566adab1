"""
Domain package for the candidate registry.

Exports the record model, the query description and the shared validation
rules. Keep this package free of I/O.
"""

from candidate_registry.domain.models import TIMESTAMP_FORMAT, Candidate, registration_now
from candidate_registry.domain.query_spec import NumOp, QueryField, QuerySpec, SortMode, TextOp
from candidate_registry.domain.validation import (
    candidate_errors,
    require_positive_id,
    validate_candidate,
)

__all__ = [
    "Candidate",
    "TIMESTAMP_FORMAT",
    "registration_now",
    "QueryField",
    "TextOp",
    "NumOp",
    "SortMode",
    "QuerySpec",
    "candidate_errors",
    "require_positive_id",
    "validate_candidate",
]
