"""
Query package for the candidate registry.

Re-exports the query engine and the reusable filters so callers can import
from `candidate_registry.query` directly.
"""

from candidate_registry.query.engine import QueryEngine, build_predicate, build_sort
from candidate_registry.query.filters import (
    by_industry_contains,
    by_min_years,
    by_name_key,
    by_registration_key,
)

__all__ = [
    "QueryEngine",
    "build_predicate",
    "build_sort",
    "by_industry_contains",
    "by_min_years",
    "by_name_key",
    "by_registration_key",
]
