"""
Query engine: turns a `QuerySpec` into a predicate and a sort key, then runs
them over a snapshot taken from a `CandidateStore`.

Usage:
    from candidate_registry.query import QueryEngine
    from candidate_registry.domain import QueryField, QuerySpec, TextOp

    engine = QueryEngine(repository)
    engine.run(QuerySpec(field=QueryField.NAME, text_op=TextOp.STARTS_WITH, query="al"))

A numeric query that does not parse as a 32-bit integer yields no results
rather than an error.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Tuple

from candidate_registry.domain.models import Candidate
from candidate_registry.domain.query_spec import NumOp, QueryField, QuerySpec, SortMode, TextOp
from candidate_registry.query.filters import (
    Predicate,
    SortKey,
    by_industry_contains,
    by_min_years,
    by_name_key,
    by_registration_key,
    match_all,
    match_none,
    safe_lower,
)
from candidate_registry.repository.abstract import CandidateStore
from candidate_registry.utils.logging import get_logger

log = get_logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TEXT_OPS: Dict[TextOp, Callable[[str, str], bool]] = {
    TextOp.CONTAINS: lambda value, q: q in value,
    TextOp.STARTS_WITH: lambda value, q: value.startswith(q),
    TextOp.EQUALS: lambda value, q: value == q,
}

_NUM_OPS: Dict[NumOp, Callable[[int, int], bool]] = {
    NumOp.EQ: lambda value, n: value == n,
    NumOp.GTE: lambda value, n: value >= n,
    NumOp.LTE: lambda value, n: value <= n,
}


def _parse_int(raw: str) -> Optional[int]:
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _text_predicate(attr: str, op: TextOp, query: str) -> Predicate:
    compare = _TEXT_OPS[op]
    needle = safe_lower(query)
    return lambda c: compare(safe_lower(getattr(c, attr)), needle)


def build_predicate(spec: QuerySpec) -> Predicate:
    """
    Build the filtering predicate for ``spec``.

    NAME/INDUSTRY use the text operator on lower-cased values; AGE/YEARS parse
    the query as an integer and use the numeric operator. Unknown fields
    match everything.
    """
    field = spec.field
    if field == QueryField.NAME:
        return _text_predicate("name", spec.text_op, spec.query)

    if field == QueryField.INDUSTRY:
        if spec.text_op == TextOp.CONTAINS:
            return by_industry_contains(spec.query)
        return _text_predicate("industry", spec.text_op, spec.query)

    if field in (QueryField.AGE, QueryField.YEARS):
        n = _parse_int(spec.query)
        if n is None:
            log.debug("Bad number in numeric query, matching nothing", extra={"query": spec.query})
            return match_none
        if field == QueryField.YEARS and spec.num_op == NumOp.GTE:
            return by_min_years(n)
        attr = "age" if field == QueryField.AGE else "years_of_experience"
        compare = _NUM_OPS[spec.num_op]
        return lambda c: compare(getattr(c, attr), n)

    return match_all


def build_sort(spec: QuerySpec) -> Tuple[Optional[SortKey], bool]:
    """
    Return ``(key, reverse)`` for `sorted`. ``key`` is None when no ordering
    is requested.
    """
    if spec.sort == SortMode.NAME_ASC:
        return by_name_key, False
    if spec.sort == SortMode.NAME_DESC:
        return by_name_key, True
    if spec.sort == SortMode.DATEOFREGISTER:
        return by_registration_key, False
    return None, False


class QueryEngine:
    """
    Read-only query executor over a `CandidateStore` snapshot.
    """

    def __init__(self, store: CandidateStore) -> None:
        self._store = store

    def query(
        self,
        predicate: Optional[Predicate] = None,
        sort_key: Optional[SortKey] = None,
        reverse: bool = False,
    ) -> List[Candidate]:
        """
        Filter then sort a fresh snapshot.

        ``None`` predicate matches all, ``None`` sort key keeps storage order.
        Sorting is stable, so equal keys keep their input order.
        """
        snapshot = self._store.find_all()
        result = [c for c in snapshot if predicate is None or predicate(c)]
        if sort_key is not None:
            result = sorted(result, key=sort_key, reverse=reverse)
        log.debug("Query executed", extra={"snapshot": len(snapshot), "result": len(result)})
        return result

    def run(self, spec: Optional[QuerySpec] = None) -> List[Candidate]:
        """Execute a structured query. ``None`` runs the default spec."""
        spec = spec or QuerySpec()
        sort_key, reverse = build_sort(spec)
        return self.query(build_predicate(spec), sort_key, reverse)


__all__ = ["QueryEngine", "build_predicate", "build_sort"]
