"""
Application service: the interface handed to front ends and scripts.

Write operations return an `OperationResult` instead of raising for expected
outcomes (validation failures, unknown ids, storage failures), so callers
handle success and failure explicitly:

    result = service.add(Candidate(name="Alice", age=30, industry="Software"))
    if result.ok:
        print(result.value.id)
    else:
        print(result.error.code, result.error.message)

Unexpected exceptions are not caught here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from candidate_registry.domain.models import Candidate
from candidate_registry.domain.query_spec import QuerySpec
from candidate_registry.errors import CandidateRegistryError
from candidate_registry.query.engine import QueryEngine
from candidate_registry.query.filters import Predicate, SortKey
from candidate_registry.repository.abstract import CandidateStore
from candidate_registry.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a write operation: either a value or an error, never both.
    """

    value: Optional[T] = None
    error: Optional[CandidateRegistryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the error for callers that prefer exceptions."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CandidateRegistryError) -> "OperationResult[T]":
        return cls(error=error)


def _attempt(operation: str, action: Callable[[], T]) -> OperationResult[T]:
    try:
        return OperationResult.success(action())
    except CandidateRegistryError as exc:
        log.warning(
            f"{operation} failed",
            extra={"operation": operation, "code": exc.code, "error": exc.message},
        )
        return OperationResult.failure(exc)


class CandidateService:
    """
    Facade over a `CandidateStore` and its `QueryEngine`.
    """

    def __init__(self, store: CandidateStore) -> None:
        self._store = store
        self._engine = QueryEngine(store)

    @property
    def store(self) -> CandidateStore:
        return self._store

    # Read/query API

    def find_all(self) -> List[Candidate]:
        return self._store.find_all()

    def query(self, spec: Optional[QuerySpec] = None) -> List[Candidate]:
        return self._engine.run(spec)

    def query_with(
        self,
        predicate: Optional[Predicate] = None,
        sort_key: Optional[SortKey] = None,
        reverse: bool = False,
    ) -> List[Candidate]:
        return self._engine.query(predicate, sort_key, reverse)

    # Write API

    def add(self, candidate: Candidate) -> OperationResult[Candidate]:
        return _attempt("add", lambda: self._store.add(candidate))

    def update(self, candidate: Candidate) -> OperationResult[Candidate]:
        return _attempt("update", lambda: self._store.update(candidate))

    def delete(self, candidate_id: int) -> OperationResult[None]:
        return _attempt("delete", lambda: self._store.delete(candidate_id))

    def seed_if_empty(self, samples: Iterable[Candidate]) -> int:
        """
        Add ``samples`` only when the store holds no candidates.

        Returns the number of candidates added. Stops at the first failure and
        re-raises it, since sample data is expected to be valid.
        """
        if self._store.find_all():
            return 0
        added = 0
        for sample in samples:
            self.add(sample.with_id(0)).unwrap()
            added += 1
        log.info("Seeded sample candidates", extra={"added": added})
        return added


__all__ = ["OperationResult", "CandidateService"]
