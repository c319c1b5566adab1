"""
Persistence interfaces for the candidate registry.

Concrete stores (currently the TSV file repository) implement the
`CandidateStore` protocol. The service and the query engine depend on this
protocol only.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from candidate_registry.domain.models import Candidate


@runtime_checkable
class CandidateStore(Protocol):
    """
    Operations the service layer depends on.

    Write operations raise `ValidationError`, `NotFoundError` or
    `StorageError` from `candidate_registry.errors`.
    """

    def find_all(self) -> List[Candidate]:
        """
        Snapshot of all candidates in storage order (never ``None``).
        """
        ...

    def add(self, candidate: Candidate) -> Candidate:
        """
        Insert a candidate, assigning the next id when ``candidate.id <= 0``.

        Returns
        -------
        Candidate
            The stored record, carrying its assigned id.
        """
        ...

    def update(self, candidate: Candidate) -> Candidate:
        """Replace the record with the same id (> 0) and return the stored copy."""
        ...

    def delete(self, candidate_id: int) -> None:
        """Remove the record with ``candidate_id`` (> 0)."""
        ...


class AbstractCandidateStore(abc.ABC):
    """
    Optional ABC helper for class-based implementations.
    """

    @abc.abstractmethod
    def find_all(self) -> List[Candidate]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def add(self, candidate: Candidate) -> Candidate:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, candidate: Candidate) -> Candidate:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, candidate_id: int) -> None:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = [
    "CandidateStore",
    "AbstractCandidateStore",
]
