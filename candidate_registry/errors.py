"""
Error types for the candidate registry.

Every error carries a symbolic ``code`` (e.g. "BAD_REQUEST", "NOT_FOUND",
"REPO_WRITE"), an HTTP-like ``status`` and an optional read-only ``details``
mapping, so front ends can render them without inspecting the type.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class CandidateRegistryError(Exception):
    """Base class for all registry errors."""

    default_code: str = "INTERNAL_ERROR"
    default_status: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status: Optional[int] = None,
        details: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.status = self.default_status if status is None else status
        self.details: Mapping[str, str] = MappingProxyType(dict(details or {}))

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "code": self.code,
            "status": self.status,
            "message": self.message,
        }
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(CandidateRegistryError):
    """Bad input: missing or invalid fields, or a non-positive id where one is required."""

    default_code = "BAD_REQUEST"
    default_status = 400


class NotFoundError(CandidateRegistryError):
    """The operation targets an id absent from the store."""

    default_code = "NOT_FOUND"
    default_status = 404


class StorageError(CandidateRegistryError):
    """The backing file could not be created, written or replaced."""

    default_code = "REPO_WRITE"
    default_status = 500


__all__ = [
    "CandidateRegistryError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
]
