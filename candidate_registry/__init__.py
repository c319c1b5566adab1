"""
Candidate Registry - a small file-backed store for candidate records.

The package provides:

- A TSV file repository with atomic rewrites and tolerant loading
- A query engine that turns a structured query into a filter and ordering
- A service facade returning explicit success/error results
- A typer CLI and rich console rendering for quick inspection
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from candidate_registry.config import Settings, get_settings
from candidate_registry.domain import (
    Candidate,
    NumOp,
    QueryField,
    QuerySpec,
    SortMode,
    TextOp,
    validate_candidate,
)
from candidate_registry.errors import (
    CandidateRegistryError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from candidate_registry.query import QueryEngine
from candidate_registry.repository import CandidateStore, FileCandidateRepository
from candidate_registry.service import CandidateService, OperationResult
from candidate_registry.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Candidate",
    "QuerySpec",
    "QueryField",
    "TextOp",
    "NumOp",
    "SortMode",
    "validate_candidate",
    # Errors
    "CandidateRegistryError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    # Storage and querying
    "CandidateStore",
    "FileCandidateRepository",
    "QueryEngine",
    "CandidateService",
    "OperationResult",
    # Logging
    "configure_logging",
    "get_logger",
]
