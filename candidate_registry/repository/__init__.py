"""
Repository package for the candidate registry.

Centralizes persistence concerns: the store protocol, the TSV line codec and
the file-backed implementation. Keep this layer focused on I/O, decoupled
from query and presentation logic.
"""

from candidate_registry.repository.abstract import AbstractCandidateStore, CandidateStore
from candidate_registry.repository.file_repository import FileCandidateRepository
from candidate_registry.repository.tsv_codec import HEADER, escape, unescape

__all__ = [
    "AbstractCandidateStore",
    "CandidateStore",
    "FileCandidateRepository",
    "HEADER",
    "escape",
    "unescape",
]
