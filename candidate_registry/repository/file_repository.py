"""
File-backed candidate repository.

Keeps the full candidate set in memory and rewrites the whole TSV file after
every successful write:

- the new contents go to a temporary file in the same directory,
- the temporary file is flushed and fsynced,
- `os.replace` swaps it over the target in one step.

The file on disk is therefore always either the previous complete state or
the new complete state. If the write fails, the in-memory cache is rolled
back so cache and file stay equal.

A single process is expected to own the file; nothing here coordinates
writers across processes.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import List, NoReturn, Optional

from candidate_registry.domain.models import Candidate, registration_now
from candidate_registry.domain.validation import require_positive_id, validate_candidate
from candidate_registry.errors import NotFoundError, StorageError, ValidationError
from candidate_registry.repository.abstract import AbstractCandidateStore
from candidate_registry.repository.tsv_codec import (
    HEADER,
    MalformedLineError,
    decode_line,
    encode_document,
)
from candidate_registry.utils.logging import get_logger

log = get_logger(__name__)


class FileCandidateRepository(AbstractCandidateStore):
    """
    TSV file repository for `Candidate` records.

    Parameters
    ----------
    path : Path | str
        Location of the data file. Missing parent directories are created and
        a missing file is initialized with the header line.
    logger : logging.Logger | None
        Logger to report to; defaults to this module's logger.
    """

    def __init__(self, path: Path | str, logger: Optional[logging.Logger] = None) -> None:
        self._path = Path(path)
        self._log = logger or log
        self._lock = threading.RLock()
        self._store: List[Candidate] = []
        self._load_warnings: List[str] = []
        self._next_id = 1

        try:
            self._init_storage()
        except OSError as exc:
            raise StorageError(
                f"Failed to initialize file repository: {self._path}",
                code="REPO_INIT",
                details={"path": str(self._path)},
            ) from exc
        self.reload()
        self._log.info(
            "Repository initialized",
            extra={
                "path": str(self._path),
                "candidates": len(self._store),
                "next_id": self._next_id,
            },
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def load_warnings(self) -> List[str]:
        """Warnings recorded for lines skipped during the last load."""
        return list(self._load_warnings)

    # ------------------------------------------------------------------
    # CandidateStore
    # ------------------------------------------------------------------

    def find_all(self) -> List[Candidate]:
        with self._lock:
            return list(self._store)

    def add(self, candidate: Candidate) -> Candidate:
        """
        Validate, assign an id if needed, append and persist.

        Raises
        ------
        ValidationError
            Rule violation, or an explicit id that is already taken.
        StorageError
            The file could not be rewritten; the store is left unchanged.
        """
        with self._lock:
            validate_candidate(candidate)
            if candidate.id <= 0:
                stored = candidate.with_id(self._next_id)
            else:
                if self._index_of(candidate.id) is not None:
                    raise ValidationError(
                        f"add(): id={candidate.id} already exists",
                        code="DUPLICATE_ID",
                        details={"id": str(candidate.id)},
                    )
                stored = candidate
            if stored.registered_at is None:
                stored = stored.model_copy(update={"registered_at": registration_now()})

            previous = list(self._store)
            self._store.append(stored)
            self._persist(rollback_to=previous)
            self._next_id = max(self._next_id, stored.id + 1)
            self._log.info("Candidate added", extra={"candidate_id": stored.id})
            return stored

    def update(self, candidate: Candidate) -> Candidate:
        """
        Replace the record with the same id, keeping its position.

        The registration time is immutable: the stored value is kept whatever
        the incoming record carries.
        """
        require_positive_id(candidate.id, "update")
        validate_candidate(candidate)
        with self._lock:
            index = self._index_of(candidate.id)
            if index is None:
                raise NotFoundError(
                    f"update(): id={candidate.id} not found",
                    details={"id": str(candidate.id)},
                )
            stored = candidate.model_copy(
                update={"registered_at": self._store[index].registered_at}
            )

            previous = list(self._store)
            self._store[index] = stored
            self._persist(rollback_to=previous)
            self._log.info("Candidate updated", extra={"candidate_id": stored.id})
            return stored

    def delete(self, candidate_id: int) -> None:
        require_positive_id(candidate_id, "delete")
        with self._lock:
            index = self._index_of(candidate_id)
            if index is None:
                raise NotFoundError(
                    f"delete(): id={candidate_id} not found",
                    details={"id": str(candidate_id)},
                )
            previous = list(self._store)
            del self._store[index]
            self._persist(rollback_to=previous)
            self._log.info("Candidate deleted", extra={"candidate_id": candidate_id})

    def reload(self) -> int:
        """
        Re-read the data file into memory and recompute the next id.

        Returns the number of candidates loaded.
        """
        with self._lock:
            try:
                with self._path.open("r", encoding="utf-8", newline="") as f:
                    content = f.read()
            except OSError as exc:
                raise StorageError(
                    f"Failed to read repository file: {self._path}",
                    code="REPO_INIT",
                    details={"path": str(self._path)},
                ) from exc
            self._store, self._load_warnings = self._parse(content)
            self._next_id = self._compute_next_id()
            return len(self._store)

    # ------------------------------------------------------------------
    # File persistence
    # ------------------------------------------------------------------

    def _init_storage(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            with self._path.open("x", encoding="utf-8", newline="") as f:
                f.write(HEADER + "\n")
            self._log.info("Created repository file", extra={"path": str(self._path)})

    def _parse(self, content: str) -> tuple[List[Candidate], List[str]]:
        candidates: List[Candidate] = []
        warnings: List[str] = []
        seen_ids: set[int] = set()

        # Split on "\n" only; str.splitlines also breaks on \x1c, \u2028 and
        # friends, which may legitimately appear unescaped in a name.
        lines = content.split("\n")
        for line_no, raw in enumerate(lines[1:], start=2):
            line = raw.rstrip("\r")
            if not line.strip():
                continue
            try:
                candidate = decode_line(line)
            except MalformedLineError as exc:
                warnings.append(f"line {line_no}: {exc}")
                self._log.warning(
                    "Skipping malformed line",
                    extra={"path": str(self._path), "line_no": line_no, "error": str(exc)},
                )
                continue
            if candidate.id in seen_ids:
                warnings.append(f"line {line_no}: duplicate id {candidate.id}")
                self._log.warning(
                    "Skipping duplicate id",
                    extra={"path": str(self._path), "line_no": line_no, "candidate_id": candidate.id},
                )
                continue
            seen_ids.add(candidate.id)
            candidates.append(candidate)
        return candidates, warnings

    def _compute_next_id(self) -> int:
        return max((c.id for c in self._store), default=0) + 1

    def _index_of(self, candidate_id: int) -> Optional[int]:
        for i, existing in enumerate(self._store):
            if existing.id == candidate_id:
                return i
        return None

    def _persist(self, rollback_to: List[Candidate]) -> None:
        """
        Atomically rewrite the data file from the cache.

        The temporary file takes the permission bits of the current data file
        so external readers keep their access after the swap. On failure the
        cache is restored from ``rollback_to`` and `StorageError` is raised.
        """
        try:
            payload = encode_document(self._store).encode("utf-8")
        except UnicodeEncodeError as exc:
            self._store[:] = rollback_to
            self._fail("Failed to encode repository contents as UTF-8", "REPO_WRITE", exc)

        try:
            mode: Optional[int] = stat.S_IMODE(self._path.stat().st_mode)
        except OSError:
            mode = None

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
        except OSError as exc:
            self._store[:] = rollback_to
            self._fail("Failed to create temporary repository file", "REPO_WRITE", exc)

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            if mode is not None:
                os.chmod(tmp_path, mode)
        except OSError as exc:
            self._store[:] = rollback_to
            tmp_path.unlink(missing_ok=True)
            self._fail(f"Failed to write repository file (tmp): {tmp_path}", "REPO_WRITE", exc)

        try:
            os.replace(tmp_path, self._path)
        except OSError as exc:
            self._store[:] = rollback_to
            tmp_path.unlink(missing_ok=True)
            self._fail(f"Failed to replace repository file: {self._path}", "REPO_REPLACE", exc)

        self._log.debug(
            "Repository persisted",
            extra={"path": str(self._path), "candidates": len(self._store)},
        )

    def _fail(self, message: str, code: str, exc: Exception) -> NoReturn:
        self._log.error(message, extra={"path": str(self._path), "error": str(exc)})
        raise StorageError(message, code=code, details={"path": str(self._path)}) from exc


__all__ = ["FileCandidateRepository"]
