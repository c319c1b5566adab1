"""
Domain models for the candidate registry.

`Candidate` mirrors one line of the TSV data file. The model is frozen so a
record handed out by the repository can never be changed behind its back;
use `model_copy(update=...)` to derive a modified record.

Business rules (minimum age, industry shape, ...) are enforced by
`candidate_registry.domain.validation` at the storage boundary, not here, so
callers can still build a transient record that the store later rejects.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def registration_now() -> datetime:
    """Current local time truncated to whole seconds (the on-disk precision)."""
    return datetime.now().replace(microsecond=0)


class Candidate(BaseModel):
    """
    A single candidate entry.
    """

    id: int = Field(0, description="Store-assigned id; 0 means not yet persisted.")
    name: str = Field("", description="Candidate's full name.")
    age: int = Field(0, description="Age in years.")
    industry: str = Field("", description="Professional field, e.g. Software or Healthcare.")
    years_of_experience: int = Field(0, description="Years of professional experience.")
    registered_at: Optional[datetime] = Field(
        default_factory=registration_now,
        description="Registration timestamp, set once at creation.",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def is_persisted(self) -> bool:
        return self.id > 0

    def with_id(self, candidate_id: int) -> "Candidate":
        return self.model_copy(update={"id": candidate_id})

    def registered_at_text(self) -> str:
        if self.registered_at is None:
            return "null"
        return self.registered_at.strftime(TIMESTAMP_FORMAT)


__all__ = ["Candidate", "TIMESTAMP_FORMAT", "registration_now"]
