"""
Typed query description built by front ends: field + operator + query + sort.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class QueryField(str, Enum):
    NAME = "NAME"
    INDUSTRY = "INDUSTRY"
    AGE = "AGE"
    YEARS = "YEARS"


class TextOp(str, Enum):
    """Operator for NAME/INDUSTRY."""

    CONTAINS = "CONTAINS"
    STARTS_WITH = "STARTS_WITH"
    EQUALS = "EQUALS"


class NumOp(str, Enum):
    """Operator for AGE/YEARS."""

    EQ = "EQ"
    GTE = "GTE"
    LTE = "LTE"


class SortMode(str, Enum):
    NAME_ASC = "NAME_ASC"
    NAME_DESC = "NAME_DESC"
    DATEOFREGISTER = "DATEOFREGISTER"


class QuerySpec(BaseModel):
    """
    One query over the candidate set. Consumed once by the query engine.
    """

    field: QueryField = Field(QueryField.NAME, description="Field to filter on.")
    text_op: TextOp = Field(TextOp.CONTAINS, description="Text operator (NAME/INDUSTRY).")
    num_op: NumOp = Field(NumOp.EQ, description="Numeric operator (AGE/YEARS).")
    query: str = Field("", description="Raw query string.")
    sort: SortMode = Field(SortMode.NAME_ASC, description="Result ordering.")

    model_config = {
        "frozen": True,
    }

    @field_validator("query", mode="before")
    @classmethod
    def _strip_query(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()


__all__ = ["QueryField", "TextOp", "NumOp", "SortMode", "QuerySpec"]
