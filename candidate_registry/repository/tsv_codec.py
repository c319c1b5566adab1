"""
Line format of the candidate data file.

One header line, then one tab-separated record per line:

    id  name  age  industry  years  date_of_register

Text fields escape backslash, tab, newline and carriage return so a record
always occupies exactly one physical line.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional

from candidate_registry.domain.models import TIMESTAMP_FORMAT, Candidate

HEADER = "id\tname\tage\tindustry\tyears\tdate_of_register"
FIELD_SEPARATOR = "\t"
LINE_TERMINATOR = "\n"
FIELD_COUNT = 6
NULL_TIMESTAMP = "null"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
}
_UNESCAPES = {
    "\\": "\\",
    "t": "\t",
    "n": "\n",
    "r": "\r",
}


class MalformedLineError(ValueError):
    """A data line that cannot be decoded into a candidate."""


def escape(text: Optional[str]) -> str:
    if text is None:
        return ""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape(text: Optional[str]) -> str:
    """
    Reverse `escape` in a single left-to-right pass.

    Unknown escape sequences and a trailing lone backslash are kept verbatim.
    """
    if not text:
        return ""
    out: List[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\\" and i + 1 < length and text[i + 1] in _UNESCAPES:
            out.append(_UNESCAPES[text[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _parse_int(raw: str, field: str) -> int:
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise MalformedLineError(f"invalid {field}: {raw!r}")
    return int(text)


def _format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return NULL_TIMESTAMP
    return value.strftime(TIMESTAMP_FORMAT)


def _parse_timestamp(raw: str) -> Optional[datetime]:
    raw = raw.strip()
    if not raw or raw == NULL_TIMESTAMP:
        return None
    try:
        parsed = datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError:
        # Accept ISO-8601 as written by other tools (e.g. "2024-05-01T10:00:00").
        parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def encode_line(candidate: Candidate) -> str:
    """Serialize one candidate (without the line terminator)."""
    return FIELD_SEPARATOR.join(
        [
            str(candidate.id),
            escape(candidate.name),
            str(candidate.age),
            escape(candidate.industry),
            str(candidate.years_of_experience),
            _format_timestamp(candidate.registered_at),
        ]
    )


def decode_line(line: str) -> Candidate:
    """
    Parse one data line.

    Raises
    ------
    MalformedLineError
        Wrong field count, unparsable integer, non-positive id or
        unparsable timestamp.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise MalformedLineError(f"expected {FIELD_COUNT} fields, found {len(parts)}")
    candidate_id = _parse_int(parts[0], "id")
    if candidate_id <= 0:
        raise MalformedLineError(f"id must be > 0, found {candidate_id}")
    age = _parse_int(parts[2], "age")
    years = _parse_int(parts[4], "years")
    try:
        return Candidate(
            id=candidate_id,
            name=unescape(parts[1]),
            age=age,
            industry=unescape(parts[3]),
            years_of_experience=years,
            registered_at=_parse_timestamp(parts[5]),
        )
    except ValueError as exc:
        raise MalformedLineError(str(exc)) from exc


def encode_document(candidates: List[Candidate]) -> str:
    """Full file contents: header plus one line per candidate."""
    lines = [HEADER]
    lines.extend(encode_line(c) for c in candidates)
    return LINE_TERMINATOR.join(lines) + LINE_TERMINATOR


__all__ = [
    "HEADER",
    "FIELD_COUNT",
    "MalformedLineError",
    "escape",
    "unescape",
    "encode_line",
    "decode_line",
    "encode_document",
]
