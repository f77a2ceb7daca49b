from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class AccuracyLevel(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True, slots=True)
class ContactRecord:
    """A contact as handed over by the loader; every field but the id may be absent."""

    contact_id: int
    first_name: str | None = None
    last_name: str | None = None
    email_address: str | None = None
    zipcode: str | None = None
    address: str | None = None


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """Probable duplicate pair, ids in enumeration order, with a coarse accuracy label."""

    source_id: int
    match_id: int
    accuracy: AccuracyLevel
