from __future__ import annotations

from typing import Protocol, Sequence

from contact_dedupe.models import ContactRecord, MatchRecord


class ContactCleaner(Protocol):
    """Optional pre-step: normalize contact fields before scoring."""

    def clean(self, records: Sequence[ContactRecord]) -> list[ContactRecord]:
        ...


class ContactMatcher(Protocol):
    """Produce scored duplicate pairs from a contact list."""

    def match(self, contacts: Sequence[ContactRecord]) -> list[MatchRecord]:
        ...

    def match_rows(self, contacts: Sequence[ContactRecord], start: int, stop: int) -> list[MatchRecord]:
        ...


class MatchPipeline(Protocol):
    """Unified pipeline interface for sequential or partitioned execution."""

    def run(self, contacts: Sequence[ContactRecord]) -> list[MatchRecord]:
        ...
