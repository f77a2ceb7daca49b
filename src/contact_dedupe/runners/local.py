from __future__ import annotations

from collections.abc import Sequence

from contact_dedupe.interfaces import ContactCleaner, ContactMatcher
from contact_dedupe.models import ContactRecord, MatchRecord


class LocalMatchPipeline:
    """Sequential runner; fine for the few thousand contacts a batch usually holds."""

    def __init__(self, matcher: ContactMatcher, cleaner: ContactCleaner | None = None) -> None:
        self._matcher = matcher
        self._cleaner = cleaner

    def run(self, contacts: Sequence[ContactRecord]) -> list[MatchRecord]:
        if self._cleaner is not None:
            contacts = self._cleaner.clean(contacts)
        return self._matcher.match(contacts)
