from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from contact_dedupe.config import DEFAULT_WEIGHTS, ScoringWeights
from contact_dedupe.models import AccuracyLevel, ContactRecord, MatchRecord
from contact_dedupe.steps.scoring import accuracy_for, calculate_score

logger = logging.getLogger(__name__)


class PairwiseContactMatcher:
    """Scores every unordered pair of contacts and keeps those above the threshold.

    Pairs are enumerated by input position (i < j), so each pair is scored
    once and the lower-index contact is always the match source.
    """

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> None:
        self._weights = weights

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def match(self, contacts: Sequence[ContactRecord]) -> list[MatchRecord]:
        logger.debug("Scoring %d pairs across %d contacts", pair_count(len(contacts)), len(contacts))
        matches = self.match_rows(contacts, 0, len(contacts))
        logger.info("Found %d possible matches: %s", len(matches), count_accuracy_levels(matches))
        return matches

    def match_rows(self, contacts: Sequence[ContactRecord], start: int, stop: int) -> list[MatchRecord]:
        """Enumerate pairs whose source row lies in ``[start, stop)``."""
        matches: list[MatchRecord] = []
        for i in range(start, min(stop, len(contacts))):
            left = contacts[i]
            for j in range(i + 1, len(contacts)):
                right = contacts[j]
                score = calculate_score(left, right, self._weights)
                if score > self._weights.match_threshold:
                    matches.append(
                        MatchRecord(
                            source_id=left.contact_id,
                            match_id=right.contact_id,
                            accuracy=accuracy_for(score, self._weights),
                        )
                    )
        return matches


def find_possible_matches(
    contacts: Sequence[ContactRecord] | None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[MatchRecord]:
    if not contacts:
        return []
    return PairwiseContactMatcher(weights).match(contacts)


def count_accuracy_levels(matches: Iterable[MatchRecord]) -> dict[str, int]:
    counts = {level.value: 0 for level in AccuracyLevel}
    for match in matches:
        label = str(match.accuracy)
        if label in counts:
            counts[label] += 1
    return counts


def pair_count(contact_count: int) -> int:
    return contact_count * (contact_count - 1) // 2 if contact_count > 1 else 0
