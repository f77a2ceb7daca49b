"""Pairwise duplicate detection for contact records."""

from contact_dedupe.config import DEFAULT_WEIGHTS, ScoringWeights
from contact_dedupe.models import AccuracyLevel, ContactRecord, MatchRecord
from contact_dedupe.steps.matching import count_accuracy_levels, find_possible_matches

__all__ = [
    "AccuracyLevel",
    "ContactRecord",
    "DEFAULT_WEIGHTS",
    "MatchRecord",
    "ScoringWeights",
    "count_accuracy_levels",
    "find_possible_matches",
]
