from contact_dedupe.steps.cleanup import FunctionalCleaner
from contact_dedupe.steps.matching import (
    PairwiseContactMatcher,
    count_accuracy_levels,
    find_possible_matches,
)
from contact_dedupe.steps.scoring import ScoreBreakdown, accuracy_for, calculate_score, score_breakdown

__all__ = [
    "FunctionalCleaner",
    "PairwiseContactMatcher",
    "ScoreBreakdown",
    "accuracy_for",
    "calculate_score",
    "count_accuracy_levels",
    "find_possible_matches",
    "score_breakdown",
]
