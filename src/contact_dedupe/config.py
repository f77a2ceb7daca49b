from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Hand-tuned weights and thresholds used to score a pair of contacts.

    Email and address carry the most weight: two people can share a first and
    last name without being the same person, so a name agreement on its own is
    weak evidence. A first name and surname agreeing together earn a bonus.
    """

    name_match_full: int = 12
    name_match_partial: int = 7
    name_surname_bonus: int = 10
    email_match_full: int = 20
    email_match_partial: int = 17
    zip_match: int = 3
    address_match_full: int = 20
    address_match_partial: int = 17
    address_mismatch_penalty: int = -10

    # A pair is reported only when its score is strictly above this.
    match_threshold: int = 27
    high_accuracy_min: int = 40
    medium_accuracy_min: int = 30


DEFAULT_WEIGHTS = ScoringWeights()
