from __future__ import annotations

from dataclasses import dataclass

from contact_dedupe.config import DEFAULT_WEIGHTS, ScoringWeights
from contact_dedupe.models import AccuracyLevel, ContactRecord
from contact_dedupe.steps.comparators import (
    match_address,
    match_email,
    match_name_and_surname,
    match_zip_code,
)


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Per-attribute contributions to a pair score."""

    name: int
    email: int
    zipcode: int
    address: int

    @property
    def total(self) -> int:
        return self.name + self.email + self.zipcode + self.address


def score_breakdown(
    left: ContactRecord,
    right: ContactRecord,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> ScoreBreakdown:
    return ScoreBreakdown(
        name=match_name_and_surname(
            left.first_name, left.last_name, right.first_name, right.last_name, weights
        ),
        email=match_email(left.email_address, right.email_address, weights),
        zipcode=match_zip_code(left.zipcode, right.zipcode, weights),
        address=match_address(left.address, right.address, weights),
    )


def calculate_score(
    left: ContactRecord,
    right: ContactRecord,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    return score_breakdown(left, right, weights).total


def accuracy_for(score: int, weights: ScoringWeights = DEFAULT_WEIGHTS) -> AccuracyLevel:
    if score >= weights.high_accuracy_min:
        return AccuracyLevel.HIGH
    if score >= weights.medium_accuracy_min:
        return AccuracyLevel.MEDIUM
    return AccuracyLevel.LOW
