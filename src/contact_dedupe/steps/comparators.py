"""Attribute comparators used to score a pair of contacts.

Every comparator takes two optional strings and returns an integer score.
An absent value on either side is no evidence at all and scores 0; it is
never treated as a match or a mismatch.
"""

from __future__ import annotations

from contact_dedupe.config import DEFAULT_WEIGHTS, ScoringWeights


def match_name_or_surname(
    left: str | None,
    right: str | None,
    full_score: int,
    partial_score: int,
) -> int:
    """Score a single name token.

    Equal ignoring case scores ``full_score``. A one-letter initial that
    prefixes the other value (case-sensitive) scores ``partial_score``.
    """
    if left is None or right is None:
        return 0
    if left.lower() == right.lower():
        return full_score
    if len(left) == 1 and right.startswith(left):
        return partial_score
    if len(right) == 1 and left.startswith(right):
        return partial_score
    return 0


def match_name_and_surname(
    first_name_left: str | None,
    last_name_left: str | None,
    first_name_right: str | None,
    last_name_right: str | None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    name_score = match_name_or_surname(
        first_name_left, first_name_right, weights.name_match_full, weights.name_match_partial
    )
    surname_score = match_name_or_surname(
        last_name_left, last_name_right, weights.name_match_full, weights.name_match_partial
    )
    total = name_score + surname_score
    # A single matching name is common; both agreeing is much stronger evidence.
    if name_score and surname_score:
        return total + weights.name_surname_bonus
    return total


def match_email(
    left: str | None,
    right: str | None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    if left is None or right is None:
        return 0
    if left.lower() == right.lower():
        return weights.email_match_full
    left_local = left.split("@", 1)[0]
    right_local = right.split("@", 1)[0]
    if left_local and right_local and left_local == right_local:
        return weights.email_match_partial
    return 0


def match_zip_code(
    left: str | None,
    right: str | None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    if left is None or right is None:
        return 0
    if left == right:
        return weights.zip_match
    return 0


def match_address(
    left: str | None,
    right: str | None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Score two street addresses.

    Exact equality ignores case, containment does not. Two present addresses
    that neither equal nor contain each other are penalised.
    """
    if left is None or right is None:
        return 0
    if left.lower() == right.lower():
        return weights.address_match_full
    if right in left or left in right:
        return weights.address_match_partial
    return weights.address_mismatch_penalty
