from contact_dedupe.config import ScoringWeights
from contact_dedupe.steps.comparators import (
    match_address,
    match_email,
    match_name_and_surname,
    match_name_or_surname,
    match_zip_code,
)


def test_name_exact_match_ignores_case() -> None:
    assert match_name_or_surname("Ciara", "ciara", 12, 7) == 12


def test_name_initial_matches_either_direction() -> None:
    assert match_name_or_surname("C", "Ciara", 12, 7) == 7
    assert match_name_or_surname("Ciara", "C", 12, 7) == 7


def test_name_initial_prefix_is_case_sensitive() -> None:
    assert match_name_or_surname("c", "Ciara", 12, 7) == 0


def test_name_longer_prefix_is_not_partial() -> None:
    assert match_name_or_surname("Ci", "Ciara", 12, 7) == 0


def test_name_absent_scores_zero() -> None:
    assert match_name_or_surname(None, "Ciara", 12, 7) == 0
    assert match_name_or_surname("C", None, 12, 7) == 0
    assert match_name_or_surname(None, None, 12, 7) == 0


def test_name_and_surname_bonus_requires_both() -> None:
    assert match_name_and_surname("C", "F", "C", "French") == 12 + 7 + 10
    assert match_name_and_surname("Bob", "Smith", "Rob", "Smith") == 12
    assert match_name_and_surname("C", None, "C", "French") == 12


def test_name_and_surname_uses_given_weights() -> None:
    weights = ScoringWeights(name_match_full=5, name_match_partial=1, name_surname_bonus=0)
    assert match_name_and_surname("Ann", "L", "ann", "Lee", weights) == 6


def test_email_exact_match_ignores_case() -> None:
    assert match_email("Mollis.Lectus@Outlook.net", "mollis.lectus@outlook.net") == 20


def test_email_same_local_part_is_partial() -> None:
    assert match_email("mollis.lectus@outlook.net", "mollis.lectus@zoho.ca") == 17
    assert match_email("mollis.lectus", "mollis.lectus@zoho.ca") == 17


def test_email_local_part_is_case_sensitive() -> None:
    assert match_email("Mollis@outlook.net", "mollis@zoho.ca") == 0


def test_email_empty_local_parts_do_not_match() -> None:
    assert match_email("@outlook.net", "@zoho.ca") == 0


def test_email_absent_scores_zero() -> None:
    assert match_email(None, "a@b.com") == 0
    assert match_email("a@b.com", None) == 0


def test_zip_code_exact_only() -> None:
    assert match_zip_code("39746", "39746") == 3
    assert match_zip_code("39746", "39747") == 0
    assert match_zip_code("ab1 2cd", "AB1 2CD") == 0
    assert match_zip_code(None, "39746") == 0


def test_address_exact_match_ignores_case() -> None:
    assert match_address("449-6990 Tellus. Rd.", "449-6990 TELLUS. RD.") == 20


def test_address_containment_either_direction() -> None:
    assert match_address("449-6990 Tellus. Rd.", "449-6990 Tellus. Rd., Apt 5") == 17
    assert match_address("449-6990 Tellus. Rd., Apt 5", "449-6990 Tellus. Rd.") == 17


def test_address_containment_is_case_sensitive() -> None:
    assert match_address("449-6990 tellus. rd.", "449-6990 Tellus. Rd., Apt 5") == -10


def test_address_mismatch_is_penalised() -> None:
    assert match_address("449-6990 Tellus. Rd.", "12 Nulla Av.") == -10


def test_address_absent_scores_zero() -> None:
    assert match_address(None, "12 Nulla Av.") == 0
    assert match_address("12 Nulla Av.", None) == 0
