from pathlib import Path

import pytest

from contact_dedupe import count_accuracy_levels, find_possible_matches
from contact_dedupe.datasets import (
    ReferenceContactGenerator,
    read_contacts_csv,
    write_contacts_csv,
    write_matches_csv,
)
from contact_dedupe.errors import ContactDataError
from contact_dedupe.models import AccuracyLevel, ContactRecord, MatchRecord

_REFERENCE_CSV = """id,firstName,lastName,emailAddress,zipcode,address
1001,C,F,mollis.lectus.pede@outlook.net,,449-6990 Tellus. Rd.
1002,C,French,mollis.lectus.pede@outlook.net,39746,449-6990 Tellus. Rd.
1003,Ciara,F,non.lacinia.at@zoho.ca,39746,
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_read_contacts_csv_maps_blank_cells_to_absent(tmp_path: Path) -> None:
    contacts = read_contacts_csv(_write(tmp_path / "contacts.csv", _REFERENCE_CSV))

    assert contacts[0] == ContactRecord(
        1001, "C", "F", "mollis.lectus.pede@outlook.net", None, "449-6990 Tellus. Rd."
    )
    assert contacts[2].address is None


def test_loaded_reference_contacts_match_as_expected(tmp_path: Path) -> None:
    contacts = read_contacts_csv(_write(tmp_path / "contacts.csv", _REFERENCE_CSV))

    matches = find_possible_matches(contacts)

    assert count_accuracy_levels(matches) == {"High": 1, "Medium": 0, "Low": 1}


def test_read_contacts_csv_accepts_snake_case_headers(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "contacts.csv",
        "contact_id,first_name,last_name,email,zip,address\n7,Maya,Young,maya@zoho.ca,10001,1 Lectus St.\n",
    )

    assert read_contacts_csv(path) == [
        ContactRecord(7, "Maya", "Young", "maya@zoho.ca", "10001", "1 Lectus St.")
    ]


def test_read_contacts_csv_skips_rows_without_id(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = _write(tmp_path / "contacts.csv", "id,firstName\n,Nobody\n5,Quinn\n")

    contacts = read_contacts_csv(path)

    assert [contact.contact_id for contact in contacts] == [5]
    assert "no contact id" in caplog.text


def test_read_contacts_csv_rejects_non_integer_id(tmp_path: Path) -> None:
    path = _write(tmp_path / "contacts.csv", "id,firstName\nabc,Quinn\n")

    with pytest.raises(ContactDataError, match="line 2"):
        read_contacts_csv(path)


def test_read_contacts_csv_rejects_repeated_id(tmp_path: Path) -> None:
    path = _write(tmp_path / "contacts.csv", "id,firstName\n5,Quinn\n5,Tatum\n")

    with pytest.raises(ContactDataError, match="already used on line 2"):
        read_contacts_csv(path)


def test_written_contacts_load_back(tmp_path: Path) -> None:
    contacts = ReferenceContactGenerator(seed=9).generate(size=25)
    path = tmp_path / "contacts.csv"

    write_contacts_csv(path, contacts)

    assert read_contacts_csv(path) == contacts


def test_write_matches_csv(tmp_path: Path) -> None:
    path = tmp_path / "matches.csv"

    write_matches_csv(path, [MatchRecord(1001, 1002, AccuracyLevel.HIGH)])

    assert path.read_text(encoding="utf-8").splitlines() == ["source_id,match_id,accuracy", "1001,1002,High"]


def test_reference_generator_is_deterministic() -> None:
    first = ReferenceContactGenerator(seed=21).generate(size=40, duplicate_rate=0.25)
    second = ReferenceContactGenerator(seed=21).generate(size=40, duplicate_rate=0.25)

    assert first == second
    assert len(first) == 40
    assert sorted(contact.contact_id for contact in first) == list(range(1001, 1041))


def test_reference_duplicates_are_found() -> None:
    contacts = ReferenceContactGenerator(seed=4).generate(size=40, duplicate_rate=0.25)

    matches = find_possible_matches(contacts)

    # 30 originals, 10 injected copies; each copy matches at least its original.
    assert len(matches) >= 10


def test_reference_generator_empty() -> None:
    assert ReferenceContactGenerator().generate(size=0) == []
