from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from contact_dedupe.datasets.profiles import CONTACT_COLUMNS, MATCH_COLUMNS
from contact_dedupe.errors import ContactDataError
from contact_dedupe.models import ContactRecord, MatchRecord
from contact_dedupe.schema import DEFAULT_CONTACT_SCHEMA, ContactField, RecordSchema

logger = logging.getLogger(__name__)


def read_contacts_csv(path: Path, schema: RecordSchema = DEFAULT_CONTACT_SCHEMA) -> list[ContactRecord]:
    """Load contacts from a CSV file with a header row.

    Blank cells become absent fields. Rows without an id are skipped; an id
    that is not an integer, or that repeats, is a data error.
    """
    records: list[ContactRecord] = []
    seen: dict[int, int] = {}
    with path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            line = reader.line_num
            raw_id = schema.value_for(row, ContactField.CONTACT_ID)
            if raw_id is None:
                logger.warning("Skipping %s line %d: no contact id", path, line)
                continue
            try:
                contact_id = int(raw_id)
            except ValueError:
                raise ContactDataError(f"{path} line {line}: contact id {raw_id!r} is not an integer") from None
            if contact_id in seen:
                raise ContactDataError(
                    f"{path} line {line}: contact id {contact_id} already used on line {seen[contact_id]}"
                )
            seen[contact_id] = line
            records.append(
                ContactRecord(
                    contact_id=contact_id,
                    first_name=schema.value_for(row, ContactField.FIRST_NAME),
                    last_name=schema.value_for(row, ContactField.LAST_NAME),
                    email_address=schema.value_for(row, ContactField.EMAIL),
                    zipcode=schema.value_for(row, ContactField.ZIPCODE),
                    address=schema.value_for(row, ContactField.ADDRESS),
                )
            )
    logger.info("Loaded %d contacts from %s", len(records), path)
    return records


def write_contacts_csv(path: Path, contacts: Sequence[ContactRecord]) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CONTACT_COLUMNS)
        writer.writeheader()
        for contact in contacts:
            writer.writerow(
                {
                    "id": contact.contact_id,
                    "firstName": contact.first_name or "",
                    "lastName": contact.last_name or "",
                    "emailAddress": contact.email_address or "",
                    "zipcode": contact.zipcode or "",
                    "address": contact.address or "",
                }
            )


def write_matches_csv(path: Path, matches: Sequence[MatchRecord]) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=MATCH_COLUMNS)
        writer.writeheader()
        for match in matches:
            writer.writerow(
                {
                    "source_id": match.source_id,
                    "match_id": match.match_id,
                    "accuracy": str(match.accuracy),
                }
            )
