from __future__ import annotations

import random
from dataclasses import replace

from contact_dedupe.models import ContactRecord

_FIRST_NAMES = [
    "Ciara",
    "Daniel",
    "Hedda",
    "Kasimir",
    "Maya",
    "Noah",
    "Olivia",
    "Quinn",
    "Sofia",
    "Tatum",
]
_LAST_NAMES = [
    "French",
    "Nacher",
    "Holt",
    "Mcintyre",
    "Sweeney",
    "Vance",
    "Wilkins",
    "Young",
]
_STREETS = [
    "Tellus. Rd.",
    "Nulla Av.",
    "Lectus St.",
    "Mauris Road",
    "Fusce Avenue",
    "Ornare Street",
]
_DOMAINS = ["outlook.net", "zoho.ca", "yahoo.com", "protonmail.org", "icloud.net"]
_ADDRESS_SUFFIXES = ["Apt 5", "Flat 2", "Top floor"]
_MUTATIONS = [
    "initial",
    "surname_case",
    "email_domain",
    "email_case",
    "drop_zipcode",
    "address_suffix",
    "drop_address",
]


class ReferenceContactGenerator:
    """Generate synthetic contacts (with intentional dupes) for tests and benchmarks.

    Every injected duplicate keeps its original's email local part and both
    names at least partially, so it always scores above the match threshold
    against the record it was copied from.
    """

    def __init__(self, seed: int = 7, first_id: int = 1001) -> None:
        self._rng = random.Random(seed)
        self._first_id = first_id

    def generate(self, size: int, duplicate_rate: float = 0.15) -> list[ContactRecord]:
        if size <= 0:
            return []

        unique_count = int(size * (1.0 - duplicate_rate))
        unique_count = max(1, min(unique_count, size))

        records = [self._profile(i) for i in range(unique_count)]

        while len(records) < size:
            source = self._rng.choice(records[:unique_count])
            records.append(self._perturb(source, self._first_id + len(records)))

        self._rng.shuffle(records)
        return records

    def _profile(self, idx: int) -> ContactRecord:
        first_name = self._rng.choice(_FIRST_NAMES)
        last_name = self._rng.choice(_LAST_NAMES)
        house_no = f"{100 + (idx % 900)}-{(idx * 7919) % 10000:04d}"

        return ContactRecord(
            contact_id=self._first_id + idx,
            first_name=first_name,
            last_name=last_name,
            email_address=f"{first_name}.{last_name}{idx}@{self._rng.choice(_DOMAINS)}".lower(),
            zipcode=None if self._rng.random() < 0.1 else f"{10000 + (idx * 37) % 89999}",
            address=None if self._rng.random() < 0.1 else f"{house_no} {self._rng.choice(_STREETS)}",
        )

    def _perturb(self, source: ContactRecord, contact_id: int) -> ContactRecord:
        mutations = self._rng.sample(_MUTATIONS, k=self._rng.randint(1, 3))
        # Re-casing the local part would break the local-part match a new domain relies on.
        if "email_domain" in mutations and "email_case" in mutations:
            mutations.remove("email_case")
        record = replace(source, contact_id=contact_id)

        for mutation in mutations:
            if mutation == "initial" and record.first_name:
                record = replace(record, first_name=record.first_name[0])
            elif mutation == "surname_case" and record.last_name:
                record = replace(record, last_name=record.last_name.upper())
            elif mutation == "email_domain" and record.email_address:
                local = record.email_address.split("@", 1)[0]
                domain = self._rng.choice(_DOMAINS)
                record = replace(record, email_address=f"{local}@mail.{domain}")
            elif mutation == "email_case" and record.email_address:
                record = replace(record, email_address=record.email_address.upper())
            elif mutation == "drop_zipcode":
                record = replace(record, zipcode=None)
            elif mutation == "address_suffix" and record.address:
                suffix = self._rng.choice(_ADDRESS_SUFFIXES)
                record = replace(record, address=f"{record.address}, {suffix}")
            elif mutation == "drop_address":
                record = replace(record, address=None)
        return record
