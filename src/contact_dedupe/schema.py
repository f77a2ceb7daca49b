from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping, Sequence


class ContactField(StrEnum):
    CONTACT_ID = "CONTACT_ID"
    FIRST_NAME = "FIRST_NAME"
    LAST_NAME = "LAST_NAME"
    EMAIL = "EMAIL"
    ZIPCODE = "ZIPCODE"
    ADDRESS = "ADDRESS"


@dataclass(frozen=True)
class RecordSchema:
    """Maps source-file columns to contact fields."""

    field_to_columns: Mapping[ContactField, tuple[str, ...]]

    @classmethod
    def from_mapping(cls, mapping: Mapping[ContactField, Sequence[str]]) -> "RecordSchema":
        frozen = {field: tuple(columns) for field, columns in mapping.items()}
        return cls(field_to_columns=frozen)

    def columns_for(self, field: ContactField) -> tuple[str, ...]:
        return self.field_to_columns.get(field, ())

    def value_for(self, row: Mapping[str, object], field: ContactField) -> str | None:
        """First non-blank value among the field's columns, stripped, or None."""
        for column in self.columns_for(field):
            value = row.get(column)
            if value is None:
                continue
            text = str(value).strip()
            if text:
                return text
        return None


DEFAULT_CONTACT_SCHEMA = RecordSchema.from_mapping(
    {
        ContactField.CONTACT_ID: ["id", "contact_id"],
        ContactField.FIRST_NAME: ["firstName", "first_name"],
        ContactField.LAST_NAME: ["lastName", "last_name"],
        ContactField.EMAIL: ["emailAddress", "email_address", "email"],
        ContactField.ZIPCODE: ["zipcode", "zip_code", "zip"],
        ContactField.ADDRESS: ["address"],
    }
)
