from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace

from contact_dedupe.models import ContactRecord
from contact_dedupe.schema import ContactField

FieldTransform = Callable[[str], str | None]

_FIELD_ATTRIBUTES = {
    ContactField.FIRST_NAME: "first_name",
    ContactField.LAST_NAME: "last_name",
    ContactField.EMAIL: "email_address",
    ContactField.ZIPCODE: "zipcode",
    ContactField.ADDRESS: "address",
}


class FunctionalCleaner:
    """Applies per-field transforms to contacts before they are scored.

    Matching never normalises values itself, so this is the place for loaders
    that want blank strings or stray whitespace treated as absent.
    """

    def __init__(self, transforms: Mapping[ContactField, Sequence[FieldTransform]] | None = None) -> None:
        self._transforms = {field: list(chain) for field, chain in (transforms or {}).items()}
        unknown = set(self._transforms) - set(_FIELD_ATTRIBUTES)
        if unknown:
            raise ValueError(f"Cannot transform fields: {sorted(unknown)}")

    def clean(self, records: Sequence[ContactRecord]) -> list[ContactRecord]:
        cleaned: list[ContactRecord] = []
        for record in records:
            changes: dict[str, str | None] = {}
            for field, chain in self._transforms.items():
                attribute = _FIELD_ATTRIBUTES[field]
                value = getattr(record, attribute)
                for transform in chain:
                    if value is None:
                        break
                    value = transform(value)
                changes[attribute] = value
            cleaned.append(replace(record, **changes) if changes else record)
        return cleaned

    @classmethod
    def default(cls) -> "FunctionalCleaner":
        """Collapse whitespace on every text field and drop values left blank."""
        chain = [collapse_whitespace, blank_to_none]
        return cls({field: chain for field in _FIELD_ATTRIBUTES})


def collapse_whitespace(value: str) -> str:
    return " ".join(value.split())


def blank_to_none(value: str) -> str | None:
    return value if value.strip() else None
