from __future__ import annotations


class ContactDedupeError(Exception):
    """Base class for errors raised outside the scoring core."""


class ContactDataError(ContactDedupeError, ValueError):
    """Input contact data cannot be turned into contact records."""
