from __future__ import annotations

# Column layout used when contacts and matches are written back out.
CONTACT_COLUMNS = [
    "id",
    "firstName",
    "lastName",
    "emailAddress",
    "zipcode",
    "address",
]

MATCH_COLUMNS = ["source_id", "match_id", "accuracy"]
