from contact_dedupe.datasets.csv_io import read_contacts_csv, write_contacts_csv, write_matches_csv
from contact_dedupe.datasets.profiles import CONTACT_COLUMNS, MATCH_COLUMNS
from contact_dedupe.datasets.reference import ReferenceContactGenerator

__all__ = [
    "CONTACT_COLUMNS",
    "MATCH_COLUMNS",
    "ReferenceContactGenerator",
    "read_contacts_csv",
    "write_contacts_csv",
    "write_matches_csv",
]
