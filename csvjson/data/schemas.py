"""
Record types, seeded-file schema and ingest errors.

**Conceptual**: This module defines the small set of data contracts shared by
both pipelines:
  - A Record is an ordered mapping of field name to string value.
  - A RecordSet is a list of Records in source (or generation) order.
  - FileContent is the serialized form of a RecordSet: one header line plus
    delimiter-joined data rows.

**Column order rule**: the header line of a FileContent and the value order of
each of its rows come from the same header sequence. Seeded account data
always uses ACCOUNT_HEADERS.
"""

from dataclasses import dataclass
from typing import Dict, List


# One parsed or generated row: field name -> value
Record = Dict[str, str]

# Ordered collection of Records from one source
RecordSet = List[Record]


# Seeded account-data schema, in on-disk column order
ACCOUNT_HEADERS = [
    'accountName',
    'accountNumber',
    'amount',
    'firstName',
    'email',
]


class CsvParseError(Exception):
    """
    Raised when CSV bytes cannot be parsed into records.

    The underlying pandas or codec error is chained as __cause__ so callers
    can inspect the original failure (line number, offending byte, ...).
    """
    pass


@dataclass(frozen=True)
class FileContent:
    """
    Serialized delimited text for a RecordSet.

    Attributes:
        header: Delimiter-joined field names followed by a single newline.
        data: Data rows joined by newlines. No trailing newline after the last row.
    """
    header: str
    data: str

    def text(self) -> str:
        """Full file text: header line followed by the data rows."""
        return self.header + self.data

    @property
    def row_count(self) -> int:
        """Number of data rows (zero when data is empty)."""
        return len(self.data.split("\n")) if self.data else 0
