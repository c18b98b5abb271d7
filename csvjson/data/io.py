"""
CSV ingest and delimited-text writers.

**Conceptual**: This module is the I/O boundary for record data in both
directions:
  - convert_to_records() turns raw CSV bytes into a RecordSet (ingest).
  - build_file_content() turns a RecordSet back into delimited text and
    write_file_content() puts that text on disk (seeding).
  - write_json_records() saves a RecordSet as a JSON array.

**Rule**: Never call pd.read_csv directly in processors or actions. Going
through convert_to_records() guarantees string-valued records, verbatim
header keys, empty-input handling and a single error type (CsvParseError)
for malformed input.

**Ingest semantics**:
  - Every value is read as a string; empty cells stay "" (no NaN coercion).
  - Keys are the header fields exactly as written: no renaming of duplicate
    or empty names. Duplicate header names are rejected.
  - A data row with more fields than the header is rejected.
  - Rows are streamed in chunks and appended to a list allocated per call,
    so no rows ever leak between two conversions.
  - Empty input (no bytes, blank lines only, or a header with no rows)
    yields an empty list, not an error.
"""

import io
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Union

import pandas as pd

from csvjson.data.schemas import CsvParseError, FileContent, RecordSet

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, str]

PARSE_ERROR_PREFIX = "Failed to parse CSV input."


def _header_fields(values: Sequence[object]) -> List[str]:
    """
    Turn the first parsed row into the list of header names.

    The frame is as wide as its widest row, so trailing NaN cells are not
    part of the header.

    Raises:
        CsvParseError: If a header name appears more than once.
    """
    fields = list(values)
    while fields and pd.isna(fields[-1]):
        fields.pop()

    header = [str(field) for field in fields]

    duplicates = sorted(name for name, count in Counter(header).items() if count > 1)
    if duplicates:
        raise CsvParseError(
            f"{PARSE_ERROR_PREFIX} Error: duplicate header field(s) {duplicates}. "
            f"Header: {header}."
        )

    return header


def _check_row_widths(chunk: pd.DataFrame, header: Sequence[str]) -> None:
    """
    Raise CsvParseError if any row in `chunk` has more fields than the header.

    Row numbers count the header row as row 0, so they match the data row
    number in the source file (blank lines excluded).
    """
    if chunk.shape[1] <= len(header):
        return

    too_wide = chunk.iloc[:, len(header):].notna().any(axis=1)
    if too_wide.any():
        row_number = chunk.index[too_wide.to_numpy()][0]
        raise CsvParseError(
            f"{PARSE_ERROR_PREFIX} Error: data row {row_number} has more fields "
            f"than the {len(header)}-field header {list(header)}."
        )


def convert_to_records(
    file_bytes: BytesLike,
    encoding: str = "utf-8",
    chunk_size: int = 1000,
) -> RecordSet:
    """
    Convert raw CSV bytes (with a header row) into a list of records.

    **Functionally**:
      - Wraps the bytes in an in-memory buffer and streams it through
        pd.read_csv in chunks of `chunk_size` rows, with header=None so the
        header row is parsed as a plain row. pandas therefore never renames
        header fields or uses a column as the index.
      - Takes the first row as the header, exactly as written.
      - Converts each following row to a dict keyed by the header names
        present in that row. Short rows omit their missing trailing fields.
      - Returns the accumulated records in source row order.

    Args:
        file_bytes: Raw CSV content. A str is encoded with `encoding` first.
        encoding: Text encoding of the bytes (default: "utf-8").
        chunk_size: Rows parsed per chunk (default: 1000).

    Returns:
        List of records, one per data row. Empty list for empty input.

    Raises:
        CsvParseError: If the content is not parseable CSV: a row with more
                       fields than the header, a repeated header name, or
                       undecodable bytes.

    Example:
        >>> convert_to_records(b"name,amount\\nalice,10\\nbob,\\n")
        [{'name': 'alice', 'amount': '10'}, {'name': 'bob', 'amount': ''}]
    """
    if isinstance(file_bytes, str):
        file_bytes = file_bytes.encode(encoding)

    # Fresh accumulator per call
    records: RecordSet = []
    header: List[str] = []

    buffer = io.BytesIO(bytes(file_bytes))

    try:
        with pd.read_csv(
            buffer,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding=encoding,
            chunksize=chunk_size,
        ) as reader:
            for chunk_number, chunk in enumerate(reader):
                rows = chunk.itertuples(index=False, name=None)
                if chunk_number == 0:
                    header = _header_fields(next(rows))

                _check_row_widths(chunk, header)

                for values in rows:
                    records.append(
                        {key: value for key, value in zip(header, values) if not pd.isna(value)}
                    )
    except pd.errors.EmptyDataError:
        logger.debug("CSV input is empty; returning no records")
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise CsvParseError(f"{PARSE_ERROR_PREFIX} Error: {e}") from e

    logger.debug("Parsed %d record(s) from CSV input", len(records))
    return records


def build_file_content(
    headers: Sequence[str],
    records: Iterable[Mapping[str, object]],
    delimiter: str = ",",
) -> FileContent:
    """
    Serialize records into a header line and delimiter-joined data rows.

    **Functionally**:
      - header = headers joined by `delimiter`, plus "\\n".
      - For each record, values are taken in `headers` order; an absent or
        None value becomes "". Every value is converted to str and
        JSON-string encoded, so delimiters, quotes and newlines inside a value
        are always enclosed in quotes or escaped.
      - Rows are joined with "\\n". No trailing newline follows the last row.

    Args:
        headers: Field names, in output column order.
        records: Records to serialize. Extra keys not in `headers` are ignored.
        delimiter: Field separator (default: ",").

    Returns:
        FileContent with the header line and the data rows.

    Raises:
        ValueError: If delimiter is empty.

    Example:
        >>> content = build_file_content(["a", "b"], [{"a": 1, "b": "x,y"}])
        >>> content.header
        'a,b\\n'
        >>> content.data
        '"1","x,y"'
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    header_line = delimiter.join(headers) + "\n"

    rows = []
    for record in records:
        values = []
        for header in headers:
            value = record.get(header)
            values.append(json.dumps("" if value is None else str(value)))
        rows.append(delimiter.join(values))

    return FileContent(header=header_line, data="\n".join(rows))


def _write_text(text: str, path: Union[Path, str]) -> Path:
    """
    Write UTF-8 text to `path`, creating parent directories.

    Raises:
        OSError: If the file can't be written, with the path in the message.
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" separators unchanged on every platform
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OSError(f"{path}: Failed to write file. Error: {e}") from e

    return path


def write_file_content(content: FileContent, path: Union[Path, str]) -> Path:
    """
    Write a FileContent to disk as UTF-8 text.

    The caller decides the final path (see utils.paths.resolve_unique_path);
    this function overwrites whatever is at `path`.

    Args:
        content: Serialized header and data rows.
        path: Destination file. Parent directories are created if needed.

    Returns:
        The path written to.

    Raises:
        OSError: If the file can't be written (permissions, disk full, etc.).
    """
    written = _write_text(content.text(), path)
    logger.info("Wrote %d row(s) to %s", content.row_count, written)
    return written


def write_json_records(
    records: RecordSet,
    path: Union[Path, str],
    indent: int = 4,
) -> Path:
    """
    Write records to disk as a JSON array (UTF-8, non-ASCII kept as-is).

    Like write_file_content(), this overwrites `path`; resolve a free name first.

    Raises:
        OSError: If the file can't be written.
    """
    written = _write_text(json.dumps(records, indent=indent, ensure_ascii=False), path)
    logger.info("Wrote %d record(s) to %s", len(records), written)
    return written
