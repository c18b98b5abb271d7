"""
FileProcessor: the CSV ingest pipeline entry point.

**Conceptual**: FileProcessor turns raw CSV bytes into a list of JSON-ready
records and reports the outcome as a Result. It is the outermost layer of
the ingest pipeline, so it is the one place parse errors are caught:
  - Parse errors become Result.failure(PARSE_ERROR, ...) and are logged.
  - Empty input is a success with an empty list; it is only logged, so
    callers can skip downstream work without treating it as a failure.

Example:
    >>> result = FileProcessor().process(b"name,amount\\nalice,10\\n")
    >>> result.ok, result.data
    (True, [{'name': 'alice', 'amount': '10'}])
"""

import logging
from pathlib import Path
from typing import Optional, Union

from csvjson.config.settings import IngestSettings
from csvjson.data.io import BytesLike, convert_to_records
from csvjson.data.schemas import CsvParseError
from csvjson.utils.result import ErrorKind, Result

logger = logging.getLogger(__name__)


class FileProcessor:
    """
    Reads CSV content and converts it into records.

    Args:
        settings: Encoding and chunk size used for parsing. Defaults to
                  IngestSettings() (utf-8, 1000-row chunks).
    """

    def __init__(self, settings: Optional[IngestSettings] = None):
        self.settings = settings or IngestSettings()

    def process(self, file_bytes: BytesLike) -> Result:
        """
        Convert CSV bytes into records.

        Returns:
            Result.success(records) (possibly an empty list), or a failure with
            kind PARSE_ERROR for malformed CSV or UNEXPECTED for anything else.
        """
        try:
            records = convert_to_records(
                file_bytes,
                encoding=self.settings.encoding,
                chunk_size=self.settings.chunk_size,
            )
        except CsvParseError as e:
            logger.warning("FileProcessor failed: %s", e)
            return Result.failure(ErrorKind.PARSE_ERROR, str(e))
        except Exception as e:
            logger.exception("FileProcessor failed with an unexpected error")
            return Result.failure(ErrorKind.UNEXPECTED, str(e))

        if len(records) < 1:
            logger.info("No data, skipping")

        return Result.success(records)

    def process_file(self, path: Union[Path, str]) -> Result:
        """
        Read a CSV file from disk and convert it into records.

        Returns:
            Same as process(), plus an IO_ERROR failure when the file can't be read.
        """
        path = Path(path)

        try:
            file_bytes = path.read_bytes()
        except OSError as e:
            logger.warning("FileProcessor could not read %s: %s", path, e)
            return Result.failure(ErrorKind.IO_ERROR, f"{path}: Failed to read file. Error: {e}")

        return self.process(file_bytes)
