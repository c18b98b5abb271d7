"""
Tests for csvjson/processing/file_processor.py

FileProcessor must never raise: every outcome is a Result.
"""

import logging

import pytest

from csvjson.config.settings import IngestSettings
from csvjson.processing.file_processor import FileProcessor
from csvjson.utils.result import ErrorKind


def test_process_returns_records():
    """Test that valid CSV bytes produce a successful Result with records."""
    result = FileProcessor().process(b"name,amount\nalice,10\nbob,20\n")

    assert result.ok
    assert result.error_kind is None
    assert result.data == [
        {"name": "alice", "amount": "10"},
        {"name": "bob", "amount": "20"},
    ]


def test_process_empty_input_is_success_and_logged(caplog):
    """Test that empty input is a success with no records and an info log."""
    caplog.set_level(logging.INFO, logger="csvjson.processing.file_processor")

    result = FileProcessor().process(b"")

    assert result.ok
    assert result.data == []
    assert "No data, skipping" in caplog.text


def test_process_header_only_is_success():
    """Test that a header with no rows is a success with no records."""
    result = FileProcessor().process(b"a,b,c\n")

    assert result.ok
    assert result.data == []


def test_process_malformed_input_is_parse_failure(caplog):
    """Test that malformed CSV returns PARSE_ERROR instead of raising."""
    caplog.set_level(logging.WARNING, logger="csvjson.processing.file_processor")

    result = FileProcessor().process(b"a,b\n1,2\n3,4,5\n")

    assert not result.ok
    assert result.data is None
    assert result.error_kind is ErrorKind.PARSE_ERROR
    assert "Failed to parse CSV input" in result.message
    assert "FileProcessor failed" in caplog.text


@pytest.mark.parametrize("csv_bytes", [
    b"a,b\n1,2,3\n4,5,6\n",
    b"a,a\n1,2\n",
])
def test_process_wide_rows_and_duplicate_headers_are_parse_failures(csv_bytes):
    """Test that rows wider than the header and repeated header names fail with PARSE_ERROR."""
    result = FileProcessor().process(csv_bytes)

    assert not result.ok
    assert result.error_kind is ErrorKind.PARSE_ERROR


def test_process_unexpected_error_is_failure():
    """Test that a non-CSV error (wrong input type) returns UNEXPECTED."""
    result = FileProcessor().process(None)

    assert not result.ok
    assert result.error_kind is ErrorKind.UNEXPECTED


def test_process_uses_configured_encoding():
    """Test that settings.encoding is used to decode the bytes."""
    processor = FileProcessor(IngestSettings(encoding="latin-1"))

    result = processor.process("name\nJosé\n".encode("latin-1"))

    assert result.ok
    assert result.data == [{"name": "José"}]


def test_process_file_reads_from_disk(tmp_path):
    """Test that process_file converts the contents of a file."""
    path = tmp_path / "sample.csv"
    path.write_bytes(b"a,b\n1,2\n")

    result = FileProcessor().process_file(path)

    assert result.ok
    assert result.data == [{"a": "1", "b": "2"}]


def test_process_file_missing_file_is_io_failure(tmp_path):
    """Test that a missing file returns IO_ERROR."""
    result = FileProcessor().process_file(tmp_path / "missing.csv")

    assert not result.ok
    assert result.error_kind is ErrorKind.IO_ERROR
    assert "missing.csv" in result.message


def test_result_unwrap():
    """Test that unwrap returns data on success and raises on failure."""
    processor = FileProcessor()

    assert processor.process(b"a\n1\n").unwrap() == [{"a": "1"}]

    failed = processor.process(b"a,b\n1,2\n3,4,5\n")
    with pytest.raises(RuntimeError) as exc_info:
        failed.unwrap()

    assert "parse_error" in str(exc_info.value)
