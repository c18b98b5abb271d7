"""
Tests for csvjson/seeding/seed.py

These tests verify --size parsing and the full seed pipeline: row counts,
header line, collision-free file names and failure results.
"""

import pytest

from csvjson.config.settings import SeedSettings
from csvjson.data.io import convert_to_records
from csvjson.data.schemas import ACCOUNT_HEADERS
from csvjson.seeding import seed as seed_module
from csvjson.seeding.seed import coerce_size, generate_seed_file, parse_size_arg
from csvjson.utils.paths import MissingExtensionError
from csvjson.utils.result import ErrorKind


class FixedSource:
    """ValueSource returning the same values every time."""

    def account_name(self):
        return "Savings Account"

    def account_number(self):
        return "00001234"

    def amount(self):
        return "10.00"

    def first_name(self):
        return "Maya"

    def email(self, first_name):
        return f"{first_name.lower()}@example.com"


# ============================================================================
# parse_size_arg / coerce_size
# ============================================================================

@pytest.mark.parametrize("args, expected", [
    (["--size=5"], 5),
    (["--size=0"], 0),
    (["--verbose", "--size=42"], 42),
    (["--size=7", "--size=9"], 9),
    (["--size", "4"], 4),
    (["--size"], 10),
    (["--size", "--verbose"], 10),
    (["--si=3"], 10),
    ([], 10),
    (["--size="], 10),
    (["--size=abc"], 10),
    (["--size=-3"], 10),
    (["--size=2.5"], 10),
    (["--sizes=4"], 10),
])
def test_parse_size_arg(args, expected):
    """Test that missing, non-numeric or negative sizes fall back to 10 and the last --size wins."""
    assert parse_size_arg(args) == expected


def test_parse_size_arg_custom_default():
    """Test that the fallback value can be overridden."""
    assert parse_size_arg(["--size=oops"], default=3) == 3


def test_coerce_size_none_uses_default():
    """Test that a missing value uses the default."""
    assert coerce_size(None, default=25) == 25
    assert coerce_size(" 12 ") == 12


# ============================================================================
# generate_seed_file
# ============================================================================

def test_generate_seed_file_writes_header_plus_rows(tmp_path):
    """Test that size=5 produces exactly one header line and five data rows."""
    settings = SeedSettings(output_dir=tmp_path)

    result = generate_seed_file(5, settings=settings, source=FixedSource())

    assert result.ok
    assert result.data == tmp_path / "Account_Data.csv"

    lines = result.data.read_text(encoding="utf-8").split("\n")
    assert len(lines) == 6
    assert lines[0] == ",".join(ACCOUNT_HEADERS)
    assert lines[1] == '"Savings Account","00001234","10.00","Maya","maya@example.com"'


def test_generate_seed_file_output_parses_back(tmp_path):
    """Test that the seeded file can be read by the ingest converter."""
    result = generate_seed_file(3, settings=SeedSettings(output_dir=tmp_path), source=FixedSource())

    records = convert_to_records(result.data.read_bytes())

    assert len(records) == 3
    assert records[0]["accountNumber"] == "00001234"


def test_generate_seed_file_never_overwrites(tmp_path):
    """Test that a second run picks the next free name and leaves the first file alone."""
    settings = SeedSettings(output_dir=tmp_path)
    existing = tmp_path / "Account_Data.csv"
    existing.write_text("keep me")

    first = generate_seed_file(2, settings=settings, source=FixedSource())
    second = generate_seed_file(2, settings=settings, source=FixedSource())

    assert first.data == tmp_path / "Account_Data1.csv"
    assert second.data == tmp_path / "Account_Data2.csv"
    assert existing.read_text() == "keep me"


def test_generate_seed_file_custom_delimiter(tmp_path):
    """Test that the configured delimiter is used for header and rows."""
    settings = SeedSettings(output_dir=tmp_path, delimiter=";")

    result = generate_seed_file(1, settings=settings, source=FixedSource())

    header, row = result.data.read_text(encoding="utf-8").split("\n")
    assert header == ";".join(ACCOUNT_HEADERS)
    assert row.count(";") == len(ACCOUNT_HEADERS) - 1


def test_generate_seed_file_zero_records(tmp_path):
    """Test that size=0 writes only the header line."""
    result = generate_seed_file(0, settings=SeedSettings(output_dir=tmp_path), source=FixedSource())

    assert result.ok
    assert result.data.read_text(encoding="utf-8") == ",".join(ACCOUNT_HEADERS) + "\n"


def test_generate_seed_file_uses_faker_by_default(tmp_path):
    """Test that omitting the source still produces a full file."""
    result = generate_seed_file(4, settings=SeedSettings(output_dir=tmp_path))

    assert result.ok
    assert len(convert_to_records(result.data.read_bytes())) == 4


def test_generate_seed_file_collision_limit_is_a_failure(tmp_path):
    """Test that running out of candidate names returns COLLISION_LIMIT."""
    (tmp_path / "Account_Data.csv").write_text("x")
    (tmp_path / "Account_Data1.csv").write_text("x")
    settings = SeedSettings(output_dir=tmp_path, max_attempts=1)

    result = generate_seed_file(2, settings=settings, source=FixedSource())

    assert not result.ok
    assert result.error_kind is ErrorKind.COLLISION_LIMIT
    assert "after 1 attempts" in result.message


def test_generate_seed_file_missing_extension_is_a_failure(tmp_path, monkeypatch):
    """Test that a resolver extension error returns MISSING_EXTENSION."""
    def reject(*args, **kwargs):
        raise MissingExtensionError("no extension")

    monkeypatch.setattr(seed_module, "resolve_unique_path", reject)

    result = generate_seed_file(1, settings=SeedSettings(output_dir=tmp_path), source=FixedSource())

    assert not result.ok
    assert result.error_kind is ErrorKind.MISSING_EXTENSION
    assert result.message == "no extension"


def test_generate_seed_file_write_error_is_a_failure(tmp_path):
    """Test that an unwritable output directory returns IO_ERROR."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = generate_seed_file(1, settings=SeedSettings(output_dir=blocker), source=FixedSource())

    assert not result.ok
    assert result.error_kind is ErrorKind.IO_ERROR
