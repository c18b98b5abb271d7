"""
Seed file pipeline: generate records, serialize them and write a new file.

**Conceptual**: One call to generate_seed_file() produces exactly one new CSV:
  1. Generate `size` synthetic account records.
  2. Serialize them with ACCOUNT_HEADERS and the configured delimiter.
  3. Resolve a file name that does not exist yet in the output directory.
  4. Write the content once to that path.

Failures never escape as exceptions. They are logged and returned as a
failed Result, so callers (and the seed action) can branch on `result.ok`.
"""

import argparse
import logging
from typing import Optional, Sequence

from csvjson.config.settings import SeedSettings
from csvjson.data.io import build_file_content, write_file_content
from csvjson.data.schemas import ACCOUNT_HEADERS
from csvjson.seeding.synthetic_data import FakerValueSource, ValueSource, create_records
from csvjson.utils.paths import CollisionLimitError, MissingExtensionError, resolve_unique_path
from csvjson.utils.result import ErrorKind, Result

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser for the seed action.

    `--size` is the only recognized flag. Its value is kept as a string so
    coerce_size() can apply the fallback rules, and a bare `--size` parses
    to None. Abbreviations such as `--si=3` are not accepted as `--size`.
    """
    parser = argparse.ArgumentParser(
        description="Generate a CSV file of synthetic account data",
        epilog="""
Examples:
  # 10 records (default)
  python actions/seed_account_data.py

  # 500 records
  python actions/seed_account_data.py --size=500
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "--size",
        type=str,
        nargs="?",
        const=None,
        default=None,
        help="Number of records to generate (default: 10; missing or non-numeric values use the default)",
    )

    return parser


def coerce_size(value: Optional[str], default: int = DEFAULT_SIZE) -> int:
    """
    Turn a raw size value into a record count.

    None, a non-numeric string or a negative number all fall back to `default`.
    """
    if value is None:
        return default

    value = value.strip()
    try:
        size = int(value)
    except ValueError:
        logger.warning("Ignoring non-numeric size %r; using %d", value, default)
        return default

    if size < 0:
        logger.warning("Ignoring negative size %d; using %d", size, default)
        return default

    return size


def parse_size_arg(args: Sequence[str], default: int = DEFAULT_SIZE) -> int:
    """
    Extract the record count from command line arguments.

    Arguments other than `--size` are ignored. If `--size` is repeated the
    last one wins; see coerce_size() for the fallback rules.

    Example:
        >>> parse_size_arg(["--size=5"])
        5
        >>> parse_size_arg(["--size=abc"])
        10
        >>> parse_size_arg(["--size"])
        10
    """
    namespace, _ = build_arg_parser().parse_known_args(list(args))
    return coerce_size(namespace.size, default)


def generate_seed_file(
    size: int,
    settings: Optional[SeedSettings] = None,
    source: Optional[ValueSource] = None,
) -> Result:
    """
    Generate `size` account records and write them to a new CSV file.

    Args:
        size: Number of data rows to generate.
        settings: Output location, delimiter and resolver limits. Defaults to
                  SeedSettings() (data/Account_Data.csv, comma-delimited).
        source: Value generator. Defaults to a FakerValueSource using the
                configured locale.

    Returns:
        Result.success(path) with the path actually written, or a failure with
        kind MISSING_EXTENSION, COLLISION_LIMIT, IO_ERROR or UNEXPECTED.
    """
    if settings is None:
        settings = SeedSettings()
    if source is None:
        source = FakerValueSource(locale=settings.faker_locale)

    try:
        records = create_records(size, source)
        content = build_file_content(ACCOUNT_HEADERS, records, delimiter=settings.delimiter)
        path = resolve_unique_path(settings.output_path, max_attempts=settings.max_attempts)
        written = write_file_content(content, path)
    except MissingExtensionError as e:
        logger.error("Seed file not written: %s", e)
        return Result.failure(ErrorKind.MISSING_EXTENSION, str(e))
    except CollisionLimitError as e:
        logger.error("Seed file not written: %s", e)
        return Result.failure(ErrorKind.COLLISION_LIMIT, str(e))
    except OSError as e:
        logger.error("Seed file not written: %s", e)
        return Result.failure(ErrorKind.IO_ERROR, str(e))
    except Exception as e:
        logger.exception("Unexpected error while seeding")
        return Result.failure(ErrorKind.UNEXPECTED, str(e))

    logger.info("Seeded %d record(s) into %s", size, written)
    return Result.success(written)
