#!/usr/bin/env python3
"""
Convert a CSV file to JSON records.

**Purpose**: Read a CSV file with a header row, convert every data row into a
JSON object keyed by the header names, and print the resulting list (or save
it with --output).

**Usage**:
    From project root:
    ```bash
    # Print records from the default sample file
    python actions/convert_csv_to_json.py

    # Convert a specific file and save the JSON next to it
    python actions/convert_csv_to_json.py data/Account_Data.csv --output data/Account_Data.json
    ```

If the --output file already exists, the JSON is written to the next free
name (Account_Data1.json, ...) instead of overwriting it.

**Exit codes**:
  - 0: Conversion succeeded (including an empty CSV, which yields []).
  - 1: File missing or unreadable, malformed CSV, or output not writable.
"""

import argparse
import json
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvjson.config.settings import get_settings
from csvjson.data.io import write_json_records
from csvjson.processing.file_processor import FileProcessor
from csvjson.utils.log import configure_logging
from csvjson.utils.paths import MissingExtensionError, CollisionLimitError, resolve_unique_path

DEFAULT_SOURCE = "files/sample_data.csv"


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Convert a CSV file to JSON records")

    parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"Path to the source CSV file (default: {DEFAULT_SOURCE})",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write JSON to this file instead of printing it (never overwrites)",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        help="JSON indentation (default: 4)",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entrypoint for CSV to JSON conversion.

    Returns:
        Process exit code (0 on success, 1 on failure).
    """
    args = parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    processor = FileProcessor(settings.ingest)
    result = processor.process_file(args.source)

    if not result.ok:
        print(f"  ✗ {result.error_kind.value}: {result.message}", file=sys.stderr)
        return 1

    records = result.data

    if args.output is None:
        print(json.dumps(records, indent=args.indent, ensure_ascii=False))
        return 0

    try:
        path = resolve_unique_path(args.output, max_attempts=settings.seed.max_attempts)
        path = write_json_records(records, path, indent=args.indent)
    except (MissingExtensionError, CollisionLimitError, OSError) as e:
        print(f"  ✗ Failed to save JSON: {e}", file=sys.stderr)
        return 1

    print(f"  ✓ Saved {len(records)} record(s) to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
