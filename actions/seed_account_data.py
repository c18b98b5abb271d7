#!/usr/bin/env python3
"""
Generate a CSV of synthetic account data.

**Purpose**: Seed a test CSV with fake account records (account name, account
number, amount, first name, email) for exercising the CSV-to-JSON converter.

**What it does**:
  1. Reads --size (number of records, default 10).
  2. Generates that many records with Faker.
  3. Writes them to data/Account_Data.csv, or to the next free name
     (Account_Data1.csv, Account_Data2.csv, ...) if that file already exists.
     Existing files are never overwritten.

**Usage**:
    From project root:
    ```bash
    python actions/seed_account_data.py --size=25
    ```

Output directory, file name and delimiter come from settings
(CSVJSON_SEED_OUTPUT_DIR, CSVJSON_SEED_FILE_NAME, CSVJSON_DELIMITER).

**Exit codes**:
  - 0: File written.
  - 1: Nothing written (bad file name, no free name, write error, bad settings).
"""

import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvjson.config.settings import get_settings
from csvjson.seeding.seed import generate_seed_file, parse_size_arg
from csvjson.utils.log import configure_logging


def main(argv=None) -> int:
    """
    Main entrypoint for seeding account data.

    Args:
        argv: Command line arguments (default: sys.argv[1:]).

    Returns:
        Process exit code (0 on success, 1 on failure).
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    size = parse_size_arg(argv, default=settings.seed.default_size)
    print(f"Generating {size} account record(s)...")

    result = generate_seed_file(size, settings=settings.seed)

    if not result.ok:
        print(f"  ✗ {result.error_kind.value}: {result.message}", file=sys.stderr)
        return 1

    print(f"  ✓ Saved to {result.data}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
