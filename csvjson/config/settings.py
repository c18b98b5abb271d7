"""
Configuration settings for the CSV ingest and seeding pipelines.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when they are constructed, so a bad value (negative chunk size, empty file
name) fails at startup instead of halfway through a conversion.

**Environment variables** (all optional):
  - CSVJSON_ENCODING: text encoding of ingested CSV bytes (default "utf-8").
  - CSVJSON_CHUNK_SIZE: rows parsed per chunk while streaming CSV (default 1000).
  - CSVJSON_SEED_FILE_NAME: base file name for seeded data (default "Account_Data.csv").
  - CSVJSON_SEED_OUTPUT_DIR: directory seeded files are written to (default "data").
  - CSVJSON_SEED_DEFAULT_SIZE: records generated when --size is missing (default 10).
  - CSVJSON_DELIMITER: field delimiter for seeded files (default ",").
  - CSVJSON_MAX_ATTEMPTS: candidate names tried by the collision resolver (default 1000).
  - CSVJSON_FAKER_LOCALE: Faker locale for synthetic values (default "en_US").
  - LOG_LEVEL: logging level name for action scripts (default "INFO").

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); a missing file is a no-op
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _int_from_env(name: str, default: int) -> int:
    """Read an integer environment variable, raising ValueError with the variable name."""
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}")


@dataclass(frozen=True)
class IngestSettings:
    """
    Configuration for the CSV ingest converter.

    Attributes:
        encoding: Text encoding used to decode raw CSV bytes.
        chunk_size: Number of rows parsed per chunk while streaming the input.
                    Only affects memory use, never the resulting records.
    """
    encoding: str = "utf-8"
    chunk_size: int = 1000

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.encoding:
            raise ValueError("CSVJSON_ENCODING must not be empty.")
        if self.chunk_size <= 0:
            raise ValueError(
                f"CSVJSON_CHUNK_SIZE must be positive, got: {self.chunk_size}"
            )

    @classmethod
    def from_env(cls) -> "IngestSettings":
        """Load ingest settings from environment variables."""
        return cls(
            encoding=os.getenv("CSVJSON_ENCODING", "utf-8"),
            chunk_size=_int_from_env("CSVJSON_CHUNK_SIZE", 1000),
        )


@dataclass(frozen=True)
class SeedSettings:
    """
    Configuration for the synthetic account-data seeder.

    **Conceptual**: The seeder writes one CSV per run. The file name is only a
    starting candidate: if it already exists in the output directory the
    collision resolver picks the next free name (Account_Data1.csv, ...), so
    max_attempts bounds how far it searches.

    Attributes:
        file_name: Base file name for the seeded CSV. Must carry an extension.
        output_dir: Directory the seeded CSV is written to.
        default_size: Number of records generated when no valid --size is given.
        delimiter: Field delimiter used when serializing records.
        max_attempts: Maximum candidate names the collision resolver may reject.
        faker_locale: Locale passed to Faker for synthetic values.
    """
    file_name: str = "Account_Data.csv"
    output_dir: Path = field(default_factory=lambda: Path("data"))
    default_size: int = 10
    delimiter: str = ","
    max_attempts: int = 1000
    faker_locale: str = "en_US"

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.file_name:
            raise ValueError("CSVJSON_SEED_FILE_NAME must not be empty.")
        if not Path(self.file_name).suffix:
            raise ValueError(
                f"CSVJSON_SEED_FILE_NAME must have an extension, got: {self.file_name}"
            )
        if self.default_size < 0:
            raise ValueError(
                f"CSVJSON_SEED_DEFAULT_SIZE must be non-negative, got: {self.default_size}"
            )
        if not self.delimiter:
            raise ValueError("CSVJSON_DELIMITER must not be empty.")
        if self.max_attempts <= 0:
            raise ValueError(
                f"CSVJSON_MAX_ATTEMPTS must be positive, got: {self.max_attempts}"
            )

    @property
    def output_path(self) -> Path:
        """Candidate path for the seeded file, before collision resolution."""
        return Path(self.output_dir) / self.file_name

    @classmethod
    def from_env(cls) -> "SeedSettings":
        """
        Load seeder settings from environment variables.

        Returns:
            SeedSettings object with values loaded from environment.

        Raises:
            ValueError: If a numeric variable is not an integer or any value
                        fails validation.

        Usage example:
            >>> # In .env file:
            >>> # CSVJSON_SEED_OUTPUT_DIR=files
            >>> # CSVJSON_SEED_DEFAULT_SIZE=25
            >>>
            >>> settings = SeedSettings.from_env()
            >>> print(settings.output_path)  # files/Account_Data.csv
        """
        return cls(
            file_name=os.getenv("CSVJSON_SEED_FILE_NAME", "Account_Data.csv"),
            output_dir=Path(os.getenv("CSVJSON_SEED_OUTPUT_DIR", "data")),
            default_size=_int_from_env("CSVJSON_SEED_DEFAULT_SIZE", 10),
            delimiter=os.getenv("CSVJSON_DELIMITER", ","),
            max_attempts=_int_from_env("CSVJSON_MAX_ATTEMPTS", 1000),
            faker_locale=os.getenv("CSVJSON_FAKER_LOCALE", "en_US"),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings aggregating the ingest and seeding subsystems.

    **Usage pattern**:
      ```python
      from csvjson.config.settings import get_settings

      settings = get_settings()
      chunk_size = settings.ingest.chunk_size
      ```

    Attributes:
        ingest: CSV ingest converter settings.
        seed: Synthetic data seeder settings.
        log_level: Logging level name used by action scripts.
    """
    ingest: IngestSettings = field(default_factory=IngestSettings)
    seed: SeedSettings = field(default_factory=SeedSettings)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load global settings from environment variables."""
        return cls(
            ingest=IngestSettings.from_env(),
            seed=SeedSettings.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


# Lazily loaded singleton. Tests can build Settings(...) directly instead.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If any environment variable holds an invalid value.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    Clears the cached settings so the next get_settings() call re-reads the
    environment.
    """
    global _default_settings
    _default_settings = None
