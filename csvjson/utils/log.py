"""
Logging setup for action scripts.

Library modules only create module-level loggers; configuring handlers is
left to the entry point, which calls configure_logging() once.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Send log records from the csvjson package to stderr.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Unknown names fall
               back to INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
