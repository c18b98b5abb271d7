"""
Collision-free output path resolution.

**Conceptual**: Seeded files must never overwrite an existing file. Given a
candidate path, resolve_unique_path() proposes successive names until one
does not exist:

    data.csv   -> data1.csv -> data2.csv -> ...
    data9.csv  -> data10.csv
    noext      -> MissingExtensionError

Only the candidate is changed; storage is never touched. The check is not
atomic with the later write, so two processes seeding the same directory at
the same moment can pick the same name.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

# Stem split into (prefix, trailing decimal digits)
_TRAILING_DIGITS = re.compile(r"^(.*?)(\d+)$")

DEFAULT_MAX_ATTEMPTS = 1000


class MissingExtensionError(ValueError):
    """Raised when a candidate path has no file extension."""
    pass


class CollisionLimitError(RuntimeError):
    """Raised when no free path is found within the allowed number of attempts."""
    pass


def next_candidate(path: Path) -> Path:
    """
    Return the next name to try after `path`.

    A stem ending in digits has that number incremented (report9 -> report10);
    any other stem gets "1" appended (report -> report1). Directory and
    extension are kept.

    Raises:
        MissingExtensionError: If `path` has no extension.
    """
    suffix = path.suffix
    if not suffix:
        raise MissingExtensionError(
            f"Cannot resolve a unique name for '{path}': the file name has no extension."
        )

    stem = path.name[: -len(suffix)]
    match = _TRAILING_DIGITS.match(stem)
    if match:
        prefix, digits = match.groups()
        new_stem = f"{prefix}{int(digits) + 1}"
    else:
        new_stem = f"{stem}1"

    return path.with_name(new_stem + suffix)


def resolve_unique_path(
    candidate: Union[Path, str],
    exists: Optional[Callable[[Path], bool]] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Path:
    """
    Find the first path, starting at `candidate`, that does not exist.

    **Functionally**:
      1. Reject candidates without an extension, whether or not they exist.
      2. Return the candidate unchanged if it does not exist.
      3. Otherwise step through next_candidate() until a free name is found.

    Args:
        candidate: Proposed output path. Must carry an extension.
        exists: Predicate telling whether a path is taken. Defaults to
                Path.exists; tests can pass a set's __contains__ or similar.
        max_attempts: Maximum number of taken candidates to step past.

    Returns:
        A path that did not exist at the time of the check.

    Raises:
        MissingExtensionError: If the candidate has no extension.
        CollisionLimitError: If `max_attempts` candidates in a row were taken.
        ValueError: If max_attempts is not positive.

    Example:
        >>> taken = {Path("report.csv"), Path("report1.csv")}
        >>> resolve_unique_path("report.csv", exists=taken.__contains__)
        PosixPath('report2.csv')
    """
    if max_attempts <= 0:
        raise ValueError(f"max_attempts must be positive, got: {max_attempts}")

    if exists is None:
        exists = Path.exists

    path = Path(candidate)
    if not path.suffix:
        raise MissingExtensionError(
            f"Cannot resolve a unique name for '{path}': the file name has no extension."
        )

    attempts = 0
    while exists(path):
        attempts += 1
        if attempts > max_attempts:
            raise CollisionLimitError(
                f"No free file name found for '{candidate}' after {max_attempts} attempts "
                f"(last tried '{path}')."
            )
        path = next_candidate(path)

    if attempts:
        logger.info("'%s' already exists; using '%s'", candidate, path)

    return path
