"""
Explicit success/failure values returned by the pipeline entry points.

**Conceptual**: The ingest and seeding entry points never let an exception
escape to their caller. Instead they return a Result that is either a
success carrying data or a failure carrying an ErrorKind and a message, so
calling code can branch on `result.ok` without scraping log output.

Example:
    >>> result = FileProcessor().process(b"a,b\\n1,2\\n")
    >>> if result.ok:
    ...     records = result.data
    ... elif result.error_kind is ErrorKind.PARSE_ERROR:
    ...     print(result.message)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Category of a failed pipeline invocation."""
    PARSE_ERROR = "parse_error"
    MISSING_EXTENSION = "missing_extension"
    COLLISION_LIMIT = "collision_limit"
    IO_ERROR = "io_error"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Result:
    """
    Outcome of one pipeline invocation.

    Build instances with Result.success() or Result.failure() rather than the
    constructor, so `ok`, `data` and `error_kind` always agree.

    Attributes:
        ok: True for success, False for failure.
        data: Payload of a success (records, written path, ...). None on failure.
        error_kind: Category of a failure. None on success.
        message: Human-readable failure description. Empty on success.
    """
    ok: bool
    data: Any = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, data: Any = None) -> "Result":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result":
        return cls(ok=False, error_kind=kind, message=message)

    def unwrap(self) -> Any:
        """Return the success payload, or raise RuntimeError describing the failure."""
        if not self.ok:
            raise RuntimeError(f"{self.error_kind.value}: {self.message}")
        return self.data
