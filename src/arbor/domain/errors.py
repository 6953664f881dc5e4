from __future__ import annotations

import enum
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    VALIDATION = "validation"


class Step(enum.Enum):
    """The I/O primitive that was running when an error occurred."""

    EXISTS = "exists"
    CREATE = "create"
    LIST = "list"
    STAT = "stat"
    COPY = "copy"
    UNLINK = "unlink"
    RMDIR = "rmdir"
    READ = "read"
    WRITE = "write"
    APPEND = "append"
    RENAME = "rename"


class ArborError(Exception):
    """Base exception for domain-specific errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Union[str, Path]] = None,
        step: Optional[Step] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = None if path is None else str(path)
        self.step = step


class NotFoundError(ArborError):
    """A path that had to exist was missing when checked."""

    kind = ErrorKind.NOT_FOUND


class InternalError(ArborError):
    """An I/O primitive failed for a reason other than non-existence."""

    kind = ErrorKind.INTERNAL


class ValidationError(ArborError):
    """Content handed to a write-style operation was not well-formed."""

    kind = ErrorKind.VALIDATION


class ConfigurationError(ValidationError):
    """Config file exists but is unusable (bad JSON, not an object)."""


@contextmanager
def translate_os_errors(
    step: Step, path: Union[str, Path], *, missing_is_not_found: bool = False
) -> Iterator[None]:
    """
    Re-raise OSError from the wrapped block as an ArborError.

    FileNotFoundError becomes NotFoundError only when `missing_is_not_found`
    is set; otherwise a vanished path is an I/O failure like any other.
    """
    try:
        yield
    except FileNotFoundError as e:
        if missing_is_not_found:
            raise NotFoundError(f"Not found: {path}", path=path, step=step) from e
        raise InternalError(
            f"{step.value} failed for {path}: {e.strerror or e}", path=path, step=step
        ) from e
    except OSError as e:
        raise InternalError(
            f"{step.value} failed for {path}: {e.strerror or e}", path=path, step=step
        ) from e
