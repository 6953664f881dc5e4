# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .errors import ArborError, ErrorKind


@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of a checked tree operation.

    Either `ok` is True and `error` is None, or `ok` is False and `error`
    holds the ArborError that stopped the operation.
    """

    ok: bool
    error: Optional[ArborError] = None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> None:
        """Re-raise the captured error, if any."""
        if self.error is not None:
            raise self.error


def capture(fn: Callable[..., None], *args) -> TreeResult:
    """Run `fn(*args)` and fold any ArborError into a TreeResult."""
    try:
        fn(*args)
    except ArborError as e:
        return TreeResult(ok=False, error=e)
    return TreeResult(ok=True)
