from .errors import (
    ArborError,
    ConfigurationError,
    ErrorKind,
    InternalError,
    NotFoundError,
    Step,
    ValidationError,
    translate_os_errors,
)
from .results import TreeResult, capture

__all__ = [
    "ArborError",
    "ConfigurationError",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "Step",
    "TreeResult",
    "ValidationError",
    "capture",
    "translate_os_errors",
]
