from .base import BaseService
from .errors import (
    AbortedError,
    ExternalCommandFailedError,
    PreconditionFailedError,
    ServiceFailure,
    UnexpectedStateError,
    UnsupportedKindError,
)

__all__ = [
    "AbortedError",
    "BaseService",
    "ExternalCommandFailedError",
    "PreconditionFailedError",
    "ServiceFailure",
    "UnexpectedStateError",
    "UnsupportedKindError",
]
