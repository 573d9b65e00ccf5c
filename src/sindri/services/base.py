"""Base class for the init pipeline stages.

A stage implements ``_run(request)`` and returns a typed outcome. Expected
failures are raised as ``ServiceFailure``; ``__call__`` routes them to
``_handle_failure``, which re-raises unless the stage recovers (the git
bootstrap turns its failures into a ``failed`` outcome). Whatever escapes
reaches ``commands.init``, which logs the message at the failure's
``log_level`` and exits with status 1.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import ServiceFailure

R = TypeVar("R")
T = TypeVar("T")


class BaseService(ABC, Generic[R, T]):
    """One stage of ``sindri init``, called with a request, returning an outcome."""

    def __call__(self, request: R) -> T:
        try:
            return self._run(request)
        except ServiceFailure as failure:
            return self._handle_failure(failure)

    @abstractmethod
    def _run(self, request: R) -> T:
        """Run the stage. Raise ``ServiceFailure`` to end the init run."""
        ...

    def _handle_failure(self, error: ServiceFailure) -> T:
        """Re-raise ``error``; stages that can recover return an outcome instead."""
        raise error
