"""Service failure contracts.

Services return typed outcomes on success and raise ServiceFailure on expected
precondition/user/runtime failures. Programmer bugs raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

from ..log import LogLevel

ServiceFailureCode = Literal[
    "precondition_failed",
    "aborted",
    "unsupported_kind",
    "external_command_failed",
    "unexpected_state",
]


class ServiceFailure(Exception):
    """Expected service failure that ends the init run.

    Use ``raise ServiceFailure(...) from exc`` to chain a causing exception;
    it is available as ``__cause__``. ``log_level`` is the level the CLI
    reports the message at before exiting.
    """

    log_level = LogLevel.ERROR

    def __init__(self, code: ServiceFailureCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class PreconditionFailedError(ServiceFailure):
    """The target path cannot be used (for example, it is a regular file)."""

    log_level = LogLevel.WARNING

    def __init__(self, message: str) -> None:
        super().__init__("precondition_failed", message)


class AbortedError(ServiceFailure):
    """The user declined to continue."""

    log_level = LogLevel.INFO

    def __init__(self, message: str = "Aborting.") -> None:
        super().__init__("aborted", message)


class UnsupportedKindError(ServiceFailure):
    """The selected project kind is recognized but cannot be scaffolded yet."""

    log_level = LogLevel.FATAL

    def __init__(self, kind: str) -> None:
        super().__init__("unsupported_kind", f"Sorry, {kind} is not yet supported.")
        self.kind = kind


class ExternalCommandFailedError(ServiceFailure):
    """External command (git) failed.

    Attributes:
        diagnostic: Captured failure details of the command.
    """

    def __init__(
        self,
        message: str,
        *,
        diagnostic: dict[str, object] | None = None,
    ) -> None:
        super().__init__("external_command_failed", message)
        self.diagnostic = diagnostic or {}


class UnexpectedStateError(ServiceFailure):
    """Unexpected or inconsistent state."""

    def __init__(self, message: str) -> None:
        super().__init__("unexpected_state", message)
