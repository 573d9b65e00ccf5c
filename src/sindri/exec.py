"""Subprocess helpers for running external commands."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

REDACTED_PLACEHOLDER = "<truncated>"
CAPTURED_BUFFER_FIELDS = ("output", "stderr", "stdout")


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess.

    Calls block until the child exits; there is no timeout.
    """

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv),
                cwd=request.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return None
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


@dataclass(frozen=True)
class CommandExecutionError(RuntimeError):
    """Raised when a command is missing or exits non-zero."""

    request: CommandRequest
    detail: str
    result: CommandResult | None = None

    def __str__(self) -> str:
        return self.detail

    def diagnostic(self) -> dict[str, object]:
        """Return the captured failure details as a plain mapping."""
        stdout = self.result.stdout if self.result is not None else ""
        stderr = self.result.stderr if self.result is not None else ""
        return {
            "argv": list(self.request.argv),
            "cwd": str(self.request.cwd) if self.request.cwd is not None else None,
            "returncode": self.result.returncode if self.result is not None else None,
            "detail": self.detail,
            "output": stdout + stderr,
            "stdout": stdout,
            "stderr": stderr,
        }


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    return active_runner.run(request)


def _missing_command_detail(request: CommandRequest) -> str:
    argv = request.argv
    if not argv:
        return "missing required command"
    return f"missing required command: {argv[0]}"


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    command_text = " ".join(request.argv)
    return f"command failed with exit code {result.returncode}: {command_text}"


def run_checked(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult:
    """Execute a command and raise ``CommandExecutionError`` unless it succeeds."""
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise CommandExecutionError(request=request, detail=_missing_command_detail(request))
    if result.returncode != 0:
        raise CommandExecutionError(
            request=request,
            result=result,
            detail=_command_failure_detail(request, result),
        )
    return result


def redact_diagnostic(diagnostic: Mapping[str, object]) -> dict[str, object]:
    """Replace captured output buffers in a command diagnostic with a placeholder.

    Only fields already present are replaced; the input mapping is not modified.

    Example:
        >>> redact_diagnostic({"argv": ["git"], "stderr": "fatal: ..."})
        {'argv': ['git'], 'stderr': '<truncated>'}
    """
    redacted = dict(diagnostic)
    for key in CAPTURED_BUFFER_FIELDS:
        if key in redacted:
            redacted[key] = REDACTED_PLACEHOLDER
    return redacted
