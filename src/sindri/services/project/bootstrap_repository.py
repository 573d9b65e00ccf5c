"""Optional git repository bootstrap after scaffolding.

Failures here never end the run: ``_handle_failure`` logs a redacted
diagnostic and reports a ``failed`` outcome instead of re-raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from ... import exec as exec_util
from ... import git, log
from ...io import Prompter
from ..base import BaseService
from ..errors import ExternalCommandFailedError, ServiceFailure

BootstrapStatus = Literal["skipped", "succeeded", "failed"]
SkipReason = Literal["git_missing", "already_initialized", "declined"]


@dataclass(frozen=True)
class BootstrapRepositoryRequest:
    target_dir: Path


@dataclass(frozen=True)
class BootstrapRepositoryOutcome:
    """Terminal state of the bootstrap.

    Attributes:
        status: ``skipped``, ``succeeded``, or ``failed``.
        skip_reason: Why the bootstrap was skipped, when it was.
        diagnostic: Redacted failure diagnostic, when it failed.
    """

    status: BootstrapStatus
    skip_reason: SkipReason | None = None
    diagnostic: dict[str, object] = field(default_factory=dict)


def init_prompt(target_dir: Path) -> str:
    return f'Would you like to initialize a git repository in "{target_dir}"?'


class BootstrapRepositoryService(
    BaseService[BootstrapRepositoryRequest, BootstrapRepositoryOutcome]
):
    """Probe for git, confirm, then init/add/commit inside the target directory."""

    def __init__(
        self, prompter: Prompter, *, runner: exec_util.CommandRunner | None = None
    ) -> None:
        self._prompter = prompter
        self._runner = runner

    def _run(self, request: BootstrapRepositoryRequest) -> BootstrapRepositoryOutcome:
        target_dir = request.target_dir
        if not git.git_installed(runner=self._runner):
            log.debug("Git is not installed, skipping git initialization questions.")
            return BootstrapRepositoryOutcome(status="skipped", skip_reason="git_missing")
        if git.repo_initialized(target_dir):
            return BootstrapRepositoryOutcome(
                status="skipped", skip_reason="already_initialized"
            )
        if not self._prompter.confirm(init_prompt(target_dir), default=True):
            return BootstrapRepositoryOutcome(status="skipped", skip_reason="declined")

        log.info(f'Initializing git repository in "{target_dir}".')
        try:
            git.init_repository(target_dir, runner=self._runner)
        except exec_util.CommandExecutionError as exc:
            raise ExternalCommandFailedError(
                "Error occurred while initializing the git repository.",
                diagnostic=exc.diagnostic(),
            ) from exc
        except OSError as exc:
            raise ExternalCommandFailedError(
                "Error occurred while initializing the git repository.",
                diagnostic={"detail": str(exc), "errno": exc.errno},
            ) from exc
        log.success("Successfully initialized git repository.")
        return BootstrapRepositoryOutcome(status="succeeded")

    def _handle_failure(self, error: ServiceFailure) -> BootstrapRepositoryOutcome:
        log.error(error.message)
        diagnostic = exec_util.redact_diagnostic(getattr(error, "diagnostic", {}))
        log.error_payload(diagnostic)
        return BootstrapRepositoryOutcome(status="failed", diagnostic=diagnostic)
