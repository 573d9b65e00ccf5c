"""Target directory checks run before any question is asked."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ... import paths
from ...io import Prompter
from ..base import BaseService
from ..errors import AbortedError, PreconditionFailedError


@dataclass(frozen=True)
class PrepareDirectoryRequest:
    target_dir: Path


@dataclass(frozen=True)
class PrepareDirectoryOutcome:
    """Result of the directory checks.

    Attributes:
        target_dir: Directory that will receive the project.
        created: Whether the directory was created by this step.
        overwrite_confirmed: Whether the user agreed to write into a
            non-empty directory.
    """

    target_dir: Path
    created: bool
    overwrite_confirmed: bool = False


def overwrite_prompt(target_dir: Path) -> str:
    return (
        f'The "{target_dir}" directory already exists and contains files. Continuing will '
        "overwrite your existing files. Are you *SURE* you would like to proceed?"
    )


class PrepareDirectoryService(BaseService[PrepareDirectoryRequest, PrepareDirectoryOutcome]):
    """Create the target directory or confirm writing into an existing one."""

    def __init__(self, prompter: Prompter) -> None:
        self._prompter = prompter

    def _run(self, request: PrepareDirectoryRequest) -> PrepareDirectoryOutcome:
        target_dir = request.target_dir
        state = paths.inspect_directory(target_dir)
        if not state.exists:
            paths.ensure_dir(target_dir)
            return PrepareDirectoryOutcome(target_dir=target_dir, created=True)
        if not state.is_dir:
            raise PreconditionFailedError(
                f'File "{target_dir}" exists and is not a directory, aborting.'
            )
        if state.is_empty_dir:
            return PrepareDirectoryOutcome(target_dir=target_dir, created=False)
        if not self._prompter.confirm(overwrite_prompt(target_dir), default=False):
            raise AbortedError()
        return PrepareDirectoryOutcome(
            target_dir=target_dir, created=False, overwrite_confirmed=True
        )
