"""Git helper functions used by ``sindri init``."""

from __future__ import annotations

from pathlib import Path

from . import exec as exec_util
from . import paths

INITIAL_COMMIT_MESSAGE = "Initial commit."


def git_command(args: list[str]) -> list[str]:
    """Build a git command line.

    Example:
        >>> git_command(["init", "."])
        ['git', 'init', '.']
    """
    return ["git", *args]


def git_installed(*, runner: exec_util.CommandRunner | None = None) -> bool:
    """Return whether ``git --version`` runs successfully.

    A binary that exists but cannot be started (for example, one without the
    execute bit) counts as not installed.
    """
    try:
        result = exec_util.run_with_runner(
            exec_util.CommandRequest(argv=tuple(git_command(["--version"]))),
            runner=runner,
        )
    except OSError:
        return False
    return result is not None and result.returncode == 0


def repo_initialized(project_dir: Path) -> bool:
    """Return whether ``project_dir`` already holds a ``.git`` directory."""
    return paths.git_metadata_dir(project_dir).exists()


def bootstrap_commands() -> tuple[tuple[str, ...], ...]:
    return (
        tuple(git_command(["init", "."])),
        tuple(git_command(["add", "."])),
        tuple(git_command(["commit", "-m", INITIAL_COMMIT_MESSAGE])),
    )


def init_repository(
    project_dir: Path, *, runner: exec_util.CommandRunner | None = None
) -> None:
    """Initialize a repository in ``project_dir`` and commit everything in it.

    Raises:
        CommandExecutionError: If any git command is missing or fails.
    """
    for argv in bootstrap_commands():
        exec_util.run_checked(exec_util.CommandRequest(argv=argv, cwd=project_dir), runner=runner)
