"""Path helpers for the Sindri data directory and init target directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

SINDRI_APP_NAME = "sindri"
TEMPLATES_DIRNAME = "templates"
GIT_DIRNAME = ".git"
GITKEEP_FILENAME = ".gitkeep"


def sindri_data_dir() -> Path:
    """Return the base Sindri data directory.

    Returns:
        Path to the user data directory for Sindri.
    """
    return Path(user_data_dir(SINDRI_APP_NAME))


def user_templates_dir() -> Path:
    """Return the directory holding user template set overrides.

    Returns:
        Path to ``<data dir>/templates``.
    """
    return sindri_data_dir() / TEMPLATES_DIRNAME


def ensure_dir(path: Path) -> None:
    """Create ``path`` and any missing parents."""
    path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class DirectoryState:
    """Snapshot of a target path used for the overwrite decision.

    Attributes:
        path: Inspected path.
        exists: Whether anything exists at ``path``.
        is_dir: Whether ``path`` is a directory.
        entries: Names of the directory's entries (empty unless ``is_dir``).
    """

    path: Path
    exists: bool
    is_dir: bool
    entries: tuple[str, ...] = ()

    @property
    def is_empty_dir(self) -> bool:
        return self.is_dir and not self.entries


def inspect_directory(path: Path) -> DirectoryState:
    """Inspect ``path`` without modifying it."""
    if not path.exists():
        return DirectoryState(path=path, exists=False, is_dir=False)
    if not path.is_dir():
        return DirectoryState(path=path, exists=True, is_dir=False)
    entries = tuple(sorted(child.name for child in path.iterdir()))
    return DirectoryState(path=path, exists=True, is_dir=True, entries=entries)


def git_metadata_dir(project_dir: Path) -> Path:
    return project_dir / GIT_DIRNAME


def gitkeep_path(project_dir: Path) -> Path:
    return project_dir / GITKEEP_FILENAME
