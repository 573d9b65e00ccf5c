"""Implementation for the ``sindri init`` command.

``sindri init`` asks about the new circuit project, renders the starter files
into the target directory, and optionally commits them to a new git
repository.
"""

from __future__ import annotations

import sys
from pathlib import Path

from .. import log
from ..services import ServiceFailure
from ..services.project import InitializeProjectOutcome, InitializeProjectService


def init_project(args: object) -> InitializeProjectOutcome:
    """Initialize a new Sindri project.

    Args:
        args: CLI argument object with an optional ``directory`` field
            (defaults to the current directory).

    Returns:
        Outcome of the init flow. Exits with status 1 on abort.

    Example:
        $ sindri init my-circuit
    """
    directory = Path(getattr(args, "directory", None) or ".")
    try:
        return InitializeProjectService.run_default(directory=directory)
    except ServiceFailure as exc:
        log.emit(exc.log_level, exc.message)
        sys.exit(1)
