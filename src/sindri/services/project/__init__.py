"""Project initialization service modules."""

from .bootstrap_repository import (
    BootstrapRepositoryOutcome,
    BootstrapRepositoryRequest,
    BootstrapRepositoryService,
)
from .collect_context import (
    PROJECT_KINDS,
    CollectContextOutcome,
    CollectContextRequest,
    CollectContextService,
)
from .initialize_project import (
    InitializeProjectDependencies,
    InitializeProjectOutcome,
    InitializeProjectRequest,
    InitializeProjectService,
)
from .prepare_directory import (
    PrepareDirectoryOutcome,
    PrepareDirectoryRequest,
    PrepareDirectoryService,
)
from .scaffold_project import (
    ScaffoldProjectOutcome,
    ScaffoldProjectRequest,
    ScaffoldProjectService,
)

__all__ = [
    "PROJECT_KINDS",
    "BootstrapRepositoryOutcome",
    "BootstrapRepositoryRequest",
    "BootstrapRepositoryService",
    "CollectContextOutcome",
    "CollectContextRequest",
    "CollectContextService",
    "InitializeProjectDependencies",
    "InitializeProjectOutcome",
    "InitializeProjectRequest",
    "InitializeProjectService",
    "PrepareDirectoryOutcome",
    "PrepareDirectoryRequest",
    "PrepareDirectoryService",
    "ScaffoldProjectOutcome",
    "ScaffoldProjectRequest",
    "ScaffoldProjectService",
]
