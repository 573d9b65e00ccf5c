from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ... import exec as exec_util
from ... import templates
from ...io import ConsolePrompter, Prompter
from ...models import ProjectContext
from ..base import BaseService
from .bootstrap_repository import (
    BootstrapRepositoryOutcome,
    BootstrapRepositoryRequest,
    BootstrapRepositoryService,
)
from .collect_context import CollectContextRequest, CollectContextService
from .prepare_directory import PrepareDirectoryRequest, PrepareDirectoryService
from .scaffold_project import (
    RenderTemplateSet,
    ScaffoldProjectOutcome,
    ScaffoldProjectRequest,
    ScaffoldProjectService,
)


@dataclass(frozen=True)
class InitializeProjectDependencies:
    """Collaborators used by the init flow.

    Attributes:
        prompter: Interactive prompt primitives.
        render: Template set renderer.
        runner: Command runner for git; ``None`` uses subprocess.
    """

    prompter: Prompter
    render: RenderTemplateSet = templates.scaffold_directory
    runner: exec_util.CommandRunner | None = None


@dataclass(frozen=True)
class InitializeProjectRequest:
    directory: Path

    @property
    def target_dir(self) -> Path:
        return self.directory.expanduser().resolve()


@dataclass(frozen=True)
class InitializeProjectOutcome:
    target_dir: Path
    context: ProjectContext
    scaffold: ScaffoldProjectOutcome
    bootstrap: BootstrapRepositoryOutcome


class InitializeProjectService(BaseService[InitializeProjectRequest, InitializeProjectOutcome]):
    """Run directory checks, questions, scaffolding, and git bootstrap in order.

    Each stage may end the run by raising ``ServiceFailure``; nothing done by
    an earlier stage is undone.
    """

    def __init__(self, dependencies: InitializeProjectDependencies) -> None:
        self._prepare_directory = PrepareDirectoryService(dependencies.prompter)
        self._collect_context = CollectContextService(dependencies.prompter)
        self._scaffold_project = ScaffoldProjectService(dependencies.render)
        self._bootstrap_repository = BootstrapRepositoryService(
            dependencies.prompter, runner=dependencies.runner
        )

    @classmethod
    def run_default(cls, *, directory: Path) -> InitializeProjectOutcome:
        """Run the init flow against the console and real subprocesses."""
        service = cls(InitializeProjectDependencies(prompter=ConsolePrompter()))
        return service(InitializeProjectRequest(directory=directory))

    def _run(self, request: InitializeProjectRequest) -> InitializeProjectOutcome:
        target_dir = request.target_dir
        self._prepare_directory(PrepareDirectoryRequest(target_dir=target_dir))
        context = self._collect_context(CollectContextRequest(target_dir=target_dir)).context
        scaffold = self._scaffold_project(
            ScaffoldProjectRequest(target_dir=target_dir, context=context)
        )
        bootstrap = self._bootstrap_repository(BootstrapRepositoryRequest(target_dir=target_dir))
        return InitializeProjectOutcome(
            target_dir=target_dir,
            context=context,
            scaffold=scaffold,
            bootstrap=bootstrap,
        )
