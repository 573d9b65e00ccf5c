"""Template rendering step of ``sindri init``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping

from ... import log, paths, templates
from ...models import ProjectContext
from ..base import BaseService

RenderTemplateSet = Callable[[str, Path, Mapping[str, str]], object]


@dataclass(frozen=True)
class ScaffoldProjectRequest:
    target_dir: Path
    context: ProjectContext


@dataclass(frozen=True)
class ScaffoldProjectOutcome:
    target_dir: Path
    template_sets: tuple[str, ...]
    removed_placeholder: bool


class ScaffoldProjectService(BaseService[ScaffoldProjectRequest, ScaffoldProjectOutcome]):
    """Render the shared and kind-specific template sets.

    Render failures are not ``ServiceFailure``s: they propagate to the caller
    and files already written stay on disk.
    """

    def __init__(self, render: RenderTemplateSet = templates.scaffold_directory) -> None:
        self._render = render

    def _run(self, request: ScaffoldProjectRequest) -> ScaffoldProjectOutcome:
        target_dir = request.target_dir
        template_sets = (templates.COMMON_TEMPLATE_SET, request.context.circuit_type)
        log.info(f'Proceeding to generate scaffolded project in "{target_dir}".')
        for name in template_sets:
            self._render(name, target_dir, request.context.template_context())

        # The common set only ships a placeholder to keep its directory tracked.
        placeholder = paths.gitkeep_path(target_dir)
        removed = placeholder.is_file()
        if removed:
            placeholder.unlink()
        log.success("Project scaffolding successful.")
        return ScaffoldProjectOutcome(
            target_dir=target_dir,
            template_sets=template_sets,
            removed_placeholder=removed,
        )
