"""Template set lookup and rendering helpers.

A template set is a directory of text files. Rendering copies every file into
a target directory, substituting ``{{ key }}`` placeholders in both the file
contents and the relative file path.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Iterator, Mapping

from . import log, paths

COMMON_TEMPLATE_SET = "common"


@dataclass(frozen=True)
class TemplateSet:
    """A resolved template set.

    Attributes:
        name: Template set name.
        root: Directory holding the set's files.
        source: ``user_override`` or ``packaged_default``.
        attempts: Ordered diagnostics describing lookup attempts.
    """

    name: str
    root: Traversable
    source: str
    attempts: tuple[str, ...]


class TemplateSetNotFoundError(RuntimeError):
    """Raised when no directory can be found for a template set."""

    def __init__(self, *, name: str, attempts: tuple[str, ...]) -> None:
        self.name = name
        self.attempts = attempts
        summary = "; ".join(attempts) if attempts else "no lookup attempts recorded"
        super().__init__(f"template_set_not_found[{name}]: {summary}")


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Render a template using a simple ``{{ key }}`` substitution.

    Example:
        >>> render_template("module {{ packageName }}", {"packageName": "demo"})
        'module demo'
    """
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace(f"{{{{ {key} }}}}", str(value))
    return rendered


def _packaged_template_root(name: str) -> Traversable:
    return resources.files("sindri").joinpath(paths.TEMPLATES_DIRNAME).joinpath(name)


def resolve_template_set(name: str) -> TemplateSet:
    """Find a template set, preferring a user override over the packaged one.

    Raises:
        TemplateSetNotFoundError: If neither location holds the set.
    """
    attempts: list[str] = []
    override = paths.user_templates_dir() / name
    if override.is_dir():
        attempts.append(f"user override loaded: {override}")
        return TemplateSet(name, override, "user_override", tuple(attempts))
    attempts.append(f"user override missing: {override}")

    packaged = _packaged_template_root(name)
    if packaged.is_dir():
        attempts.append(f"packaged default loaded: {packaged}")
        return TemplateSet(name, packaged, "packaged_default", tuple(attempts))
    attempts.append(f"packaged default missing: {packaged}")
    raise TemplateSetNotFoundError(name=name, attempts=tuple(attempts))


def _walk_files(
    root: Traversable, prefix: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], Traversable]]:
    for child in sorted(root.iterdir(), key=lambda item: item.name):
        parts = (*prefix, child.name)
        if child.is_dir():
            yield from _walk_files(child, parts)
        elif child.is_file():
            yield parts, child


def scaffold_directory(name: str, target_dir: Path, context: Mapping[str, str]) -> list[Path]:
    """Render template set ``name`` into ``target_dir``.

    Existing files are overwritten and missing parent directories created.

    Args:
        name: Template set name.
        target_dir: Directory receiving the rendered files.
        context: Placeholder values.

    Returns:
        Paths written, in render order.
    """
    template_set = resolve_template_set(name)
    log.debug(f"Rendering template set {name!r} from {template_set.source}.")
    written: list[Path] = []
    for parts, source in _walk_files(template_set.root):
        relative = Path(*(render_template(part, context) for part in parts))
        dest = target_dir / relative
        paths.ensure_dir(dest.parent)
        rendered = render_template(source.read_text(encoding="utf-8"), context)
        dest.write_text(rendered, encoding="utf-8")
        log.trace(f"Wrote {dest}")
        written.append(dest)
    return written
