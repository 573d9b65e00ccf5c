"""Command implementations exposed by the Sindri CLI."""

from .init import init_project

__all__ = [
    "init_project",
]
