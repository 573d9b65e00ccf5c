"""Question sequencing for ``sindri init``.

Questions run strictly in order. Each step sees the answers fixed before it,
which it may use for its default; the kind table decides which extra steps
follow the project kind question.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from ... import models, validation
from ...io import Prompter
from ...models import GnarkProjectContext, ProjectContext
from ..base import BaseService
from ..errors import UnexpectedStateError, UnsupportedKindError

CIRCUIT_NAME = "circuitName"
CIRCUIT_TYPE = "circuitType"
PACKAGE_NAME = "packageName"
PROVING_SCHEME = "provingScheme"
CURVE_NAME = "curveName"
GNARK_CURVE_NAME = "gnarkCurveName"


class ContextAnswers:
    """Append-only mapping of answers collected so far."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, field: str, value: str) -> None:
        if field in self._values:
            raise UnexpectedStateError(f"context field {field!r} is already set")
        self._values[field] = value

    def __getitem__(self, field: str) -> str:
        return self._values[field]

    def __contains__(self, field: object) -> bool:
        return field in self._values

    def view(self) -> Mapping[str, str]:
        return MappingProxyType(self._values)

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


@dataclass(frozen=True)
class QuestionState:
    prompter: Prompter
    target_dir: Path
    answers: Mapping[str, str]


@dataclass(frozen=True)
class QuestionStep:
    """One entry of the question sequence.

    ``resolve`` either prompts or derives the value from earlier answers.
    """

    field: str
    resolve: Callable[[QuestionState], str]


@dataclass(frozen=True)
class KindQuestions:
    context_model: type[ProjectContext]
    steps: tuple[QuestionStep, ...]


def _ask_circuit_name(state: QuestionState) -> str:
    return state.prompter.text(
        "Circuit Name:",
        default=validation.default_circuit_name(state.target_dir.name),
        validate=validation.validate_circuit_name,
    )


def _ask_circuit_type(state: QuestionState) -> str:
    return state.prompter.select(
        "Proving Framework:",
        choices=models.PROJECT_KIND_CHOICES,
        default=models.DEFAULT_PROJECT_KIND,
    )


def _ask_package_name(state: QuestionState) -> str:
    return state.prompter.text(
        "Go Package Name:",
        default=validation.default_package_name(state.answers[CIRCUIT_NAME]),
        validate=validation.validate_package_name,
    )


def _ask_proving_scheme(state: QuestionState) -> str:
    return state.prompter.select(
        "Proving Scheme:",
        choices=models.PROVING_SCHEME_CHOICES,
        default=models.DEFAULT_PROVING_SCHEME,
    )


def _ask_curve_name(state: QuestionState) -> str:
    return state.prompter.select(
        "Curve Name:",
        choices=models.CURVE_NAME_CHOICES,
        default=models.DEFAULT_CURVE_NAME,
    )


def _derive_gnark_curve_name(state: QuestionState) -> str:
    return models.gnark_curve_name(state.answers[CURVE_NAME])


COMMON_STEPS: tuple[QuestionStep, ...] = (
    QuestionStep(CIRCUIT_NAME, _ask_circuit_name),
    QuestionStep(CIRCUIT_TYPE, _ask_circuit_type),
)

GNARK_STEPS: tuple[QuestionStep, ...] = (
    QuestionStep(PACKAGE_NAME, _ask_package_name),
    QuestionStep(PROVING_SCHEME, _ask_proving_scheme),
    QuestionStep(CURVE_NAME, _ask_curve_name),
    QuestionStep(GNARK_CURVE_NAME, _derive_gnark_curve_name),
)

# Every project kind has an entry; ``None`` marks a kind that is offered but
# cannot be scaffolded yet.
PROJECT_KINDS: Mapping[str, KindQuestions | None] = MappingProxyType(
    {
        "circom": None,
        "gnark": KindQuestions(GnarkProjectContext, GNARK_STEPS),
        "halo2": None,
        "noir": None,
    }
)


@dataclass(frozen=True)
class CollectContextRequest:
    target_dir: Path


@dataclass(frozen=True)
class CollectContextOutcome:
    context: ProjectContext


class CollectContextService(BaseService[CollectContextRequest, CollectContextOutcome]):
    """Ask the init questions and validate the answers into a context model."""

    def __init__(self, prompter: Prompter) -> None:
        self._prompter = prompter

    def _run(self, request: CollectContextRequest) -> CollectContextOutcome:
        answers = ContextAnswers()
        self._ask(COMMON_STEPS, answers, request.target_dir)

        kind = answers[CIRCUIT_TYPE]
        if kind not in PROJECT_KINDS:
            raise UnexpectedStateError(f"unknown project kind: {kind}")
        questions = PROJECT_KINDS[kind]
        if questions is None:
            raise UnsupportedKindError(kind)

        self._ask(questions.steps, answers, request.target_dir)
        context = questions.context_model.model_validate(answers.snapshot())
        return CollectContextOutcome(context=context)

    def _ask(
        self, steps: tuple[QuestionStep, ...], answers: ContextAnswers, target_dir: Path
    ) -> None:
        for step in steps:
            state = QuestionState(self._prompter, target_dir, answers.view())
            answers.set(step.field, step.resolve(state))
