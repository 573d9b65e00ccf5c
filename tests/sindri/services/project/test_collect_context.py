from __future__ import annotations

from pathlib import Path

import pytest

import sindri.validation as validation
from sindri.models import GnarkProjectContext
from sindri.services import UnexpectedStateError, UnsupportedKindError
from sindri.services.project import CollectContextRequest, CollectContextService
from sindri.services.project.collect_context import ContextAnswers
from tests.sindri.helpers import GNARK_ANSWERS, ScriptedPrompter


def _collect(prompter: ScriptedPrompter, target: Path) -> GnarkProjectContext:
    outcome = CollectContextService(prompter)(CollectContextRequest(target_dir=target))
    assert isinstance(outcome.context, GnarkProjectContext)
    return outcome.context


def test_gnark_questions_are_asked_in_order(tmp_path: Path) -> None:
    prompter = ScriptedPrompter(GNARK_ANSWERS)

    context = _collect(prompter, tmp_path)

    assert prompter.messages() == [
        "Circuit Name:",
        "Proving Framework:",
        "Go Package Name:",
        "Proving Scheme:",
        "Curve Name:",
    ]
    assert context.template_context() == {
        "circuitName": "demo-circuit",
        "circuitType": "gnark",
        "packageName": "democircuit",
        "provingScheme": "groth16",
        "curveName": "bls12-377",
        "gnarkCurveName": "BLS12_377",
    }


def test_defaults_derive_from_directory_and_earlier_answers(tmp_path: Path) -> None:
    target = tmp_path / "My Circuit!"
    prompter = ScriptedPrompter({"Go Package Name:": "mycircuit"})

    context = _collect(prompter, target)

    defaults = {message: default for _kind, message, default in prompter.questions}
    assert defaults["Circuit Name:"] == "My-Circuit-"
    assert defaults["Proving Framework:"] == "gnark"
    assert defaults["Go Package Name:"] == "yCircuit"
    assert defaults["Proving Scheme:"] == "groth16"
    assert defaults["Curve Name:"] == "bn254"
    assert context.circuit_name == "My-Circuit-"
    assert context.gnark_curve_name == "BN254"


def test_package_default_follows_the_entered_circuit_name(tmp_path: Path) -> None:
    prompter = ScriptedPrompter(
        {"Circuit Name:": "zk_Proof-9", "Go Package Name:": ["zkProof9", "zkproof9"]}
    )

    context = _collect(prompter, tmp_path / "ignored")

    defaults = {message: default for _kind, message, default in prompter.questions}
    assert defaults["Go Package Name:"] == "zkProof9"
    assert prompter.rejections == [("Go Package Name:", validation.PACKAGE_NAME_INVALID)]
    assert context.package_name == "zkproof9"


def test_invalid_answers_are_reprompted_with_reason(tmp_path: Path) -> None:
    prompter = ScriptedPrompter(
        {
            **GNARK_ANSWERS,
            "Circuit Name:": ["", "bad name", "good-name"],
            "Go Package Name:": ["Good", "good"],
        }
    )

    context = _collect(prompter, tmp_path)

    assert prompter.rejections == [
        ("Circuit Name:", validation.CIRCUIT_NAME_REQUIRED),
        ("Circuit Name:", validation.CIRCUIT_NAME_INVALID),
        ("Go Package Name:", validation.PACKAGE_NAME_INVALID),
    ]
    assert context.circuit_name == "good-name"
    assert context.package_name == "good"


@pytest.mark.parametrize("kind", ["circom", "halo2", "noir"])
def test_unsupported_kind_stops_after_kind_question(tmp_path: Path, kind: str) -> None:
    prompter = ScriptedPrompter({**GNARK_ANSWERS, "Proving Framework:": kind})

    with pytest.raises(UnsupportedKindError) as excinfo:
        CollectContextService(prompter)(CollectContextRequest(target_dir=tmp_path))

    assert excinfo.value.code == "unsupported_kind"
    assert excinfo.value.message == f"Sorry, {kind} is not yet supported."
    assert prompter.messages() == ["Circuit Name:", "Proving Framework:"]


def test_context_answers_are_append_only() -> None:
    answers = ContextAnswers()
    answers.set("circuitName", "demo")
    view = answers.view()

    with pytest.raises(UnexpectedStateError):
        answers.set("circuitName", "other")
    with pytest.raises(TypeError):
        view["circuitName"] = "other"  # type: ignore[index]

    answers.set("circuitType", "gnark")
    assert dict(view) == {"circuitName": "demo", "circuitType": "gnark"}
