# ruff: noqa: E402

from __future__ import annotations

import sys
from pathlib import Path
from typing import Mapping, Sequence

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import sindri.exec as exec_util
from sindri.io import Choice, Validator

GNARK_ANSWERS = {
    "Circuit Name:": "demo-circuit",
    "Proving Framework:": "gnark",
    "Go Package Name:": "democircuit",
    "Proving Scheme:": "groth16",
    "Curve Name:": "bls12-377",
}


class ScriptedPrompter:
    """Prompter that answers from a script and records every question.

    Text answers are run through the question's validator; a rejected answer
    is recorded and the next scripted answer for the same question is used.
    Missing text answers fall back to the question's default.
    """

    def __init__(
        self,
        answers: Mapping[str, object] | None = None,
        *,
        confirms: Sequence[bool] = (),
    ) -> None:
        self._answers = {
            key: list(value) if isinstance(value, (list, tuple)) else [value]
            for key, value in (answers or {}).items()
        }
        self._confirms = list(confirms)
        self.questions: list[tuple[str, str, object]] = []
        self.rejections: list[tuple[str, str]] = []

    def text(self, message: str, *, default: str, validate: Validator) -> str:
        self.questions.append(("text", message, default))
        queue = self._answers.get(message, [])
        while queue:
            value = str(queue.pop(0))
            verdict = validate(value)
            if verdict is True:
                return value
            self.rejections.append((message, str(verdict)))
        verdict = validate(default)
        assert verdict is True, f"default for {message!r} rejected: {verdict}"
        return default

    def confirm(self, message: str, *, default: bool) -> bool:
        self.questions.append(("confirm", message, default))
        if self._confirms:
            return self._confirms.pop(0)
        return default

    def select(self, message: str, *, choices: Sequence[Choice], default: str) -> str:
        self.questions.append(("select", message, default))
        values = [value for _label, value in choices]
        assert default in values
        queue = self._answers.get(message, [])
        value = str(queue.pop(0)) if queue else default
        assert value in values, f"{value!r} is not a choice for {message!r}"
        return value

    def messages(self, kind: str | None = None) -> list[str]:
        return [message for k, message, _ in self.questions if kind is None or k == kind]


class FakeRunner:
    """Command runner that records requests and replays canned results.

    ``results`` maps the first two argv items (e.g. ``("git", "commit")``) to
    a return code, to ``None`` for a missing executable, or to an exception
    raised when the command is started.
    """

    def __init__(
        self, results: Mapping[tuple[str, ...], int | BaseException | None] | None = None
    ) -> None:
        self._results = dict(results or {})
        self.requests: list[exec_util.CommandRequest] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        key = tuple(request.argv[:2])
        returncode = self._results.get(key, 0)
        if isinstance(returncode, BaseException):
            raise returncode
        if returncode is None:
            return None
        stdout = "x" * 4096 if returncode else ""
        stderr = f"fatal: {' '.join(request.argv)} failed" if returncode else ""
        return exec_util.CommandResult(
            argv=request.argv, returncode=returncode, stdout=stdout, stderr=stderr
        )

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]


class RecordingRenderer:
    """Template renderer double that records calls and can fail on a set."""

    def __init__(self, *, fail_on: str | None = None, write: Mapping[str, str] | None = None):
        self.calls: list[tuple[str, Path, dict[str, str]]] = []
        self._fail_on = fail_on
        self._write = dict(write or {})

    def __call__(self, name: str, target_dir: Path, context: Mapping[str, str]) -> None:
        self.calls.append((name, target_dir, dict(context)))
        if name == self._fail_on:
            raise OSError(f"cannot render {name}")
        for relative, content in self._write.items():
            if relative.startswith(f"{name}:"):
                path = target_dir / relative.split(":", 1)[1]
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
