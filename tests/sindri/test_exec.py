"""Tests for typed command execution helpers."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from sindri import exec as exec_util
from tests.sindri.helpers import FakeRunner


def test_subprocess_command_runner_success(monkeypatch: pytest.MonkeyPatch) -> None:
    """Runner returns typed output and forwards execution options."""
    calls: dict[str, object] = {}

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        calls["argv"] = argv
        calls["kwargs"] = kwargs
        return subprocess.CompletedProcess(argv, 0, stdout="ok", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    request = exec_util.CommandRequest(argv=("git", "add", "."), cwd=Path("/tmp"))
    result = exec_util.SubprocessCommandRunner().run(request)

    assert result == exec_util.CommandResult(
        argv=("git", "add", "."),
        returncode=0,
        stdout="ok",
        stderr="",
    )
    assert calls["argv"] == ["git", "add", "."]
    run_kwargs = calls["kwargs"]
    assert isinstance(run_kwargs, dict)
    assert run_kwargs["cwd"] == Path("/tmp")
    assert run_kwargs["capture_output"] is True
    assert run_kwargs["text"] is True
    assert run_kwargs["check"] is False
    assert "timeout" not in run_kwargs


def test_subprocess_command_runner_returns_none_when_missing_executable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Runner returns None when executable is not found."""

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        del argv, kwargs
        raise FileNotFoundError

    monkeypatch.setattr(subprocess, "run", fake_run)

    request = exec_util.CommandRequest(argv=("missing-cmd",))
    result = exec_util.SubprocessCommandRunner().run(request)

    assert result is None


def test_run_checked_returns_successful_result() -> None:
    runner = FakeRunner()

    result = exec_util.run_checked(exec_util.CommandRequest(argv=("git", "init")), runner=runner)

    assert result.returncode == 0
    assert runner.argvs == [("git", "init")]


def test_run_checked_raises_with_diagnostic_on_failure() -> None:
    runner = FakeRunner({("git", "commit"): 128})
    request = exec_util.CommandRequest(argv=("git", "commit", "-m", "x"), cwd=Path("/work"))

    with pytest.raises(exec_util.CommandExecutionError) as excinfo:
        exec_util.run_checked(request, runner=runner)

    diagnostic = excinfo.value.diagnostic()
    assert diagnostic["argv"] == ["git", "commit", "-m", "x"]
    assert diagnostic["cwd"] == "/work"
    assert diagnostic["returncode"] == 128
    assert diagnostic["stdout"] == "x" * 4096
    assert diagnostic["stderr"] == "fatal: git commit -m x failed"
    assert diagnostic["output"] == diagnostic["stdout"] + diagnostic["stderr"]
    assert "exit code 128" in str(excinfo.value)


def test_run_checked_raises_when_command_missing() -> None:
    runner = FakeRunner({("git", "init"): None})

    with pytest.raises(exec_util.CommandExecutionError) as excinfo:
        exec_util.run_checked(exec_util.CommandRequest(argv=("git", "init")), runner=runner)

    assert str(excinfo.value) == "missing required command: git"
    assert excinfo.value.diagnostic()["returncode"] is None


def test_redact_diagnostic_replaces_only_present_buffers() -> None:
    diagnostic = {"argv": ["git"], "stdout": "a" * 10_000, "returncode": 1}

    redacted = exec_util.redact_diagnostic(diagnostic)

    assert redacted == {"argv": ["git"], "stdout": "<truncated>", "returncode": 1}
    assert diagnostic["stdout"] == "a" * 10_000


def test_redact_diagnostic_covers_every_captured_buffer() -> None:
    diagnostic = {key: b"\x00" * 64 for key in exec_util.CAPTURED_BUFFER_FIELDS}

    redacted = exec_util.redact_diagnostic(diagnostic)

    assert set(redacted.values()) == {exec_util.REDACTED_PLACEHOLDER}
