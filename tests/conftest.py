# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import sindri.io as io
import sindri.log as sindri_log

DOCTEST_MODULES = {
    ROOT / "src" / "sindri" / "exec.py",
    ROOT / "src" / "sindri" / "git.py",
    ROOT / "src" / "sindri" / "models.py",
    ROOT / "src" / "sindri" / "templates.py",
    ROOT / "src" / "sindri" / "validation.py",
}


@pytest.fixture(autouse=True)
def _default_console_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(sindri_log, "_configured_level", None)
    monkeypatch.setattr(sindri_log, "_no_color", None)
    for name in ("SINDRI_LOG_LEVEL", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
