from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from tools import docs_wasm


class FakeRun:
    """Stand-in for subprocess.run that records calls and replays scripted outcomes.

    `version` / `build` are either an int return code or an exception instance to raise.
    """

    def __init__(self, *, version=0, build=0, produce: Path | None = None):
        self.version = version
        self.build = build
        self.produce = produce
        self.calls: list[dict] = []

    def __call__(self, cmd, **kwargs):
        self.calls.append({"cmd": list(cmd), **kwargs})
        outcome = self.version if "--version" in cmd else self.build
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome == 0 and "build" in cmd and self.produce is not None:
            self.produce.parent.mkdir(parents=True, exist_ok=True)
            self.produce.write_text("// generated\n", encoding="utf-8")
        return subprocess.CompletedProcess(cmd, outcome)

    @property
    def build_calls(self) -> list[dict]:
        return [c for c in self.calls if "build" in c["cmd"]]


@pytest.fixture
def docs_dir(tmp_path, monkeypatch) -> Path:
    docs = tmp_path / "docs"
    docs.mkdir()
    monkeypatch.setattr(docs_wasm, "DOCS_DIR", docs)
    monkeypatch.setattr(docs_wasm, "PKG_FILE", docs / "pkg" / "bahlilui_docs.js")
    return docs


@pytest.fixture
def fake_run(monkeypatch):
    def install(**kwargs) -> FakeRun:
        fake = FakeRun(**kwargs)
        monkeypatch.setattr(docs_wasm.subprocess, "run", fake)
        return fake

    return install
