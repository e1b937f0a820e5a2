"""Shared test fixtures for pandagen tests."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pandagen.core.contracts.answers import AnswerRecord
from pandagen.core.scaffold.context import ScaffoldContext

SAMPLE_MANIFEST = {
    "name": "panda-template",
    "version": "1.2.3",
    "private": True,
    "description": "template description",
    "author": "template author",
    "scripts": {"dev": "nodemon server/index.js", "start": "node server/index.js"},
    "dependencies": {"express": "^4.18.3"},
}


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A templates root holding a small ``mern`` template tree."""
    root = tmp_path / "templates"
    template = root / "mern"
    (template / "server" / "routes").mkdir(parents=True)
    (template / "package.json").write_text(json.dumps(SAMPLE_MANIFEST, indent=2), encoding="utf-8")
    (template / "_gitignore").write_text("node_modules\n.env\n", encoding="utf-8")
    (template / "README.md").write_text("# template\n", encoding="utf-8")
    (template / "server" / "index.js").write_text("console.log('hi');\n", encoding="utf-8")
    (template / "server" / "routes" / "health.js").write_bytes(b"export default 1;\r\n\x00\xff")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    cwd = tmp_path / "work"
    cwd.mkdir()
    return cwd


@pytest.fixture
def context(workdir: Path, templates_root: Path) -> ScaffoldContext:
    return ScaffoldContext(cwd=workdir, templates_root=templates_root)


@pytest.fixture
def answers() -> AnswerRecord:
    return AnswerRecord(
        project_name="my-app",
        package_name="my-pkg",
        description="d",
        author="a",
        framework="mern",
    )


class FakeQuestion:
    """Mimics questionary.Question: returns a canned value from .ask()."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def ask(self) -> Any:
        return self._value


class FakeQuestionary:
    """Fake questionary module driven by a mapping of prompt-substring -> answer.

    ``select``/``text``/``confirm`` match keys case-insensitively against the
    prompt text. Every call is recorded in ``calls`` as ``(kind, prompt, kwargs)``.
    ``Choice`` is passed through as a no-op wrapper.
    """

    def __init__(self, answers: dict[str, Any]) -> None:
        self.answers = answers
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.select = self._prompt("select")
        self.text = self._prompt("text")
        self.confirm = self._prompt("confirm")
        self.Choice = lambda label, value: value

    def _prompt(self, kind: str) -> Callable[..., FakeQuestion]:
        def _ask(prompt: str, **kwargs: Any) -> FakeQuestion:
            self.calls.append((kind, prompt, kwargs))
            for key, value in self.answers.items():
                if key.lower() in prompt.lower():
                    return FakeQuestion(value)
            raise KeyError(f"no answer configured for prompt: {prompt!r}")

        return _ask

    def prompts(self) -> list[str]:
        return [prompt for _, prompt, _ in self.calls]


BASE_ANSWERS: dict[str, Any] = {
    "name of your project": "my-app",
    "not empty": True,
    "Package name": "my-pkg",
    "framework": "mern",
    "variant": None,
    "Description": "d",
    "Author": "a",
}


@pytest.fixture
def fake_questionary(monkeypatch: pytest.MonkeyPatch) -> Callable[..., FakeQuestionary]:
    """Install a fake ``questionary`` module; call with answer overrides."""

    def _install(overrides: dict[str, Any] | None = None) -> FakeQuestionary:
        fake = FakeQuestionary({**BASE_ANSWERS, **(overrides or {})})
        monkeypatch.setitem(sys.modules, "questionary", fake)
        return fake

    return _install
