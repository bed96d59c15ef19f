"""Pytest configuration and fixtures."""

import io
from pathlib import Path
from typing import List, Optional, Sequence

import pytest
from rich.console import Console

from cpt_hook.actions.base import Action
from cpt_hook.core.models import ExecutionResult
from cpt_hook.ui.selection import Selector


class StaticSelector(Selector):
    """Selector that always returns the same indices and records prompts."""

    def __init__(self, indices: Optional[List[int]] = None, pick_all: bool = False):
        self.indices = indices or []
        self.pick_all = pick_all
        self.calls = []

    def select(self, prompt: str, options: Sequence[str]) -> List[int]:
        self.calls.append((prompt, list(options)))
        if self.pick_all:
            return list(range(len(options)))
        return list(self.indices)


class FakeAction(Action):
    """Action with scripted validate/execute results and a call log."""

    def __init__(self, key: str, applies: bool = True, succeeds: bool = True, log=None):
        super().__init__(command=["fake", key])
        self.key = key
        self.label = f"Fake {key}"
        self.applies = applies
        self.succeeds = succeeds
        self.log = log if log is not None else []
        self.validate_calls = 0

    def validate(self, repo_path: Path, hook_name: str) -> bool:
        self.validate_calls += 1
        return self.applies

    def execute(self, repo_path: Path, hook_name: str) -> ExecutionResult:
        self.log.append(self.key)
        if self.succeeds:
            return ExecutionResult.ok(self.key, self.label)
        return ExecutionResult.failed(self.key, self.label, "boom", returncode=1)


@pytest.fixture
def repo(tmp_path):
    """Fake repository with .git/hooks, no git binary needed."""
    repo_dir = tmp_path / "repo"
    (repo_dir / ".git" / "hooks").mkdir(parents=True)
    return repo_dir


@pytest.fixture
def cargo_repo(repo):
    """Repository with a Cargo.toml manifest."""
    (repo / "Cargo.toml").write_text('[package]\nname = "demo"\nversion = "0.1.0"\n')
    return repo


@pytest.fixture
def output():
    """Buffer backing the test console."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Console writing plain text into `output`."""
    return Console(file=output, force_terminal=False, width=200)
