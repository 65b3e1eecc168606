"""Shared pytest fixtures for opinionated-commit-message tests."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from opinionated_commit_message.verbs import VerbWhitelist, build_whitelist


def _git(path: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=path,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


@pytest.fixture
def whitelist() -> VerbWhitelist:
    """Built-in verbs without additional ones."""
    return build_whitelist()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Empty git repository; skips the test if git is not installed."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    _git(repo_path, "init", "-q")
    return repo_path


@pytest.fixture
def commit(git_repo: Path) -> Callable[[str], None]:
    """Create an empty commit with the given message in git_repo."""

    def _commit(message: str) -> None:
        _git(git_repo, "commit", "-q", "--allow-empty", "--cleanup=verbatim", "-m", message)

    return _commit


@pytest.fixture
def set_git_config(git_repo: Path) -> Callable[[str, str], None]:
    """Set a local git config value in git_repo."""

    def _set(key: str, value: str) -> None:
        _git(git_repo, "config", key, value)

    return _set
