"""Git operations wrapper using subprocess."""

from __future__ import annotations

import subprocess
from pathlib import Path


class GitError(Exception):
    """Error during git operations."""

    pass


class GitRepo:
    """Wrapper for the read-only git operations needed to inspect messages."""

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize git repository wrapper.

        Args:
            path: Path to the repository (defaults to current directory)
        """
        self.path = Path(path) if path else Path.cwd()

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        """Run a git command.

        Args:
            *args: Git command arguments
            check: Raise exception on non-zero exit

        Returns:
            CompletedProcess result

        Raises:
            GitError: If command fails and check is True
        """
        cmd = ["git", *args]
        try:
            return subprocess.run(
                cmd,
                cwd=self.path,
                check=check,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"Command failed: {' '.join(cmd)}\nExit code: {e.returncode}\nStderr: {e.stderr}"
            ) from e
        except FileNotFoundError as e:
            raise GitError("The git executable could not be found") from e

    def is_repository(self) -> bool:
        """Check if this is a valid git repository."""
        try:
            self._run("rev-parse", "--git-dir")
            return True
        except GitError:
            return False

    def check_repository(self) -> None:
        """Check if this is a valid git repository.

        Raises:
            GitError: If not a git repository
        """
        if not self.is_repository():
            raise GitError("Not a git repository!")

    def get_git_dir(self) -> Path:
        """Get the path of the .git directory."""
        result = self._run("rev-parse", "--git-dir")
        git_dir = Path(result.stdout.strip())
        if not git_dir.is_absolute():
            git_dir = self.path / git_dir
        return git_dir

    def get_commits(self, rev_range: str, max_count: int | None = None) -> list[str]:
        """Get commit hashes of a revision range, oldest first.

        Args:
            rev_range: Revision range, e.g. ``origin/main..HEAD``
            max_count: Limit the output to the most recent commits
        """
        args = ["rev-list", "--reverse"]
        if max_count is not None:
            args.append(f"--max-count={max_count}")
        result = self._run(*args, rev_range)
        return [line for line in result.stdout.strip().split("\n") if line]

    def get_commit_full_message(self, commit_hash: str) -> str:
        """Get the full commit message including body."""
        result = self._run("log", "-1", "--format=%B", commit_hash)
        return result.stdout.rstrip("\n")

    def get_config(self, key: str) -> str | None:
        """Get a git config value, or None if it is not set."""
        result = self._run("config", "--get", key, check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip()
