"""Git revision range source."""

from pathlib import Path

from ..git import GitError, GitRepo
from .base import CommitMessage, MessageSource, SourceError


class GitRangeSource(MessageSource):
    """Read the messages of every commit in a revision range.

    Without a range only the commit at HEAD is read, which also works in a
    repository holding nothing but its root commit.
    """

    def __init__(
        self,
        rev_range: str | None = None,
        repo_path: str | Path | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            rev_range: Revision range passed to ``git rev-list`` (defaults to HEAD only)
            repo_path: Path to the repository (defaults to cwd)
        """
        self.rev_range = rev_range
        self.repo = GitRepo(repo_path)

    @property
    def description(self) -> str:
        return self.rev_range or "HEAD"

    def retrieve(self) -> list[CommitMessage]:
        try:
            self.repo.check_repository()
            if self.rev_range:
                commits = self.repo.get_commits(self.rev_range)
            else:
                commits = self.repo.get_commits("HEAD", max_count=1)
            return [
                CommitMessage(ref=commit[:8], message=self.repo.get_commit_full_message(commit))
                for commit in commits
            ]
        except GitError as e:
            raise SourceError(f"Failed to read the commits of {self.description}: {e}") from e

    def get_name(self) -> str:
        return f"git ({self.description})"
