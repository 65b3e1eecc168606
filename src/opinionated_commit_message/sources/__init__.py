"""Sources of the commit messages to inspect."""

from pathlib import Path

from .base import CommitMessage, MessageSource, SourceError
from .file import DEFAULT_COMMENT_CHAR, MessageFileSource
from .git_range import GitRangeSource
from .github import GitHubEventSource

__all__ = [
    "CommitMessage",
    "MessageSource",
    "SourceError",
    "MessageFileSource",
    "GitRangeSource",
    "GitHubEventSource",
    "create_source",
]


def create_source(
    source: str = "git",
    message_file: str | Path | None = None,
    rev_range: str | None = None,
    repo_path: str | Path | None = None,
    event_path: str | Path | None = None,
    token: str | None = None,
    validate_pull_request_commits: bool = False,
    comment_char: str = DEFAULT_COMMENT_CHAR,
) -> MessageSource:
    """Factory function to create a message source.

    Args:
        source: Source name - 'file', 'git', or 'github'
        message_file: Commit message file (required for 'file')
        rev_range: Revision range for 'git' (defaults to the last commit)
        repo_path: Repository for 'git' (defaults to cwd)
        event_path: Event payload for 'github' (defaults to GITHUB_EVENT_PATH env var)
        token: REST API token for 'github' (defaults to GITHUB_TOKEN env var)
        validate_pull_request_commits: Inspect the commits of a pull request
        comment_char: Prefix of comment lines in the message file

    Returns:
        A MessageSource instance

    Raises:
        ValueError: If source is unknown or required config is missing
    """
    source = source.lower()

    if source == "file":
        if message_file is None:
            raise ValueError("A message file is required for the 'file' source")
        return MessageFileSource(message_file, comment_char=comment_char)
    elif source == "git":
        return GitRangeSource(rev_range=rev_range, repo_path=repo_path)
    elif source == "github":
        return GitHubEventSource(
            event_path=event_path,
            token=token,
            validate_pull_request_commits=validate_pull_request_commits,
        )
    else:
        raise ValueError(f"Unknown source: {source}. Supported sources: file, git, github")
