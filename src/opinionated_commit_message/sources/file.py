"""Commit message file source, as passed to a commit-msg hook."""

from pathlib import Path

from .base import CommitMessage, MessageSource, SourceError

DEFAULT_COMMENT_CHAR = "#"

# Everything below this line is dropped by git when committing with --verbose.
SCISSORS_MARKER = " ------------------------ >8 ------------------------"


def clean_message(text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> str:
    """Remove git comments, the verbose diff and surrounding empty lines.

    Args:
        text: Content of the commit message file
        comment_char: Prefix of comment lines (git's ``core.commentChar``)

    Returns:
        The message as git would record it
    """
    scissors_line = comment_char + SCISSORS_MARKER

    lines: list[str] = []
    for line in text.split("\n"):
        if line.rstrip("\r") == scissors_line:
            break
        if line.startswith(comment_char):
            continue
        lines.append(line)

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    return "\n".join(lines)


class MessageFileSource(MessageSource):
    """Read a single message from a file."""

    def __init__(self, path: str | Path, comment_char: str = DEFAULT_COMMENT_CHAR) -> None:
        self.path = Path(path)
        self.comment_char = comment_char

    def retrieve(self) -> list[CommitMessage]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceError(f"Failed to read the commit message from {self.path}: {e}") from e

        return [CommitMessage(ref=str(self.path), message=clean_message(text, self.comment_char))]

    def get_name(self) -> str:
        return f"message file ({self.path})"
