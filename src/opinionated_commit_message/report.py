"""Formatting of the inspection results."""

from __future__ import annotations

from dataclasses import dataclass

from .sources import CommitMessage


@dataclass
class MessageResult:
    """Errors found in one of the inspected messages."""

    index: int
    commit: CommitMessage
    errors: list[str]

    @property
    def is_valid(self) -> bool:
        return not self.errors


def format_errors(result: MessageResult) -> str:
    """Format the errors of a single invalid message."""
    parts = [f"The message {result.index} is invalid:\n"]
    parts.extend(f"* {error}\n" for error in result.errors)
    parts.append("The original message was:\n")
    parts.append(f"{result.commit.message}\n")
    return "".join(parts)


def format_report(results: list[MessageResult]) -> str:
    """Format the errors of all invalid messages.

    Returns:
        The report, or an empty string if all the messages are valid
    """
    return "\n".join(format_errors(result) for result in results if not result.is_valid)


def summarize(results: list[MessageResult]) -> tuple[int, int]:
    """Count the inspected and the invalid messages."""
    invalid = sum(1 for result in results if not result.is_valid)
    return len(results), invalid
