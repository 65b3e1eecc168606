"""Base protocol and types for commit message sources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class CommitMessage:
    """A commit message together with where it came from."""

    ref: str
    message: str


class SourceError(Exception):
    """Error while retrieving commit messages."""

    pass


class MessageSource(ABC):
    """Abstract base class for message sources."""

    @abstractmethod
    def retrieve(self) -> list[CommitMessage]:
        """Retrieve the commit messages to inspect.

        Returns:
            Messages in the order they should be reported

        Raises:
            SourceError: If the messages cannot be retrieved
        """
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Get the display name for this source."""
        ...
