"""Main CommitMessageInspector class tying sources, verbs and checks together."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from .config import InspectionOptions
from .inspection import check
from .report import MessageResult
from .sources import CommitMessage, MessageSource, create_source
from .verbs import VerbWhitelist, build_whitelist


class CommitMessageInspector:
    """Inspect the commit messages selected by the options."""

    def __init__(
        self,
        options: InspectionOptions | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the inspector.

        The verb whitelist is built eagerly so that configuration errors
        surface before any message is retrieved.

        Args:
            options: Inspection options
            console: Rich console for output

        Raises:
            ConfigurationError: If the additional verbs cannot be read
        """
        self.options = options or InspectionOptions()
        self.console = console or Console(quiet=self.options.quiet)
        self.whitelist: VerbWhitelist = build_whitelist(
            self.options.additional_verbs,
            self.options.path_to_additional_verbs,
        )
        self._source: MessageSource | None = None

    def _get_source(self) -> MessageSource:
        """Lazily create and return the message source."""
        if self._source is None:
            self._source = create_source(
                source=self.options.source,
                message_file=self.options.message_file,
                rev_range=self.options.rev_range,
                repo_path=self.options.repo,
                event_path=self.options.github_event,
                token=self.options.github_token,
                validate_pull_request_commits=self.options.validate_pull_request_commits,
                comment_char=self.options.comment_char,
            )
        return self._source

    def inspect_message(self, message: str) -> list[str]:
        """Inspect a single raw message with the configured rules."""
        return check(
            message,
            self.whitelist,
            self.options.allow_one_liners,
            max_subject_length=self.options.max_subject_length,
            max_body_line_length=self.options.max_body_line_length,
        )

    def inspect(self, commits: list[CommitMessage] | None = None) -> list[MessageResult]:
        """Inspect the messages, retrieving them from the source if not given.

        Raises:
            SourceError: If the messages cannot be retrieved
        """
        if commits is None:
            source = self._get_source()
            if self.options.verbose:
                self.console.print(f"[blue]Reading messages from {escape(source.get_name())}[/]")
            commits = source.retrieve()

        results: list[MessageResult] = []
        for i, commit in enumerate(commits, start=1):
            errors = self.inspect_message(commit.message)
            results.append(MessageResult(index=i, commit=commit, errors=errors))

            if self.options.verbose:
                if errors:
                    self.console.print(f"[red]✗ {escape(commit.ref)}: {len(errors)} error(s)[/]")
                else:
                    self.console.print(f"[green]✓ {escape(commit.ref)}[/]")

        return results


__all__ = ["CommitMessageInspector"]
