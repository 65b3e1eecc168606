"""CLI interface for opinionated-commit-message."""

from __future__ import annotations

import os
import sys

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import load_options
from .errors import ConfigurationError, InspectionError
from .git import GitError, GitRepo
from .hooks import install_hook
from .inspection import MAX_BODY_LINE_LENGTH, MAX_SUBJECT_LENGTH
from .inspector import CommitMessageInspector
from .report import format_report, summarize
from .sources import SourceError

EXIT_INVALID = 1
EXIT_ERROR = 2


@click.command()
@click.option(
    "--additional-verbs",
    envvar=["INPUT_ADDITIONAL-VERBS", "OCM_ADDITIONAL_VERBS"],
    help="Additional verbs separated by commas, semicolons or new lines",
)
@click.option(
    "--path-to-additional-verbs",
    envvar=["INPUT_PATH-TO-ADDITIONAL-VERBS", "OCM_PATH_TO_ADDITIONAL_VERBS"],
    help="File with additional verbs separated by commas, semicolons or new lines",
)
@click.option(
    "--allow-one-liners/--disallow-one-liners",
    default=None,
    help="Accept messages consisting only of a subject",
)
@click.option(
    "--max-subject-length",
    type=int,
    default=MAX_SUBJECT_LENGTH,
    show_default=True,
    help="Maximum number of characters in the subject",
)
@click.option(
    "--max-body-line-length",
    type=int,
    default=MAX_BODY_LINE_LENGTH,
    show_default=True,
    help="Maximum number of characters per body line",
)
@click.option(
    "-f",
    "--message-file",
    type=click.Path(dir_okay=False),
    help="Inspect the message in this file (as passed to a commit-msg hook)",
)
@click.option(
    "-r",
    "--range",
    "rev_range",
    help="Inspect the commits in this revision range (defaults to the last commit)",
)
@click.option(
    "--repo",
    type=click.Path(file_okay=False),
    help="Path to the repository (defaults to current directory)",
)
@click.option(
    "--github-event",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(dir_okay=False),
    help="Inspect the messages of a GitHub Actions event payload",
)
@click.option(
    "--validate-pull-request-commits",
    is_flag=True,
    envvar="INPUT_VALIDATE-PULL-REQUEST-COMMITS",
    help="Inspect the commits of a pull request instead of its title and description",
)
@click.option(
    "--github-token",
    envvar="GITHUB_TOKEN",
    help="Token for the GitHub REST API (defaults to GITHUB_TOKEN env var)",
)
@click.option(
    "--list-verbs",
    is_flag=True,
    help="List the accepted verbs and exit",
)
@click.option(
    "--install-hook",
    is_flag=True,
    help="Install the commit-msg hook into the repository and exit",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show the status of every inspected message",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Print only the errors",
)
@click.version_option(__version__)
def main(
    additional_verbs: str | None,
    path_to_additional_verbs: str | None,
    allow_one_liners: bool | None,
    max_subject_length: int,
    max_body_line_length: int,
    message_file: str | None,
    rev_range: str | None,
    repo: str | None,
    github_event: str | None,
    validate_pull_request_commits: bool,
    github_token: str | None,
    list_verbs: bool,
    install_hook: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Check commit messages against an opinionated style guide.

    \b
    Examples:
      # Inspect the last commit
      opinionated-commit-message

      # Inspect all the commits of a feature branch
      opinionated-commit-message --range origin/main..HEAD

      # Inspect a message from a commit-msg hook
      opinionated-commit-message --message-file .git/COMMIT_EDITMSG

      # Install the commit-msg hook
      opinionated-commit-message --install-hook
    """
    console = Console(quiet=quiet, soft_wrap=True)
    error_console = Console(stderr=True, soft_wrap=True)

    try:
        git_repo = GitRepo(repo)

        if install_hook:
            install_hook_func(git_repo, console)
            return

        allow_one_liners_value: str | bool | None = allow_one_liners
        if allow_one_liners_value is None:
            allow_one_liners_value = os.environ.get(
                "INPUT_ALLOW-ONE-LINERS", os.environ.get("OCM_ALLOW_ONE_LINERS")
            )

        options = load_options(
            additional_verbs=additional_verbs,
            path_to_additional_verbs=path_to_additional_verbs,
            allow_one_liners=allow_one_liners_value,
            git_repo=git_repo,
            repo=repo,
            max_subject_length=max_subject_length,
            max_body_line_length=max_body_line_length,
            message_file=message_file,
            rev_range=rev_range,
            github_event=github_event,
            github_token=github_token,
            validate_pull_request_commits=validate_pull_request_commits,
            verbose=verbose and not quiet,
            quiet=quiet,
        )

        inspector = CommitMessageInspector(options, console=console)

        if list_verbs:
            for verb in sorted(inspector.whitelist.verbs | inspector.whitelist.additional):
                click.echo(verb)
            return

        results = inspector.inspect()

    except (ConfigurationError, SourceError, GitError, InspectionError, ValueError) as e:
        if verbose:
            error_console.print_exception()
        else:
            error_console.print(f"[red]❌ Error: {escape(str(e))}[/]", highlight=False)
        sys.exit(EXIT_ERROR)

    total, invalid = summarize(results)

    if invalid:
        # The report is printed verbatim, it contains user text with brackets.
        error_console.print(
            format_report(results), markup=False, emoji=False, highlight=False, end=""
        )
        if not quiet:
            console.print(f"\n[red]❌ {invalid} of {total} message(s) are invalid.[/]")
        sys.exit(EXIT_INVALID)

    if not quiet:
        console.print(f"[green]✓ All {total} message(s) are valid.[/]")


# Alias for install_hook to avoid name collision with the flag
install_hook_func = install_hook


if __name__ == "__main__":
    main()
