"""Options of an inspection run and their loading from git config."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .git import GitError, GitRepo
from .inspection import MAX_BODY_LINE_LENGTH, MAX_SUBJECT_LENGTH
from .sources.file import DEFAULT_COMMENT_CHAR

GIT_CONFIG_SECTION = "opinionatedCommitMessage"

_TRUE_VALUES = ("true", "yes", "1", "on")
_FALSE_VALUES = ("false", "no", "0", "off")


@dataclass
class InspectionOptions:
    """Options for inspecting commit messages."""

    additional_verbs: str | None = None
    path_to_additional_verbs: str | None = None
    allow_one_liners: bool = False
    max_subject_length: int = MAX_SUBJECT_LENGTH
    max_body_line_length: int = MAX_BODY_LINE_LENGTH
    comment_char: str = DEFAULT_COMMENT_CHAR

    message_file: str | None = None
    rev_range: str | None = None
    repo: str | None = None
    github_event: str | None = None
    github_token: str | None = None
    validate_pull_request_commits: bool = False

    verbose: bool = False
    quiet: bool = False

    @property
    def source(self) -> str:
        """Name of the message source selected by the options."""
        if self.message_file:
            return "file"
        if self.github_event and not self.rev_range:
            return "github"
        return "git"


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean configuration value.

    Raises:
        ConfigurationError: If the value is not a recognized boolean
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Unexpected value for {name}, expected a boolean, but got: {value!r}"
    )


def _git_config(repo: GitRepo, key: str) -> str | None:
    try:
        return repo.get_config(key)
    except GitError:
        return None


def _comment_char(repo: GitRepo) -> str:
    value = _git_config(repo, "core.commentString") or _git_config(repo, "core.commentChar")
    # "auto" lets git pick a character per message, the default is used then.
    if not value or value == "auto":
        return DEFAULT_COMMENT_CHAR
    return value


def load_options(
    additional_verbs: str | None = None,
    path_to_additional_verbs: str | None = None,
    allow_one_liners: str | bool | None = None,
    git_repo: GitRepo | None = None,
    **kwargs: object,
) -> InspectionOptions:
    """Build the options, falling back to git config for unset values.

    The command line and the environment take precedence; they are
    resolved by click before this function is called.

    Args:
        additional_verbs: Inline list of additional verbs
        path_to_additional_verbs: File with additional verbs
        allow_one_liners: Accept messages consisting only of a subject
        git_repo: Repository whose git config is consulted (defaults to
            the ``repo`` option, or the current directory)
        **kwargs: Remaining InspectionOptions fields, ``repo`` included

    Returns:
        The resolved options

    Raises:
        ConfigurationError: If a configured value is malformed
    """
    repo = git_repo
    if repo is None:
        repo_path = kwargs.get("repo")
        repo = GitRepo(str(repo_path) if repo_path else None)

    # GitHub Actions passes unset inputs as empty strings.
    if not additional_verbs:
        additional_verbs = _git_config(repo, f"{GIT_CONFIG_SECTION}.additionalVerbs")

    if not path_to_additional_verbs:
        path_to_additional_verbs = _git_config(
            repo, f"{GIT_CONFIG_SECTION}.pathToAdditionalVerbs"
        )

    if isinstance(allow_one_liners, str) and not allow_one_liners.strip():
        allow_one_liners = None
    if allow_one_liners is None:
        allow_one_liners = _git_config(repo, f"{GIT_CONFIG_SECTION}.allowOneLiners") or False
    if isinstance(allow_one_liners, str):
        allow_one_liners = parse_bool(allow_one_liners, "allow-one-liners")

    return InspectionOptions(
        additional_verbs=additional_verbs or None,
        path_to_additional_verbs=path_to_additional_verbs or None,
        allow_one_liners=allow_one_liners,
        comment_char=_comment_char(repo),
        **kwargs,  # type: ignore[arg-type]
    )
