"""GitHub Actions event payload source."""

import json
import os
from pathlib import Path
from typing import Any

import httpx

from .base import CommitMessage, MessageSource, SourceError

PULL_REQUEST_EVENTS = ("pull_request", "pull_request_target")


class GitHubEventSource(MessageSource):
    """Read the messages from the payload of a GitHub Actions event.

    Push events carry the messages of the pushed commits. Pull request
    events are inspected by their title and description, or by the
    messages of their commits which are then fetched from the REST API.
    """

    PER_PAGE = 100

    def __init__(
        self,
        event_path: str | Path | None = None,
        token: str | None = None,
        validate_pull_request_commits: bool = False,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            event_path: Path to the event payload (defaults to GITHUB_EVENT_PATH env var)
            token: Token for the REST API (defaults to GITHUB_TOKEN env var)
            validate_pull_request_commits: Inspect the commits of a pull request
                instead of its title and description
            client: HTTP client to use for the REST API, left open for the caller

        Raises:
            SourceError: If no event path is provided or found in environment
        """
        path = event_path or os.environ.get("GITHUB_EVENT_PATH")
        if not path:
            raise SourceError(
                "The path to the GitHub event payload is required. "
                "Set GITHUB_EVENT_PATH environment variable or pass it as an option."
            )
        self.event_path = Path(path)
        self.token = token or os.environ.get("GITHUB_TOKEN")
        self.validate_pull_request_commits = validate_pull_request_commits
        self._client = client
        self._owns_client = client is None

    def _load_payload(self) -> dict[str, Any]:
        try:
            return json.loads(self.event_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise SourceError(f"Failed to read the event payload {self.event_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SourceError(f"The event payload {self.event_path} is not valid JSON: {e}") from e

    def _get_client(self) -> httpx.Client:
        """Lazily create and return the HTTP client."""
        if self._client is None:
            headers = {"Accept": "application/vnd.github+json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._client = httpx.Client(headers=headers, timeout=30.0)
        return self._client

    def _fetch_pull_request_commits(self, commits_url: str) -> list[CommitMessage]:
        """Fetch all commits of a pull request, following pagination."""
        client = self._get_client()
        messages: list[CommitMessage] = []
        page = 1

        while True:
            try:
                response = client.get(
                    commits_url, params={"per_page": self.PER_PAGE, "page": page}
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise SourceError(f"Failed to fetch the pull request commits: {e}") from e

            data = response.json()
            for item in data:
                messages.append(
                    CommitMessage(ref=item["sha"][:8], message=item["commit"]["message"])
                )

            if len(data) < self.PER_PAGE:
                break
            page += 1

        return messages

    def retrieve(self) -> list[CommitMessage]:
        payload = self._load_payload()

        pull_request = payload.get("pull_request")
        if pull_request is not None:
            if self.validate_pull_request_commits:
                return self._fetch_pull_request_commits(pull_request["commits_url"])

            message = pull_request.get("title") or ""
            body = pull_request.get("body")
            if body:
                message = f"{message}\n\n{body}"
            return [CommitMessage(ref="pull request", message=message)]

        commits = payload.get("commits")
        if commits is not None:
            return [
                CommitMessage(ref=commit.get("id", "")[:8], message=commit["message"])
                for commit in commits
            ]

        raise SourceError(
            f"No commits found in the event payload {self.event_path}. "
            f"Expected a push event or one of: {', '.join(PULL_REQUEST_EVENTS)}"
        )

    def get_name(self) -> str:
        return f"GitHub event ({self.event_path})"

    def __del__(self) -> None:
        """Clean up the HTTP client created by this source."""
        if getattr(self, "_owns_client", False) and self._client is not None:
            self._client.close()
