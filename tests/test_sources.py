import json

import httpx
import pytest

from opinionated_commit_message.sources import (
    CommitMessage,
    GitHubEventSource,
    GitRangeSource,
    MessageFileSource,
    SourceError,
    create_source,
)
from opinionated_commit_message.sources.file import clean_message

COMMITS_URL = "https://api.github.com/repos/owner/repo/pulls/1/commits"


def write_event(tmp_path, payload):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_clean_message_removes_comments_and_verbose_diff():
    text = (
        "Change SomeClass to OtherClass\n"
        "\n"
        "This is the body.\n"
        "\n"
        "# Please enter the commit message for your changes.\n"
        "# ------------------------ >8 ------------------------\n"
        "diff --git a/file b/file\n"
        "This line is not part of the message.\n"
    )
    assert clean_message(text) == "Change SomeClass to OtherClass\n\nThis is the body."


def test_clean_message_keeps_single_line():
    assert clean_message("Do something\n") == "Do something"


def test_clean_message_drops_leading_empty_lines():
    text = "\n\n# Please enter the commit message.\nDo something\n\nThis is the body.\n"
    assert clean_message(text) == "Do something\n\nThis is the body."


def test_clean_message_with_custom_comment_char():
    text = (
        "Do something\n"
        "\n"
        "#123 is fixed by this change.\n"
        "; Please enter the commit message for your changes.\n"
        "; ------------------------ >8 ------------------------\n"
        "diff --git a/file b/file\n"
    )
    assert clean_message(text, comment_char=";") == (
        "Do something\n\n#123 is fixed by this change."
    )


def test_message_file_source(tmp_path):
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("Do something\n\nThis is the body.\n# comment\n", encoding="utf-8")

    messages = MessageFileSource(path).retrieve()

    assert messages == [CommitMessage(ref=str(path), message="Do something\n\nThis is the body.")]


def test_message_file_source_missing_file(tmp_path):
    with pytest.raises(SourceError):
        MessageFileSource(tmp_path / "missing").retrieve()


def test_github_push_event(tmp_path):
    path = write_event(
        tmp_path,
        {
            "commits": [
                {"id": "0123456789abcdef", "message": "Do something\n\nThis is the body."},
                {"id": "fedcba9876543210", "message": "Change it"},
            ]
        },
    )

    messages = GitHubEventSource(event_path=path).retrieve()

    assert messages == [
        CommitMessage(ref="01234567", message="Do something\n\nThis is the body."),
        CommitMessage(ref="fedcba98", message="Change it"),
    ]


def test_github_pull_request_event(tmp_path):
    path = write_event(
        tmp_path,
        {
            "pull_request": {
                "title": "Do something",
                "body": "This is the body.\r\nIt has two lines.",
                "commits_url": COMMITS_URL,
            }
        },
    )

    messages = GitHubEventSource(event_path=path).retrieve()

    assert messages == [
        CommitMessage(
            ref="pull request",
            message="Do something\n\nThis is the body.\r\nIt has two lines.",
        )
    ]


def test_github_pull_request_event_without_body(tmp_path):
    path = write_event(tmp_path, {"pull_request": {"title": "Do something", "body": None}})

    messages = GitHubEventSource(event_path=path).retrieve()

    assert messages == [CommitMessage(ref="pull request", message="Do something")]


def test_github_pull_request_commits_are_paginated(tmp_path):
    path = write_event(
        tmp_path,
        {"pull_request": {"title": "Do something", "body": "", "commits_url": COMMITS_URL}},
    )
    pages = {
        "1": [
            {"sha": "aaaaaaaaaa", "commit": {"message": "Do one thing"}},
            {"sha": "bbbbbbbbbb", "commit": {"message": "Do another thing"}},
        ],
        "2": [{"sha": "cccccccccc", "commit": {"message": "Do the last thing"}}],
    }
    requested_pages = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url).startswith(COMMITS_URL)
        page = request.url.params["page"]
        requested_pages.append(page)
        assert request.url.params["per_page"] == "2"
        return httpx.Response(200, json=pages[page])

    client = httpx.Client(transport=httpx.MockTransport(handler))
    source = GitHubEventSource(
        event_path=path, validate_pull_request_commits=True, client=client
    )
    source.PER_PAGE = 2

    messages = source.retrieve()

    assert requested_pages == ["1", "2"]
    assert [m.message for m in messages] == [
        "Do one thing",
        "Do another thing",
        "Do the last thing",
    ]
    assert [m.ref for m in messages] == ["aaaaaaaa", "bbbbbbbb", "cccccccc"]


def test_github_pull_request_commits_http_error(tmp_path):
    path = write_event(
        tmp_path,
        {"pull_request": {"title": "Do something", "body": "", "commits_url": COMMITS_URL}},
    )
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(404)))
    source = GitHubEventSource(
        event_path=path, validate_pull_request_commits=True, client=client
    )

    with pytest.raises(SourceError, match="Failed to fetch the pull request commits"):
        source.retrieve()


def test_github_source_leaves_given_client_open(tmp_path):
    path = write_event(tmp_path, {"commits": []})
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    source = GitHubEventSource(event_path=path, client=client)
    source.__del__()

    assert not client.is_closed
    client.close()


def test_github_source_closes_own_client(tmp_path):
    source = GitHubEventSource(event_path=write_event(tmp_path, {"commits": []}))
    client = source._get_client()

    source.__del__()

    assert client.is_closed


def test_github_client_uses_token(tmp_path):
    source = GitHubEventSource(event_path=tmp_path / "event.json", token="secret")
    client = source._get_client()
    assert client.headers["Authorization"] == "Bearer secret"
    assert client.headers["Accept"] == "application/vnd.github+json"


def test_github_event_path_from_environment(tmp_path, monkeypatch):
    path = write_event(tmp_path, {"commits": []})
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(path))
    assert GitHubEventSource().retrieve() == []


def test_github_event_path_is_required(monkeypatch):
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
    with pytest.raises(SourceError, match="GITHUB_EVENT_PATH"):
        GitHubEventSource()


def test_github_event_without_commits(tmp_path):
    path = write_event(tmp_path, {"issue": {"title": "Something"}})
    with pytest.raises(SourceError, match="No commits found"):
        GitHubEventSource(event_path=path).retrieve()


def test_github_event_invalid_json(tmp_path):
    path = tmp_path / "event.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SourceError, match="not valid JSON"):
        GitHubEventSource(event_path=path).retrieve()


def test_git_range_source(git_repo, commit):
    commit("Do the first thing\n\nThis is the first body.")
    commit("Do the second thing\n\nThis is the second body.")
    commit("Do the third thing\n\nThis is the third body.")

    messages = GitRangeSource("HEAD~2..HEAD", repo_path=git_repo).retrieve()

    assert [m.message for m in messages] == [
        "Do the second thing\n\nThis is the second body.",
        "Do the third thing\n\nThis is the third body.",
    ]
    assert all(len(m.ref) == 8 for m in messages)


def test_git_range_source_defaults_to_head(git_repo, commit):
    commit("Do the first thing\n\nThis is the first body.")
    commit("Do the second thing\n\nThis is the second body.")

    messages = GitRangeSource(repo_path=git_repo).retrieve()

    assert [m.message for m in messages] == ["Do the second thing\n\nThis is the second body."]


def test_git_range_source_reads_root_commit(git_repo, commit):
    commit("Do the first thing\n\nThis is the first body.")

    messages = GitRangeSource(repo_path=git_repo).retrieve()

    assert [m.message for m in messages] == ["Do the first thing\n\nThis is the first body."]


def test_git_range_source_invalid_range(git_repo, commit):
    commit("Do something\n\nThis is the body.")
    with pytest.raises(SourceError):
        GitRangeSource("no-such-branch..HEAD", repo_path=git_repo).retrieve()


def test_git_range_source_outside_repository(tmp_path):
    with pytest.raises(SourceError):
        GitRangeSource(repo_path=tmp_path).retrieve()


def test_create_source(tmp_path):
    assert isinstance(create_source("file", message_file=tmp_path / "msg"), MessageFileSource)
    assert isinstance(create_source("git", repo_path=tmp_path), GitRangeSource)
    assert isinstance(
        create_source("github", event_path=tmp_path / "event.json"), GitHubEventSource
    )


def test_create_source_default_range(tmp_path):
    source = create_source("git", repo_path=tmp_path)
    assert source.rev_range is None
    assert source.get_name() == "git (HEAD)"


def test_create_source_passes_comment_char(tmp_path):
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("Do something\n; comment\n", encoding="utf-8")

    source = create_source("file", message_file=path, comment_char=";")

    assert source.retrieve()[0].message == "Do something"


def test_create_source_errors():
    with pytest.raises(ValueError, match="Unknown source"):
        create_source("svn")
    with pytest.raises(ValueError, match="message file is required"):
        create_source("file")
