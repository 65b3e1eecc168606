"""Inspection of commit messages against the opinionated style guide."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

from .errors import InspectionError
from .verbs import VerbWhitelist

MAX_SUBJECT_LENGTH = 50
MAX_BODY_LINE_LENGTH = 72

CAPITALIZED_WORD_RE = re.compile(r"^([A-Z][a-z]*)[^a-zA-Z]")

# Hash codes such as " (#43)" are appended automatically by GitHub and
# similar services when a pull request is squashed.
SUFFIX_HASH_CODE_RE = re.compile(r"\s?\(\s*#[a-zA-Z_0-9]+\s*\)$")

URL_LINE_RE = re.compile(r"^[^ ]+://[^ ]+$")
LINK_DEFINITION_RE = re.compile(r"^\[[^\]]+]\s*:\s*[^ ]+://[^ ]+$")

_REF = r"[^\x00-\x1f\x7f ~^:?*\[]+"
MERGE_MESSAGE_RE = re.compile(rf"^Merge branch '{_REF}' into {_REF}(?:\r?\n|\Z)")


@dataclass
class SubjectBody:
    """A multi-line message split into its subject and body."""

    subject: str
    body_lines: list[str]


@dataclass
class MaybeSubjectBody:
    """Result of splitting; ``subject_body`` is None if there are errors."""

    subject_body: SubjectBody | None = None
    errors: list[str] = field(default_factory=list)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def split_lines(message: str) -> list[str]:
    """Split the message on new lines and strip the trailing carriage returns."""
    return [line[:-1] if line.endswith("\r") else line for line in message.split("\n")]


def split_subject_body(lines: list[str]) -> MaybeSubjectBody:
    """Split the lines into the subject and the body.

    Args:
        lines: Logical lines of the message

    Returns:
        The split, or the structural errors if the message is malformed
    """
    result = MaybeSubjectBody()

    if len(lines) < 2:
        result.errors.append(
            f"Expected at least three lines (subject, empty, body), but got: {len(lines)}"
        )
        return result

    if len(lines) == 2:
        result.errors.append(
            "Expected at least three lines (subject, empty, body) "
            f"in a multi-line message, but got: {len(lines)}"
        )
        return result

    if lines[1]:
        result.errors.append(
            "Expected an empty line between the subject and the body, "
            f"but got a second line of length: {len(lines[1])}"
        )
        return result

    result.subject_body = SubjectBody(subject=lines[0], body_lines=lines[2:])
    return result


def first_capitalized_word(line: str) -> str | None:
    """Return the leading capitalized word of the line, if any."""
    match = CAPITALIZED_WORD_RE.match(line)
    if match is None:
        return None
    return match.group(1)


def check_subject(
    subject: str,
    whitelist: VerbWhitelist,
    max_length: int = MAX_SUBJECT_LENGTH,
) -> list[str]:
    """Check the subject line.

    Length, leading verb and trailing dot are checked independently so that
    all the violations are reported at once.

    Args:
        subject: First line of the message
        whitelist: Verbs accepted in imperative mood
        max_length: Maximum number of characters without the hash-code suffix

    Returns:
        Errors, empty if the subject is valid
    """
    errors: list[str] = []

    subject_wo_code = SUFFIX_HASH_CODE_RE.sub("", subject, count=1)

    if len(subject_wo_code) > max_length:
        errors.append(
            f"The subject exceeds the limit of {max_length} characters "
            f"(got: {len(subject_wo_code)}, JSONified: {_quote(subject_wo_code)})"
        )

    word = first_capitalized_word(subject_wo_code)
    if word is None:
        errors.append('The subject must start with a capitalized verb (e.g., "Change").')
    elif word.lower() not in whitelist:
        error = (
            "The subject must start in imperative mood with one of the "
            f"most frequent English verbs, but got: {_quote(word)}. "
            "Please see `opinionated-commit-message --list-verbs` for a complete list"
        )
        if whitelist.additional:
            error += " and also revisit your list of additional verbs."
        else:
            error += "."
        errors.append(error)

    if subject_wo_code.endswith("."):
        errors.append("The subject must not end with a dot ('.').")

    return errors


def is_exempt_from_length(line: str) -> bool:
    """Check whether the line is a bare URL or a link definition."""
    return bool(URL_LINE_RE.match(line) or LINK_DEFINITION_RE.match(line))


def check_body(
    subject: str,
    body_lines: list[str],
    max_line_length: int = MAX_BODY_LINE_LENGTH,
) -> list[str]:
    """Check the body lines.

    Args:
        subject: First line of the message, compared against the body
        body_lines: Lines following the empty separator line
        max_line_length: Maximum number of characters per body line

    Returns:
        Errors, empty if the body is valid
    """
    if not body_lines:
        return ["At least one line is expected in the body, but got empty body."]

    if len(body_lines) == 1 and not body_lines[0].strip():
        return ["Unexpected empty body"]

    errors: list[str] = []

    for i, line in enumerate(body_lines):
        if is_exempt_from_length(line):
            continue

        if len(line) > max_line_length:
            errors.append(
                f"The line {i + 3} of the message (line {i + 1} of the body) "
                f"exceeds the limit of {max_line_length} characters. "
                f"The line contains {len(line)} characters: {_quote(line)}."
            )

    body_first_word = first_capitalized_word(body_lines[0])
    if body_first_word is not None:
        subject_first_word = first_capitalized_word(subject)
        if (
            subject_first_word is not None
            and subject_first_word.lower() == body_first_word.lower()
        ):
            errors.append(
                f"The first word of the subject ({_quote(subject_first_word)}) "
                "must not match the first word of the body."
            )

    return errors


def is_merge_message(message: str) -> bool:
    """Check whether the message was generated by merging a branch."""
    return MERGE_MESSAGE_RE.match(message) is not None


def check(
    message: str,
    whitelist: VerbWhitelist,
    allow_one_liners: bool = False,
    *,
    max_subject_length: int = MAX_SUBJECT_LENGTH,
    max_body_line_length: int = MAX_BODY_LINE_LENGTH,
) -> list[str]:
    """Inspect a commit message.

    Args:
        message: Raw commit message
        whitelist: Verbs accepted in imperative mood
        allow_one_liners: Accept messages consisting only of a subject
        max_subject_length: Maximum subject length
        max_body_line_length: Maximum body line length

    Returns:
        Errors in the order of the rules, empty if the message is valid

    Raises:
        InspectionError: If an error message is malformed
    """
    errors: list[str] = []

    if is_merge_message(message):
        return errors

    lines = split_lines(message)

    if not lines:
        errors.append("The message is empty.")
        return errors

    if len(lines) == 1 and allow_one_liners:
        errors.extend(check_subject(lines[0], whitelist, max_subject_length))
    else:
        maybe_subject_body = split_subject_body(lines)
        if maybe_subject_body.errors:
            errors.extend(maybe_subject_body.errors)
        else:
            subject_body = maybe_subject_body.subject_body
            if subject_body is None:
                raise InspectionError("Unexpected missing subject and body")

            errors.extend(check_subject(subject_body.subject, whitelist, max_subject_length))
            errors.extend(
                check_body(subject_body.subject, subject_body.body_lines, max_body_line_length)
            )

    for error in errors:
        if error.endswith("\n"):
            raise InspectionError(f"Unexpected error ending in a new-line character: {error}")

    return errors
