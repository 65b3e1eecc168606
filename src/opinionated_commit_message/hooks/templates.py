"""Git hook templates for inspecting commit messages."""

HOOK_MARKER = "opinionated-commit-message"


def get_commit_msg_hook(is_windows: bool) -> str:
    """Get commit-msg hook content.

    Args:
        is_windows: Whether to generate Windows batch script

    Returns:
        Hook script content
    """
    if is_windows:
        return """@echo off
REM opinionated-commit-message commit-msg hook
REM Reject commit messages which do not follow the style guide

opinionated-commit-message --quiet --message-file %1
"""
    else:
        return """#!/bin/sh
# opinionated-commit-message commit-msg hook
# Reject commit messages which do not follow the style guide

COMMIT_MSG_FILE=$1

exec opinionated-commit-message --quiet --message-file "$COMMIT_MSG_FILE"
"""
