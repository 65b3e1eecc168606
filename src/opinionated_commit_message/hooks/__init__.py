"""Git hook for inspecting commit messages on commit."""

from __future__ import annotations

import shutil
import stat
import sys
import time
from pathlib import Path

from rich.console import Console

from ..git import GitRepo
from .templates import HOOK_MARKER, get_commit_msg_hook

HOOK_NAME = "commit-msg"


def install_hook(repo: GitRepo, console: Console | None = None) -> Path:
    """Install the commit-msg hook.

    A foreign hook is backed up before it is replaced; our own hook is
    updated in place.

    Args:
        repo: Repository to install the hook into
        console: Rich console for output (creates new one if None)

    Returns:
        Path to the installed hook

    Raises:
        GitError: If not a git repository
    """
    if console is None:
        console = Console()

    repo.check_repository()

    is_windows = sys.platform == "win32"

    hooks_dir = repo.get_git_dir() / "hooks"
    hooks_dir.mkdir(parents=True, exist_ok=True)
    target_path = hooks_dir / HOOK_NAME

    existed_before = target_path.exists()
    if existed_before:
        existing_content = target_path.read_text(encoding="utf-8", errors="ignore")
        if HOOK_MARKER not in existing_content:
            backup_path = target_path.with_name(f"{HOOK_NAME}.backup-{int(time.time())}")
            shutil.copy2(target_path, backup_path)
            console.print(f"[yellow]⚠ {HOOK_NAME} - backed up existing to {backup_path.name}[/]")

    target_path.write_text(get_commit_msg_hook(is_windows), encoding="utf-8")

    # Make executable on Unix
    if not is_windows:
        target_path.chmod(target_path.stat().st_mode | stat.S_IEXEC)

    if existed_before:
        console.print(f"[green]✓ {HOOK_NAME} - updated[/]")
    else:
        console.print(f"[green]✓ {HOOK_NAME} - installed[/]")

    return target_path


__all__ = ["install_hook", "get_commit_msg_hook", "HOOK_NAME"]
