"""Current repository/branch detection.

Runs ``git status`` in the working directory to find the checked-out branch
and takes the repository name from the last segment of the working directory.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from reqtrack.utils import print_info, print_warning

BRANCH_PREFIX = "On branch "


@dataclass(frozen=True)
class RepoContext:
    """Where the user is working. Empty strings mean unknown."""

    repo: str = ""
    branch: str = ""


class GitContextError(Exception):
    """Raised when a git command cannot be run or fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


def _run_git(*args: str, cwd: str | Path | None = None, timeout: float = 30.0) -> str:
    """Run a git command and return its stdout.

    Raises GitContextError if git is missing, times out, or exits non-zero.
    """
    cmd = ["git"] + list(args)
    cmd_str = " ".join(cmd)

    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise GitContextError(f"git executable not found: {exc}", command=cmd_str) from exc
    except subprocess.TimeoutExpired as exc:
        raise GitContextError(
            f"Git command timed out after {timeout}s: {cmd_str}", command=cmd_str
        ) from exc

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitContextError(
            f"Git command failed (exit {result.returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )
    return result.stdout


def parse_branch(status_output: str) -> str:
    """Extract the branch name from the first line of ``git status`` output.

    Returns ``""`` for a detached HEAD or unexpected output.
    """
    lines = status_output.splitlines()
    if not lines:
        return ""
    first = lines[0]
    position = first.find(BRANCH_PREFIX)
    if position < 0:
        return ""
    return first[position + len(BRANCH_PREFIX):].strip()


def repo_name(cwd: str | Path) -> str:
    """Last path segment of *cwd*."""
    return Path(cwd).name


def detect_repo_context(cwd: str | Path | None = None) -> RepoContext:
    """Determine the current repository and branch.

    Prints the detected branch and repository. When *cwd* is not inside a git
    repository (or git is unavailable) a warning is printed and an empty
    context is returned.
    """
    directory = Path(cwd) if cwd else Path.cwd()
    try:
        output = _run_git("status", cwd=directory)
    except GitContextError as exc:
        print_warning(f"Not a git repository, {exc}")
        return RepoContext()

    branch = parse_branch(output)
    repo = repo_name(directory)
    print_info("On Branch", branch)
    print_info("Current Repo:", repo)
    return RepoContext(repo=repo, branch=branch)
