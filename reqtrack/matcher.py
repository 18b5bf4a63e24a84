"""Repository/branch matching for parsed requirements.

Narrows the pending requirements to the ones that reference the repository
the user is working in, and records which repo and branch entries matched so
that the reporter can highlight them.
"""

from __future__ import annotations

from reqtrack.parser.models import Requirement

MAIN_BRANCHES = ("master", "main")


def pending(requirements: list[Requirement]) -> list[Requirement]:
    """Requirements whose checkbox is not ticked, in document order."""
    return [req for req in requirements if not req.done]


def _first_containing(entries: list[str], needle: str) -> int:
    """Index of the first entry containing *needle* as a substring, or -1."""
    for index, entry in enumerate(entries):
        if needle in entry:
            return index
    return -1


def select(
    requirements: list[Requirement],
    repo: str,
    branch: str,
    show_all: bool = False,
) -> list[Requirement]:
    """Pick the requirements to display for the current working context.

    Completed requirements are always excluded. With *show_all*, or when
    *branch* is empty (detached HEAD, not a repository), every pending
    requirement is returned without match annotations. Otherwise only the
    requirements with a repo entry containing *repo* survive; their
    ``repo_matched`` index is set, and ``branch_matched`` is set to the first
    branch entry containing *branch* unless *branch* is ``master``/``main``.

    Args:
        requirements: Parsed requirements in document order.
        repo: Name of the current repository (last path segment of the cwd).
        branch: Current git branch, or ``""`` when unknown.
        show_all: Skip repo/branch filtering.

    Returns:
        The surviving requirements in their original relative order.
    """
    candidates = pending(requirements)
    for req in candidates:
        req.repo_matched = -1
        req.branch_matched = -1

    if show_all or not branch:
        return candidates

    highlight_branch = branch not in MAIN_BRANCHES
    selected: list[Requirement] = []
    for req in candidates:
        repo_index = _first_containing(req.repos, repo)
        if repo_index < 0:
            continue
        req.repo_matched = repo_index
        if highlight_branch:
            req.branch_matched = _first_containing(req.branches, branch)
        selected.append(req)
    return selected
