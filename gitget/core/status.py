"""Status snapshot computation from git's porcelain output."""

import re

from gitget.models.status import BranchStatus, RepoStatus

from .errors import GitCommandError, StatusLoadFailed
from .git_engine import GitEngine

_TRACK_PATTERN = re.compile(r"(ahead|behind) (\d+)")


def load_status(engine: GitEngine) -> RepoStatus:
    """Compute a status snapshot for the engine's work tree.

    Raises:
        StatusLoadFailed: If any git query fails.
    """
    try:
        status_output = engine.status()
        tracking_output = engine.branch_tracking()
    except GitCommandError as e:
        raise StatusLoadFailed(f"Failed loading status of {engine.path}") from e

    fields = parse_status(status_output)
    return RepoStatus(branches=parse_branch_tracking(tracking_output), **fields)


def parse_status(output: str) -> dict:
    """Parse ``git status --porcelain=v2 --branch -z`` output.

    Returns:
        Keyword arguments for RepoStatus (everything but ``branches``).
    """
    branch = None
    upstream = None
    ahead = None
    behind = None
    untracked: list[str] = []
    staged: list[str] = []
    modified: list[str] = []
    ignored: list[str] = []

    entries = iter(output.split("\0"))
    for entry in entries:
        if not entry:
            continue

        if entry.startswith("# "):
            key, _, value = entry[2:].partition(" ")
            if key == "branch.head":
                branch = None if value == "(detached)" else value
            elif key == "branch.upstream":
                upstream = value
            elif key == "branch.ab":
                a, b = value.split()
                ahead, behind = int(a.lstrip("+")), int(b.lstrip("-"))
        elif entry.startswith("1 "):
            xy, path = entry[2:4], entry.split(" ", 8)[8]
            _add_change(xy, path, staged, modified)
        elif entry.startswith("2 "):
            xy, path = entry[2:4], entry.split(" ", 9)[9]
            # Renames are followed by the original path
            next(entries, None)
            _add_change(xy, path, staged, modified)
        elif entry.startswith("u "):
            # Unmerged paths need work in the tree before they can be staged
            modified.append(entry.split(" ", 10)[10])
        elif entry.startswith("? "):
            untracked.append(entry[2:])
        elif entry.startswith("! "):
            ignored.append(entry[2:])

    return {
        "branch": branch,
        "upstream": upstream,
        "ahead": ahead,
        "behind": behind,
        "untracked": tuple(untracked),
        "staged": tuple(staged),
        "modified": tuple(modified),
        "ignored": tuple(ignored),
    }


def _add_change(
    xy: str, path: str, staged: list[str], modified: list[str]
) -> None:
    if xy[0] != ".":
        staged.append(path)
    if xy[1] != ".":
        modified.append(path)


def parse_branch_tracking(output: str) -> tuple[BranchStatus, ...]:
    """Parse ``for-each-ref`` lines of ``name NUL upstream NUL track``."""
    branches = []
    for line in output.splitlines():
        if not line:
            continue
        name, upstream, track = (line.split("\0") + ["", ""])[:3]
        if not upstream:
            branches.append(BranchStatus(name=name))
            continue

        if track == "gone":
            branches.append(BranchStatus(name=name, upstream=upstream, gone=True))
            continue

        counts = {"ahead": 0, "behind": 0}
        for direction, count in _TRACK_PATTERN.findall(track):
            counts[direction] = int(count)
        branches.append(
            BranchStatus(
                name=name,
                upstream=upstream,
                ahead=counts["ahead"],
                behind=counts["behind"],
            )
        )
    return tuple(branches)
