"""Repository status snapshot models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BranchStatus:
    """Tracking information for a local branch."""

    name: str
    upstream: str | None = None
    ahead: int | None = None
    behind: int | None = None
    gone: bool = False  # upstream configured but no longer exists

    @property
    def has_upstream(self) -> bool:
        return self.upstream is not None and not self.gone


@dataclass(frozen=True)
class RepoStatus:
    """Point-in-time status of a work tree and its current branch.

    ``ahead`` and ``behind`` are ``None`` when the current branch has no
    upstream (or its upstream no longer resolves).
    """

    branch: str | None = None  # None when HEAD is detached
    upstream: str | None = None
    ahead: int | None = None
    behind: int | None = None
    untracked: tuple[str, ...] = ()
    staged: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()
    ignored: tuple[str, ...] = ()
    branches: tuple[BranchStatus, ...] = field(default_factory=tuple)

    @property
    def has_upstream(self) -> bool:
        return self.ahead is not None and self.behind is not None

    @property
    def is_detached(self) -> bool:
        return self.branch is None

    @property
    def is_clean(self) -> bool:
        """Return True if nothing is untracked, staged or modified."""
        return not (self.untracked or self.staged or self.modified)

    def get_branch(self, name: str) -> "BranchStatus | None":
        """Find a local branch by name."""
        for branch in self.branches:
            if branch.name == name:
                return branch
        return None

    def summary(self) -> str:
        """Return a one-line human readable summary."""
        head = self.branch or "(detached)"
        if not self.has_upstream:
            tracking = "no upstream"
        else:
            tracking = f"{self.upstream} +{self.ahead} -{self.behind}"

        counts = []
        for label, paths in (
            ("staged", self.staged),
            ("modified", self.modified),
            ("untracked", self.untracked),
        ):
            if paths:
                counts.append(f"{len(paths)} {label}")
        changes = ", ".join(counts) if counts else "clean"
        return f"{head} [{tracking}] {changes}"
