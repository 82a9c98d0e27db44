"""Thin wrapper around the git executable."""

import logging
import os
import subprocess
from pathlib import Path

from gitget.models.config import CloneOptions

from .errors import GitCommandError

logger = logging.getLogger(__name__)


def _git_env() -> dict:
    """Get environment variables for git execution."""
    env = os.environ.copy()
    # Fail instead of blocking on a credential prompt
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_git(
    args: list[str], cwd: Path | None = None
) -> subprocess.CompletedProcess:
    """Run a git command and return the result.

    Raises:
        GitCommandError: If git exits non-zero or can't be started.
    """
    cmd = ["git"] + args
    logger.debug(f"Running {' '.join(cmd)} in {cwd or Path.cwd()}")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            env=_git_env(),
        )
    except FileNotFoundError:
        raise GitCommandError(args, None, "Git is not installed or not in PATH")

    if result.returncode != 0:
        raise GitCommandError(args, result.returncode, result.stderr)
    return result


def clone(url: str, path: Path, options: CloneOptions) -> None:
    """Clone ``url`` into ``path``."""
    args = ["clone"] + options.to_args() + ["--", url, str(path)]
    run_git(args)


class GitEngine:
    """Git operations bound to a single work tree."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def open(cls, path: Path) -> "GitEngine":
        """Open the work tree rooted at ``path``.

        Raises:
            GitCommandError: If ``path`` is not the top of a git work tree.
        """
        args = ["rev-parse", "--show-toplevel"]
        if not path.is_dir():
            raise GitCommandError(args, None, f"No such directory: {path}")

        result = run_git(args, cwd=path)
        toplevel = Path(result.stdout.strip()).resolve()
        if toplevel != path.resolve():
            raise GitCommandError(
                args, None, f"Not the root of a git work tree: {path}"
            )
        return cls(toplevel)

    def run(self, args: list[str]) -> subprocess.CompletedProcess:
        return run_git(args, cwd=self._path)

    def list_remotes(self) -> list[str]:
        """List configured remote names."""
        result = self.run(["remote"])
        return [r.strip() for r in result.stdout.splitlines() if r.strip()]

    def lookup_remote(self, name: str) -> str:
        """Return the fetch URL of a remote.

        Raises GitCommandError if no remote with that name is configured, so
        it also checks the remote exists before fetching it.
        """
        result = self.run(["remote", "get-url", name])
        return result.stdout.strip()

    def fetch(self, remote: str) -> None:
        """Fetch a remote using its configured refspecs."""
        self.run(["fetch", "--quiet", remote])

    def status(self) -> str:
        """Return NUL separated porcelain v2 status including branch headers."""
        result = self.run(
            [
                "status",
                "--porcelain=v2",
                "--branch",
                "--ignored",
                "--untracked-files=all",
                "-z",
            ]
        )
        return result.stdout

    def branch_tracking(self) -> str:
        """Return one line per local branch: name, upstream and tracking."""
        result = self.run(
            [
                "for-each-ref",
                "--format=%(refname:short)%00%(upstream:short)%00%(upstream:track,nobracket)",
                "refs/heads",
            ]
        )
        return result.stdout
