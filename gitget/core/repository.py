"""Repository handles: clone, open, fetch and reload."""

from pathlib import Path

import logbook

from gitget.models.config import CloneOptions
from gitget.models.status import RepoStatus

from . import git_engine
from .errors import (
    CloneFailed,
    FetchFailed,
    GitCommandError,
    ListRemotesFailed,
    OpenFailed,
)
from .git_engine import GitEngine
from .status import load_status

log = logbook.Logger(__name__)


def clone_repo(
    url: str, path: Path, options: CloneOptions | None = None
) -> None:
    """Clone a remote repository into ``path``.

    Args:
        url: Remote address understood by git (usually ``str(GitURL)``)
        path: Destination directory; must not exist or be empty
        options: Clone options; defaults to a full, non-bare checkout of
            the remote HEAD

    Raises:
        CloneFailed: If git fails to clone.
    """
    options = options or CloneOptions()
    log.info(f"Cloning {url} into {path}")
    try:
        git_engine.clone(url, path, options)
    except GitCommandError as e:
        raise CloneFailed(f"Failed cloning {url}") from e


def open_repo(path: Path) -> "Repository":
    """Open an existing work tree and load its status.

    Raises:
        OpenFailed: If ``path`` is not a git work tree.
        StatusLoadFailed: If the initial status can't be computed.
    """
    try:
        engine = GitEngine.open(path)
    except GitCommandError as e:
        raise OpenFailed(f"Failed opening repository at {path}") from e

    return Repository(engine, load_status(engine))


class Repository:
    """An opened repository together with its latest status snapshot.

    Instances are not safe to share between threads; callers must serialize
    fetch() and reload() on the same handle.
    """

    def __init__(self, engine: GitEngine, status: RepoStatus) -> None:
        self._engine = engine
        self._status = status

    @property
    def path(self) -> Path:
        return self._engine.path

    @property
    def status(self) -> RepoStatus:
        return self._status

    def fetch(self) -> None:
        """Fetch every configured remote, stopping at the first failure.

        Only remote-tracking refs change; call reload() to see the effect
        on ``status``.

        Raises:
            ListRemotesFailed: If the remotes can't be listed.
            FetchFailed: If looking up or fetching a remote fails.
        """
        try:
            remotes = self._engine.list_remotes()
        except GitCommandError as e:
            raise ListRemotesFailed(f"Failed listing remotes of {self.path}") from e

        for name in remotes:
            try:
                url = self._engine.lookup_remote(name)
                log.debug(f"Fetching {name} ({url}) into {self.path}")
                self._engine.fetch(name)
            except GitCommandError as e:
                raise FetchFailed(f"Failed fetching remote {name}", remote=name) from e

        log.info(f"Fetched {len(remotes)} remote(s) into {self.path}")

    def reload(self) -> None:
        """Recompute the status snapshot.

        The previous snapshot is kept if loading fails.

        Raises:
            StatusLoadFailed: If the status can't be computed.
        """
        self._status = load_status(self._engine)

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"

    def __hash__(self) -> int:
        return hash(str(self.path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return False
        return self.path == other.path
