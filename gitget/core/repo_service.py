"""Service tying URL normalization, path layout and repository handles."""

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from gitget.models.config import AppConfig

from .errors import GitGetError
from .repository import Repository, clone_repo, open_repo
from .url import parse_url

logger = logging.getLogger(__name__)


class RepoService(QObject):
    """Service for getting and synchronizing repositories under a root."""

    # Signals
    repository_cloned = Signal(object)  # Path
    repository_opened = Signal(object)  # Repository
    status_changed = Signal(object, object)  # Repository, RepoStatus
    error_occurred = Signal(str)

    def __init__(
        self, config: AppConfig | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._config = config or AppConfig()

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def repos_root(self) -> Path:
        return self._config.repos_root

    def get_path(self, raw_url: str) -> Path:
        """Return where the repository at ``raw_url`` lives locally."""
        return self._config.repo_path(parse_url(raw_url))

    def get(self, raw_url: str) -> Repository:
        """Clone a repository if it isn't there yet and open it.

        Returns:
            The opened Repository
        """
        try:
            url = parse_url(raw_url)
            path = self._config.repo_path(url)

            if not path.exists():
                clone_repo(str(url), path, self._config.clone)
                self.repository_cloned.emit(path)
            else:
                logger.info(f"Repository already exists at {path}")

            repo = open_repo(path)
        except GitGetError as e:
            self.error_occurred.emit(str(e))
            raise

        self.repository_opened.emit(repo)
        return repo

    def open(self, path: Path) -> Repository:
        """Open an existing repository."""
        try:
            repo = open_repo(path)
        except GitGetError as e:
            self.error_occurred.emit(str(e))
            raise

        self.repository_opened.emit(repo)
        return repo

    def fetch(self, repo: Repository) -> None:
        """Fetch all remotes of a repository."""
        try:
            repo.fetch()
        except GitGetError as e:
            self.error_occurred.emit(str(e))
            raise

    def reload(self, repo: Repository) -> None:
        """Reload a repository's status, signalling if it changed."""
        previous = repo.status
        try:
            repo.reload()
        except GitGetError as e:
            self.error_occurred.emit(str(e))
            raise

        if repo.status != previous:
            self.status_changed.emit(repo, repo.status)

    def sync(self, repo: Repository) -> None:
        """Fetch all remotes and then reload the status."""
        self.fetch(repo)
        self.reload(repo)

    def list_repositories(self) -> list[Path]:
        """List all work trees under the repositories root."""
        root = self.repos_root
        if not root.is_dir():
            return []

        found = []
        pending = [root]
        while pending:
            current = pending.pop()
            if (current / ".git").exists():
                found.append(current)
                continue
            try:
                children = sorted(p for p in current.iterdir() if p.is_dir())
            except PermissionError:
                logger.warning(f"Permission denied listing {current}")
                continue
            pending.extend(reversed(children))

        return sorted(found)
