"""Application configuration management."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from .url import GitURL


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_dir = Path.home() / ".config" / "git-get"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get the main configuration file path."""
    return get_config_dir() / "config.json"


def default_repos_root() -> Path:
    return Path.home() / "repositories"


@dataclass(frozen=True)
class CloneOptions:
    """Options passed to the engine for a single clone.

    Attributes:
        bare: Create a bare repository; no work tree is checked out, so the
            result cannot be opened as a Repository handle.
        branch: Check out this branch instead of the remote's HEAD.
        depth: Create a shallow clone truncated to this many commits.
        quiet: Suppress git's progress output.
    """

    bare: bool = False
    branch: str | None = None
    depth: int | None = None
    quiet: bool = True

    def to_args(self) -> list[str]:
        """Convert to ``git clone`` command line flags."""
        args = []
        if self.bare:
            args.append("--bare")
        if self.branch:
            args.extend(["--branch", self.branch])
        if self.depth is not None:
            args.extend(["--depth", str(self.depth)])
        if self.quiet:
            args.append("--quiet")
        return args


@dataclass
class AppConfig:
    """Application configuration."""

    # Directory clones are placed under
    repos_root: Path = field(default_factory=default_repos_root)

    # Clone settings
    clone: CloneOptions = field(default_factory=CloneOptions)

    def repo_path(self, url: GitURL) -> Path:
        """Return the local clone path for a canonical URL.

        Raises:
            InvalidURL: If the URL's path climbs out of the repositories root.
        """
        from gitget.core.errors import InvalidURL
        from gitget.core.url import url_to_path

        path = self.repos_root / url_to_path(url).lstrip("/")
        root = self.repos_root.resolve()
        if path.resolve() == root or not path.resolve().is_relative_to(root):
            raise InvalidURL(f"URL {url} resolves outside of {self.repos_root}")
        return path

    def save(self) -> None:
        """Save configuration to file."""
        config_file = get_config_file()
        with open(config_file, "w") as f:
            json.dump(self._to_dict(), f, indent=2)

    def _to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "repos_root": str(self.repos_root),
            "clone": {
                "bare": self.clone.bare,
                "branch": self.clone.branch,
                "depth": self.clone.depth,
                "quiet": self.clone.quiet,
            },
        }

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from file."""
        config_file = get_config_file()
        if not config_file.exists():
            return cls()

        try:
            with open(config_file) as f:
                data = json.load(f)
            return cls._from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError):
            return cls()

    @classmethod
    def _from_dict(cls, data: dict) -> "AppConfig":
        """Create from dictionary."""
        clone = data.get("clone", {})
        repos_root = data.get("repos_root")

        return cls(
            repos_root=(
                Path(repos_root).expanduser() if repos_root else default_repos_root()
            ),
            clone=CloneOptions(
                bare=clone.get("bare", False),
                branch=clone.get("branch"),
                depth=clone.get("depth"),
                quiet=clone.get("quiet", True),
            ),
        )
