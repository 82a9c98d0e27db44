"""Pytest configuration and fixtures."""

import os
import subprocess
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from gitget.core import Repository, clone_repo, open_repo
from gitget.models.config import AppConfig

# Git environment for tests - preserve PATH so git can be found
GIT_ENV = {
    **os.environ,
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@test.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@test.com",
    "GIT_AUTHOR_DATE": "2000-01-01T16:00:00Z",
    "GIT_COMMITTER_DATE": "2000-01-01T16:00:00Z",
}


def git(args: list[str], cwd: Path) -> str:
    """Run a git command in a test repository."""
    result = subprocess.run(
        ["git", "-c", "commit.gpgsign=false"] + args,
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
        env=GIT_ENV,
    )
    return result.stdout


def write_file(repo_path: Path, name: str, content: str) -> None:
    path = repo_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def commit_file(repo_path: Path, name: str, content: str, message: str) -> None:
    """Write, stage and commit a file."""
    write_file(repo_path, name, content)
    git(["add", name], cwd=repo_path)
    git(["commit", "-m", message], cwd=repo_path)


def clone_and_open(origin: Path, dest: Path) -> Repository:
    """Clone a local repository over file:// and open the clone."""
    clone_repo(f"file://{origin}", dest)
    return open_repo(dest)


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def empty_repo(temp_dir: Path) -> Path:
    """Create an empty git repository."""
    repo_path = temp_dir / "empty-repo"
    repo_path.mkdir()
    git(["init"], cwd=repo_path)
    return repo_path


@pytest.fixture
def git_repo(temp_dir: Path) -> Path:
    """Create a temporary git repository with one commit."""
    repo_path = temp_dir / "test-repo"
    repo_path.mkdir()
    git(["init"], cwd=repo_path)
    commit_file(repo_path, "README", "I'm a README file", "Initial commit")
    return repo_path


@pytest.fixture
def make_clone(temp_dir: Path) -> Callable[[Path], Repository]:
    """Return a factory cloning a repository into a fresh directory."""
    counter = iter(range(1000))

    def _make_clone(origin: Path) -> Repository:
        return clone_and_open(origin, temp_dir / f"clone-{next(counter)}")

    return _make_clone


@pytest.fixture
def app_config(temp_dir: Path) -> AppConfig:
    """Configuration rooted in the temporary directory."""
    return AppConfig(repos_root=temp_dir / "repositories")


@pytest.fixture
def home_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def qapp():
    """Create a QCoreApplication for Qt tests."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
