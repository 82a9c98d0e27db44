"""Core services for git-get."""

from .errors import (
    CloneFailed,
    EmptyURL,
    ErrorKind,
    FetchFailed,
    GitCommandError,
    GitGetError,
    InvalidURL,
    ListRemotesFailed,
    OpenFailed,
    StatusLoadFailed,
)
from .repo_service import RepoService
from .repository import Repository, clone_repo, open_repo
from .status import load_status
from .url import parse_url, url_to_path

__all__ = [
    "CloneFailed",
    "EmptyURL",
    "ErrorKind",
    "FetchFailed",
    "GitCommandError",
    "GitGetError",
    "InvalidURL",
    "ListRemotesFailed",
    "OpenFailed",
    "StatusLoadFailed",
    "RepoService",
    "Repository",
    "clone_repo",
    "open_repo",
    "load_status",
    "parse_url",
    "url_to_path",
]
