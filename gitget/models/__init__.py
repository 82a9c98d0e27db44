"""Data models for git-get."""

from .config import AppConfig, CloneOptions
from .status import BranchStatus, RepoStatus
from .url import GitURL

__all__ = [
    "AppConfig",
    "CloneOptions",
    "BranchStatus",
    "RepoStatus",
    "GitURL",
]
