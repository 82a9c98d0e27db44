"""Exceptions raised by git-get operations."""

from enum import Enum


class ErrorKind(Enum):
    """Tag identifying which operation failed."""

    INVALID_URL = "invalid_url"
    EMPTY_URL = "empty_url"
    CLONE_FAILED = "clone_failed"
    OPEN_FAILED = "open_failed"
    LIST_REMOTES_FAILED = "list_remotes_failed"
    FETCH_FAILED = "fetch_failed"
    STATUS_LOAD_FAILED = "status_load_failed"


class GitCommandError(Exception):
    """Exception raised when the git executable fails."""

    def __init__(
        self, args: list[str], returncode: int | None, stderr: str = ""
    ) -> None:
        self.git_args = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = self.stderr or "Unknown error"
        super().__init__(f"git {' '.join(self.git_args)}: {message}")


class GitGetError(Exception):
    """Base exception for git-get operation failures.

    The underlying error, if any, is available as ``__cause__``; ``str()``
    renders the whole chain so it can be shown to the user verbatim.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.message}: {self.__cause__}"
        return self.message


class InvalidURL(GitGetError):
    """Address is neither SCP-like nor a valid URL."""

    kind = ErrorKind.INVALID_URL


class EmptyURL(GitGetError):
    """Address parsed but names neither host nor path."""

    kind = ErrorKind.EMPTY_URL


class CloneFailed(GitGetError):
    kind = ErrorKind.CLONE_FAILED


class OpenFailed(GitGetError):
    kind = ErrorKind.OPEN_FAILED


class ListRemotesFailed(GitGetError):
    kind = ErrorKind.LIST_REMOTES_FAILED


class FetchFailed(GitGetError):
    """Fetching a remote failed; remaining remotes were not fetched."""

    kind = ErrorKind.FETCH_FAILED

    def __init__(self, message: str, remote: str | None = None) -> None:
        super().__init__(message)
        self.remote = remote


class StatusLoadFailed(GitGetError):
    kind = ErrorKind.STATUS_LOAD_FAILED
