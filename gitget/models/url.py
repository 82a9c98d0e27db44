"""Canonical remote URL model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitURL:
    """Normalized remote address of a repository."""

    scheme: str
    host: str
    path: str
    user: str | None = None

    def __str__(self) -> str:
        userinfo = f"{self.user}@" if self.user else ""
        path = self.path
        # scp-style paths are relative to the host
        if self.host and path and not path.startswith("/"):
            path = "/" + path
        return f"{self.scheme}://{userinfo}{self.host}{path}"

    @property
    def hostname(self) -> str:
        """Return the host without any port number."""
        return self.host.split(":")[0]
