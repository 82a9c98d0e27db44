"""Remote address normalization and local path derivation."""

import posixpath
import re
from urllib.parse import unquote, urlsplit

from gitget.models.url import GitURL

from .errors import EmptyURL, InvalidURL

# SCP-like addresses used by the ssh protocol, eg: git@github.com:user/repo.git
SCP_SYNTAX = re.compile(r"^([a-zA-Z0-9_]+)@([a-zA-Z0-9._-]+):(.*)\Z")

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")


def parse_url(raw_url: str) -> GitURL:
    """Parse a remote address into its canonical form.

    SCP-like addresses (``user@host:path``) are converted straight into ssh
    URLs; anything else goes through the generic URL parser.

    Raises:
        InvalidURL: If the address can't be parsed.
        EmptyURL: If the address names neither a host nor a path.
    """
    match = SCP_SYNTAX.match(raw_url)
    if match:
        scheme, user, host, path = "ssh", match.group(1), match.group(2), match.group(3)
    else:
        scheme, user, host, path = _split_url(raw_url)

    if not host and not path:
        raise EmptyURL(f"Parsed URL is empty: {raw_url!r}")

    if scheme == "git+ssh":
        scheme = "ssh"

    # Default to "git" user when using ssh and no user is provided
    if scheme == "ssh" and user is None:
        user = "git"

    if not scheme:
        scheme = "https"

    return GitURL(scheme=scheme, user=user, host=host, path=path)


def _split_url(raw_url: str) -> tuple[str, str | None, str, str]:
    """Split a generic URL into (scheme, user, host, path)."""
    try:
        if _CONTROL_CHARS.search(raw_url):
            raise ValueError("invalid control character in URL")
        if raw_url.startswith(":"):
            raise ValueError("missing protocol scheme")
        if _BAD_ESCAPE.search(raw_url):
            raise ValueError("invalid URL escape")

        parts = urlsplit(raw_url)
        # Validates the port and IPv6 brackets
        parts.port
    except ValueError as e:
        raise InvalidURL(f"Failed parsing URL {raw_url!r}") from e

    # "host:path" without a user reads as an opaque "scheme:data" URL,
    # which names no host or path
    if parts.scheme and not raw_url.split(":", 1)[1].startswith("/"):
        return parts.scheme, None, "", ""

    user = None
    host = parts.netloc
    if "@" in host:
        userinfo, host = host.rsplit("@", 1)
        user = unquote(userinfo.split(":", 1)[0])

    return parts.scheme.lower(), user, host, unquote(parts.path)


def url_to_path(url: GitURL) -> str:
    """Map a canonical URL to a relative-looking local path.

    The port is dropped from the host, a trailing ``.git`` is removed and
    every ``~`` is deleted. The result is not checked for ``..`` escapes.
    """
    # Remove port numbers from host
    repo_host = url.host.split(":")[0]

    # Remove trailing ".git" from repo name
    repo_path = _join(repo_host, url.path)
    if repo_path.endswith(".git"):
        repo_path = repo_path[: -len(".git")]

    # Remove tilde (~) char from username
    return repo_path.replace("~", "")


def _join(*elements: str) -> str:
    """Join path elements and clean the result lexically."""
    joined = "/".join(e for e in elements if e)
    if not joined:
        return ""
    # normpath keeps a leading "//", collapse it first
    return posixpath.normpath(re.sub(r"/+", "/", joined))
