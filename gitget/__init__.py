"""git-get: clone remote repositories into a predictable directory layout."""

__version__ = "0.1.0"
