#!/usr/bin/env python3
"""Main entry point for git-get."""

import argparse
import logging
import sys
from pathlib import Path

import logbook
from logbook.compat import redirect_logging

from gitget.core import GitGetError, RepoService
from gitget.models.config import AppConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "{record.time:%Y-%m-%d %H:%M:%S} - {record.channel} - {record.level_name} - {record.message}"


def setup_logging(verbose: bool) -> logbook.Handler:
    """Route stdlib and logbook records to stderr."""
    redirect_logging()
    handler = logbook.StderrHandler(
        level=logbook.DEBUG if verbose else logbook.WARNING,
        format_string=LOG_FORMAT,
        bubble=False,
    )
    handler.push_application()
    return handler


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-get",
        description="Clone repositories into a directory tree mirroring their URLs",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Repository URL, eg https://github.com/user/repo or git@github.com:user/repo",
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Directory to clone into (defaults to the configured root)",
    )
    parser.add_argument(
        "--fetch",
        action="store_true",
        help="Fetch all remotes before reporting status",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Print the repository status",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List all repositories under the root",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)
    if not args.url and not args.list:
        parser.error("a URL is required unless --list is given")
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    handler = setup_logging(args.verbose)

    try:
        config = AppConfig.load()
        if args.root:
            config.repos_root = args.root.expanduser().resolve()

        service = RepoService(config)

        if args.list:
            for path in service.list_repositories():
                print(path)
            return 0

        repo = service.get(args.url)
        if args.fetch:
            service.sync(repo)

        print(repo.path)
        if args.status:
            print(repo.status.summary())
        return 0
    except GitGetError as e:
        logger.debug("git-get failed", exc_info=True)
        print(f"git-get: {e}", file=sys.stderr)
        return 1
    finally:
        handler.pop_application()
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)


if __name__ == "__main__":
    sys.exit(main())
