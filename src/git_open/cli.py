"""git-open command line entrypoint."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import gitlab
import requests
import structlog
from pydantic import ValidationError

from git_open.config import Settings
from git_open.errors import GitOpenError
from git_open.git_operations import current_branch, push_remote_url
from git_open.gitlab_client import GitLabClient
from git_open.launcher import open_url
from git_open.logging_setup import configure_logging
from git_open.remote_url import parse_remote_url

log = structlog.get_logger()

TARGET_HOME = "home"
TARGET_MR = "mr"
_TARGET_ALIASES = {"home": TARGET_HOME, "homepage": TARGET_HOME, "mr": TARGET_MR}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-open",
        description="Open the repository homepage or the merge request for the current branch.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=TARGET_HOME,
        choices=sorted(_TARGET_ALIASES),
        help="What to open (default: home)",
    )
    parser.add_argument(
        "-C",
        dest="repo_dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Run git in DIR instead of the current directory",
    )
    parser.add_argument(
        "--print",
        action="store_true",
        help="Print the URL instead of opening it in a browser",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_url(target: str, settings: Settings, repo_dir: Path | None = None) -> str:
    """Return the URL for *target*: the project homepage or the current branch's MR."""
    remote = parse_remote_url(push_remote_url(repo_dir))
    if _TARGET_ALIASES[target] == TARGET_HOME:
        return remote.home_url

    branch = current_branch(repo_dir)
    client = GitLabClient(settings)
    return client.merge_request_url(remote.org, remote.name, branch)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")

    configure_logging("debug" if args.verbose else settings.log_level)

    try:
        url = resolve_url(args.target, settings, args.repo_dir)
        if args.print:
            print(url)
        else:
            open_url(url)
    except (
        GitOpenError,
        gitlab.exceptions.GitlabError,
        requests.exceptions.RequestException,
    ) as e:
        log.error("git_open_failed", target=args.target, error=str(e))
        return 1
    return 0
