"""Git CLI introspection: current branch and push remote."""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from git_open.errors import ResolutionError

log = structlog.get_logger()

_ACTIVE_BRANCH_MARKER = "*"
_PUSH_TAG = "(push)"


def _run_git(repo_dir: Path | None, *args: str) -> str:
    """Run a git command and return stdout. Raises ResolutionError on failure."""
    cmd = ["git"]
    if repo_dir is not None:
        cmd.extend(["-C", str(repo_dir)])
    cmd.extend(args)
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        raise ResolutionError(f"unable to run git: {e}") from e

    if proc.returncode != 0:
        raise ResolutionError(f"git {' '.join(args)} failed: {proc.stderr.strip()}")
    return proc.stdout


def parse_current_branch(output: str) -> str:
    """Return the branch on the first line of ``git branch`` output marked ``*``."""
    for line in output.splitlines():
        if line.startswith(_ACTIVE_BRANCH_MARKER):
            return line.removeprefix(_ACTIVE_BRANCH_MARKER).strip()
    raise ResolutionError("unable to get current working branch")


def parse_push_remote(output: str) -> str:
    """Return the URL of the first ``(push)`` line of ``git remote -v`` output."""
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 3:
            continue
        if parts[2] == _PUSH_TAG:
            return parts[1]
    raise ResolutionError("unable to find remote push url")


def current_branch(repo_dir: Path | None = None) -> str:
    """Return the checked-out branch of the repository at *repo_dir* (default: cwd)."""
    log.debug("getting_current_branch", repo=str(repo_dir or "."))
    branch = parse_current_branch(_run_git(repo_dir, "branch"))
    log.info("branch_resolved", branch=branch)
    return branch


def push_remote_url(repo_dir: Path | None = None) -> str:
    """Return the first push remote URL of the repository at *repo_dir*."""
    url = parse_push_remote(_run_git(repo_dir, "remote", "-v"))
    log.debug("push_remote_resolved", url=url)
    return url
