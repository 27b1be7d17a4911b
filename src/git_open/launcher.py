"""Open URLs with the platform's opener command."""

from __future__ import annotations

import shutil
import subprocess

import structlog

from git_open.errors import LaunchError

log = structlog.get_logger()

LINUX_OPENER = "xdg-open"
GENERIC_OPENER = "open"


def opener_command() -> str:
    """Prefer ``xdg-open`` when it is on PATH, else fall back to ``open``."""
    if shutil.which(LINUX_OPENER):
        return LINUX_OPENER
    return GENERIC_OPENER


def open_url(url: str) -> None:
    """Open *url* in the default browser and wait for the opener to exit.

    Raises:
        LaunchError: If the opener cannot be started or exits non-zero.
    """
    opener = opener_command()
    log.info("opening_url", url=url, opener=opener)
    try:
        proc = subprocess.run([opener, url], capture_output=True, text=True, check=False)
    except OSError as e:
        raise LaunchError(f"unable to run {opener}: {e}") from e

    if proc.returncode != 0:
        err = proc.stderr.strip()
        raise LaunchError(f"{opener} exited with status {proc.returncode}: {err}")
