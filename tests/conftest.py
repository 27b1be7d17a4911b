"""Shared test constants, fixtures, and factory functions."""

import subprocess
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from git_open.config import Settings

# -- Constants --

GITLAB_HOST = "https://gitlab.example.com"
GITLAB_API_KEY = "test-token"

REMOTE_URL = "git@gitlab.example.com:group/my-project.git"
REMOTE_ORG = "group"
REMOTE_NAME = "my-project"
HOME_URL = "https://gitlab.example.com/group/my-project"

PROJECT_ID = 42
BRANCH = "feature/x"
MR_WEB_URL = "https://gitlab.example.com/group/my-project/-/merge_requests/7"

REMOTE_OUTPUT = (
    f"origin\t{REMOTE_URL} (fetch)\n"
    f"origin\t{REMOTE_URL} (push)\n"
)
BRANCH_OUTPUT = f"  main\n* {BRANCH}\n  other\n"


# -- Factories --


def make_settings(**overrides: Any) -> Settings:
    """Create a Settings instance with test defaults. Override any field."""
    defaults: dict[str, Any] = {
        "gitlab_host": GITLAB_HOST,
        "gitlab_api_key": GITLAB_API_KEY,
    }
    return Settings(**(defaults | overrides))


def make_project_item(
    project_id: int = PROJECT_ID, path: str = f"{REMOTE_ORG}/{REMOTE_NAME}"
) -> MagicMock:
    """Create a python-gitlab project list item."""
    item = MagicMock()
    item.attributes = {
        "id": project_id,
        "name": path.rsplit("/", 1)[-1],
        "ssh_url_to_repo": f"git@gitlab.example.com:{path}.git",
        "web_url": f"{GITLAB_HOST}/{path}",
    }
    return item


def make_mr_item(web_url: str = MR_WEB_URL, iid: int = 7) -> MagicMock:
    """Create a python-gitlab MR list item as returned by the simple view."""
    item = MagicMock()
    item.attributes = {"id": 1000 + iid, "iid": iid, "state": "opened", "web_url": web_url}
    return item


def run_git(repo: Path, *args: str) -> str:
    """Run git synchronously for test setup."""
    result = subprocess.run(
        ["git", "-C", str(repo), *args], capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


# -- Fixtures --


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own GitLab settings out of tests."""
    for name in ("GITLAB_API_KEY", "GITLAB_HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_gl(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace python-gitlab's Gitlab class with a MagicMock instance."""
    mock = MagicMock()
    monkeypatch.setattr("git_open.gitlab_client.gitlab.Gitlab", lambda *a, **kw: mock)
    return mock


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A real repository on branch BRANCH with one commit and a push remote."""
    repo = tmp_path / "repo"
    repo.mkdir()
    run_git(repo, "init", "--initial-branch=main")
    run_git(
        repo,
        "-c",
        "user.name=Test",
        "-c",
        "user.email=test@example.com",
        "-c",
        "commit.gpgsign=false",
        "commit",
        "--allow-empty",
        "-m",
        "initial",
    )
    run_git(repo, "checkout", "-b", BRANCH)
    run_git(repo, "remote", "add", "origin", REMOTE_URL)
    return repo
