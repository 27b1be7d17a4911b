"""GitLab API client for project search and merge request lookup."""

from __future__ import annotations

from typing import Protocol

import gitlab
import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from git_open.config import Settings
from git_open.errors import NotFoundError

log = structlog.get_logger()


class Project(BaseModel):
    """Subset of fields from GitLab project search API response."""

    model_config = ConfigDict(extra="ignore")
    id: int
    ssh_url_to_repo: str


class MergeRequest(BaseModel):
    """Subset of fields from GitLab MR list API response."""

    model_config = ConfigDict(extra="ignore")
    web_url: str
    state: str
    # absent from the "simple" list view
    source_branch: str | None = None


class GitLabClientProtocol(Protocol):
    def find_project(self, org: str, name: str) -> Project: ...
    def find_merge_request(self, project_id: int, branch: str) -> MergeRequest: ...
    def merge_request_url(self, org: str, name: str, branch: str) -> str: ...


def _matches_path(repo_url: str, org: str, name: str) -> bool:
    """True if *repo_url* ends with ``org/name.git`` starting at a path boundary.

    GitLab paths are case-insensitive, so the comparison is too.
    """
    url = repo_url.casefold()
    suffix = f"{org}/{name}.git".casefold()
    if not url.endswith(suffix):
        return False
    head = url[: -len(suffix)]
    return head == "" or head.endswith((":", "/"))


class GitLabClient:
    def __init__(self, settings: Settings) -> None:
        self._gl = gitlab.Gitlab(settings.gitlab_host, private_token=settings.gitlab_api_key)

    def find_project(self, org: str, name: str) -> Project:
        """Search projects by *name* and return the first whose repo path is ``org/name``."""
        log.info("searching_projects", name=name)
        results = self._gl.projects.list(search=name, get_all=False)
        if not results:
            raise NotFoundError(f"unable to find project {name!r}")

        for item in results:
            try:
                project = Project.model_validate(item.attributes)
            except ValidationError as e:
                log.warning("project_skipped", attributes=item.attributes, error=str(e))
                continue
            if _matches_path(project.ssh_url_to_repo, org, name):
                log.info("project_found", project_id=project.id, path=f"{org}/{name}")
                return project
        raise NotFoundError(
            f"{len(results)} project(s) matched {name!r} but none belong to {org}/{name}"
        )

    def find_merge_request(self, project_id: int, branch: str) -> MergeRequest:
        """Return the first open merge request whose source branch is *branch*."""
        log.info("searching_merge_requests", project_id=project_id, branch=branch)
        project = self._gl.projects.get(project_id, lazy=True)
        mrs = project.mergerequests.list(
            source_branch=branch, state="opened", view="simple", get_all=False
        )
        if not mrs:
            raise NotFoundError(f"no open merge requests found for branch {branch!r}")
        try:
            return MergeRequest.model_validate(mrs[0].attributes)
        except ValidationError as e:
            msg = f"merge request for branch {branch!r} has no usable web url"
            raise NotFoundError(msg) from e

    def merge_request_url(self, org: str, name: str, branch: str) -> str:
        """Resolve ``org/name`` and return the web URL of its open MR for *branch*."""
        project = self.find_project(org, name)
        return self.find_merge_request(project.id, branch).web_url
