"""Parsing of SSH-style git remote URLs into a project identity."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from git_open.errors import ResolutionError

_GIT_SUFFIX = ".git"


class RemoteURL(BaseModel):
    """Project identity derived from a remote such as ``git@host:org/name.git``."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(description="Hostname serving the repository")
    org: str = Field(description="Namespace the project lives in")
    name: str = Field(description="Project name, without the .git suffix")

    @property
    def path(self) -> str:
        return f"{self.org}/{self.name}"

    @property
    def home_url(self) -> str:
        return f"https://{self.host}/{self.path}"


def parse_remote_url(raw: str) -> RemoteURL:
    """Split ``user@host:org/name.git`` into host, org and name.

    Only the SSH form is understood. The host is separated on the first ``:``
    and the org on the first ``/`` of the remaining path, so a nested group
    such as ``group/sub/name`` yields org ``group`` and name ``sub/name``.

    Raises:
        ResolutionError: If the URL has no ``:`` or ``/`` separator, or a
            component is empty.
    """
    url = raw.strip()
    user_host, sep, path = url.partition(":")
    if not sep:
        raise ResolutionError(f"remote url {url!r} has no ':' separating host from path")
    host = user_host.rsplit("@", 1)[-1]

    org, sep, name = path.partition("/")
    if not sep:
        raise ResolutionError(f"remote url {url!r} has no '/' separating org from name")
    name = name.removesuffix(_GIT_SUFFIX)

    if not host or not org or not name:
        raise ResolutionError(f"remote url {url!r} is missing a host, org or name")
    return RemoteURL(host=host, org=org, name=name)
