"""CLI configuration via environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_GITLAB_HOST = "https://gitlab.com"
_API_SUFFIX = "/api/v4"


class Settings(BaseSettings):
    """Configuration built once at startup and passed to the GitLab client."""

    model_config = {"env_prefix": ""}

    gitlab_api_key: str | None = Field(
        default=None, description="GitLab private token. Anonymous access when unset."
    )
    gitlab_host: str = Field(
        default=DEFAULT_GITLAB_HOST, description="GitLab instance URL used for API calls"
    )
    log_level: str = Field(default="info", description="Log level")

    @field_validator("gitlab_host")
    @classmethod
    def _normalize_host(cls, v: str) -> str:
        # python-gitlab appends /api/v4 itself
        host = v.strip().rstrip("/")
        if host.endswith(_API_SUFFIX):
            host = host[: -len(_API_SUFFIX)].rstrip("/")
        if not host:
            return DEFAULT_GITLAB_HOST
        return host

    @field_validator("gitlab_api_key")
    @classmethod
    def _blank_key_is_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v
