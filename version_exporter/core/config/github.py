from httpx import Timeout
from pydantic import Field

from version_exporter.core.config.base import BaseConfig


class GitHubConfig(BaseConfig):
    BASE_URL: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    TOKEN: str | None = Field(default=None, alias="GITHUB_TOKEN", description="Raises the API rate limit")
    TIMEOUT: float = Field(default=10.0, alias="GITHUB_TIMEOUT", description="Request timeout in seconds")

    @property
    def timeout(self) -> Timeout:
        return Timeout(self.TIMEOUT)
