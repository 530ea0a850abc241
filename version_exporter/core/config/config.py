from loguru import logger
from pydantic import Field, model_validator

from version_exporter.core.config.base import BaseConfig
from version_exporter.core.config.github import GitHubConfig
from version_exporter.enums import ExecutionMode, ProjectStage


class Settings(BaseConfig):
    EXECUTION_MODE: ExecutionMode = Field(default=ExecutionMode.TEST)
    STAGE: ProjectStage = Field(default=ProjectStage.LOCAL)
    PROJECT_NAME: str = Field(default="Version Exporter")
    SERVER_HOST: str = Field(default="0.0.0.0")
    SERVER_PORT: int = Field(default=9333)

    VERSION: str = Field(default="dev")
    DEBUG: bool = Field(default=False)

    SENTRY_DSN: str | None = Field(default=None)

    github: GitHubConfig = GitHubConfig()

    @property
    def is_production(self) -> bool:
        return self.EXECUTION_MODE == ExecutionMode.PRODUCTION

    @property
    def bind(self) -> str:
        return f"{self.SERVER_HOST}:{self.SERVER_PORT}"

    @model_validator(mode="after")
    def production_extra_check(self) -> "Settings":
        if not self.is_production:
            return self

        if not self.SENTRY_DSN:
            logger.warning("SENTRY_DSN is not set, errors will not be reported")

        if not self.github.TOKEN:
            logger.warning("GITHUB_TOKEN is not set, unauthenticated requests are heavily rate limited")

        return self


settings = Settings()
