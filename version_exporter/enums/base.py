from enum import StrEnum


class ExecutionMode(StrEnum):
    TEST = "test"
    PRODUCTION = "production"


class ProjectStage(StrEnum):
    LOCAL = "local"
    DEV = "dev"
    PRODUCTION = "prod"
