from .base import ExecutionMode, ProjectStage
from .exception import ExceptionAlias
from .github import GitHubEndpoint

__all__ = (
    "ExceptionAlias",
    "ExecutionMode",
    "GitHubEndpoint",
    "ProjectStage",
)
