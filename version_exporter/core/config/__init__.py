from .config import Settings, settings
from .github import GitHubConfig

__all__ = ("GitHubConfig", "Settings", "settings")
