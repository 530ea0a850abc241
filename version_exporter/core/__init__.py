from .config import settings
from .init_sentry import init_sentry

__all__ = ("init_sentry", "settings")
