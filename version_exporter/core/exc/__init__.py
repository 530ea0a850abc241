from .base import BadRequestException, BaseHTTPException, LoggerMixin
from .github import DecodeException, FetchException, UpstreamStatusException
from .probe import InvalidVersionException, MissingParameterException

__all__ = (
    "BadRequestException",
    "BaseHTTPException",
    "DecodeException",
    "FetchException",
    "InvalidVersionException",
    "LoggerMixin",
    "MissingParameterException",
    "UpstreamStatusException",
)
