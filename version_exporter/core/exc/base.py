from typing import Any

from fastapi import HTTPException, status
from loguru import logger

from version_exporter.enums import ExceptionAlias

LOG_LEVELS = {"debug", "info", "warning", "error", "critical", "exception"}


class LoggerMixin:
    log_level: str | None = "info"
    log_message_pattern: tuple | None = None

    def format_pattern(self, pattern: tuple) -> tuple[str, list[Any]]:
        message, *names = pattern
        return message, [getattr(self, name) for name in names]

    def log_exception(self, detail: str = None) -> None:
        if self.log_level not in LOG_LEVELS:
            return

        log = getattr(logger.bind(name=self.__class__.__name__), self.log_level)

        if self.log_message_pattern:
            message, args = self.format_pattern(self.log_message_pattern)
            log(message, *args)
        else:
            log(detail)


class BaseHTTPException(LoggerMixin, HTTPException):
    """
    Client-facing probe error.

    Keyword arguments become attributes, and the *_pattern tuples name the attributes that fill the message.
    MissingParameterException(parameter="tag") with ("{0} parameter is missing", "parameter") answers
    "tag parameter is missing".
    """

    _exception_alias: ExceptionAlias = None
    status_code: int = status.HTTP_400_BAD_REQUEST
    message_pattern: tuple[str, ...] | None = None
    sentry_record: bool = False

    def __init__(self, detail: str = None, headers: dict[str, str] = None, **kwargs: Any) -> None:
        for key, value in kwargs.items():
            setattr(self, key, value)

        if detail is None and self.message_pattern:
            message, args = self.format_pattern(self.message_pattern)
            detail = message.format(*args)

        self.log_exception(str(detail))

        super().__init__(
            status_code=self.status_code,
            detail={"msg": f"{detail}", "alias": self._exception_alias or "UnknownCode"},
            headers=headers,
        )

    @property
    def message(self) -> str:
        return self.detail["msg"]


class BadRequestException(BaseHTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
