from logging import LogRecord

import sentry_sdk
from loguru import logger
from loguru._defaults import LOGURU_FORMAT
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.httpx import HttpxIntegration
from sentry_sdk.integrations.logging import _IGNORED_LOGGERS, EventHandler
from sentry_sdk.integrations.loguru import Integration, LoggingLevels

from version_exporter.core.config import settings


class ProbeEventHandler(EventHandler):
    """Forwards ERROR records to Sentry unless the attached exception opts out with sentry_record = False."""

    def _can_record(self, record: LogRecord) -> bool:
        if record.name in _IGNORED_LOGGERS:
            return False

        exc_type = record.exc_info[0] if record.exc_info else None
        return getattr(exc_type, "sentry_record", True)


class ProbeLoguruIntegration(Integration):
    identifier = "version_exporter_loguru"

    @staticmethod
    def setup_once() -> None:
        logger.add(ProbeEventHandler(), level=LoggingLevels.ERROR.value, format=LOGURU_FORMAT)


def init_sentry() -> None:
    if not (settings.is_production and settings.SENTRY_DSN):
        return

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.STAGE,
        integrations=[FastApiIntegration(), HttpxIntegration(), ProbeLoguruIntegration()],
        release=settings.VERSION,
    )
