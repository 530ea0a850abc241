from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from prometheus_fastapi_instrumentator import Instrumentator

from version_exporter.api import api_router
from version_exporter.core import init_sentry, settings
from version_exporter.core.exc import BaseHTTPException


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    init_sentry()
    logger.info(f"starting version_exporter {settings.VERSION}")

    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=None,
    debug=settings.DEBUG,
    docs_url=None,
    redoc_url=None,
    version=settings.VERSION,
    lifespan=lifespan,
)

# Prometheus metrics
Instrumentator().instrument(app).expose(app, include_in_schema=False)


@app.exception_handler(BaseHTTPException)
async def probe_exception_handler(request: Request, exc: BaseHTTPException) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=exc.headers)


app.include_router(api_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "version_exporter.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        forwarded_allow_ips="*",
    )
