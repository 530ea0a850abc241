from fastapi import APIRouter, status
from starlette.responses import JSONResponse

from version_exporter.core import settings

router = APIRouter()


@router.get(
    "",
    description="Liveness check. Does not reach GitHub.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> JSONResponse:
    return JSONResponse(content={"status": "ok", "version": settings.VERSION})
