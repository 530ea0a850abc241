from fastapi import APIRouter

from .health_check import router as health_check
from .index import router as index
from .probe import router as probe

api_router = APIRouter()

api_router.include_router(index)
api_router.include_router(probe)
api_router.include_router(health_check, prefix="/health-check", tags=["Health check"])
