from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from version_exporter.core import settings

router = APIRouter()

INDEX_PAGE = """
<html>
<head><title>{title}</title></head>
<body>
    <h1>{title}</h1>
    <p><a href="/metrics">Metrics</a></p>
    <p><a href="/probe?repo=prometheus/prometheus&tag=v1.7.2">probe prometheus/prometheus</a></p>
</body>
</html>
"""


@router.get("/", include_in_schema=False, response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(INDEX_PAGE.format(title=settings.PROJECT_NAME))
