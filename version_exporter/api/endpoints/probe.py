from fastapi import APIRouter, Query, Response, status
from prometheus_client import CONTENT_TYPE_LATEST

from version_exporter.api.dependencies import ReleaseFetcherDep
from version_exporter.services import ProbeService

router = APIRouter(tags=["Probe"])


@router.get(
    "/probe",
    description="Check whether a newer stable release of the repository exists.",
    status_code=status.HTTP_200_OK,
    response_class=Response,
)
async def probe(
    fetcher: ReleaseFetcherDep,
    repo: str | None = Query(
        None,
        title="Repository",
        description="Repository in owner/name form.",
        examples=["prometheus/prometheus"],
    ),
    tag: str | None = Query(
        None,
        title="Tag",
        description="Currently deployed version.",
        examples=["v1.7.2"],
    ),
) -> Response:
    content = await ProbeService(fetcher).run(repo=repo, tag=tag)
    return Response(content=content, media_type=CONTENT_TYPE_LATEST)
