import httpx
from fastapi import status
from loguru import logger
from orjson import JSONDecodeError, loads
from pydantic import ValidationError

from version_exporter.core.config import GitHubConfig, settings
from version_exporter.core.exc import (
    DecodeException,
    FetchException,
    MissingParameterException,
    UpstreamStatusException,
)
from version_exporter.enums import GitHubEndpoint
from version_exporter.schemas import Release, ReleaseList

from .abc import AbstractReleaseFetcher


class GitHubReleaseFetcher(AbstractReleaseFetcher):
    """
    Retrieves the releases of a repository from the GitHub REST API.

    The bearer token is fixed at construction time and attached to every request when set.
    """

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        token: str | None = None,
        timeout: httpx.Timeout | float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, config: GitHubConfig = settings.github) -> "GitHubReleaseFetcher":
        return cls(base_url=config.BASE_URL, token=config.TOKEN, timeout=config.timeout)

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"version-exporter/{settings.VERSION}",
        }

        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        return headers

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        )

    async def get_releases(self, repo: str) -> list[Release]:
        """
        Get the releases of a repository in the order GitHub lists them.

        Args:
            repo: Repository in owner/name form.

        Returns:
            The releases, newest first by GitHub convention.

        Raises:
            MissingParameterException: If the repository is empty.
            FetchException: If the request could not be completed.
            UpstreamStatusException: If GitHub answered with a non-success status code.
            DecodeException: If the body is not a list of releases.
        """

        if not repo:
            raise MissingParameterException(parameter="repo")

        try:
            async with self.client() as client:
                response = await client.get(GitHubEndpoint.RELEASES.format(repo=repo))

        except httpx.HTTPError as e:
            raise FetchException(repo=repo, error=str(e) or e.__class__.__name__) from e

        self._check_status_code(repo, response)

        try:
            releases = ReleaseList.validate_python(loads(response.content))

        except (JSONDecodeError, ValidationError) as e:
            raise DecodeException(repo=repo, error=str(e)) from e

        logger.debug(f"Fetched {len(releases)} releases for {repo}")
        return releases

    @staticmethod
    def _check_status_code(repo: str, response: httpx.Response) -> None:
        match response.status_code:
            case stat if status.HTTP_200_OK <= stat < status.HTTP_300_MULTIPLE_CHOICES:
                return

            case _:
                raise UpstreamStatusException(
                    repo=repo,
                    upstream_status=response.status_code,
                    response_text=response.text,
                )
