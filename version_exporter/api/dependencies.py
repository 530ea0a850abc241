from typing import Annotated

from fastapi import Depends

from version_exporter.services import AbstractReleaseFetcher, GitHubReleaseFetcher


def get_release_fetcher() -> AbstractReleaseFetcher:
    return GitHubReleaseFetcher.from_settings()


ReleaseFetcherDep = Annotated[AbstractReleaseFetcher, Depends(get_release_fetcher)]
