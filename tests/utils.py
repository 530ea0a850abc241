from typing import Any, Callable

from version_exporter.schemas import Release
from version_exporter.services import AbstractReleaseFetcher, probe_metrics


def release(tag: str, draft: bool = False, prerelease: bool = False) -> dict[str, Any]:
    return {
        "tag_name": tag,
        "draft": draft,
        "prerelease": prerelease,
        "published_at": "2024-01-01T00:00:00Z",
    }


class StubReleaseFetcher(AbstractReleaseFetcher):
    """Serves a fixed release list and records the repositories it was asked for."""

    def __init__(
        self,
        releases: list[dict[str, Any]] | None = None,
        error: Callable[[], Exception] | None = None,
    ) -> None:
        self.releases = releases or []
        self.error = error
        self.calls: list[str] = []

    async def get_releases(self, repo: str) -> list[Release]:
        self.calls.append(repo)

        if self.error:
            raise self.error()

        return [Release.model_validate(item) for item in self.releases]


def sample(name: str) -> float | None:
    return probe_metrics.registry().get_sample_value(name)
