from abc import ABC, abstractmethod

from version_exporter.schemas import Release


class AbstractReleaseFetcher(ABC):
    @abstractmethod
    async def get_releases(self, repo: str) -> list[Release]:
        """Fetch the published releases of a repository, newest first."""
        raise NotImplementedError
